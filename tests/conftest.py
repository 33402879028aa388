"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from blockworld import BlockCursor, BlockRegistry, LocalWorld, WorldSettings


@pytest.fixture
def registry():
    """Registry with air, stone and a buffered sign."""
    registry = BlockRegistry()
    registry.register("air")
    registry.register("stone")
    registry.register("sign", buffered=True)
    return registry


@pytest.fixture
def world(registry):
    """Fresh LocalWorld with explicit default settings (ignores environment)."""
    return LocalWorld(registry, settings=WorldSettings(_env_file=None))


@pytest.fixture
def cursor(world):
    """BlockCursor over the fresh world."""
    return BlockCursor(world)
