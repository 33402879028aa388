"""Seek targets for cursors.

Usage:
    cursor.seek(Absolute(BlockPos.from_xyz(0, 64, 0)))
    cursor.seek(Relative(1, 0, -1))
    chunk_cursor.seek(ChunkRelative(0, 1))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

P = TypeVar("P")


@dataclass(frozen=True, slots=True)
class Absolute(Generic[P]):
    """Jump to an exact position."""

    pos: P


@dataclass(frozen=True, slots=True)
class Relative:
    """Move by block deltas from the current position."""

    dx: int = 0
    dy: int = 0
    dz: int = 0


@dataclass(frozen=True, slots=True)
class ChunkRelative:
    """Move by chunk deltas from the current chunk position."""

    dx: int = 0
    dz: int = 0


SeekFrom = Absolute | Relative
ChunkSeekFrom = Absolute | ChunkRelative
