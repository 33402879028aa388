"""Core type definitions for blockworld."""

from typing import TypeAlias

BlockState: TypeAlias = int
"""Runtime-local 16-bit block handle. 0 means "no block".

State numbers are assigned by a BlockRegistry and are only meaningful for that
registry instance. Use a BlockId to refer to a block kind across sessions.
"""

BlockId: TypeAlias = str
"""Stable namespaced block identifier, e.g. ``"minecraft:stone"``."""

Buffer: TypeAlias = bytearray
"""Auxiliary per-position payload. Opaque to the world; owned by its consumer."""

NO_BLOCK: BlockState = 0
MAX_STATE: BlockState = 0xFFFF
DENSE_STATE_LIMIT: BlockState = 0xFF
"""Largest state that fits a chunk's single-byte cells."""
