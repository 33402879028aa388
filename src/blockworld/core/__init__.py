"""Core functionalities: stateless value types and pure operations.

Architecture Note:
    core/ contains pure, stateless building blocks: the coordinate codec,
    block identifiers and game time. For stateful services (registry, world
    storage) see storage/; for position-relative access see cursor/.
"""

from blockworld.core import block
from blockworld.core.position import (
    CHUNK_HEIGHT,
    CHUNK_WIDTH,
    BlockPos,
    ChunkPos,
    PosLike,
    chunk_of,
    decode,
    encode,
    local_of,
)
from blockworld.core.time import TICKS_PER_DAY, Instant
from blockworld.core.types import (
    DENSE_STATE_LIMIT,
    MAX_STATE,
    NO_BLOCK,
    BlockId,
    BlockState,
    Buffer,
)

__all__ = [
    # Types
    "BlockId",
    "BlockState",
    "Buffer",
    "NO_BLOCK",
    "MAX_STATE",
    "DENSE_STATE_LIMIT",
    # Identifiers
    "block",
    # Position
    "BlockPos",
    "ChunkPos",
    "PosLike",
    "encode",
    "decode",
    "chunk_of",
    "local_of",
    "CHUNK_WIDTH",
    "CHUNK_HEIGHT",
    # Time
    "Instant",
    "TICKS_PER_DAY",
]
