"""Position functionality: packed block positions and chunk coordinates."""

from blockworld.core.position.models import BlockPos, ChunkPos, PosLike
from blockworld.core.position.operations import (
    CHUNK_HEIGHT,
    CHUNK_WIDTH,
    chunk_of,
    decode,
    encode,
    local_of,
)

__all__ = [
    # Models
    "BlockPos",
    "ChunkPos",
    "PosLike",
    # Operations
    "encode",
    "decode",
    "chunk_of",
    "local_of",
    # Constants
    "CHUNK_WIDTH",
    "CHUNK_HEIGHT",
]
