"""blockworld: hybrid dense/sparse voxel world storage.

Usage:
    from blockworld import BlockCursor, BlockPos, LocalWorld, SignCursor, default_registry
    from blockworld.core.block import SIGN

    world = LocalWorld(default_registry())
    cursor = BlockCursor(world)

    cursor.set_block((123, 45, 6789), SIGN)
    sign = SignCursor(cursor.block_buffer_mut((123, 45, 6789)))
    sign.write_lines(["First line", "Then second", "And third", "Finally fourth"])

    cursor.get_block((123, 45, 6789))  # "minecraft:sign"
"""

__version__ = "0.1.0"

# Configuration
from blockworld.config import WorldSettings

# Core primitives
from blockworld.core import (
    NO_BLOCK,
    TICKS_PER_DAY,
    BlockId,
    BlockPos,
    BlockState,
    ChunkPos,
    Instant,
    chunk_of,
    decode,
    encode,
)

# Cursors
from blockworld.cursor import (
    Absolute,
    BlockCursor,
    ChunkCursor,
    ChunkRelative,
    MalformedSignError,
    Relative,
    SeekFrom,
    SignCursor,
    SignLineError,
    UnknownBlockError,
)

# Storage
from blockworld.storage import (
    BlockBufferExact,
    BlockReadExact,
    BlockRegistry,
    BlockWriteExact,
    Chunk,
    ChunkReadExact,
    ChunkWriteExact,
    IdentifiedBlockReader,
    IdentifiedBlockWriter,
    LocalWorld,
    MissingBufferError,
    PositionOutOfRangeError,
    RegistryOwner,
    StorageBackendError,
    default_registry,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "BlockPos",
    "ChunkPos",
    "BlockId",
    "BlockState",
    "NO_BLOCK",
    "encode",
    "decode",
    "chunk_of",
    "Instant",
    "TICKS_PER_DAY",
    # Config
    "WorldSettings",
    # Storage
    "BlockReadExact",
    "BlockWriteExact",
    "BlockBufferExact",
    "ChunkReadExact",
    "ChunkWriteExact",
    "RegistryOwner",
    "IdentifiedBlockReader",
    "IdentifiedBlockWriter",
    "StorageBackendError",
    "BlockRegistry",
    "default_registry",
    "LocalWorld",
    "Chunk",
    "MissingBufferError",
    "PositionOutOfRangeError",
    # Cursors
    "BlockCursor",
    "ChunkCursor",
    "SignCursor",
    "Absolute",
    "Relative",
    "ChunkRelative",
    "SeekFrom",
    "UnknownBlockError",
    "SignLineError",
    "MalformedSignError",
]
