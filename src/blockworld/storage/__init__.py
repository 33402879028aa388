"""Storage backends, capability protocols and the block registry."""

from blockworld.storage.chunk import CHUNK_SHAPE, Chunk, PositionOutOfRangeError
from blockworld.storage.local import LocalWorld, MissingBufferError
from blockworld.storage.protocol import (
    BlockBufferExact,
    BlockReadExact,
    BlockWriteExact,
    ChunkReadExact,
    ChunkWriteExact,
    IdentifiedBlockReader,
    IdentifiedBlockWriter,
    RegistryOwner,
    StorageBackendError,
)
from blockworld.storage.registry import BlockRegistry, default_registry

__all__ = [
    # Protocols
    "BlockReadExact",
    "BlockWriteExact",
    "BlockBufferExact",
    "ChunkReadExact",
    "ChunkWriteExact",
    "RegistryOwner",
    "IdentifiedBlockReader",
    "IdentifiedBlockWriter",
    "StorageBackendError",
    # Registry
    "BlockRegistry",
    "default_registry",
    # Local backend
    "LocalWorld",
    "MissingBufferError",
    "Chunk",
    "CHUNK_SHAPE",
    "PositionOutOfRangeError",
]
