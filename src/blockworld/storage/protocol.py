"""Storage capability protocols.

A backend implements only the position-exact primitives it supports. Cursors
are generic over the backend and build position-relative operations on top of
these primitives, so a test double can implement just the capability under
test.

    BlockReadExact    read_block_state, contains_block
    BlockWriteExact   write_block_state, flush
    BlockBufferExact  block_buffer, block_buffer_mut
    ChunkReadExact    read_chunk, contains_chunk
    ChunkWriteExact   write_chunk
    RegistryOwner     registry

    IdentifiedBlockReader and IdentifiedBlockWriter combine block access with
    RegistryOwner for identifier-level reads and writes.

Usage:
    world = LocalWorld(default_registry())
    assert isinstance(world, BlockReadExact)
    cursor = BlockCursor(world)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from blockworld.core.position import BlockPos, ChunkPos
from blockworld.core.types import BlockState, Buffer

if TYPE_CHECKING:
    from blockworld.storage.chunk import Chunk
    from blockworld.storage.registry import BlockRegistry


class StorageBackendError(Exception):
    """Raised when a backend fails to complete a primitive (I/O, permissions).

    In-memory storage never raises this; persistent or read-only backends do.
    """

    pass


@runtime_checkable
class BlockReadExact(Protocol):
    """Read blocks at an exact position."""

    def read_block_state(self, pos: BlockPos) -> BlockState:
        """State stored at pos; NO_BLOCK when nothing is there."""
        ...

    def contains_block(self, pos: BlockPos) -> bool:
        """Whether a block (state != NO_BLOCK) is stored at pos."""
        ...


@runtime_checkable
class BlockWriteExact(Protocol):
    """Write blocks at an exact position."""

    def write_block_state(self, pos: BlockPos, state: BlockState) -> None:
        """Store state at pos. Writing NO_BLOCK deletes the block."""
        ...

    def flush(self) -> None:
        """Make pending writes durable. No-op for in-memory backends."""
        ...


@runtime_checkable
class BlockBufferExact(Protocol):
    """Access the auxiliary buffer attached to a block."""

    def block_buffer(self, pos: BlockPos) -> bytes:
        """Snapshot of the buffer at pos."""
        ...

    def block_buffer_mut(self, pos: BlockPos) -> Buffer:
        """Live buffer at pos; mutations are stored."""
        ...


@runtime_checkable
class ChunkReadExact(Protocol):
    """Read whole chunks."""

    def read_chunk(self, pos: ChunkPos) -> Chunk:
        """Copy of the dense chunk at pos."""
        ...

    def contains_chunk(self, pos: ChunkPos) -> bool:
        ...


@runtime_checkable
class ChunkWriteExact(Protocol):
    """Write whole chunks."""

    def write_chunk(self, pos: ChunkPos, chunk: Chunk) -> None:
        ...


@runtime_checkable
class RegistryOwner(Protocol):
    """Backend exposing the registry that numbers its states."""

    @property
    def registry(self) -> BlockRegistry:
        ...


@runtime_checkable
class IdentifiedBlockReader(BlockReadExact, RegistryOwner, Protocol):
    """Readable backend whose states can be named through its registry."""

    pass


@runtime_checkable
class IdentifiedBlockWriter(BlockWriteExact, RegistryOwner, Protocol):
    """Writable backend that numbers identifiers through its registry."""

    pass
