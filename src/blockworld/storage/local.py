"""Local in-memory world storage.

Hybrid dense/sparse storage suitable for single-process use and testing.
Nothing is persisted; ``flush`` is a no-op.

Usage:
    world = LocalWorld(default_registry())
    world.write_block_state(BlockPos.from_xyz(1, 64, 1), state)
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator

from blockworld.config import WorldSettings
from blockworld.core.position import CHUNK_WIDTH, BlockPos, ChunkPos
from blockworld.core.types import DENSE_STATE_LIMIT, MAX_STATE, NO_BLOCK, BlockState, Buffer
from blockworld.storage.chunk import Chunk, check_local
from blockworld.storage.registry import BlockRegistry

logger = logging.getLogger(__name__)


class MissingBufferError(LookupError):
    """Raised when a buffer is requested at a position whose state carries none.

    This is a caller bug: only ask for a buffer after writing a buffer-requiring
    state at that position.
    """

    pass


class LocalWorld:
    """In-memory world combining dense chunks with sparse overflow storage.

    Structure:
        _chunks[chunk_pos]     dense 16x256x16 byte grid, created on first write
        _overflow[packed_pos]  states above 255
        _buffers[packed_pos]   auxiliary buffers for buffer-requiring states

    Reads check the overflow map first, then the dense chunk, then fall back to
    NO_BLOCK. A position is held by at most one tier at a time.

    Args:
        registry: Registry numbering this world's states. Fixed for the world's
            lifetime.
        settings: Storage settings (default: loaded from environment).
    """

    def __init__(self, registry: BlockRegistry | None = None, settings: WorldSettings | None = None):
        """Initialize an empty world.

        Args:
            registry: Registry numbering this world's states. A fresh, empty
                registry is created if omitted.
            settings: Storage settings (default: ``WorldSettings()``).
        """
        self._settings = settings or WorldSettings()
        if registry is None:
            registry = BlockRegistry(first_state=self._settings.first_state)
        self._registry = registry
        self._chunks: dict[ChunkPos, Chunk] = {}
        self._overflow: dict[int, BlockState] = {}
        self._buffers: dict[int, Buffer] = {}

        if self._settings.preserve_stale_dense_on_delete:
            warnings.warn(
                "preserve_stale_dense_on_delete leaves deleted dense blocks readable. "
                "Use only to reproduce worlds written under the historical policy.",
                stacklevel=2,
            )

    @property
    def registry(self) -> BlockRegistry:
        return self._registry

    @property
    def settings(self) -> WorldSettings:
        return self._settings

    def _locate(self, pos: BlockPos) -> tuple[ChunkPos, tuple[int, int, int]]:
        """Owning chunk and local coordinates, validating the vertical span."""
        local = pos.to_local()
        check_local(*local)
        return pos.to_chunk_pos(), local

    def _chunk_for_write(self, chunk_pos: ChunkPos) -> Chunk:
        chunk = self._chunks.get(chunk_pos)
        if chunk is None:
            chunk = Chunk()
            self._chunks[chunk_pos] = chunk
            logger.debug("Created chunk %s", chunk_pos)
        return chunk

    def _sync_buffer(self, packed: int, state: BlockState) -> None:
        """Allocate a fresh buffer or release the old one to match state."""
        template = self._registry.buffer_template(state)
        if template is not None:
            self._buffers[packed] = template
            logger.debug("Allocated buffer at %s for state %d", BlockPos(packed), state)
        elif self._buffers.pop(packed, None) is not None:
            logger.debug("Released buffer at %s", BlockPos(packed))

    # Block primitives

    def write_block_state(self, pos: BlockPos, state: BlockState) -> None:
        """Store state at pos, resolving its tier and buffer.

        - NO_BLOCK deletes: drops any overflow entry and zeroes the dense cell.
        - 1..255 go to the dense chunk, created on demand.
        - 256..65535 go to the overflow map; the dense cell is zeroed.
        A buffer-requiring state always gets a fresh empty buffer, discarding
        any previous content at pos. Other states release the buffer.

        Args:
            pos: Target position.
            state: New block state.

        Raises:
            ValueError: If state does not fit 16 bits.
            PositionOutOfRangeError: If y is outside [0, 256).
        """
        if not NO_BLOCK <= state <= MAX_STATE:
            raise ValueError(f"Block state must be in [0, {MAX_STATE}], got {state}")
        chunk_pos, local = self._locate(pos)
        packed = pos.packed

        if state == NO_BLOCK:
            self._overflow.pop(packed, None)
            chunk = self._chunks.get(chunk_pos)
            if chunk is not None and not self._settings.preserve_stale_dense_on_delete:
                chunk.clear(*local)
        elif state <= DENSE_STATE_LIMIT:
            self._overflow.pop(packed, None)
            self._chunk_for_write(chunk_pos).set(*local, state)
        else:
            self._overflow[packed] = state
            chunk = self._chunks.get(chunk_pos)
            if chunk is not None:
                chunk.clear(*local)
            logger.debug("Stored overflow state %d at %s", state, pos)

        self._sync_buffer(packed, state)

    def read_block_state(self, pos: BlockPos) -> BlockState:
        """State at pos: overflow map, then dense chunk, then NO_BLOCK.

        Raises:
            PositionOutOfRangeError: If y is outside [0, 256).
        """
        chunk_pos, local = self._locate(pos)
        state = self._overflow.get(pos.packed)
        if state is not None:
            return state
        chunk = self._chunks.get(chunk_pos)
        if chunk is None:
            return NO_BLOCK
        return chunk.get(*local)

    def contains_block(self, pos: BlockPos) -> bool:
        return self.read_block_state(pos) != NO_BLOCK

    def flush(self) -> None:
        """Nothing to commit for in-memory storage."""
        logger.debug(
            "Flush requested: %d chunks, %d overflow entries, %d buffers",
            len(self._chunks),
            len(self._overflow),
            len(self._buffers),
        )

    # Buffer primitives

    def block_buffer_mut(self, pos: BlockPos) -> Buffer:
        """Live buffer attached to the block at pos.

        Raises:
            MissingBufferError: If the block at pos has no buffer.
        """
        try:
            return self._buffers[pos.packed]
        except KeyError:
            raise MissingBufferError(f"No block buffer at {pos}") from None

    def block_buffer(self, pos: BlockPos) -> bytes:
        """Read-only snapshot of the buffer at pos.

        Raises:
            MissingBufferError: If the block at pos has no buffer.
        """
        return bytes(self.block_buffer_mut(pos))

    def has_block_buffer(self, pos: BlockPos) -> bool:
        return pos.packed in self._buffers

    # Chunk primitives

    def contains_chunk(self, pos: ChunkPos) -> bool:
        return pos in self._chunks

    def read_chunk(self, pos: ChunkPos) -> Chunk:
        """Copy of the dense chunk at pos; an empty chunk if never written.

        Overflow states are not part of a chunk and are not included.
        """
        chunk = self._chunks.get(pos)
        return chunk.copy() if chunk is not None else Chunk()

    def write_chunk(self, pos: ChunkPos, chunk: Chunk) -> None:
        """Replace the dense chunk at pos.

        Overflow entries inside the chunk are dropped and its buffers released;
        every cell whose state requires a buffer then gets a fresh one.
        """
        for packed in [p for p in self._overflow if BlockPos(p).to_chunk_pos() == pos]:
            del self._overflow[packed]
        for packed in [p for p in self._buffers if BlockPos(p).to_chunk_pos() == pos]:
            del self._buffers[packed]

        stored = chunk.copy()
        self._chunks[pos] = stored
        base_x, base_z = pos.x * CHUNK_WIDTH, pos.z * CHUNK_WIDTH
        for x, y, z in stored.cells_with(self._registry.buffered_states()):
            block_pos = BlockPos.from_xyz(base_x + x, y, base_z + z)
            self._sync_buffer(block_pos.packed, stored.get(x, y, z))
        logger.debug("Wrote chunk %s (%d non-empty cells)", pos, stored.non_empty_count())

    # Introspection

    @property
    def chunk_count(self) -> int:
        return len(self._chunks)

    @property
    def overflow_count(self) -> int:
        return len(self._overflow)

    @property
    def buffer_count(self) -> int:
        return len(self._buffers)

    def iter_chunks(self) -> Iterator[tuple[ChunkPos, Chunk]]:
        """Iterate (position, chunk) pairs. Chunks are live, not copies."""
        yield from self._chunks.items()
