"""Block cursor: position-relative access over position-exact backends.

Usage:
    cursor = BlockCursor(LocalWorld(default_registry()))
    cursor.set_block((1, 64, 1), "minecraft:stone")
    cursor.seek(Relative(0, 1, 0))
    cursor.read_block()  # NO_BLOCK, nothing above the stone

Each method only needs the capability it delegates to: a backend that
implements BlockReadExact alone supports reads and seeks; writes then raise
AttributeError from the missing primitive.
"""

from __future__ import annotations

from typing import Generic, TypeVar, cast

from blockworld.core.position import BlockPos, PosLike
from blockworld.core.types import BlockId, BlockState, Buffer
from blockworld.cursor.models import Absolute, Relative, SeekFrom
from blockworld.storage.protocol import (
    BlockBufferExact,
    BlockReadExact,
    BlockWriteExact,
    IdentifiedBlockReader,
    IdentifiedBlockWriter,
)

B = TypeVar("B")


class UnknownBlockError(KeyError):
    """Raised when writing an identifier the backend's registry does not know."""

    pass


class BlockCursor(Generic[B]):
    """Mutable current position plus a backend.

    The cursor holds no block data. Dropping it leaves the backend untouched;
    ``into_inner`` hands the backend back.

    Args:
        inner: Storage backend.
        position: Starting position (default origin).
    """

    def __init__(self, inner: B, position: PosLike | None = None):
        self._inner = inner
        self._pos = BlockPos() if position is None else BlockPos.of(position)

    @property
    def inner(self) -> B:
        return self._inner

    def into_inner(self) -> B:
        return self._inner

    @property
    def position(self) -> BlockPos:
        return self._pos

    def set_position(self, pos: PosLike) -> None:
        """Move to pos. The position is not validated."""
        self._pos = BlockPos.of(pos)

    def seek(self, target: SeekFrom) -> BlockPos:
        """Move to an absolute position or by relative deltas.

        Relative deltas are added to the decoded coordinates and re-encoded,
        so results outside the codec range wrap.

        Returns:
            The new position.
        """
        if isinstance(target, Absolute):
            self.set_position(cast(PosLike, target.pos))
        elif isinstance(target, Relative):
            self._pos = self._pos.offset(target.dx, target.dy, target.dz)
        else:
            raise TypeError(f"Invalid seek target: {target!r}")
        return self._pos

    # Reads (BlockReadExact)

    def read_block(self: BlockCursor[BlockReadExact]) -> BlockState:
        """State at the current position. The position does not advance."""
        return self._inner.read_block_state(self._pos)

    def check_current_block(self: BlockCursor[BlockReadExact]) -> bool:
        return self._inner.contains_block(self._pos)

    def get_block_state(self: BlockCursor[BlockReadExact], pos: PosLike) -> BlockState:
        self.set_position(pos)
        return self.read_block()

    # Writes (BlockWriteExact)

    def write_block(self: BlockCursor[BlockWriteExact], state: BlockState) -> None:
        """Store state at the current position. The position does not advance."""
        self._inner.write_block_state(self._pos, state)

    def flush_block(self: BlockCursor[BlockWriteExact]) -> None:
        self._inner.flush()

    def set_block_state(self: BlockCursor[BlockWriteExact], pos: PosLike, state: BlockState) -> None:
        self.set_position(pos)
        self.write_block(state)

    # Identifier access (registry-owning backends)

    def get_block(self: BlockCursor[IdentifiedBlockReader], pos: PosLike) -> BlockId | None:
        """Identifier of the block at pos, None for no block or unknown states."""
        state = self.get_block_state(pos)
        return self._inner.registry.state_to_id(state)

    def set_block(
        self: BlockCursor[IdentifiedBlockWriter], pos: PosLike, block_id: BlockId | None
    ) -> None:
        """Store the block named block_id at pos; None deletes.

        Raises:
            UnknownBlockError: If block_id is not registered.
        """
        state = self._inner.registry.id_to_state(block_id)
        if state is None:
            raise UnknownBlockError(block_id)
        self.set_block_state(pos, state)

    # Buffers (BlockBufferExact)

    def block_buffer(self: BlockCursor[BlockBufferExact], pos: PosLike) -> bytes:
        self.set_position(pos)
        return self._inner.block_buffer(self._pos)

    def block_buffer_mut(self: BlockCursor[BlockBufferExact], pos: PosLike) -> Buffer:
        self.set_position(pos)
        return self._inner.block_buffer_mut(self._pos)

    def __repr__(self) -> str:
        return f"BlockCursor({type(self._inner).__name__}, {self._pos!r})"
