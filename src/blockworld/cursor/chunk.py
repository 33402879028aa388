"""Chunk cursor: whole-chunk access at a current chunk position."""

from __future__ import annotations

from typing import Generic, TypeVar

from blockworld.core.position import ChunkPos
from blockworld.cursor.models import Absolute, ChunkRelative, ChunkSeekFrom
from blockworld.storage.chunk import Chunk
from blockworld.storage.protocol import ChunkReadExact, ChunkWriteExact

B = TypeVar("B")


class ChunkCursor(Generic[B]):
    """Mutable current chunk position plus a backend.

    Args:
        inner: Storage backend.
        position: Starting chunk position (default origin).
    """

    def __init__(self, inner: B, position: ChunkPos | None = None):
        self._inner = inner
        self._pos = position or ChunkPos()

    @property
    def inner(self) -> B:
        return self._inner

    def into_inner(self) -> B:
        return self._inner

    @property
    def position(self) -> ChunkPos:
        return self._pos

    def set_position(self, pos: ChunkPos) -> None:
        self._pos = pos

    def seek(self, target: ChunkSeekFrom) -> ChunkPos:
        if isinstance(target, Absolute):
            self._pos = target.pos
        elif isinstance(target, ChunkRelative):
            self._pos = self._pos.offset(target.dx, target.dz)
        else:
            raise TypeError(f"Invalid seek target: {target!r}")
        return self._pos

    def read_chunk(self: ChunkCursor[ChunkReadExact]) -> Chunk:
        return self._inner.read_chunk(self._pos)

    def check_current_chunk(self: ChunkCursor[ChunkReadExact]) -> bool:
        return self._inner.contains_chunk(self._pos)

    def write_chunk(self: ChunkCursor[ChunkWriteExact], chunk: Chunk) -> None:
        self._inner.write_chunk(self._pos, chunk)
