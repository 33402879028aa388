"""Dense chunk storage.

A chunk is a 16 x 256 x 16 grid of single-byte cells indexed [x, y, z] in
chunk-local coordinates. Cells hold the low byte of states 1..255; 0 is
empty. Larger states live in the world's overflow map, never in a chunk.
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from blockworld.core.position import CHUNK_HEIGHT, CHUNK_WIDTH
from blockworld.core.types import DENSE_STATE_LIMIT, NO_BLOCK, BlockState

CHUNK_SHAPE = (CHUNK_WIDTH, CHUNK_HEIGHT, CHUNK_WIDTH)


class PositionOutOfRangeError(IndexError):
    """Raised when a position lies outside a chunk's vertical span [0, 256)."""

    pass


def check_local(x: int, y: int, z: int) -> None:
    """Validate chunk-local coordinates.

    Raises:
        PositionOutOfRangeError: If any coordinate is outside the chunk.
    """
    if not 0 <= y < CHUNK_HEIGHT:
        raise PositionOutOfRangeError(f"y={y} outside chunk height [0, {CHUNK_HEIGHT})")
    if not (0 <= x < CHUNK_WIDTH and 0 <= z < CHUNK_WIDTH):
        raise PositionOutOfRangeError(f"({x}, {z}) outside chunk width [0, {CHUNK_WIDTH})")


class Chunk:
    """Fixed-size dense byte grid for one chunk column.

    Args:
        data: Optional existing array of shape (16, 256, 16). Copied, and cast
            to uint8.
    """

    __slots__ = ("_data",)

    def __init__(self, data: np.ndarray | None = None) -> None:
        if data is None:
            self._data: np.ndarray = np.zeros(CHUNK_SHAPE, dtype=np.uint8)
        else:
            if data.shape != CHUNK_SHAPE:
                raise ValueError(f"Chunk data must have shape {CHUNK_SHAPE}, got {data.shape}")
            self._data = np.array(data, dtype=np.uint8, copy=True)

    @property
    def data(self) -> np.ndarray:
        """Direct access to the cell array."""
        return self._data

    def get(self, x: int, y: int, z: int) -> BlockState:
        check_local(x, y, z)
        return int(self._data[x, y, z])

    def set(self, x: int, y: int, z: int, state: BlockState) -> None:
        """Store a dense state in a cell.

        Raises:
            ValueError: If state does not fit a single byte.
        """
        if not NO_BLOCK <= state <= DENSE_STATE_LIMIT:
            raise ValueError(f"Dense cells hold states 0..{DENSE_STATE_LIMIT}, got {state}")
        check_local(x, y, z)
        self._data[x, y, z] = state

    def clear(self, x: int, y: int, z: int) -> None:
        self.set(x, y, z, NO_BLOCK)

    def non_empty_count(self) -> int:
        return int(np.count_nonzero(self._data))

    @property
    def is_empty(self) -> bool:
        return not self._data.any()

    def cells_with(self, states: frozenset[BlockState]) -> Iterator[tuple[int, int, int]]:
        """Local coordinates of every cell holding one of ``states``."""
        dense = [s for s in states if NO_BLOCK < s <= DENSE_STATE_LIMIT]
        if not dense:
            return
        for x, y, z in np.argwhere(np.isin(self._data, dense)):
            yield int(x), int(y), int(z)

    def copy(self) -> Chunk:
        return Chunk(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"Chunk(non_empty={self.non_empty_count()})"
