"""Position models.

Usage:
    pos = BlockPos.from_xyz(123, 45, -6789)
    x, y, z = pos.to_xyz()
    chunk = pos.to_chunk_pos()  # ChunkPos(x=7, z=-425)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from blockworld.core.position.operations import PACKED_MASK, chunk_of, decode, encode, local_of


@dataclass(frozen=True, slots=True)
class ChunkPos:
    """Chunk coordinates: block coordinates floor-divided by 16."""

    x: int = 0
    z: int = 0

    @classmethod
    def from_xz(cls, chunk_x: int, chunk_z: int) -> ChunkPos:
        return cls(x=chunk_x, z=chunk_z)

    def to_xz(self) -> tuple[int, int]:
        return self.x, self.z

    def offset(self, dx: int, dz: int) -> ChunkPos:
        return ChunkPos(self.x + dx, self.z + dz)


@dataclass(frozen=True, slots=True)
class BlockPos:
    """Block position stored as one packed integer.

    The packed value is the wire representation; see
    ``blockworld.core.position.operations`` for the bit layout. Coordinates that
    do not fit their field wrap instead of raising. A packed value outside
    [0, 2^64), such as the wire value read as a signed long, is reduced to its
    low 64 bits so every position has exactly one key.
    """

    packed: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "packed", self.packed & PACKED_MASK)

    @classmethod
    def from_xyz(cls, x: int, y: int, z: int) -> BlockPos:
        return cls(encode(x, y, z))

    @classmethod
    def from_packed(cls, packed: int) -> BlockPos:
        return cls(packed)

    @classmethod
    def of(cls, value: PosLike) -> BlockPos:
        """Coerce a BlockPos or an (x, y, z) tuple into a BlockPos.

        Raises:
            TypeError: If value is neither a BlockPos nor a 3-tuple.
        """
        if isinstance(value, BlockPos):
            return value
        if isinstance(value, tuple) and len(value) == 3:
            return cls.from_xyz(*value)
        raise TypeError(f"Expected BlockPos or (x, y, z) tuple, got {value!r}")

    def to_xyz(self) -> tuple[int, int, int]:
        return decode(self.packed)

    def to_chunk_pos(self) -> ChunkPos:
        return ChunkPos(*chunk_of(self.packed))

    def to_local(self) -> tuple[int, int, int]:
        """Coordinates inside the owning chunk: (x % 16, y, z % 16)."""
        return local_of(self.packed)

    def offset(self, dx: int, dy: int, dz: int) -> BlockPos:
        """Position shifted by deltas. The result is not range checked."""
        x, y, z = self.to_xyz()
        return BlockPos.from_xyz(x + dx, y + dy, z + dz)

    def __repr__(self) -> str:
        x, y, z = self.to_xyz()
        return f"BlockPos(x={x}, y={y}, z={z})"


PosLike: TypeAlias = BlockPos | tuple[int, int, int]
