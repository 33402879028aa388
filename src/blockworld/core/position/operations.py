"""Packed block coordinate operations.

Layout of a packed position (unsigned 64-bit):
    bits 63..38  x (26 bits, two's complement)
    bits 37..26  y (12 bits, two's complement)
    bits 25..0   z (26 bits, two's complement)

Coordinates outside their field range wrap silently: ``encode`` masks, it does
not validate. Callers that need bounds checking must do it before encoding.
"""

from __future__ import annotations

X_BITS = 26
Y_BITS = 12
Z_BITS = 26

X_MASK = (1 << X_BITS) - 1
Y_MASK = (1 << Y_BITS) - 1
Z_MASK = (1 << Z_BITS) - 1
PACKED_MASK = (1 << (X_BITS + Y_BITS + Z_BITS)) - 1

X_SHIFT = Y_BITS + Z_BITS
Y_SHIFT = Z_BITS

X_MIN, X_MAX = -(1 << (X_BITS - 1)), (1 << (X_BITS - 1)) - 1
Y_MIN, Y_MAX = -(1 << (Y_BITS - 1)), (1 << (Y_BITS - 1)) - 1
Z_MIN, Z_MAX = -(1 << (Z_BITS - 1)), (1 << (Z_BITS - 1)) - 1

CHUNK_WIDTH = 16
CHUNK_HEIGHT = 256


def _sign_extend(value: int, bits: int) -> int:
    sign_bit = 1 << (bits - 1)
    return (value ^ sign_bit) - sign_bit


def encode(x: int, y: int, z: int) -> int:
    """Pack three signed coordinates into one integer.

    Out-of-range coordinates wrap into their field width.

    Args:
        x: X coordinate, valid range [-2^25, 2^25 - 1].
        y: Y coordinate, valid range [-2^11, 2^11 - 1].
        z: Z coordinate, valid range [-2^25, 2^25 - 1].

    Returns:
        Packed position as a non-negative 64-bit integer.
    """
    return ((x & X_MASK) << X_SHIFT) | ((y & Y_MASK) << Y_SHIFT) | (z & Z_MASK)


def decode(packed: int) -> tuple[int, int, int]:
    """Unpack a position into signed (x, y, z).

    Args:
        packed: Packed position produced by ``encode``.

    Returns:
        Tuple of sign-extended (x, y, z).
    """
    x = _sign_extend((packed >> X_SHIFT) & X_MASK, X_BITS)
    y = _sign_extend((packed >> Y_SHIFT) & Y_MASK, Y_BITS)
    z = _sign_extend(packed & Z_MASK, Z_BITS)
    return x, y, z


def chunk_of(packed: int) -> tuple[int, int]:
    """Chunk coordinates owning a packed position.

    Uses floor division so that x = -1 belongs to chunk -1, not chunk 0.
    """
    x, _, z = decode(packed)
    return x // CHUNK_WIDTH, z // CHUNK_WIDTH


def local_of(packed: int) -> tuple[int, int, int]:
    """Coordinates of a packed position inside its owning chunk."""
    x, y, z = decode(packed)
    return x % CHUNK_WIDTH, y, z % CHUNK_WIDTH
