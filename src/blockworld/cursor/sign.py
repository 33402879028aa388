"""Sign cursor: four lines of text stored in a block buffer.

Buffer format: each line's UTF-8 bytes followed by one ``\\n`` byte, in order.

Usage:
    cursor = BlockCursor(world)
    cursor.set_block(pos, SIGN)
    sign = SignCursor(cursor.block_buffer_mut(pos))
    sign.write_lines(["First line", "Then second", "And third", "Finally fourth"])
    sign.read_lines()
"""

from __future__ import annotations

from collections.abc import Sequence

from typing import TypeAlias

from blockworld.core.types import Buffer

SIGN_LINES = 4
LINE_SEPARATOR = b"\n"

SignText: TypeAlias = tuple[str, str, str, str]


class SignLineError(ValueError):
    """Raised when sign text cannot be encoded unambiguously."""

    pass


class MalformedSignError(ValueError):
    """Raised when a sign buffer does not hold four encoded lines."""

    pass


class SignCursor:
    """Reads and writes sign text in one block's buffer.

    The buffer is edited in place, so changes are visible to the world that
    owns it.

    Args:
        buffer: Live buffer, usually from ``block_buffer_mut``.
    """

    def __init__(self, buffer: Buffer):
        self._buffer = buffer

    @property
    def buffer(self) -> Buffer:
        return self._buffer

    def write_lines(self, lines: Sequence[str]) -> None:
        """Replace the buffer content with four lines.

        Args:
            lines: Exactly four strings without embedded newlines.

        Raises:
            SignLineError: On the wrong number of lines or a line containing
                a newline.
        """
        if isinstance(lines, str) or len(lines) != SIGN_LINES:
            raise SignLineError(f"A sign holds exactly {SIGN_LINES} lines, got {lines!r}")
        encoded = bytearray()
        for index, line in enumerate(lines):
            if "\n" in line:
                raise SignLineError(f"Sign line {index} contains a newline: {line!r}")
            encoded += line.encode("utf-8")
            encoded += LINE_SEPARATOR
        self._buffer[:] = encoded

    def read_lines(self) -> SignText:
        """Decode the four lines stored in the buffer.

        Raises:
            MalformedSignError: If the buffer has fewer than four segments or
                is not valid UTF-8.
        """
        segments = bytes(self._buffer).split(LINE_SEPARATOR)
        if len(segments) < SIGN_LINES:
            raise MalformedSignError(
                f"Sign buffer has {len(segments)} segments, expected at least {SIGN_LINES}"
            )
        try:
            first, second, third, fourth = (s.decode("utf-8") for s in segments[:SIGN_LINES])
        except UnicodeDecodeError as e:
            raise MalformedSignError("Sign buffer is not valid UTF-8") from e
        return first, second, third, fourth

    def clear(self) -> None:
        del self._buffer[:]
