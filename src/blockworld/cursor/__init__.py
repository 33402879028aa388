"""Cursors: position-relative access layered on storage primitives.

Architecture Note:
    cursor/ holds thin stateful wrappers. A cursor owns a current position and
    a backend, and every operation is "set position, then call the matching
    exact primitive". Storage logic lives in storage/, never here.
"""

from blockworld.cursor.block import BlockCursor, UnknownBlockError
from blockworld.cursor.chunk import ChunkCursor
from blockworld.cursor.models import Absolute, ChunkRelative, ChunkSeekFrom, Relative, SeekFrom
from blockworld.cursor.sign import (
    SIGN_LINES,
    MalformedSignError,
    SignCursor,
    SignLineError,
    SignText,
)

__all__ = [
    # Seek targets
    "Absolute",
    "Relative",
    "ChunkRelative",
    "SeekFrom",
    "ChunkSeekFrom",
    # Cursors
    "BlockCursor",
    "ChunkCursor",
    "SignCursor",
    # Sign format
    "SIGN_LINES",
    "SignText",
    # Errors
    "UnknownBlockError",
    "SignLineError",
    "MalformedSignError",
]
