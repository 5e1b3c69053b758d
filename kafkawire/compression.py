"""Compression types of the message protocol and gzip support."""

from __future__ import annotations

import gzip
import zlib
from enum import IntEnum
from typing import BinaryIO, Union


class Compression(IntEnum):
    """Compression codecs; values match the message attribute encoding."""

    NONE = 0
    GZIP = 1
    SNAPPY = 2


DEFAULT_COMPRESSION = Compression.NONE


def gzip_compress(src: bytes) -> bytes:
    """Compress ``src`` into a gzip stream."""
    return gzip.compress(bytes(src))


def gzip_uncompress(src: Union[bytes, bytearray, memoryview, BinaryIO]) -> bytes:
    """Decompress a gzip stream given as bytes or a readable binary stream.

    Raises OSError if the data is not a valid gzip stream.
    """
    data = bytes(src) if isinstance(src, (bytes, bytearray, memoryview)) else src.read()
    try:
        return gzip.decompress(data)
    except (EOFError, zlib.error) as exc:
        raise OSError(f"invalid gzip data: {exc}") from exc