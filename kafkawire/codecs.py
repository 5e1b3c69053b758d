"""Big-endian encoding and decoding of the primitive protocol types."""

from __future__ import annotations

import struct
from typing import BinaryIO, Callable, Iterable, List, Sequence, TypeVar

from kafkawire.errors import CodecError, StringDecodeError, UnexpectedEOFError

T = TypeVar("T")

_INT8 = struct.Struct(">b")
_INT16 = struct.Struct(">h")
_INT32 = struct.Struct(">i")
_INT64 = struct.Struct(">q")

_INT16_MAX = 2**15 - 1
_INT32_MAX = 2**31 - 1


def _pack(fmt: struct.Struct, value: int) -> bytes:
    try:
        return fmt.pack(value)
    except struct.error as exc:
        raise CodecError(f"cannot encode {value!r}: {exc}") from exc


def encode_int8(value: int) -> bytes:
    """Encode a signed 8-bit integer."""
    return _pack(_INT8, value)


def encode_int16(value: int) -> bytes:
    """Encode a signed big-endian 16-bit integer."""
    return _pack(_INT16, value)


def encode_int32(value: int) -> bytes:
    """Encode a signed big-endian 32-bit integer."""
    return _pack(_INT32, value)


def encode_int64(value: int) -> bytes:
    """Encode a signed big-endian 64-bit integer."""
    return _pack(_INT64, value)


def encode_string(value: str) -> bytes:
    """Encode a string as an int16 byte length followed by its UTF-8 bytes."""
    data = value.encode("utf-8")
    if len(data) > _INT16_MAX:
        raise CodecError(f"string of {len(data)} bytes is too long")
    return _INT16.pack(len(data)) + data


def encode_bytes(value: bytes) -> bytes:
    """Encode a byte string as an int32 length followed by the bytes."""
    data = bytes(value)
    if len(data) > _INT32_MAX:
        raise CodecError(f"byte string of {len(data)} bytes is too long")
    return _INT32.pack(len(data)) + data


def encode_array(items: Sequence[T], encode_item: Callable[[T], bytes]) -> bytes:
    """Encode an int32 element count followed by each encoded element."""
    if len(items) > _INT32_MAX:
        raise CodecError(f"array of {len(items)} elements is too long")
    parts = [_INT32.pack(len(items))]
    parts.extend(encode_item(item) for item in items)
    return b"".join(parts)


def encode_strings(items: Iterable[str]) -> bytes:
    """Encode a sequence of strings as a protocol array."""
    return encode_array(list(items), encode_string)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if data is None or len(data) < size:
        raise UnexpectedEOFError()
    return data


def _unpack(stream: BinaryIO, fmt: struct.Struct) -> int:
    return fmt.unpack(_read_exact(stream, fmt.size))[0]


def decode_int8(stream: BinaryIO) -> int:
    """Read a signed 8-bit integer."""
    return _unpack(stream, _INT8)


def decode_int16(stream: BinaryIO) -> int:
    """Read a signed big-endian 16-bit integer."""
    return _unpack(stream, _INT16)


def decode_int32(stream: BinaryIO) -> int:
    """Read a signed big-endian 32-bit integer."""
    return _unpack(stream, _INT32)


def decode_int64(stream: BinaryIO) -> int:
    """Read a signed big-endian 64-bit integer."""
    return _unpack(stream, _INT64)


def decode_string(stream: BinaryIO) -> str:
    """Read an int16-prefixed UTF-8 string; a non-positive length yields ''."""
    length = decode_int16(stream)
    if length <= 0:
        return ""
    data = _read_exact(stream, length)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise StringDecodeError() from exc


def decode_bytes(stream: BinaryIO) -> bytes:
    """Read an int32-prefixed byte string; a non-positive length yields b''."""
    length = decode_int32(stream)
    if length <= 0:
        return b""
    return _read_exact(stream, length)


def decode_array(stream: BinaryIO, decode_item: Callable[[BinaryIO], T]) -> List[T]:
    """Read an int32 element count and then that many elements."""
    length = decode_int32(stream)
    if length <= 0:
        return []
    return [decode_item(stream) for _ in range(length)]


def decode_strings(stream: BinaryIO) -> List[str]:
    """Read a protocol array of strings."""
    return decode_array(stream, decode_string)