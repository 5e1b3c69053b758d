"""Raw snappy compression and a reader for chunked snappy streams."""

from __future__ import annotations

from typing import Union

from kafkawire.errors import InvalidSnappyError, UnexpectedEOFError

BytesLike = Union[bytes, bytearray, memoryview]

MAGIC = b"\x82SNAPPY\x00"

_BLOCK_SIZE = 1 << 16
_MIN_NON_LITERAL_BLOCK_SIZE = 17


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def _decode_varint(src: bytes) -> tuple[int, int]:
    value = 0
    for index, byte in enumerate(src[:5]):
        value |= (byte & 0x7F) << (7 * index)
        if byte < 0x80:
            if value > 0xFFFFFFFF:
                raise InvalidSnappyError("snappy header: length too big")
            return value, index + 1
    raise InvalidSnappyError("snappy header: invalid length")


def _emit_literal(out: bytearray, literal: bytes) -> None:
    if not literal:
        return
    n = len(literal) - 1
    if n < 60:
        out.append(n << 2)
    else:
        size = (n.bit_length() + 7) // 8
        out.append((59 + size) << 2)
        out += n.to_bytes(size, "little")
    out += literal


def _emit_copy(out: bytearray, offset: int, length: int) -> None:
    while length >= 68:
        out.append(2 | (63 << 2))
        out += offset.to_bytes(2, "little")
        length -= 64
    if length > 64:
        out.append(2 | (59 << 2))
        out += offset.to_bytes(2, "little")
        length -= 60
    if 4 <= length < 12 and offset < 2048:
        out.append(1 | ((length - 4) << 2) | ((offset >> 8) << 5))
        out.append(offset & 0xFF)
    else:
        out.append(2 | ((length - 1) << 2))
        out += offset.to_bytes(2, "little")


def _compress_block(block: bytes, out: bytearray) -> None:
    n = len(block)
    if n < _MIN_NON_LITERAL_BLOCK_SIZE:
        _emit_literal(out, block)
        return
    table: dict[bytes, int] = {}
    literal_start = 0
    pos = 0
    while pos + 4 <= n:
        key = block[pos:pos + 4]
        candidate = table.get(key)
        table[key] = pos
        if candidate is None:
            pos += 1
            continue
        length = 4
        while pos + length < n and block[candidate + length] == block[pos + length]:
            length += 1
        _emit_literal(out, block[literal_start:pos])
        _emit_copy(out, pos - candidate, length)
        pos += length
        literal_start = pos
    _emit_literal(out, block[literal_start:])


def compress(src: BytesLike) -> bytes:
    """Compress ``src`` into the raw snappy block format."""
    data = bytes(src)
    out = bytearray(_encode_varint(len(data)))
    for start in range(0, len(data), _BLOCK_SIZE):
        _compress_block(data[start:start + _BLOCK_SIZE], out)
    return bytes(out)


def _take(src: bytes, pos: int, count: int) -> int:
    if pos + count > len(src):
        raise InvalidSnappyError("snappy: truncated tag")
    return int.from_bytes(src[pos:pos + count], "little")


def _decompress(src: bytes, expected: int, pos: int) -> bytes:
    out = bytearray()
    end = len(src)
    while pos < end:
        tag = src[pos]
        pos += 1
        kind = tag & 3
        if kind == 0:
            length = tag >> 2
            if length >= 60:
                extra = length - 59
                length = _take(src, pos, extra)
                pos += extra
            length += 1
            if pos + length > end or len(out) + length > expected:
                raise InvalidSnappyError("snappy: invalid literal")
            out += src[pos:pos + length]
            pos += length
            continue
        if kind == 1:
            length = 4 + ((tag >> 2) & 7)
            offset = ((tag >> 5) << 8) | _take(src, pos, 1)
            pos += 1
        elif kind == 2:
            length = (tag >> 2) + 1
            offset = _take(src, pos, 2)
            pos += 2
        else:
            length = (tag >> 2) + 1
            offset = _take(src, pos, 4)
            pos += 4
        if offset == 0 or offset > len(out):
            raise InvalidSnappyError(f"snappy: invalid copy offset {offset}")
        if len(out) + length > expected:
            raise InvalidSnappyError("snappy: copy exceeds output")
        start = len(out) - offset
        if offset >= length:
            out += out[start:start + length]
        else:
            for k in range(length):
                out.append(out[start + k])
    if len(out) != expected:
        raise InvalidSnappyError(
            f"snappy: header says {expected} bytes, got {len(out)}"
        )
    return bytes(out)


def uncompress(src: BytesLike) -> bytes:
    """Decompress data in the raw snappy block format."""
    data = bytes(src)
    if not data:
        return b""
    expected, pos = _decode_varint(data)
    if expected == 0:
        return b""
    return _decompress(data, expected, pos)


def _read_i32(data: bytes, pos: int) -> int:
    if pos + 4 > len(data):
        raise UnexpectedEOFError()
    return int.from_bytes(data[pos:pos + 4], "big", signed=True)


def validate_stream(stream: BytesLike) -> bytes:
    """Check the chunked stream header and return the data following it."""
    data = bytes(stream)
    if len(data) < len(MAGIC):
        raise UnexpectedEOFError()
    if data[:len(MAGIC)] != MAGIC:
        raise InvalidSnappyError("snappy stream: bad header magic")
    pos = len(MAGIC)
    version = _read_i32(data, pos)
    if version != 1:
        raise InvalidSnappyError(f"snappy stream: unsupported version {version}")
    compat = _read_i32(data, pos + 4)
    if compat != 1:
        raise InvalidSnappyError(f"snappy stream: unsupported compatibility {compat}")
    return data[pos + 8:]


class SnappyReader:
    """Reads a stream of length-prefixed snappy chunks as one byte stream."""

    def __init__(self, stream: BytesLike) -> None:
        self._data = validate_stream(stream)
        self._pos = 0
        self._chunk = b""
        self._chunk_pos = 0

    def _next_chunk(self) -> bytes | None:
        if self._pos >= len(self._data):
            return None
        size = _read_i32(self._data, self._pos)
        if size <= 0:
            raise InvalidSnappyError(f"snappy stream: unsupported chunk length {size}")
        start = self._pos + 4
        if start + size > len(self._data):
            raise UnexpectedEOFError()
        self._pos = start + size
        return uncompress(self._data[start:start + size])

    def read(self, size: int = -1) -> bytes:
        """Return up to ``size`` uncompressed bytes; b'' at the end."""
        if size is None or size < 0:
            return self.read_all()
        if size == 0:
            return b""
        while self._chunk_pos >= len(self._chunk):
            chunk = self._next_chunk()
            if chunk is None:
                return b""
            self._chunk = chunk
            self._chunk_pos = 0
        piece = self._chunk[self._chunk_pos:self._chunk_pos + size]
        self._chunk_pos += len(piece)
        return piece

    def read_all(self) -> bytes:
        """Return all remaining uncompressed bytes."""
        parts = [self._chunk[self._chunk_pos:]]
        self._chunk = b""
        self._chunk_pos = 0
        while (chunk := self._next_chunk()) is not None:
            parts.append(chunk)
        return b"".join(parts)