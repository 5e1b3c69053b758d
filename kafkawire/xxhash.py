"""Streaming 32-bit xxHash used to partition messages by key."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_MASK = 0xFFFFFFFF

PRIME1 = 2654435761
PRIME2 = 2246822519
PRIME3 = 3266489917
PRIME4 = 668265263
PRIME5 = 374761393


def _rotl(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & _MASK


def _round(acc: int, lane: int) -> int:
    acc = (acc + lane * PRIME2) & _MASK
    acc = _rotl(acc, 13)
    return (acc * PRIME1) & _MASK


class XxHash32:
    """Incremental XXH32 hasher; ``write`` feeds bytes, ``finish`` yields the digest."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed & _MASK
        self._v1 = (self.seed + PRIME1 + PRIME2) & _MASK
        self._v2 = (self.seed + PRIME2) & _MASK
        self._v3 = self.seed
        self._v4 = (self.seed - PRIME1) & _MASK
        self._buffer = b""
        self._total_len = 0

    def _consume_stripe(self, stripe: bytes) -> None:
        lanes = [int.from_bytes(stripe[i:i + 4], "little") for i in range(0, 16, 4)]
        self._v1 = _round(self._v1, lanes[0])
        self._v2 = _round(self._v2, lanes[1])
        self._v3 = _round(self._v3, lanes[2])
        self._v4 = _round(self._v4, lanes[3])

    def write(self, data: BytesLike) -> None:
        """Feed ``data`` into the hash state."""
        chunk = bytes(data)
        self._total_len += len(chunk)
        pending = self._buffer + chunk
        full = len(pending) - len(pending) % 16
        for start in range(0, full, 16):
            self._consume_stripe(pending[start:start + 16])
        self._buffer = pending[full:]

    def finish(self) -> int:
        """Return the 32-bit hash of everything written so far."""
        if self._total_len >= 16:
            h = (
                _rotl(self._v1, 1)
                + _rotl(self._v2, 7)
                + _rotl(self._v3, 12)
                + _rotl(self._v4, 18)
            ) & _MASK
        else:
            h = (self.seed + PRIME5) & _MASK
        h = (h + self._total_len) & _MASK

        rest = self._buffer
        pos = 0
        while pos + 4 <= len(rest):
            lane = int.from_bytes(rest[pos:pos + 4], "little")
            h = (h + lane * PRIME3) & _MASK
            h = (_rotl(h, 17) * PRIME4) & _MASK
            pos += 4
        for byte in rest[pos:]:
            h = (h + byte * PRIME5) & _MASK
            h = (_rotl(h, 11) * PRIME1) & _MASK

        h ^= h >> 15
        h = (h * PRIME2) & _MASK
        h ^= h >> 13
        h = (h * PRIME3) & _MASK
        h ^= h >> 16
        return h