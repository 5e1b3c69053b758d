import io

import pytest

from kafkawire.compression import (
    DEFAULT_COMPRESSION,
    Compression,
    gzip_compress,
    gzip_uncompress,
)

GZIP_TEST = bytes(
    [31, 139, 8, 0, 192, 248, 79, 85, 2, 255, 43, 73, 45, 46, 1, 0,
     12, 126, 127, 216, 4, 0, 0, 0]
)

NOT_GZIP = bytes(
    [12, 42, 84, 104, 105, 115, 32, 105, 115, 32, 116, 101, 115, 116]
)


@pytest.mark.parametrize(
    "value, name",
    [(0, "NONE"), (1, "GZIP"), (2, "SNAPPY")],
)
def test_compression_values(value, name):
    assert Compression(value).name == name


def test_default_compression_is_none():
    assert DEFAULT_COMPRESSION is Compression(0)


def test_uncompress():
    assert gzip_uncompress(io.BytesIO(GZIP_TEST)).decode("utf-8") == "test"


def test_uncompress_from_bytes():
    assert gzip_uncompress(GZIP_TEST) == b"test"


def test_uncompress_invalid_raises():
    with pytest.raises(OSError):
        gzip_uncompress(io.BytesIO(NOT_GZIP))


def test_uncompress_truncated_raises():
    with pytest.raises(OSError):
        gzip_uncompress(GZIP_TEST[:-6])


@pytest.mark.parametrize("payload", [b"", b"This is test", bytes(range(256)) * 40])
def test_round_trip(payload):
    compressed = gzip_compress(payload)
    assert compressed[:2] == b"\x1f\x8b"
    assert gzip_uncompress(compressed) == payload