import pytest

from kafkawire.xxhash import XxHash32


def _digest(data, seed=0):
    h = XxHash32(seed)
    h.write(data)
    return h.finish()


def test_empty_input_reference_value():
    assert XxHash32().finish() == 0x02CC5D05


def test_abc_reference_value():
    assert _digest(b"abc") == 0x32D153FF


@pytest.mark.parametrize("split", [0, 1, 3, 7, 15, 16, 17, 31, 40])
def test_streaming_matches_single_write(split):
    data = bytes(range(50))
    h = XxHash32()
    h.write(data[:split])
    h.write(data[split:])
    assert h.finish() == _digest(data)


def test_many_small_writes_match_single_write():
    data = b"the quick brown fox jumps over the lazy dog" * 3
    h = XxHash32()
    for byte in data:
        h.write(bytes([byte]))
    assert h.finish() == _digest(data)


def test_finish_is_repeatable():
    h = XxHash32()
    h.write(b"foo-key")
    first = h.finish()
    assert h.finish() == first


def test_seed_changes_result():
    assert _digest(b"foo-key", 0) != _digest(b"foo-key", 1)
    assert _digest(b"foo-key", 7) == _digest(b"foo-key", 7)


def test_result_fits_in_32_bits():
    for data in (b"", b"a", b"x" * 16, b"y" * 1000):
        assert 0 <= _digest(data) < 2**32


def test_accepts_bytearray_and_memoryview():
    data = b"some key value"
    assert _digest(bytearray(data)) == _digest(data)
    assert _digest(memoryview(data)) == _digest(data)