import pytest

from panoview.ringbuffer import RingBuffer


def test_new_buffer_is_empty_and_fully_writable():
    ring = RingBuffer(16)
    assert ring.buffered_bytes() == 0
    assert ring.free_space() == 16
    assert ring.get(5) == b""


def test_put_then_get_round_trip():
    ring = RingBuffer(16)
    payload = b"hello ring"
    assert ring.put(payload) == len(payload)
    assert ring.buffered_bytes() == len(payload)
    assert ring.get(len(payload)) == payload
    assert ring.buffered_bytes() == 0


def test_put_truncates_to_free_space():
    ring = RingBuffer(8)
    data = bytes(range(12))
    taken = ring.put(data)
    assert taken == 8
    assert ring.free_space() == 0
    assert ring.get(100) == data[:8]


def test_wrapping_data_needs_two_gets():
    ring = RingBuffer(8)
    ring.put(b"abcdef")
    assert ring.get(4) == b"abcd"
    # only the tail region up to the end is writable in one call
    first = ring.put(b"WXYZ")
    assert first == ring.buffered_bytes() - 2
    rest = ring.put(b"WXYZ"[first:])
    assert first + rest == 4
    assert ring.buffered_bytes() == 6
    part1 = ring.get(100)
    part2 = ring.get(100)
    assert part1 + part2 == b"efWXYZ"
    assert ring.buffered_bytes() == 0


def test_skip_crosses_wrap():
    ring = RingBuffer(8)
    ring.put(b"abcdef")
    ring.get(4)
    ring.put(b"WX")
    ring.put(b"YZ")
    skipped = ring.skip(5)
    assert skipped == 5
    assert ring.get(100) == b"Z"


def test_skip_limited_by_content():
    ring = RingBuffer(8)
    ring.put(b"abc")
    assert ring.skip(10) == 3
    assert ring.buffered_bytes() == 0


def test_accepts_memoryview_and_bytearray():
    ring = RingBuffer(8)
    ring.put(bytearray(b"ab"))
    ring.put(memoryview(b"cd"))
    assert ring.get(4) == b"abcd"


def test_invalid_arguments():
    with pytest.raises(ValueError):
        RingBuffer(0)
    ring = RingBuffer(4)
    with pytest.raises(ValueError):
        ring.get(-1)
    with pytest.raises(ValueError):
        ring.skip(-1)


def test_len_matches_buffered_bytes():
    ring = RingBuffer(10)
    ring.put(b"xyz")
    assert len(ring) == ring.buffered_bytes()