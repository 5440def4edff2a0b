import pytest

from dkits.bytesx import (
    from_uint16_be,
    from_uint16_le,
    set_all,
    to_uint16_be,
    to_uint16_le,
    zero_all,
)


@pytest.mark.parametrize(
    "initial, expected",
    [
        (b"", b""),
        (bytes([0]), bytes([127])),
        (bytes([0, 1, 2, 3, 4, 5, 6, 7]), bytes([127] * 8)),
    ],
)
def test_set_all(initial, expected):
    buffer = bytearray(initial)
    set_all(buffer, 127)
    assert buffer == bytearray(expected)


@pytest.mark.parametrize(
    "initial, expected",
    [
        (b"", b""),
        (bytes([0]), bytes([0])),
        (bytes([0, 1, 2, 3, 4, 5, 6, 7]), bytes([0] * 8)),
    ],
)
def test_zero_all(initial, expected):
    buffer = bytearray(initial)
    zero_all(buffer)
    assert buffer == bytearray(expected)


@pytest.mark.parametrize(
    "value, expected",
    [(0, bytes([0, 0])), (1, bytes([1, 0])), (0x1234, bytes([0x34, 0x12])), (65535, bytes([255, 255]))],
)
def test_from_uint16_le(value, expected):
    assert from_uint16_le(value) == expected


@pytest.mark.parametrize(
    "data, expected",
    [
        (None, 0),
        (b"", 0),
        (bytes([1]), 1),
        (bytes([0x34, 0x12]), 0x1234),
        (bytes([255, 255]), 65535),
        (bytes([255, 255, 1]), 65535),
    ],
)
def test_to_uint16_le(data, expected):
    assert to_uint16_le(data) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(0, bytes([0, 0])), (1, bytes([0, 1])), (0x1234, bytes([0x12, 0x34])), (65535, bytes([255, 255]))],
)
def test_from_uint16_be(value, expected):
    assert from_uint16_be(value) == expected


@pytest.mark.parametrize(
    "data, expected",
    [
        (None, 0),
        (b"", 0),
        (bytes([1]), 1),
        (bytes([0x12, 0x34]), 0x1234),
        (bytes([255, 255]), 65535),
        (bytes([255, 255, 1]), 65535),
    ],
)
def test_to_uint16_be(data, expected):
    assert to_uint16_be(data) == expected


def test_from_uint16_out_of_range():
    with pytest.raises(OverflowError):
        from_uint16_le(65536)


@pytest.mark.parametrize("value", [0, 1, 0x1234, 65535])
def test_round_trip(value):
    assert to_uint16_le(from_uint16_le(value)) == value
    assert to_uint16_be(from_uint16_be(value)) == value