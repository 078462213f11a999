import pytest

from mphmap.mph_bits import Dynamic2Bitset, next_power_of_two


def test_small_filled_then_set_modulo():
    small = Dynamic2Bitset(256, True)
    for i in range(len(small)):
        small.set(i, i % 4)
    assert [small[i] for i in range(len(small))] == [i % 4 for i in range(256)]


def test_fill_zero_and_pattern():
    size = 256
    bits = Dynamic2Bitset(size, True)
    assert all(bits[i] == 3 for i in range(size))
    for i in range(size):
        bits.set(i, 0)
    assert all(bits[i] == 0 for i in range(size))
    for i in range(size):
        bits.set(i, i % 4)
    assert all(bits[i] == i % 4 for i in range(size))


def test_size_corners_and_clear():
    size_corner1 = Dynamic2Bitset(1)
    assert len(size_corner1) == 1
    size_corner2 = Dynamic2Bitset(2)
    assert len(size_corner2) == 2
    size_corner2 = Dynamic2Bitset(4, True)
    assert len(size_corner2) == 4
    assert all(size_corner2[i] == 3 for i in range(4))
    size_corner2.clear()
    assert len(size_corner2) == 0


def test_empty_clear_and_large():
    empty = Dynamic2Bitset()
    empty.clear()
    assert len(empty) == 0
    large = Dynamic2Bitset(1000, True)
    assert len(large) == 1000
    assert large[999] == 3


def test_next_power_of_two_three():
    assert next_power_of_two(3) == 4


@pytest.mark.parametrize("k, expected", [(0, 1), (1, 1), (2, 2), (4, 4), (5, 8), (1024, 1024)])
def test_next_power_of_two_values(k, expected):
    assert next_power_of_two(k) == expected


def test_next_power_of_two_rejects_negative():
    with pytest.raises(ValueError):
        next_power_of_two(-1)


def test_packed_layout():
    bits = Dynamic2Bitset(8)
    bits.set(0, 1)
    assert bits.data == b"\x01\x00"
    bits.set(1, 2)
    assert bits.data == bytes([0b1001, 0])
    bits.set(4, 3)
    assert bits.data == bytes([0b1001, 0b11])


def test_filled_data_bytes():
    assert Dynamic2Bitset(8, True).data == b"\xff\xff"
    assert len(Dynamic2Bitset(5).data) == 2


def test_set_does_not_touch_neighbours():
    bits = Dynamic2Bitset(4, True)
    bits.set(2, 0)
    assert [bits[i] for i in range(4)] == [3, 3, 0, 3]


def test_get_out_of_range():
    with pytest.raises(IndexError):
        Dynamic2Bitset(4).get(4)
    with pytest.raises(IndexError):
        Dynamic2Bitset(4)[-1]


def test_set_value_too_large():
    with pytest.raises(ValueError):
        Dynamic2Bitset(4).set(0, 4)


def test_iteration_follows_length():
    bits = Dynamic2Bitset(6, True)
    assert list(bits) == [3] * 6


def test_resize_grows_with_fill():
    bits = Dynamic2Bitset(4, True)
    bits.resize(10)
    assert len(bits) == 10
    assert bits[9] == 3
    bits.resize(2)
    assert len(bits) == 2
    with pytest.raises(IndexError):
        bits.get(2)