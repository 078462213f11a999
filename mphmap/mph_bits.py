"""Compact vector of 2-bit values and small bit helpers."""

_ONES = 0xFF


class Dynamic2Bitset:
    """A resizable array of 2-bit unsigned values, four per byte."""

    def __init__(self, size=0, fill=False):
        self._size = size
        self._fill = bool(fill)
        self._data = bytearray([_ONES if fill else 0]) * _byte_count(size)

    def __getitem__(self, i):
        return self.get(i)

    def __len__(self):
        return self._size

    def get(self, i):
        """Return the 2-bit value stored at position ``i``."""
        if not 0 <= i < self._size:
            raise IndexError(f"index {i} out of range for size {self._size}")
        return (self._data[i >> 2] >> ((i & 3) << 1)) & 3

    def set(self, i, value):
        """Store the 2-bit ``value`` at position ``i``."""
        if not 0 <= value <= 3:
            raise ValueError(f"value {value} does not fit in two bits")
        if not 0 <= i >> 2 < len(self._data):
            raise IndexError(f"index {i} out of range for size {self._size}")
        shift = (i & 3) << 1
        byte = self._data[i >> 2] & (_ONES ^ (3 << shift))
        self._data[i >> 2] = byte | (value << shift)

    def resize(self, size):
        """Change the number of values, padding with the fill pattern."""
        nbytes = _byte_count(size)
        current = len(self._data)
        if nbytes < current:
            del self._data[nbytes:]
        else:
            self._data.extend(bytes([_ONES if self._fill else 0]) * (nbytes - current))
        self._size = size

    def clear(self):
        """Drop all values."""
        self._data.clear()
        self._size = 0

    @property
    def data(self):
        """The packed bytes backing the values."""
        return bytes(self._data)

    def __repr__(self):
        return f"Dynamic2Bitset(size={self._size}, fill={self._fill})"


def _byte_count(size):
    return (size + 3) // 4


def next_power_of_two(k):
    """Return the smallest power of two not below ``k`` as a 32-bit value.

    Zero maps to one; values above 2**31 wrap around to zero.
    """
    if not 0 <= k <= 0xFFFFFFFF:
        raise ValueError(f"{k} is not a 32-bit unsigned integer")
    if k == 0:
        return 1
    return (1 << (k - 1).bit_length()) & 0xFFFFFFFF