"""An associative container backed by a minimal perfect hash function.

Entries live in a vector addressed by a perfect hash index built over the
keys. Keys inserted since the last rebuild sit in a small slack table keyed
by their 128-bit hash; the index is rebuilt when the vector would have to
grow or when two slack hashes collide.

Three flavors trade memory for speed:

* :class:`DenseHashMap`: fast, about half of the buckets used.
* :class:`MphMap`: the middle ground.
* :class:`SparseHashMap`: slower, every bucket used.
"""

from collections.abc import MutableMapping

from .hollow_iterator import iter_present, iter_present_positions
from .mph_index import FlexibleMPHIndex, IndexFlavor
from .seeded_hash import seeded_hash128

_PACK_THRESHOLD = 256


class MphMap(MutableMapping):
    """A mutable mapping whose lookups go through a perfect hash index."""

    def __init__(self, items=None, minimal=False, square=False, rng=None):
        if minimal and square:
            raise ValueError("a map cannot be both minimal and square")
        if minimal:
            flavor = IndexFlavor.MINIMAL
        elif square:
            flavor = IndexFlavor.SQUARE
        else:
            flavor = IndexFlavor.PERFECT
        self._index = FlexibleMPHIndex(flavor, rng=rng)
        self._values = []
        self._present = []
        self._slack = {}
        self._size = 0
        self._capacity = 0
        if items is not None:
            self.update(items)

    def _position(self, key):
        """Return the slot that ``key`` would occupy, or None."""
        if self._slack:
            position = self._slack.get(seeded_hash128(key, 0))
            if position is not None:
                return position
        if len(self._index):
            position = self._index.index(key)
            if position < len(self._present) and self._present[position]:
                return position
        return None

    def _locate(self, key):
        """Return the slot holding ``key``, or None if it is absent."""
        position = self._position(key)
        if position is None:
            return None
        item = self._values[position]
        if item is None or item[0] != key:
            return None
        return position

    def find(self, key):
        """Return the stored ``(key, value)`` pair, or None if absent."""
        position = self._locate(key)
        if position is None:
            return None
        return self._values[position]

    def insert(self, key, value):
        """Add ``key`` unless present; return ``(stored_value, inserted)``."""
        item = self.find(key)
        if item is not None:
            return item[1], False
        should_pack = (
            len(self._values) == self._capacity and len(self._values) > _PACK_THRESHOLD
        )
        self._values.append((key, value))
        self._present.append(True)
        if len(self._values) > self._capacity:
            self._capacity = max(1, 2 * self._capacity)
        self._size += 1
        h = seeded_hash128(key, 0)
        if h in self._slack:
            should_pack = True
        else:
            self._slack[h] = len(self._values) - 1
        if should_pack:
            self._pack()
        return value, True

    def _pack(self):
        """Rebuild the index over the present keys and empty the slack."""
        if not self._values:
            return
        items = list(iter_present(self._values, self._present))
        self._index.reset([key for key, _ in items])
        nslots = len(self._index)
        values = [None] * nslots
        present = [False] * nslots
        for item in items:
            position = self._index.index(item[0])
            values[position] = item
            present[position] = True
        self._values = values
        self._present = present
        self._capacity = 2 * nslots
        self._slack = {}

    def _items(self):
        return iter_present(self._values, self._present)

    def __getitem__(self, key):
        item = self.find(key)
        if item is None:
            raise KeyError(key)
        return item[1]

    def __setitem__(self, key, value):
        position = self._locate(key)
        if position is None:
            self.insert(key, value)
        else:
            self._values[position] = (key, value)

    def __delitem__(self, key):
        position = self._locate(key)
        if position is None:
            raise KeyError(key)
        self._values[position] = None
        self._present[position] = False
        self._size -= 1

    def __iter__(self):
        for key, _ in self._items():
            yield key

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self._locate(key) is not None

    def __eq__(self, other):
        if not isinstance(other, MphMap):
            return NotImplemented
        return len(self) == len(other) and list(self._items()) == list(other._items())

    __hash__ = None

    def clear(self):
        """Remove every entry and forget the index."""
        self._values = []
        self._present = []
        self._slack = {}
        self._index.clear()
        self._size = 0
        self._capacity = 0

    def rehash(self, nbuckets=0):
        """Rebuild the index over the current keys; ``nbuckets`` is ignored."""
        self._pack()
        self._capacity = len(self._values)
        self._slack = {}

    def bucket_count(self):
        """Slots addressed by the index plus entries waiting in the slack."""
        return len(self._index) + len(self._slack)

    def positions(self):
        """Yield ``(slot, (key, value))`` for every occupied slot."""
        return iter_present_positions(self._values, self._present)

    def __repr__(self):
        return f"{type(self).__name__}({dict(self._items())!r})"


class DenseHashMap(MphMap):
    """Fastest flavor, with about half of the buckets in use."""

    def __init__(self, items=None, rng=None):
        super().__init__(items, minimal=False, square=True, rng=rng)


class SparseHashMap(MphMap):
    """Most compact flavor, with every bucket in use."""

    def __init__(self, items=None, rng=None):
        super().__init__(items, minimal=True, square=False, rng=rng)