"""Minimal perfect hashing with the BDZ algorithm.

Given a set of distinct keys, :class:`MPHIndex` builds a function mapping
each key to a unique number in ``range(len(index))``. Keys outside the set
map to arbitrary numbers. This is not an associative container; see
:mod:`mphmap.mph_map` for one.
"""

import math
import random
from enum import Enum

from .mph_bits import Dynamic2Bitset, next_power_of_two
from .seeded_hash import key_to_bytes, seeded_hash128
from .trigraph import Edge, TriGraph

UNASSIGNED = 3
_MAX_ITERATIONS = 1000

# Number of 2-bit fields in a byte that are not UNASSIGNED.
_ASSIGNED_COUNT = bytes(
    sum(1 for shift in (0, 2, 4, 6) if (byte >> shift) & 3 != UNASSIGNED)
    for byte in range(256)
)


class MPHIndexError(Exception):
    """Raised when a perfect hash function cannot be built."""


class IndexFlavor(Enum):
    """Trade-off between memory use and evaluation speed."""

    MINIMAL = "minimal"
    PERFECT = "perfect"
    SQUARE = "square"


def _peel(graph, nedges):
    """Return the edge removal order, or None if the graph has a cycle."""
    degree = graph.vertex_degree
    first = graph.first_edge
    edges = graph.edges
    marked = bytearray(nedges)
    queue = []
    for edge_id, edge in enumerate(edges):
        if any(degree[v] == 1 for v in edge) and not marked[edge_id]:
            queue.append(edge_id)
            marked[edge_id] = 1
    head = 0
    while head < len(queue):
        current = queue[head]
        head += 1
        graph.remove_edge(current)
        for vertex in edges[current]:
            if degree[vertex] == 1:
                next_edge = first[vertex]
                if not marked[next_edge]:
                    queue.append(next_edge)
                    marked[next_edge] = 1
    return queue if len(queue) == nedges else None


def _assign(edges, queue, nvertices):
    marked = bytearray(nvertices)
    g = Dynamic2Bitset(nvertices, True)
    for edge_id in reversed(queue):
        v0, v1, v2 = edges[edge_id]
        if not marked[v0]:
            if not marked[v1]:
                g.set(v1, UNASSIGNED)
                marked[v1] = 1
            if not marked[v2]:
                g.set(v2, UNASSIGNED)
                marked[v2] = 1
            g.set(v0, (6 - (g[v1] + g[v2])) % 3)
            marked[v0] = 1
        elif not marked[v1]:
            if not marked[v2]:
                g.set(v2, UNASSIGNED)
                marked[v2] = 1
            g.set(v1, (7 - (g[v0] + g[v2])) % 3)
            marked[v1] = 1
        else:
            g.set(v2, (8 - (g[v0] + g[v1])) % 3)
            marked[v2] = 1
    return g


def _rank_table(g_data, nvertices, k):
    block = k >> 2
    table = [0] * math.ceil(nvertices / k)
    count = 0
    for i in range(1, len(table)):
        count += sum(_ASSIGNED_COUNT[byte] for byte in g_data[(i - 1) * block:i * block])
        table[i] = count
    return table


class MPHIndex:
    """A minimal perfect hash function over a fixed set of keys."""

    def __init__(self, square=False, c=1.23, b=7, rng=None):
        self._square = bool(square)
        self._c = c
        self._b = b
        self._rng = rng if rng is not None else random.Random()
        self._reset_state()

    def _reset_state(self):
        self._m = 0
        self._n = 0
        self._r = 1
        self._g = Dynamic2Bitset(8, True)
        self._g_data = self._g.data
        self._ranktable = []
        self._seed = 0

    def reset(self, keys):
        """Build the function for ``keys``, which must be distinct."""
        encoded = [key_to_bytes(key) for key in keys]
        if not encoded:
            self.clear()
            return
        if len(set(encoded)) != len(encoded):
            raise MPHIndexError("input has repeated keys")
        m = len(encoded)
        r = math.ceil(self._c * m / 3)
        if r % 2 == 0:
            r += 1
        if self._square:
            r = next_power_of_two(r)
        n = 3 * r
        k = 1 << self._b

        for _ in range(_MAX_ITERATIONS):
            seed = self._rng.getrandbits(31)
            found = self._mapping(encoded, seed, m, n, r)
            if found is not None:
                break
        else:
            raise MPHIndexError(
                f"no acyclic graph found for {m} keys after {_MAX_ITERATIONS} attempts"
            )
        edges, queue = found
        g = _assign(edges, queue, n)
        g_data = g.data
        self._m, self._n, self._r = m, n, r
        self._seed = seed
        self._g = g
        self._g_data = g_data
        self._ranktable = _rank_table(g_data, n, k)

    @staticmethod
    def _mapping(encoded, seed, m, n, r):
        graph = TriGraph(n, m)
        for data in encoded:
            h = seeded_hash128(data, seed)
            graph.add_edge(Edge(h[0] % r, h[1] % r + r, h[2] % r + 2 * r))
        queue = _peel(graph, m)
        if queue is None:
            return None
        return graph.extract_edges_and_clear(), queue

    def index(self, key):
        """Return the unique id of ``key`` in ``range(len(self))``."""
        return self.minimal_perfect_hash(key)

    def __len__(self):
        return self._m

    def clear(self):
        """Forget the keys and return to the empty state."""
        self._reset_state()

    def perfect_hash_size(self):
        """Size of the range of :meth:`perfect_hash`."""
        return self._n

    def _vertices(self, key, reduce):
        h = seeded_hash128(key, self._seed)
        r = self._r
        return (reduce(h[0]), reduce(h[1]) + r, reduce(h[2]) + 2 * r)

    def _select(self, vertices):
        g = self._g
        return vertices[(g[vertices[0]] + g[vertices[1]] + g[vertices[2]]) % 3]

    def perfect_hash(self, key):
        """Return a unique vertex for ``key`` in ``range(perfect_hash_size())``."""
        if not len(self._g):
            return 0
        r = self._r
        return self._select(self._vertices(key, lambda h: h % r))

    def perfect_square(self, key):
        """Like :meth:`perfect_hash`, for indexes built with ``square=True``."""
        mask = self._r - 1
        return self._select(self._vertices(key, lambda h: h & mask))

    def minimal_perfect_hash_size(self):
        """Size of the range of :meth:`minimal_perfect_hash`."""
        return self._m

    def minimal_perfect_hash(self, key):
        """Return the rank of the perfect hash of ``key``."""
        return self._rank(self.perfect_hash(key))

    def _rank(self, vertex):
        if not self._ranktable:
            return 0
        index = vertex >> self._b
        rank = self._ranktable[index]
        begin_byte = (index << self._b) >> 2
        end_byte = vertex >> 2
        rank += sum(_ASSIGNED_COUNT[byte] for byte in self._g_data[begin_byte:end_byte])
        g = self._g
        rank += sum(
            1 for v in range(max(begin_byte, end_byte) << 2, vertex) if g[v] != UNASSIGNED
        )
        return rank


class FlexibleMPHIndex(MPHIndex):
    """An index whose ``index`` method uses the hash of the chosen flavor."""

    def __init__(self, flavor=IndexFlavor.MINIMAL, rng=None):
        flavor = IndexFlavor(flavor)
        super().__init__(square=flavor is IndexFlavor.SQUARE, rng=rng)
        self.flavor = flavor

    def index(self, key):
        """Return the id of ``key`` in ``range(len(self))``."""
        if self.flavor is IndexFlavor.SQUARE:
            return self.perfect_square(key)
        if self.flavor is IndexFlavor.PERFECT:
            return self.perfect_hash(key)
        return self.minimal_perfect_hash(key)

    def __len__(self):
        if self.flavor is IndexFlavor.MINIMAL:
            return self.minimal_perfect_hash_size()
        return self.perfect_hash_size()