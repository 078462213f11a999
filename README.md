# mphmap

`mphmap` builds minimal perfect hash functions with the BDZ algorithm
(random acyclic 3-uniform hypergraphs). It also offers a mutable mapping
that keeps its entries in a table addressed by such a function.

A minimal perfect hash function maps a fixed set of *n* keys onto the
integers `0 .. n-1` with no collisions. It suits key sets that are known
ahead of time and are mostly read, not written.

Keys may be `str` (hashed as UTF-8), bytes-like objects, or integers that fit
in 64 bits (hashed as 8 little-endian bytes).

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## Perfect hash index

```python
from mphmap.mph_index import MPHIndex, MPHIndexError

keys = ["davi", "paulo", "joao", "maria", "bruno",
        "paula", "diego", "diogo", "algume"]

index = MPHIndex()
index.reset(keys)

ids = sorted(index.index(k) for k in keys)
assert ids == list(range(len(keys)))
```

`MPHIndex(square=False, c=1.23, b=7, rng=None)` takes the graph density `c`,
the rank-table block exponent `b` and an optional `random.Random` that draws
the hash seeds. Pass a seeded generator to get the same function on every run.

`reset(keys)` raises `MPHIndexError` if the keys repeat, or if no acyclic
graph turns up after 1000 attempts. An empty key list clears the index.

The index offers several lookups:

- `minimal_perfect_hash(key)` returns a value in
  `0 .. minimal_perfect_hash_size() - 1`. `index(key)` returns the same value.
- `perfect_hash(key)` returns a vertex in `0 .. perfect_hash_size() - 1`.
  It does less work but the result is not minimal.
- `perfect_square(key)` does the same with bit masking instead of modulo.
  Use it only on an index built with `square=True`.

`len(index)` is the number of keys. `clear()` returns the index to its empty
state.

`FlexibleMPHIndex(flavor, rng=None)` fixes one of these lookups with an
`IndexFlavor` (`MINIMAL`, `PERFECT` or `SQUARE`). Its `index()` uses that
lookup, and its `len()` gives the size of the range that `index()` maps into.

The index does not store the keys. A key that was not part of the last
`reset()` gets an arbitrary value.

## Hash map

```python
from mphmap.mph_map import MphMap, DenseHashMap, SparseHashMap

m = MphMap()
for i in range(1, 12):
    m[i] = i

assert len(m) == 11
assert 5 in m
del m[5]
assert 5 not in m
assert m.find(6) == (6, 6)
assert m.insert(6, 60) == (6, False)

m.rehash()
```

`MphMap(items=None, minimal=False, square=False, rng=None)` is a
`collections.abc.MutableMapping`. It supports item access, assignment,
deletion, `in`, iteration over keys, `len()`, `clear()` and equality with
other `MphMap` instances. Its extra methods are:

- `find(key)` returns the stored `(key, value)` pair, or `None`.
- `insert(key, value)` adds the key if it is absent and returns
  `(stored_value, inserted)`.
- `rehash(nbuckets=0)` rebuilds the index over all current keys. The argument
  is ignored.
- `bucket_count()` counts the slots the index addresses plus the entries
  waiting in the overflow table.
- `positions()` yields `(slot, (key, value))` for every occupied slot.

A new key first goes into a small overflow table, keyed by its 128-bit hash.
The map rebuilds the index when its storage would have to grow past 256
entries, or when two overflow hashes collide.

- `DenseHashMap(items=None, rng=None)` uses a power-of-two table and
  `perfect_square` lookups.
- `SparseHashMap(items=None, rng=None)` uses the minimal function, so every
  slot is used.

## Building blocks

- `mphmap.murmurhash3` provides `murmur3_x86_32`, `murmur3_x86_128` (four
  32-bit words) and `murmur3_x64_128` (two 64-bit words). Each takes a
  bytes-like key and a 32-bit seed.
- `mphmap.seeded_hash` provides `key_to_bytes`, `seeded_hash32(key, seed)` and
  `seeded_hash128(key, seed)`. The 128-bit result is an `H128`, which offers
  indexing, `get64(second)` and `hash32()`.
- `mphmap.mph_bits` provides `Dynamic2Bitset`, a resizable array of 2-bit
  values, and `next_power_of_two`.
- `mphmap.trigraph` provides `TriGraph` and `Edge`, a 3-uniform hypergraph
  that supports removing edges.
- `mphmap.hollow_iterator` provides `iter_present` and
  `iter_present_positions`. They walk the values whose flag is set.
- `mphmap.string_util` provides `format_string`, `infoln` and `debugln`.
  These are printf-style formatting with an extra `%v` directive, rendered by
  `to_str`.

## Command line

```
mphmap [-v] [-h] [-V] keys.txt
```

The command reads one key per line from `keys.txt` and keeps only lines that
end in a newline. It builds a map from each key to itself and prints every
entry in table order as `i: key -> value`.

- `-h` prints help and exits.
- `-V` prints the installed version (or `unknown`) and exits.
- `-v` is accepted and has no effect.

The command exits with status 1 on a usage error or when it cannot open the
file.

## Benchmarks

```
mphmap-bench [urls_file] [--nsearches N] [--count N] [--seed N]
```

This command compares `DenseHashMap`, `dict`, `MphMap` and `SparseHashMap`.
It times three kinds of work:

- building a map of URLs;
- searching URLs, with a miss ratio of 0 and of 0.9;
- searching integers.

For each benchmark it prints user CPU, system CPU and wall-clock time.

The options and their defaults are:

- `urls_file` (default `URLS100k`) is the file of unique, newline-separated
  URLs.
- `--nsearches` (default 10,000,000) is the number of searches.
- `--count` (default 100,000) is the number of integers.
- `--seed` (default 4) seeds the random searches.

If a benchmark's input cannot be read or holds repeated lines, the command
reports that its set-up failed and skips it.

The harness lives in `mphmap.benchmark`:

- `Benchmark` has `set_up`, `run`, `tear_down`, `measure_run` and `register`.
- `run_all` runs every registered benchmark.
- `format_duration` formats the reported times.
- `UrlsBenchmark`, `SearchUrlsBenchmark`, `Uint64Benchmark` and
  `SearchUint64Benchmark` prepare the shared inputs.

## Limitations

- An index or map cannot be saved to disk or loaded from it. It lives only in
  memory and has to be rebuilt with `reset()` or by inserting the keys again.
- BDZ is the only construction algorithm provided.