"""Benchmarks comparing map implementations on urls and integers."""

import argparse
import random
import sys

from .benchmark import (
    SearchUint64Benchmark,
    SearchUrlsBenchmark,
    UrlsBenchmark,
    run_all,
)
from .mph_map import DenseHashMap, MphMap, SparseHashMap

_MASK32 = 0xFFFFFFFF


def _factory_name(factory):
    return getattr(factory, "__name__", type(factory).__name__)


def _rehash(mapping):
    rehash = getattr(mapping, "rehash", None)
    if rehash is not None:
        rehash()


def _report_occupation(mapping):
    bucket_count = getattr(mapping, "bucket_count", None)
    if bucket_count is None:
        return
    buckets = bucket_count()
    if buckets:
        print(f"Occupation: {len(mapping) / buckets:f}", file=sys.stderr)


class CreateUrlsBenchmark(UrlsBenchmark):
    """Time filling a fresh map with every url."""

    def __init__(self, map_factory, urls_file):
        super().__init__(urls_file, f"CreateUrls<{_factory_name(map_factory)}>")
        self.map_factory = map_factory
        self.map = None

    def run(self):
        """Build a map holding each url as both key and value."""
        mymap = self.map_factory()
        for url in self.urls:
            mymap[url] = url
        self.map = mymap


class SearchUrlsMapBenchmark(SearchUrlsBenchmark):
    """Time random url lookups in a prebuilt map."""

    def __init__(self, map_factory, urls_file, nsearches, miss_ratio, rng=None):
        name = f"SearchUrls<{_factory_name(map_factory)}>({miss_ratio})"
        super().__init__(urls_file, nsearches, miss_ratio, name, rng)
        self.map_factory = map_factory
        self.map = None
        self.total = 0

    def set_up(self):
        """Draw the searches and fill the map with every url."""
        if not super().set_up():
            return False
        mymap = self.map_factory()
        for url in self.urls:
            mymap[url] = url
        _rehash(mymap)
        _report_occupation(mymap)
        self.map = mymap
        return True

    def run(self):
        """Look up every search, summing the lengths of the values found."""
        total = 1
        mymap = self.map
        for key in self.searches:
            value = mymap.get(key)
            if value is not None:
                total = (total + len(value)) & _MASK32
        self.total = total
        print(f"Total: {total}", file=sys.stderr)


class SearchUint64MapBenchmark(SearchUint64Benchmark):
    """Time random integer lookups in a prebuilt map."""

    def __init__(self, map_factory, count=100_000, nsearches=10_000_000, rng=None):
        name = f"SearchUint64<{_factory_name(map_factory)}>"
        super().__init__(count, nsearches, name, rng)
        self.map_factory = map_factory
        self.map = None

    def set_up(self):
        """Fill the map with the values and check each maps to itself."""
        if not super().set_up():
            return False
        mymap = self.map_factory()
        for v in self.values:
            mymap[v] = v
        _rehash(mymap)
        self.map = mymap
        print("Doing double check", file=sys.stderr)
        for i, v in enumerate(self.values):
            found = mymap.get(v)
            if found != v:
                print(
                    f"Looking for {i} th key value {v} yielded {found}",
                    file=sys.stderr,
                )
                return False
        return True

    def run(self):
        """Look up every search; raise RuntimeError if one yields a wrong value."""
        mymap = self.map
        for key in self.searches:
            value = mymap.get(key)
            if value != key:
                raise RuntimeError(f"Looked for {key} got {value}")


def main(argv=None):
    """Register the map benchmarks, run them and return the exit status."""
    parser = argparse.ArgumentParser(prog="mphmap-bench", description=__doc__)
    parser.add_argument("urls_file", nargs="?", default="URLS100k")
    parser.add_argument("--nsearches", type=int, default=10_000_000)
    parser.add_argument("--count", type=int, default=100_000)
    parser.add_argument("--seed", type=int, default=4)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    factories = (DenseHashMap, dict, MphMap, SparseHashMap)

    for factory in factories:
        CreateUrlsBenchmark(factory, args.urls_file).register()
    for miss_ratio in (0, 0.9):
        for factory in factories:
            SearchUrlsMapBenchmark(
                factory, args.urls_file, args.nsearches, miss_ratio, rng=rng
            ).register()
    for factory in factories:
        SearchUint64MapBenchmark(factory, args.count, args.nsearches, rng=rng).register()
    run_all()
    return 0


if __name__ == "__main__":
    sys.exit(main())