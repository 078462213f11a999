"""A tiny benchmark harness and the shared set-up of the map benchmarks.

Benchmarks are registered in a process-wide list and executed in order by
:func:`run_all`. Each run reports user CPU, system CPU and wall clock time.
"""

import abc
import os
import random
import sys
import time

_INT32_MAX = 0x7FFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF

_registry = []


def format_duration(seconds):
    """Render ``seconds`` as whole seconds padded to three places and six digits of microseconds."""
    micros = round(seconds * 1_000_000)
    sign = "-" if micros < 0 else ""
    whole, frac = divmod(abs(micros), 1_000_000)
    return f"{sign + str(whole):>3}.{frac:06d}"


class Benchmark(abc.ABC):
    """A unit of work whose run is timed."""

    def __init__(self, name=None):
        self.name = name or ""

    def set_up(self):
        """Prepare the run; return False to skip the benchmark."""
        return True

    @abc.abstractmethod
    def run(self):
        """Execute the measured work."""

    def tear_down(self):
        """Release what set_up prepared."""
        return True

    def measure_run(self, out=None):
        """Run the benchmark once and write its timings to ``out``."""
        out = sys.stdout if out is None else out
        wall_begin = time.perf_counter()
        begin = os.times()
        self.run()
        end = os.times()
        wall_end = time.perf_counter()

        out.write(f"Benchmark: {self.name}\n")
        out.write(f"CPU User time  : {format_duration(end.user - begin.user)}\n")
        out.write(f"CPU System time: {format_duration(end.system - begin.system)}\n")
        out.write(f"Wall clock time: {format_duration(wall_end - wall_begin)}\n")
        out.write("\n")

    def register(self):
        """Queue this benchmark for :func:`run_all`, naming it after its class if unnamed."""
        if not self.name:
            self.name = type(self).__name__
        _registry.append(self)
        return self


def run_all(out=None):
    """Run and consume every registered benchmark; return the names of those that ran."""
    ran = []
    while _registry:
        bm = _registry.pop(0)
        if not bm.set_up():
            print(f"Set up phase for benchmark {bm.name} failed.", file=sys.stderr)
            continue
        bm.measure_run(out)
        bm.tear_down()
        ran.append(bm.name)
    return ran


def _read_lines(path):
    with open(path, encoding="utf-8", newline="") as f:
        content = f.read()
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class UrlsBenchmark(Benchmark):
    """A benchmark over the distinct lines of a file of urls."""

    def __init__(self, urls_file, name=None):
        super().__init__(name)
        self.urls_file = urls_file
        self.urls = []

    def set_up(self):
        """Load the urls; fail if the file is missing or holds repeated lines."""
        try:
            urls = _read_lines(self.urls_file)
        except OSError:
            print(f"Failed to open urls file {self.urls_file}", file=sys.stderr)
            return False
        if len(set(urls)) != len(urls):
            print("Input file has repeated keys.", file=sys.stderr)
            return False
        self.urls = urls
        return True


class SearchUrlsBenchmark(UrlsBenchmark):
    """A url benchmark with a list of random searches, a share of them forced to miss."""

    def __init__(self, urls_file, nsearches, miss_ratio, name=None, rng=None):
        super().__init__(urls_file, name)
        self.nsearches = nsearches
        self.miss_ratio = miss_ratio
        self.rng = rng if rng is not None else random.Random()
        self.searches = []

    def set_up(self):
        """Load the urls and draw the searches."""
        if not super().set_up():
            return False
        if not self.urls:
            print(f"Urls file {self.urls_file} holds no keys", file=sys.stderr)
            return False
        threshold = int(_INT32_MAX * self.miss_ratio)
        searches = []
        for _ in range(self.nsearches):
            url = self.rng.choice(self.urls)
            if self.rng.getrandbits(31) < threshold:
                url += ".force_miss"
            searches.append(url)
        self.searches = searches
        return True


class Uint64Benchmark(Benchmark):
    """A benchmark over distinct random integers."""

    def __init__(self, count, name=None, rng=None):
        super().__init__(name)
        self.count = count
        self.rng = rng if rng is not None else random.Random()
        self.values = []

    def run(self):
        """Walk the drawn values once; return their sum modulo 2**64."""
        total = 0
        for v in self.values:
            total = (total + v) & _UINT64_MASK
        return total

    def set_up(self):
        """Draw ``count`` distinct non-negative 31-bit integers."""
        unique = set()
        values = []
        while len(values) < self.count:
            v = self.rng.getrandbits(31)
            if v not in unique:
                unique.add(v)
                values.append(v)
        self.values = values
        return True


class SearchUint64Benchmark(Uint64Benchmark):
    """An integer benchmark with a list of random searches among the values."""

    def __init__(self, count, nsearches, name=None, rng=None):
        super().__init__(count, name, rng)
        self.nsearches = nsearches
        self.searches = []

    def set_up(self):
        """Draw the values and the searches."""
        if not super().set_up():
            return False
        if not self.values:
            print("No values to search among", file=sys.stderr)
            return False
        self.searches = [self.rng.choice(self.values) for _ in range(self.nsearches)]
        return True