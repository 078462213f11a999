"""Command line tool: load newline separated keys into a map and list it."""

import getopt
import sys
from importlib.metadata import PackageNotFoundError, version

from .mph_map import MphMap

_PROG = "mphmap"


def _usage():
    print(f"usage: {_PROG} [-v] [-h] [-V] <keys.txt>", file=sys.stderr)


def _usage_long():
    _usage()
    print("   -h\t print this help message", file=sys.stderr)
    print("   -V\t print version number and exit", file=sys.stderr)
    print("   -v\t increase verbosity (may be used multiple times)", file=sys.stderr)


def _version():
    try:
        return version(_PROG)
    except PackageNotFoundError:
        return "unknown"


def _read_keys(path):
    """Return the newline terminated lines of ``path``; a final unterminated line is dropped."""
    with open(path, encoding="utf-8", newline="") as f:
        content = f.read()
    return content.split("\n")[:-1]


def main(argv=None):
    """Run the tool and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, operands = getopt.gnu_getopt(args, "hvV")
    except getopt.GetoptError as exc:
        print(f"{_PROG}: {exc}", file=sys.stderr)
        _usage()
        return 1
    for opt, _ in opts:
        if opt == "-h":
            _usage_long()
            return 0
        if opt == "-V":
            print(_version())
            return 0
    if len(operands) != 1:
        _usage()
        return 1
    path = operands[0]
    try:
        keys = _read_keys(path)
    except OSError:
        print(f"Failed to open {path}", file=sys.stderr)
        return 1

    table = MphMap()
    for key in keys:
        table[key] = key
    for i, (key, value) in enumerate(table.items()):
        print(f"{i}: {key} -> {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())