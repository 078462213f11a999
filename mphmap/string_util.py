"""printf-style formatting extended with a generic ``%v`` directive.

Each argument consumes one directive. ``%v`` renders the value with
:func:`to_str`; any other directive is applied with printf semantics to the
text up to the next ``%``. Doubled ``%%`` before a directive yields ``%``.
Text after the last consumed directive is copied unchanged.
"""

import inspect
import sys


def to_str(value):
    """Render a value the way ``%v`` does."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, list):
        return "[" + " ".join(to_str(item) for item in value) + "]"
    if isinstance(value, tuple) and len(value) == 2:
        return f"({to_str(value[0])},{to_str(value[1])})"
    return str(value)


def _copy_literal(fmt, pos, parts):
    """Copy literal text from ``pos`` and return the start of the next directive."""
    while True:
        idx = fmt.find("%", pos)
        if idx == -1:
            raise ValueError(f"more arguments than directives in {fmt!r}")
        if fmt.startswith("%", idx + 1):
            parts.append(fmt[pos:idx + 1])
            pos = idx + 2
        else:
            parts.append(fmt[pos:idx])
            return idx


def _render(fmt, args):
    parts = []
    pos = 0
    for value in args:
        start = _copy_literal(fmt, pos, parts)
        end = fmt.find("%", start + 1)
        if end == -1:
            end = len(fmt)
        spec = fmt[start:end]
        if spec.startswith("%v"):
            parts.append(to_str(value))
            parts.append(spec[2:])
        else:
            try:
                parts.append(spec % (value,))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"cannot format {value!r} with {spec!r}") from exc
        pos = end
    parts.append(fmt[pos:])
    return "".join(parts)


def format_string(fmt, *args):
    """Format ``args`` into ``fmt``; raises ValueError on a bad directive."""
    return _render(fmt, args)


def infoln(fmt, *args):
    """Write the formatted line to standard output."""
    sys.stdout.write(_render(fmt + "\n", args))


def debugln(fmt, *args):
    """Write the formatted line to standard error, prefixed by the caller's file and line."""
    frame = inspect.currentframe().f_back
    try:
        filename = frame.f_code.co_filename
        line = frame.f_lineno
    finally:
        del frame
    sys.stderr.write(_render("%v:%d: " + fmt + "\n", (filename, line, *args)))