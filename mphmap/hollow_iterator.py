"""Iteration over the occupied slots of a sparsely filled sequence.

A sequence of values is paired with a sequence of flags of the same length.
Only the values whose flag is true are visited; the others are holes.
"""


def iter_present_positions(values, present):
    """Yield ``(position, value)`` for every slot whose flag is set.

    Raises ValueError once the two sequences turn out to differ in length.
    """
    for position, (value, flag) in enumerate(zip(values, present, strict=True)):
        if flag:
            yield position, value


def iter_present(values, present):
    """Yield the values whose flag is set, in order."""
    for _, value in iter_present_positions(values, present):
        yield value