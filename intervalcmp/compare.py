"""Ternary ordering between two intervals.

The test is one-sided: ``a`` is right of ``b`` when ``a.left > b.right`` and
left of ``b`` when ``a.right < b.left``. The mirrored bounds are never
consulted, so ``compare(a, b)`` and ``-compare(b, a)`` can disagree for
inverted intervals.
"""

from typing import Literal, TypeAlias

from intervalcmp.interval import Interval

Ordering: TypeAlias = Literal[-1, 0, 1]


def compare(a: Interval, b: Interval) -> Ordering:
    """Return 1 if ``a`` lies right of ``b``, -1 if left, 0 otherwise."""
    if a.left > b.right:
        return 1
    if a.right < b.left:
        return -1
    return 0
