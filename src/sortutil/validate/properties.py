"""
Property helpers for validating sorting results.

`is_sorted` and `first_unsorted_index` go through `SortInterface.less`, so
they honour whatever ordering a view imposes (e.g. `new_rev`). The
permutation helpers work on value snapshots.

Public API (stable):
    is_sorted(data) -> bool
    first_unsorted_index(data) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Optional, Sequence

from sortutil.interface import SortInterface

__all__ = [
    "is_sorted",
    "first_unsorted_index",
    "is_permutation",
    "permutation_counter_diff",
]


def first_unsorted_index(data: SortInterface) -> Optional[int]:
    """
    Return the first index i where data.less(i+1, i), or None if sorted.

    Useful for precise error messages:
        i = first_unsorted_index(seq)
        assert i is None, f"out of order at i={i}"
    """
    for i in range(data.length() - 1):
        if data.less(i + 1, i):
            return i
    return None


def is_sorted(data: SortInterface) -> bool:
    """True iff no element sorts before its predecessor."""
    return first_unsorted_index(data) is None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """True iff `a` and `b` hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return value -> (count in a) - (count in b), omitting zero entries.

    Empty dict means `a` and `b` have identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}
