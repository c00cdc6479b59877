"""
Oracle for sorting correctness on materialized snapshots.

Python's built-in `sorted()` is the ground truth. The oracle works on plain
value snapshots (e.g. `list(seq)`), not on `SortInterface`, so it can check
results independently of the sequence under test.
"""

from __future__ import annotations

from typing import Any, List, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(values: Sequence[Any]) -> List[Any]:
    """Return a new list with the elements of `values` in nondecreasing order."""
    return sorted(values)


def equals_oracle(before: Sequence[Any], after: Sequence[Any]) -> bool:
    """True iff `after` equals the oracle's sort of `before`, element by element."""
    return list(after) == oracle_sort(before)
