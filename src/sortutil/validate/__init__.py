"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle

    - Property checks:
        is_sorted
        first_unsorted_index
        is_permutation
        permutation_counter_diff
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    first_unsorted_index,
    is_permutation,
    is_sorted,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "is_sorted",
    "first_unsorted_index",
    "is_permutation",
    "permutation_counter_diff",
]
