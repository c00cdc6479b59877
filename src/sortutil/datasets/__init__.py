"""
Datasets package public API.

Concrete sequences that satisfy `SortInterface`, plus a generator for
benchmark-style inputs:
    from sortutil.datasets import Letters, new_letter_seq, make_dataset
"""

from .containers import ByteSeq, IntSeq, Letters, ListSeq, new_int_seq, new_letter_seq
from .generators import SUPPORTED_DISTS, make_dataset

__all__ = [
    "ListSeq",
    "IntSeq",
    "ByteSeq",
    "Letters",
    "new_int_seq",
    "new_letter_seq",
    "make_dataset",
    "SUPPORTED_DISTS",
]
