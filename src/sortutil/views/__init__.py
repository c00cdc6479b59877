"""
View decorators public API.

Re-exports:
    new_sub    # window onto [i, j) of a sequence
    new_rev    # same sequence, inverted ordering
    new_proxy  # swaps fan out to secondary sequences
"""

from .wrappers import new_proxy, new_rev, new_sub

__all__ = ["new_sub", "new_rev", "new_proxy"]
