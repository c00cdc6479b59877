"""
Capability contract shared by every transform and decorator in the package.

A sequence participates by exposing three methods:
    length() -> int
    less(i, j) -> bool      # True iff the element at i sorts before the one at j
    swap(i, j) -> None      # its own inverse; a no-op when i == j

Indices are always in [0, length()). Nothing in this package checks them on
`less`/`swap`; passing an out-of-range index is a caller bug.

`Markable` is optional: a sequence that can render itself with two positions
emphasized gets richer output from `sortutil.instrument.Log`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["SortInterface", "Markable"]


@runtime_checkable
class SortInterface(Protocol):
    def length(self) -> int: ...

    def less(self, i: int, j: int) -> bool: ...

    def swap(self, i: int, j: int) -> None: ...


@runtime_checkable
class Markable(Protocol):
    """Render the whole sequence as text with positions i and j emphasized.

    The result must have the same visible length as `str()` of the sequence.
    """

    def mark(self, i: int, j: int) -> str: ...
