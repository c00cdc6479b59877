"""
Zero-copy views over a `SortInterface`.

Each constructor returns a new object implementing the same interface; the
wrapped sequence is never copied and the view itself is immutable.

Public API (stable):
    new_sub(data, i, j) -> SortInterface
    new_rev(data) -> SortInterface
    new_proxy(primary, *secondaries) -> SortInterface

Collapsing:
- A sub view of a sub view is a single sub view over the innermost sequence,
  so index arithmetic never nests more than one level deep.
- Reversing a reversed view returns the original sequence object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from sortutil.interface import SortInterface

__all__ = ["new_sub", "new_rev", "new_proxy"]


@dataclass(frozen=True)
class _Sub:
    s: SortInterface
    i: int
    n: int

    def length(self) -> int:
        return self.n

    def less(self, i: int, j: int) -> bool:
        return self.s.less(self.i + i, self.i + j)

    def swap(self, i: int, j: int) -> None:
        self.s.swap(self.i + i, self.i + j)


@dataclass(frozen=True)
class _Rev:
    s: SortInterface

    def length(self) -> int:
        return self.s.length()

    def less(self, i: int, j: int) -> bool:
        return not self.s.less(i, j)

    def swap(self, i: int, j: int) -> None:
        self.s.swap(i, j)


@dataclass(frozen=True)
class _Proxy:
    primary: SortInterface
    secondaries: Tuple[SortInterface, ...]

    def length(self) -> int:
        return self.primary.length()

    def less(self, i: int, j: int) -> bool:
        return self.primary.less(i, j)

    def swap(self, i: int, j: int) -> None:
        self.primary.swap(i, j)
        for s in self.secondaries:
            s.swap(i, j)


def new_sub(data: SortInterface, i: int, j: int) -> SortInterface:
    """
    Return a view of positions [i, j) of `data`, like `data[i:j]` without the copy.

    Raises
    ------
    ValueError
        If i < 0, j < i, or j > data.length().
    """
    if i < 0 or j < i or j > data.length():
        raise ValueError(f"sub view bounds out of range: [{i}, {j}) of {data.length()}")
    if isinstance(data, _Sub):
        return _Sub(data.s, data.i + i, j - i)
    return _Sub(data, i, j - i)


def new_rev(data: SortInterface) -> SortInterface:
    """
    Return a view of `data` whose `less` is negated.

    Sorting the view orders `data` descending. To flip the current order of
    the elements themselves, use `sortutil.transforms.reverse` instead.
    """
    if isinstance(data, _Rev):
        return data.s
    return _Rev(data)


def new_proxy(primary: SortInterface, *secondaries: SortInterface) -> SortInterface:
    """
    Return a view that orders by `primary` and mirrors every swap onto
    each of `secondaries`, in the order given.

    Useful for carrying parallel arrays (labels, original indices) along with
    a sort of the primary.

    Raises
    ------
    ValueError
        If any secondary's length differs from the primary's.
    """
    n = primary.length()
    for k, s in enumerate(secondaries):
        m = s.length()
        if m != n:
            raise ValueError(f"proxy length mismatch: secondary #{k} has {m}, primary has {n}")
    return _Proxy(primary, tuple(secondaries))
