"""
Tests for the view decorators: new_sub, new_rev, new_proxy.
"""

from __future__ import annotations

from typing import List, Tuple

import pytest

from sortutil.datasets import IntSeq, new_letter_seq
from sortutil.validate import is_sorted
from sortutil.views import new_proxy, new_rev, new_sub
from sortutil.views.wrappers import _Rev, _Sub

from sorts import insertion_sort


class Recorder:
    """Sequence of a fixed length that records every swap into a shared journal."""

    def __init__(self, name: str, n: int, journal: List[Tuple[str, int, int]]) -> None:
        self.name = name
        self.n = n
        self.journal = journal

    def length(self) -> int:
        return self.n

    def less(self, i: int, j: int) -> bool:
        return i < j

    def swap(self, i: int, j: int) -> None:
        self.journal.append((self.name, i, j))


# ------------------------- sub ------------------------- #

def test_sub_sorts_only_its_window() -> None:
    data = IntSeq([7, 6, 5, 4, 3, 2, 1, 0])
    insertion_sort(new_sub(data, 4, 8))
    assert list(data) == [7, 6, 5, 4, 0, 1, 2, 3]


def test_sub_length_and_offsets() -> None:
    data = new_letter_seq(10)
    v = new_sub(data, 3, 7)
    assert v.length() == 4
    assert v.less(0, 1)
    v.swap(0, 3)
    assert str(data) == "abcgefdhij"


def test_sub_of_sub_collapses() -> None:
    data = new_letter_seq(20)
    inner = new_sub(data, 2, 18)
    outer = new_sub(inner, 3, 10)
    assert isinstance(outer, _Sub)
    assert outer.s is data
    assert (outer.i, outer.n) == (5, 7)

    nested = new_sub(new_sub(new_sub(data, 1, 19), 1, 17), 1, 15)
    assert nested.s is data
    assert nested.i == 3


def test_sub_of_sub_matches_precomposed_view() -> None:
    a = IntSeq([9, 3, 8, 1, 7, 2, 6, 0, 5, 4])
    b = IntSeq(a)
    insertion_sort(new_sub(new_sub(a, 1, 9), 2, 7))
    insertion_sort(new_sub(b, 3, 8))
    assert list(a) == list(b)


@pytest.mark.parametrize("i, j", [(-1, 3), (4, 3), (0, 11), (11, 11)])
def test_sub_bounds_rejected(i: int, j: int) -> None:
    with pytest.raises(ValueError):
        new_sub(new_letter_seq(10), i, j)


def test_sub_of_sub_bounds_use_outer_length() -> None:
    inner = new_sub(new_letter_seq(10), 2, 6)
    with pytest.raises(ValueError):
        new_sub(inner, 0, 5)


def test_empty_sub_is_allowed() -> None:
    v = new_sub(new_letter_seq(4), 4, 4)
    assert v.length() == 0


# ------------------------- rev ------------------------- #

def test_rev_sorts_descending() -> None:
    data = IntSeq(range(8))
    insertion_sort(new_rev(data))
    assert list(data) == [7, 6, 5, 4, 3, 2, 1, 0]
    assert is_sorted(new_rev(data))


def test_rev_negates_less_and_delegates_rest() -> None:
    data = IntSeq([3, 1, 2])
    r = new_rev(data)
    assert r.length() == 3
    for i in range(3):
        for j in range(3):
            assert r.less(i, j) == (not data.less(i, j))
    r.swap(0, 2)
    assert list(data) == [2, 1, 3]


def test_rev_of_rev_unwraps() -> None:
    data = new_letter_seq(5)
    r = new_rev(data)
    assert isinstance(r, _Rev)
    assert new_rev(r) is data
    assert isinstance(new_rev(new_rev(r)), _Rev)


def test_rev_of_sub_is_not_collapsed() -> None:
    data = IntSeq([4, 0, 3, 1, 2])
    insertion_sort(new_rev(new_sub(data, 1, 4)))
    assert list(data) == [4, 3, 1, 0, 2]


# ------------------------- proxy ------------------------- #

def test_proxy_carries_parallel_sequences() -> None:
    keys = IntSeq([0, 9, 1, 8, 2, 7, 3, 6, 4, 5])
    labels = new_letter_seq(10)
    positions = IntSeq(range(10))
    insertion_sort(new_proxy(keys, labels, positions))
    assert is_sorted(keys)
    assert str(labels) == "acegijhfdb"
    assert list(positions) == [0, 2, 4, 6, 8, 9, 7, 5, 3, 1]


def test_proxy_swap_fans_out_in_order() -> None:
    journal: List[Tuple[str, int, int]] = []
    p = new_proxy(
        Recorder("primary", 4, journal),
        Recorder("first", 4, journal),
        Recorder("second", 4, journal),
    )
    p.swap(0, 3)
    p.swap(2, 1)
    assert journal == [
        ("primary", 0, 3), ("first", 0, 3), ("second", 0, 3),
        ("primary", 2, 1), ("first", 2, 1), ("second", 2, 1),
    ]


def test_proxy_less_and_length_use_primary_only() -> None:
    primary = IntSeq([2, 1])
    secondary = IntSeq([1, 2])
    p = new_proxy(primary, secondary)
    assert p.length() == 2
    assert p.less(1, 0)
    assert not p.less(0, 1)


def test_proxy_length_mismatch_rejected_before_any_swap() -> None:
    journal: List[Tuple[str, int, int]] = []
    with pytest.raises(ValueError):
        new_proxy(
            Recorder("primary", 4, journal),
            Recorder("ok", 4, journal),
            Recorder("short", 3, journal),
        )
    assert journal == []


def test_proxy_without_secondaries() -> None:
    data = IntSeq([2, 0, 1])
    insertion_sort(new_proxy(data))
    assert list(data) == [0, 1, 2]
