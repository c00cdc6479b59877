"""
Tests for the demonstration containers and the dataset generator.
"""

from __future__ import annotations

import numpy as np
import pytest

from sortutil.datasets import (
    SUPPORTED_DISTS,
    ByteSeq,
    IntSeq,
    Letters,
    make_dataset,
    new_int_seq,
    new_letter_seq,
)
from sortutil.interface import Markable, SortInterface


def test_new_int_seq() -> None:
    assert list(new_int_seq(8)) == list(range(8))
    assert new_int_seq(0).length() == 0


def test_new_letter_seq_wraps_after_z() -> None:
    s = str(new_letter_seq(27))
    assert s[:2] == "ab"
    assert s[25:] == "za"


def test_letters_mark() -> None:
    s = new_letter_seq(10).mark(2, 4)
    assert s[2] == "C"
    assert s[4] == "E"
    assert s[5] == "f"
    assert len(s) == 10


def test_letters_mark_same_index_and_no_mutation() -> None:
    seq = Letters.of("abc")
    assert seq.mark(1, 1) == "aBc"
    assert str(seq) == "abc"


def test_containers_satisfy_protocols() -> None:
    assert isinstance(IntSeq([1]), SortInterface)
    assert isinstance(ByteSeq(b"a"), SortInterface)
    assert isinstance(new_letter_seq(2), Markable)
    assert not isinstance(IntSeq([1]), Markable)


def test_byte_seq_ops() -> None:
    s = ByteSeq(b"ba")
    assert s.less(1, 0)
    s.swap(0, 1)
    assert str(s) == "ab"


@pytest.mark.parametrize(
    "spec",
    [
        {"dist": "random", "params": {"range": [-5, 5]}},
        {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}},
        {"dist": "few_uniques", "params": {"k": 3, "range": [0, 9]}},
        {"dist": "few_uniques", "params": {"k": 3}},
        {"dist": "reversed"},
        {"dist": "letters"},
    ],
)
def test_make_dataset_lengths(spec) -> None:
    rng = np.random.default_rng(7)
    for n in (0, 1, 17):
        seq = make_dataset(n, spec, rng)
        assert seq.length() == n
        assert isinstance(seq, SortInterface)


def test_make_dataset_values() -> None:
    rng = np.random.default_rng(0)
    assert all(-5 <= v <= 5 for v in make_dataset(200, {"dist": "random", "params": {"range": [-5, 5]}}, rng))
    assert list(make_dataset(5, {"dist": "reversed"}, rng)) == [4, 3, 2, 1, 0]
    assert len(set(make_dataset(100, {"dist": "few_uniques", "params": {"k": 4}}, rng))) <= 4
    nearly = make_dataset(50, {"dist": "nearly_sorted", "params": {"swap_frac": 0.04}}, rng)
    assert sorted(nearly) == list(range(50))
    letters = make_dataset(26, {"dist": "letters"}, rng)
    assert isinstance(letters, Letters)
    assert sorted(str(letters)) == list("abcdefghijklmnopqrstuvwxyz")


def test_make_dataset_is_reproducible() -> None:
    spec = {"dist": "random", "params": {"range": [0, 1000]}}
    a = make_dataset(30, spec, np.random.default_rng(42))
    b = make_dataset(30, spec, np.random.default_rng(42))
    assert a == b


def test_nearly_sorted_zero_fraction_is_sorted() -> None:
    seq = make_dataset(10, {"dist": "nearly_sorted", "params": {"swap_frac": 0.0}}, np.random.default_rng(0))
    assert list(seq) == list(range(10))


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "reversed"}),
        (3, {"dist": "bogus"}),
        (3, "reversed"),
        (3, {"dist": "random"}),
        (3, {"dist": "random", "params": {"range": [5, 1]}}),
        (3, {"dist": "random", "params": {"range": [0]}}),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": 2.0}}),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": "lots"}}),
        (3, {"dist": "few_uniques", "params": {"k": 0}}),
    ],
)
def test_make_dataset_rejects_bad_input(n, spec) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, np.random.default_rng(0))


def test_supported_dists() -> None:
    assert SUPPORTED_DISTS == {"random", "nearly_sorted", "few_uniques", "reversed", "letters"}
