"""
Positional transforms expressed purely through `SortInterface.swap`.

None of these functions compare elements or allocate a buffer proportional to
the input; they only rearrange positions.

Public API (stable):
    reverse(data) -> None
    rotate(data, d) -> None
    skew(data, i, j, k) -> None
    shuffle(data, rng=None) -> None

Conventions:
- `rotate` shifts toward higher indices for positive `d`, wrapping around.
- `skew` moves a contiguous block; everything between the source and
  destination shifts over to fill the gap, keeping its relative order.
- `shuffle` draws its permutation from a numpy Generator. Supply a seeded one
  for reproducible output.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from sortutil.interface import SortInterface

__all__ = ["reverse", "rotate", "skew", "shuffle"]


def reverse(data: SortInterface) -> None:
    """Invert the current order of `data` in place."""
    n = data.length()
    for i in range(n // 2):
        data.swap(i, n - i - 1)


def rotate(data: SortInterface, d: int) -> None:
    """
    Cycle `data` by `d` positions to the right.

    The rightmost `d` elements end up at the front. A negative `d` shifts
    leftward. Any integer is accepted; it is reduced modulo the length.
    """
    n = data.length()
    if n == 0:
        return
    # Python's % is already non-negative for a positive modulus.
    d %= n
    skew(data, 0, d, n - d)


def skew(data: SortInterface, i: int, j: int, k: int) -> None:
    """
    Slide the block of `k` consecutive elements starting at `i` so that it
    starts at `j`.

    `i` and `j` are the source and destination of the block's lowest index.
    With j > i the block moves toward larger indices and the elements in
    [i+k, j+k) shift down to fill [i, j); with j < i the block moves toward
    smaller indices and the elements in [j, i) shift up.

    Parameters
    ----------
    data : SortInterface
        Sequence to rearrange in place.
    i, j : int
        Source and destination index of the block's first element.
    k : int
        Block size. Both [i, i+k) and [j, j+k) must lie within [0, n).

    Raises
    ------
    ValueError
        If any of `i`, `j`, `k` is negative.
    """
    if i < 0 or j < 0 or k < 0:
        raise ValueError(f"skew arguments must be nonnegative; got i={i}, j={j}, k={k}")
    _skew(data, i, j, k)


def _skew(data: SortInterface, i: int, j: int, k: int) -> None:
    if k == 0 or i == j:
        return
    if j < i:
        # Moving left by (i - j) is the same as moving the (i - j) displaced
        # elements right by k.
        i, j, k = j, j + k, i - j

    if j - i < k:
        # Block overlaps its destination: move each half separately,
        # the higher half first so it does not land on the lower one.
        p = k // 2
        q = k - p
        _skew(data, i + p, j + p, q)
        _skew(data, i, j, p)
        return

    r = (j - i) % k
    if r != 0:
        _skew(data, i, j - r, k)
        _skew(data, j - r, j, k)
        return

    # Distance is a whole multiple of k: leapfrog one position at a time.
    for x in range(i, j):
        data.swap(x, x + k)


def shuffle(data: SortInterface, rng: Optional[np.random.Generator] = None) -> None:
    """
    Put `data` into a random order.

    For a random permutation p of range(n), calls swap(i, p[i]) for each i in
    order. This is not a Fisher-Yates shuffle: later swaps can move elements
    placed by earlier ones, so the resulting distribution is not exactly
    uniform. Treat the entropy as best-effort.

    Parameters
    ----------
    data : SortInterface
        Sequence to shuffle in place.
    rng : numpy.random.Generator, optional
        Source of the permutation. A fresh unseeded generator is used if omitted.
    """
    if rng is None:
        rng = np.random.default_rng()
    n = data.length()
    for i, j in enumerate(rng.permutation(n)):
        data.swap(i, int(j))
