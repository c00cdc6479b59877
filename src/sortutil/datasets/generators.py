"""
Dataset generators for exercising sort functions through `SortInterface`.

Currently implemented:
- dist == "random":
    Integers drawn uniformly from an inclusive range.

- dist == "nearly_sorted":
    Start from [0, 1, ..., n-1] then perform ceil(swap_frac * n) random
    index swaps through the sequence's own `swap`.

- dist == "few_uniques":
    Up to k distinct values from an inclusive range, repeated at random.

- dist == "reversed":
    Deterministic [n-1, n-2, ..., 0].

- dist == "letters":
    `new_letter_seq(n)` put through `sortutil.transforms.shuffle`.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> IntSeq | Letters

Conventions:
- Every range in params["range"] is **inclusive** on both ends.
- The caller supplies the RNG (seeded upstream for reproducibility).
- "reversed" ignores params and RNG.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Tuple, Union

import numpy as np

from sortutil.datasets.containers import IntSeq, Letters, new_int_seq, new_letter_seq
from sortutil.transforms import reverse, shuffle

SUPPORTED_DISTS = {
    "random",
    "nearly_sorted",
    "few_uniques",
    "reversed",
    "letters",
}
__all__ = ["SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> Union[IntSeq, Letters]:
    """
    Generate a sequence according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification, e.g.

            {"dist": "random", "params": {"range": [0, 99]}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "few_uniques", "params": {"k": 4, "range": [0, 9]}}
            {"dist": "reversed"}
            {"dist": "letters"}

    rng : numpy.random.Generator
        Random number generator owned by the caller.

    Returns
    -------
    IntSeq or Letters
        A sequence of length `n` implementing `SortInterface`.

    Raises
    ------
    ValueError
        If inputs are invalid or the distribution is unsupported.
    """
    if not isinstance(n, int) or n < 0:
        raise ValueError(f"n must be a nonnegative int; got {n!r}")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}

    if dist == "random":
        lo, hi = _parse_range(params, required=True)
        # integers() is half-open; +1 makes the upper bound inclusive.
        return IntSeq(rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist())

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        seq = new_int_seq(n)
        num_swaps = math.ceil(swap_frac * n)
        if n == 0 or num_swaps == 0:
            return seq
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            # i == j is a no-op, so effective swaps may be fewer than requested.
            seq.swap(int(idxs[2 * k]), int(idxs[2 * k + 1]))
        return seq

    if dist == "few_uniques":
        k = params.get("k")
        if not isinstance(k, int) or k < 1:
            raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
        lo, hi = _parse_range(params, required=False, default=(0, 4294967295))
        if n == 0:
            return IntSeq()
        actual_k = min(k, n, hi - lo + 1)
        if hi - lo + 1 <= 10 * actual_k:
            values = rng.choice(np.arange(lo, hi + 1), size=actual_k, replace=False)
        else:
            values = _distinct_draw(rng, lo, hi, actual_k)
        picks = rng.integers(0, actual_k, size=n)
        return IntSeq(int(values[t]) for t in picks)

    if dist == "reversed":
        seq = new_int_seq(n)
        reverse(seq)
        return seq

    # letters
    seq = new_letter_seq(n)
    shuffle(seq, rng)
    return seq


# ------------------------- helpers ------------------------- #


def _parse_range(
    params: Dict[str, Any], *, required: bool, default: Tuple[int, int] = (0, 0)
) -> Tuple[int, int]:
    if "range" not in params:
        if required:
            raise ValueError("params.range must be provided as [min, max] (inclusive)")
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not isinstance(lo_raw, (int, np.integer)) or not isinstance(hi_raw, (int, np.integer)):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(f"nearly_sorted.params.swap_frac must be a float; got {val!r}") from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _distinct_draw(rng: np.random.Generator, lo: int, hi: int, k: int) -> np.ndarray:
    # Wide span relative to k: rejection-sample so we never materialize the range.
    chosen: Dict[int, None] = {}
    while len(chosen) < k:
        for v in rng.integers(lo, hi + 1, size=2 * (k - len(chosen))).tolist():
            chosen.setdefault(int(v), None)
            if len(chosen) == k:
                break
    return np.fromiter(chosen, dtype=np.int64, count=k)
