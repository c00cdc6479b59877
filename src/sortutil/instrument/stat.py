"""
Call counting wrapper.

`Stat` forwards every call to the wrapped sequence and tallies how many
`length`, `less` and `swap` calls went through it. With `per_position=True`
it also records, for every index, how often that index was an argument to
`less` and to `swap`.

Public API (stable):
    Stat(data, per_position=False)
    Stat.counts -> CallCounts
    Stat.position_stats() -> dict
    Stat.reset() -> None

position_stats() schema:
    {
        "less": {"min": int, "max": int, "mean": float, "std": float},
        "swap": {"min": int, "max": int, "mean": float, "std": float},
    }
`std` is the population standard deviation (ddof=0).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from sortutil.interface import SortInterface

__all__ = ["CallCounts", "Stat"]


@dataclass
class CallCounts:
    length: int = 0
    less: int = 0
    swap: int = 0


class Stat:
    """Wrap `data`, counting calls made through the wrapper."""

    def __init__(self, data: SortInterface, per_position: bool = False) -> None:
        self.data = data
        self.counts = CallCounts()
        self._less_hits: Optional[np.ndarray] = None
        self._swap_hits: Optional[np.ndarray] = None
        if per_position:
            # Sized once up front; this query is not counted.
            n = data.length()
            self._less_hits = np.zeros(n, dtype=np.int64)
            self._swap_hits = np.zeros(n, dtype=np.int64)

    @property
    def per_position(self) -> bool:
        return self._less_hits is not None

    def length(self) -> int:
        self.counts.length += 1
        return self.data.length()

    def less(self, i: int, j: int) -> bool:
        self.counts.less += 1
        if self._less_hits is not None:
            self._less_hits[i] += 1
            self._less_hits[j] += 1
        return self.data.less(i, j)

    def swap(self, i: int, j: int) -> None:
        self.counts.swap += 1
        if self._swap_hits is not None:
            self._swap_hits[i] += 1
            self._swap_hits[j] += 1
        self.data.swap(i, j)

    def less_hits(self) -> np.ndarray:
        """Copy of the per-position `less` touch counts."""
        return self._require_positions()[0].copy()

    def swap_hits(self) -> np.ndarray:
        """Copy of the per-position `swap` touch counts."""
        return self._require_positions()[1].copy()

    def position_stats(self) -> Dict[str, Dict[str, float]]:
        less_hits, swap_hits = self._require_positions()
        return {"less": _summarize(less_hits), "swap": _summarize(swap_hits)}

    def reset(self) -> None:
        """Zero every counter so the wrapper can be reused for another run."""
        self.counts = CallCounts()
        if self._less_hits is not None:
            self._less_hits[:] = 0
            self._swap_hits[:] = 0

    def _require_positions(self):
        if self._less_hits is None or self._swap_hits is None:
            raise ValueError("per-position counts were not requested; use Stat(data, per_position=True)")
        return self._less_hits, self._swap_hits

    def __str__(self) -> str:
        c = self.counts
        return f"{{length: {c.length}, less: {c.less}, swap: {c.swap}}}"

    def __repr__(self) -> str:
        return f"Stat({self.data!r}, counts={self.counts})"


def _summarize(hits: np.ndarray) -> Dict[str, float]:
    if hits.size == 0:
        return {"min": 0, "max": 0, "mean": 0.0, "std": 0.0}
    return {
        "min": int(hits.min()),
        "max": int(hits.max()),
        "mean": float(hits.mean()),
        "std": float(hits.std()),
    }
