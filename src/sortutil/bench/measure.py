"""
Instrumented single run of a sort function.

The sort function receives a `Stat` wrapper (itself wrapping a `Log` when a
sink is given) around the caller's sequence and must sort it in place
through `SortInterface`. Snapshotting and validation happen outside the timed
block.

Public API (stable):
    measure_sort_call(...) -> dict

Returned dict schema:
    {
        "n": int,
        "status": "ok" | "error",
        "error": str | None,
        "elapsed_ns": int | None,
        "sorted": bool,           # is_sorted on the unwrapped sequence
        "permutation": bool,      # same multiset of values as before
        "input": str,
        "output": str,
        "length": int, "less": int, "swap": int,   # call counts
        "positions": dict | None, # Stat.position_stats() if requested
    }
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, Optional, TextIO

from sortutil.instrument import Log, LogConfig, Stat
from sortutil.interface import SortInterface
from sortutil.validate import is_permutation, is_sorted

__all__ = ["measure_sort_call"]


def measure_sort_call(
    sort_fn: Callable[[SortInterface], Any],
    data: SortInterface,
    *,
    log_sink: Optional[TextIO] = None,
    log_config: Optional[LogConfig] = None,
    per_position: bool = False,
) -> Dict[str, Any]:
    """
    Run `sort_fn` once over an instrumented view of `data`.

    Parameters
    ----------
    sort_fn : Callable[[SortInterface], Any]
        Sorts its argument in place; the return value is ignored.
    data : SortInterface
        Sequence to sort. Must also be iterable so a value snapshot can be
        taken for the permutation check (true of every `sortutil.datasets`
        container). It is mutated.
    log_sink : TextIO, optional
        If given, calls are also logged there through `Log`.
    log_config : LogConfig, optional
        Passed to `Log`; ignored without a sink.
    per_position : bool
        Track per-index touch counts. Sizing the counters costs one
        `length()` call that reaches the log but is not counted.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    before = list(data)
    rendered_before = str(data)

    target: SortInterface = data
    if log_sink is not None:
        target = Log(data, log_sink, log_config)
    stat = Stat(target, per_position=per_position)

    result: Dict[str, Any] = {
        "n": len(before),
        "status": "ok",
        "error": None,
        "elapsed_ns": None,
    }
    try:
        t0 = time.perf_counter_ns()
        sort_fn(stat)
        t1 = time.perf_counter_ns()
        result["elapsed_ns"] = int(t1 - t0)
    except Exception as e:
        result["status"] = "error"
        result["error"] = f"sort failed: {e!r}"

    result.update(
        {
            "sorted": result["status"] == "ok" and is_sorted(data),
            "permutation": is_permutation(before, list(data)),
            "input": rendered_before,
            "output": str(data),
            "length": stat.counts.length,
            "less": stat.counts.less,
            "swap": stat.counts.swap,
            "positions": stat.position_stats() if per_position else None,
        }
    )
    return result
