"""
sortutil: generic positional transforms and instrumentation decorators for
anything implementing the `SortInterface` capability (length / less / swap).

Re-exports the most common entry points so callers can write:
    from sortutil import rotate, new_sub, Stat, Log
"""

from .instrument import CallCounts, Log, LogConfig, Stat
from .interface import Markable, SortInterface
from .transforms import reverse, rotate, shuffle, skew
from .views import new_proxy, new_rev, new_sub

__all__ = [
    "SortInterface",
    "Markable",
    "reverse",
    "rotate",
    "skew",
    "shuffle",
    "new_sub",
    "new_rev",
    "new_proxy",
    "Stat",
    "CallCounts",
    "Log",
    "LogConfig",
]
