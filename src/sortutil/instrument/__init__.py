"""
Instrumentation decorators public API.

Re-exports:
    Stat, CallCounts   # call counting, optionally per position
    Log, LogConfig     # call logging to a text sink
"""

from .log import DEFAULT_INLINE_THRESHOLD, Log, LogConfig
from .stat import CallCounts, Stat

__all__ = ["Stat", "CallCounts", "Log", "LogConfig", "DEFAULT_INLINE_THRESHOLD"]
