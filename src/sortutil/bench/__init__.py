"""
Analysis harness public API.

Re-exports:
    measure_sort_call   # one instrumented run of a sort function
    analyze             # fixed inputs -> report DataFrame
    DEFAULT_INPUTS
"""

from .measure import measure_sort_call
from .runner import DEFAULT_INPUTS, analyze, print_report, run_analysis

__all__ = ["measure_sort_call", "analyze", "print_report", "run_analysis", "DEFAULT_INPUTS"]
