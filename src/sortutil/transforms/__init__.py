"""
Positional transforms public API.

Re-export the swap-only transforms so callers can write:
    from sortutil.transforms import reverse, rotate, skew, shuffle
"""

from .positional import reverse, rotate, shuffle, skew

__all__ = ["reverse", "rotate", "skew", "shuffle"]
