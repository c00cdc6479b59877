"""
Call logging wrapper.

`Log` forwards every call to the wrapped sequence and writes one line per
call to a text sink. Indices are right-justified to the digit width of the
largest valid index seen at the most recent `length()` call, so that columns
line up across a run.

Line formats, with inline rendering enabled:
    (abcde).Len() [5]
    (aBcDe).Less(1, 3) [True]
    (aBcDe).Swap(1, 3) [adcbe]

and with it disabled:
    Len() [5]
    Less(1, 3) [True]
    Swap(1, 3)

Inline rendering is on when the last reported length is within
`LogConfig.inline_threshold` (a negative threshold turns it off). If the
wrapped sequence is `Markable`, the rendering before a call emphasizes the
two indices involved; otherwise plain `str()` is used.

Writes are not synchronized. When several sorts share one sink from
different threads, the sink must serialize writes itself.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from sortutil.interface import Markable, SortInterface

__all__ = ["DEFAULT_INLINE_THRESHOLD", "LogConfig", "Log"]

DEFAULT_INLINE_THRESHOLD: int = 26


@dataclass(frozen=True)
class LogConfig:
    inline_threshold: int = DEFAULT_INLINE_THRESHOLD


class Log:
    """Wrap `data`, writing a line to `sink` for each call."""

    def __init__(
        self,
        data: SortInterface,
        sink: Optional[TextIO] = None,
        config: Optional[LogConfig] = None,
    ) -> None:
        self.data = data
        self.sink = sink if sink is not None else sys.stdout
        self.config = config if config is not None else LogConfig()
        self._n: Optional[int] = None
        self._width = 0

    def length(self) -> int:
        n = self.data.length()
        self._n = n
        self._width = len(str(n - 1)) if n > 0 else 0
        if self._inline():
            self._emit(f"({self.data}).Len() [{n}]")
        else:
            self._emit(f"Len() [{n}]")
        return n

    def less(self, i: int, j: int) -> bool:
        r = self.data.less(i, j)
        call = f"Less({self._pad(i)}, {self._pad(j)}) [{r}]"
        if self._inline():
            call = f"({self._render(i, j)}).{call}"
        self._emit(call)
        return r

    def swap(self, i: int, j: int) -> None:
        inline = self._inline()
        before = self._render(i, j) if inline else None
        self.data.swap(i, j)
        call = f"Swap({self._pad(i)}, {self._pad(j)})"
        if inline:
            call = f"({before}).{call} [{self.data}]"
        self._emit(call)

    def _inline(self) -> bool:
        t = self.config.inline_threshold
        return t >= 0 and self._n is not None and self._n <= t

    def _render(self, i: int, j: int) -> str:
        if isinstance(self.data, Markable):
            return self.data.mark(i, j)
        return str(self.data)

    def _pad(self, i: int) -> str:
        return str(i).rjust(self._width)

    def _emit(self, line: str) -> None:
        self.sink.write(line + "\n")

    def __str__(self) -> str:
        return str(self.data)

    def __repr__(self) -> str:
        return f"Log({self.data!r}, config={self.config})"
