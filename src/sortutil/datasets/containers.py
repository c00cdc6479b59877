"""
Concrete sequences for developing and debugging sorting algorithms.

- ListSeq / IntSeq: Python lists ordered with `<`.
- ByteSeq: a bytearray that prints as ASCII text.
- Letters: a ByteSeq of lowercase letters that is also `Markable`, so
  `Log` can show which two positions a call touched.

All of these are ordinary mutable containers; indexing, iteration and
equality behave exactly as for list / bytearray.
"""

from __future__ import annotations

__all__ = ["ListSeq", "IntSeq", "ByteSeq", "Letters", "new_int_seq", "new_letter_seq"]

_ALPHABET = 26


class ListSeq(list):
    def length(self) -> int:
        return len(self)

    def less(self, i: int, j: int) -> bool:
        return self[i] < self[j]

    def swap(self, i: int, j: int) -> None:
        self[i], self[j] = self[j], self[i]


class IntSeq(ListSeq):
    pass


class ByteSeq(bytearray):
    def length(self) -> int:
        return len(self)

    def less(self, i: int, j: int) -> bool:
        return self[i] < self[j]

    def swap(self, i: int, j: int) -> None:
        self[i], self[j] = self[j], self[i]

    def __str__(self) -> str:
        return self.decode("ascii")


class Letters(ByteSeq):
    """Lowercase ASCII letters. `mark(i, j)` upper-cases positions i and j."""

    @classmethod
    def of(cls, text: str) -> "Letters":
        return cls(text.encode("ascii"))

    def mark(self, i: int, j: int) -> str:
        c = bytearray(self)
        for x in (i, j):
            c[x : x + 1] = c[x : x + 1].upper()
        return c.decode("ascii")


def new_int_seq(n: int) -> IntSeq:
    """Return the ascending sequence [0, 1, ..., n-1]."""
    return IntSeq(range(n))


def new_letter_seq(n: int) -> Letters:
    """
    Return "abc..." of length n. Past 26 elements the alphabet repeats,
    starting again with 'a'.
    """
    return Letters(ord("a") + i % _ALPHABET for i in range(n))
