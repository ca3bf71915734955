"""Interleave the characters of two words."""

from __future__ import annotations

import sys
from itertools import zip_longest


def split_words(line: str) -> tuple[str, str]:
    """Split at the first space; a line without one gives the line twice."""
    head, separator, tail = line.partition(" ")
    if not separator:
        return line, line
    return head, tail


def interleave(first: str, second: str) -> str:
    """Alternate characters of both words, then append what is left of the longer."""
    return "".join(a + b for a, b in zip_longest(first, second, fillvalue=""))


def main(argv=None) -> None:
    """Read a count and that many lines, printing each pair interleaved."""
    try:
        count = int(sys.stdin.readline())
    except ValueError:
        count = 0
    for _ in range(count):
        line = sys.stdin.readline().strip()
        print(interleave(*split_words(line)))