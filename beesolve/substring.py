"""Length of the longest common substring of two lines."""

from __future__ import annotations

import sys

_LIMIT = 255


def longest_common_substring(first: str, second: str) -> int:
    """Return the length in bytes of the longest common substring, at most 255."""
    left = first.encode()
    right = second.encode()
    best = 0
    previous = [0] * (len(right) + 1)
    for byte in left:
        current = [0]
        for offset, other in enumerate(right):
            current.append(previous[offset] + 1 if byte == other else 0)
        best = max(best, max(current))
        previous = current
    return min(best, _LIMIT)


def main(argv=None) -> None:
    """Read pairs of lines from standard input and print their common length."""
    lines = iter(sys.stdin)
    for first in lines:
        second = next(lines, "")
        print(longest_common_substring(first.rstrip("\r\n"), second.rstrip("\r\n")))