"""Count the pages needed to print a text with limited lines and line width."""

from __future__ import annotations

import sys


def count_pages(text: str, max_lines: int, max_chars: int) -> int:
    """Return the number of pages the words of text fill."""
    if max_lines <= 0:
        raise ValueError("max_lines must be positive")
    used = 0
    lines = 1
    for word in text.split():
        size = len(word.encode())
        if used + size <= max_chars:
            used += size + 1
        else:
            lines += 1
            used = size + 1
    return -(-lines // max_lines)


def main(argv=None) -> None:
    """Read test cases from standard input until it ends and print page counts."""
    lines = iter(sys.stdin)
    for header in lines:
        _, max_lines, max_chars = (int(field) for field in header.split()[:3])
        text = next(lines, "")
        print(count_pages(text, max_lines, max_chars))