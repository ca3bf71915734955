"""Locate queried marble numbers in the sorted list of marbles."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from itertools import islice


def find_marbles(marbles: Iterable[int], queries: Iterable[int]) -> list[tuple[int, int | None]]:
    """Return (query, 1-based position in sorted marbles or None) for each query."""
    ordered = sorted(marbles)
    positions: dict[int, int] = {}
    for position, marble in enumerate(ordered, start=1):
        positions.setdefault(marble, position)
    return [(query, positions.get(query)) for query in queries]


def format_case(number: int, marbles: Iterable[int], queries: Iterable[int]) -> str:
    """Return the answer block for one case, without a trailing newline."""
    lines = [f"CASE# {number}:"]
    for query, position in find_marbles(marbles, queries):
        if position is None:
            lines.append(f"{query} not found")
        else:
            lines.append(f"{query} found at {position}")
    return "\n".join(lines)


def _read_numbers(lines, count: int) -> list[int]:
    rows = list(islice(lines, count))
    if len(rows) < count:
        raise ValueError("input ended before all numbers were read")
    return [int(row) for row in rows]


def main(argv=None) -> None:
    """Read cases from standard input until "0 0" and print the answers."""
    lines = iter(sys.stdin)
    for number, header in enumerate(lines, start=1):
        count, query_count = (int(field) for field in header.split()[:2])
        if (count, query_count) == (0, 0):
            break
        marbles = _read_numbers(lines, count)
        queries = _read_numbers(lines, query_count)
        print(format_case(number, marbles, queries))