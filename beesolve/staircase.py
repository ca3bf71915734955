"""Count the staircases (constant-difference runs) in a sequence."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def count_staircases(sequence: Sequence[int]) -> int:
    """Return how many constant-difference runs cover the sequence, sharing endpoints."""
    if not sequence:
        raise ValueError("sequence must not be empty")
    last = len(sequence) - 1
    count = 1
    start = 0
    while start < last:
        step = sequence[start + 1] - sequence[start]
        index = start + 1
        while index < last and sequence[index + 1] - sequence[index] == step:
            index += 1
        if index == last:
            break
        count += 1
        start = index
    return count


def _parse(line: str) -> list[int]:
    values = []
    for field in line.split():
        try:
            values.append(int(field))
        except ValueError:
            continue
    return values


def main(argv=None) -> None:
    """Read a sequence from standard input and print its staircase count."""
    sys.stdin.readline()
    print(count_staircases(_parse(sys.stdin.readline())))