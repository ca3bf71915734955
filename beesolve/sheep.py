"""Simulate the sheep thief walking along the stars."""

from __future__ import annotations

import sys
from collections.abc import Iterable


def steal_sheep(flocks: Iterable[int]) -> tuple[int, list[int]]:
    """Return the sheep left in total and the flock on each star after the raid."""
    remaining = list(flocks)
    total = sum(remaining)
    index = 0
    while 0 <= index < len(remaining):
        count = remaining[index]
        if count == 0:
            index -= 1
            continue
        remaining[index] -= 1
        total -= 1
        index += 1 if count % 2 else -1
    return total, remaining


def attack_summary(flocks: Iterable[int]) -> tuple[int, int]:
    """Return the number of stars attacked and the sheep left unstolen."""
    original = list(flocks)
    total, remaining = steal_sheep(original)
    attacked = sum(before != after for before, after in zip(original, remaining))
    return attacked, total


def _parse_flocks(line: str) -> list[int]:
    flocks = []
    for field in line.split():
        try:
            value = int(field)
        except ValueError:
            continue
        if value >= 0:
            flocks.append(value)
    return flocks


def main(argv=None) -> None:
    """Read the stars from standard input and print attacked stars and sheep left."""
    sys.stdin.readline()
    attacked, total = attack_summary(_parse_flocks(sys.stdin.readline()))
    print(f"{attacked} {total}")