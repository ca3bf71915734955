"""Distribute pequis among workers as the tray rotates for a number of steps."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Sequence


def distribute(values: Sequence[int], steps: int) -> list[int]:
    """Return each worker's total after steps rotations of the tray."""
    count = len(values)
    if count == 0:
        raise ValueError("there must be at least one worker")
    rounds, remainder = divmod(steps, count)
    tray = deque(values)
    totals = [0] * count
    for _ in range(count):
        totals = [total + value * rounds for total, value in zip(totals, tray)]
        tray.rotate(1)
    for _ in range(remainder):
        totals = [total + value for total, value in zip(totals, tray)]
        tray.rotate(1)
    return totals


def main(argv=None) -> None:
    """Read workers, steps and tray values from standard input and print the totals."""
    count, steps = (int(field) for field in sys.stdin.readline().split()[:2])
    values = [int(field) for field in sys.stdin.readline().split()]
    if len(values) < count:
        raise ValueError("fewer values than workers")
    print(" ".join(str(total) for total in distribute(values[:count], steps)))