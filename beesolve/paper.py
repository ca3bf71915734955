"""Decide whether requested pieces fit on a sheet of paper."""

from __future__ import annotations

import sys
from itertools import islice


def fits(sheet: tuple[int, int], piece: tuple[int, int]) -> bool:
    """Return True when piece fits on sheet, either way round."""
    long_side, short_side = sorted(sheet, reverse=True)
    piece_long, piece_short = sorted(piece, reverse=True)
    return piece_long <= long_side and piece_short <= short_side


def _pair(line: str) -> tuple[int, int]:
    first, second = (int(field) for field in line.split()[:2])
    return first, second


def main(argv=None) -> None:
    """Read sheets and pieces from standard input until it ends, printing Sim or Nao."""
    lines = iter(sys.stdin)
    for header in lines:
        if not header.strip():
            break
        width, height, count = (int(field) for field in header.split()[:3])
        rows = list(islice(lines, count))
        if len(rows) < count:
            raise ValueError("input ended before all pieces were read")
        for row in rows:
            print("Sim" if fits((width, height), _pair(row)) else "Nao")