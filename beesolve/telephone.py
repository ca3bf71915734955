"""Judge which team's relayed message stays closest to the original."""

from __future__ import annotations

import enum
import sys


class Winner(enum.Enum):
    """Outcome of a round, valued by its printed form."""

    TEAM1 = "time 1"
    TEAM2 = "time 2"
    TIE = "empate"


def judge(reference: str, team1: str, team2: str) -> Winner:
    """Score positions only one team got right; the first to score breaks a tie."""
    score1 = score2 = 0
    first = Winner.TIE
    for expected, answer1, answer2 in zip(reference, team1, team2):
        if expected == answer1 and expected != answer2:
            score1 += 1
            if first is Winner.TIE:
                first = Winner.TEAM1
        elif expected == answer2 and expected != answer1:
            score2 += 1
            if first is Winner.TIE:
                first = Winner.TEAM2
    if score1 == score2:
        return first
    return Winner.TEAM1 if score1 > score2 else Winner.TEAM2


def main(argv=None) -> None:
    """Read the rounds from standard input and print each verdict."""
    count = int(sys.stdin.readline())
    for number in range(1, count + 1):
        reference, team1, team2 = (sys.stdin.readline() for _ in range(3))
        print(f"Instancia {number}")
        print(judge(reference, team1, team2).value)
        print()