"""Water consumption report per city, grouping houses by average use."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import groupby, islice


@dataclass(frozen=True)
class House:
    """A house with its number of residents and total water consumption."""

    people: int
    consumption: int

    def __post_init__(self) -> None:
        if self.people <= 0:
            raise ValueError("a house must have at least one resident")

    @property
    def average(self) -> int:
        """Consumption per resident, rounded down."""
        return self.consumption // self.people


def group_consumption(houses: Iterable[House]) -> list[tuple[int, int]]:
    """Return (residents, average) pairs sorted by average, equal averages merged."""
    ordered = sorted(houses, key=lambda house: house.average)
    return [
        (sum(house.people for house in group), average)
        for average, group in groupby(ordered, key=lambda house: house.average)
    ]


def average_consumption(houses: Iterable[House]) -> float:
    """Return the city's total consumption divided by its total residents."""
    houses = list(houses)
    people = sum(house.people for house in houses)
    if not people:
        raise ValueError("no houses to average")
    return sum(house.consumption for house in houses) / people


def _truncate_average(value: float) -> str:
    text = f"{value:.5f}"
    return text[: text.index(".") + 3]


def format_city(number: int, houses: Iterable[House]) -> str:
    """Return the report block for one city, without a trailing newline."""
    houses = list(houses)
    groups = " ".join(f"{people}-{average}" for people, average in group_consumption(houses))
    average = _truncate_average(average_consumption(houses))
    return f"Cidade# {number}:\n{groups}\nConsumo medio: {average} m3."


def _parse_house(line: str) -> House:
    people, consumption = (int(field) for field in line.split()[:2])
    return House(people, consumption)


def _read_cities(lines: Iterator[str]) -> Iterator[list[House]]:
    for line in lines:
        count = int(line)
        if count == 0:
            return
        rows = list(islice(lines, count))
        if len(rows) < count:
            raise ValueError("input ended before all houses were read")
        yield [_parse_house(row) for row in rows]


def main(argv=None) -> None:
    """Read cities from standard input and print their reports."""
    for number, houses in enumerate(_read_cities(iter(sys.stdin)), start=1):
        if number > 1:
            sys.stdout.write("\n")
        print(format_city(number, houses))