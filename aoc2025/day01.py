"""Day 1: counting how often a circular dial lands on zero."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

STARTING_POINT = 50
DIAL_SIZE = 100


def _lines(source: Iterable[str]) -> Iterator[str]:
    for line in source:
        yield line.removesuffix("\n").removesuffix("\r")


def _rotations(source: Iterable[str]) -> Iterator[tuple[str, int]]:
    for line in _lines(source):
        if not line:
            raise ValueError("empty rotation line")
        yield line[0], int(line[1:])


def part1(source: Iterable[str]) -> int:
    """Count the rotations that leave the dial pointing at zero."""
    point = STARTING_POINT
    reached_zero = 0
    for direction, distance in _rotations(source):
        if direction == "L":
            point = mod(point - distance)
        elif direction == "R":
            point = mod(point + distance)
        if point == 0:
            reached_zero += 1
    return reached_zero


def part2(source: Iterable[str]) -> int:
    """Count every single click that passes the dial through zero."""
    point = STARTING_POINT
    reached_zero = 0
    for direction, distance in _rotations(source):
        if direction == "R":
            reached_zero += (point + distance) // DIAL_SIZE
            point = mod(point + distance)
        elif direction == "L":
            reached_zero += (mod(DIAL_SIZE - point) + distance) // DIAL_SIZE
            point = mod(point - distance)
        elif point == 0:
            reached_zero += distance
    return reached_zero


def mod(value: int) -> int:
    """Return the non-negative position of ``value`` on the dial."""
    return value % DIAL_SIZE


def quotient(value: int) -> float:
    """Return how many full turns ``value`` makes, rounded down."""
    return float(value // DIAL_SIZE)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "input.txt"
    with open(path, encoding="utf-8") as handle:
        print(part2(handle))


if __name__ == "__main__":
    main()