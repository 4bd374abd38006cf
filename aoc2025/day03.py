"""Day 3: choosing the largest joltage from banks of battery digits."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from itertools import combinations

JOLTAGE_DIGITS = 12


def _lines(source: Iterable[str]) -> Iterator[str]:
    for line in source:
        yield line.removesuffix("\n").removesuffix("\r")


def part1(source: Iterable[str]) -> int:
    """Sum, over all banks, the largest two-digit number kept in order."""
    return sum(
        max((int(a + b) for a, b in combinations(bank, 2)), default=0)
        for bank in _lines(source)
    )


def part2(source: Iterable[str]) -> int:
    """Sum, over all banks, the largest twelve-digit number kept in order."""
    total = 0
    for bank in _lines(source):
        start = 0
        digits = []
        for reserved in range(JOLTAGE_DIGITS - 1, -1, -1):
            end = len(bank) - reserved
            if end < start:
                raise ValueError(f"bank too short: {bank!r}")
            digit, index = max_digit(bank[start:end])
            start += index + 1
            digits.append(digit)
        total += int("".join(digits))
    return total


def max_digit(bank: str) -> tuple[str, int]:
    """Return the first greatest character above '0' and its index.

    Falls back to ``('0', 0)`` when nothing exceeds '0'.
    """
    best, best_index = "0", 0
    for index, char in enumerate(bank):
        if char > best:
            best, best_index = char, index
    return best, best_index


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "input.txt"
    with open(path, encoding="utf-8") as handle:
        print(part2(handle))


if __name__ == "__main__":
    main()