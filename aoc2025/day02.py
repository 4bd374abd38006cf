"""Day 2: summing product ids made of repeated digit patterns."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator


def _ranges(source: Iterable[str]) -> Iterator[tuple[int, int]]:
    first_line = next(iter(source), "")
    first_line = first_line.removesuffix("\n").removesuffix("\r")
    for part in first_line.split(","):
        first, sep, last = part.partition("-")
        if not sep:
            raise ValueError(f"malformed id range: {part!r}")
        yield int(first), int(last.split("-")[0])


def _sum_matching(source: Iterable[str], predicate: Callable[[str], bool]) -> int:
    return sum(
        product_id
        for first, last in _ranges(source)
        for product_id in range(first, last + 1)
        if predicate(str(product_id))
    )


def _is_doubled(text: str) -> bool:
    if len(text) % 2:
        return False
    mid = len(text) // 2
    return text[:mid] == text[mid:]


def part1(source: Iterable[str]) -> int:
    """Sum ids whose digits are one sequence repeated exactly twice."""
    return _sum_matching(source, _is_doubled)


def part2(source: Iterable[str]) -> int:
    """Sum ids whose digits are one sequence repeated two or more times."""
    return _sum_matching(source, has_repeating_pattern)


def has_repeating_pattern(text: str) -> bool:
    """Tell whether ``text`` is a shorter string repeated at least twice."""
    length = len(text)
    return any(
        length % n == 0 and text[:n] * (length // n) == text
        for n in range(1, length // 2 + 1)
    )


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "input.txt"
    with open(path, encoding="utf-8") as handle:
        print(part2(handle))


if __name__ == "__main__":
    main()