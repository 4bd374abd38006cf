"""Day 5: checking ingredient ids against ranges of fresh ids."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator


def _lines(source: Iterable[str]) -> Iterator[str]:
    for line in source:
        yield line.removesuffix("\n").removesuffix("\r")


def parse_ranges(lines: Iterable[str]) -> list[tuple[int, int]]:
    """Read ``a-b`` ranges up to the first blank line.

    When given an iterator, it is left just past that blank line.
    """
    ranges = []
    for line in lines:
        if line == "":
            break
        first, sep, last = line.partition("-")
        if not sep:
            raise ValueError(f"malformed range: {line!r}")
        ranges.append((int(first), int(last.split("-")[0])))
    return ranges


def merge_ranges(ranges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge overlapping inclusive ranges, ordered by their start."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(ranges, key=lambda pair: pair[0]):
        if merged and start <= merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def part1(source: Iterable[str]) -> int:
    """Count the available ids that fall in at least one fresh range."""
    lines = _lines(source)
    ranges = parse_ranges(lines)
    return sum(
        1
        for product_id in (int(line) for line in lines)
        if any(start <= product_id <= end for start, end in ranges)
    )


def part2(source: Iterable[str]) -> int:
    """Count how many distinct ids the fresh ranges cover."""
    ranges = merge_ranges(parse_ranges(_lines(source)))
    return sum(end - start + 1 for start, end in ranges)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "input.txt"
    with open(path, encoding="utf-8") as handle:
        print(part2(handle))


if __name__ == "__main__":
    main()