"""Day 4: removing paper rolls that too few neighbours surround."""

from __future__ import annotations

import sys
from collections.abc import Iterable

MAX_NEIGHBOURS = 4


def parse_grid(source: Iterable[str]) -> list[list[bool]]:
    """Read a grid in which '@' marks an occupied cell."""
    return [
        [char == "@" for char in line.removesuffix("\n").removesuffix("\r")]
        for line in source
    ]


def count_neighbours(grid: list[list[bool]], x: int, y: int) -> int:
    """Count occupied cells among the eight around column ``x``, row ``y``.

    The grid is taken to be square, with the width of its first row.
    """
    size = len(grid[0])
    return sum(
        1
        for dy in (-1, 0, 1)
        for dx in (-1, 0, 1)
        if (dx, dy) != (0, 0)
        and 0 <= y + dy < size
        and 0 <= x + dx < size
        and grid[y + dy][x + dx]
    )


def _accessible(grid: list[list[bool]]) -> list[tuple[int, int]]:
    size = len(grid)
    return [
        (row, col)
        for row in range(size)
        for col in range(size)
        if grid[row][col] and count_neighbours(grid, col, row) < MAX_NEIGHBOURS
    ]


def part1(source: Iterable[str]) -> int:
    """Count rolls with fewer than four occupied neighbours."""
    return len(_accessible(parse_grid(source)))


def part2(source: Iterable[str]) -> int:
    """Count rolls removed by repeatedly taking every accessible one."""
    grid = parse_grid(source)
    removed = 0
    while selected := _accessible(grid):
        for row, col in selected:
            grid[row][col] = False
        removed += len(selected)
    return removed


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "input.txt"
    with open(path, encoding="utf-8") as handle:
        print(part2(handle))


if __name__ == "__main__":
    main()