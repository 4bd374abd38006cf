import io

from aoc2025.day04 import count_neighbours, parse_grid, part1, part2

EXAMPLE = """..@@.@@@@.
@@@.@.@.@@
@@@@@.@.@@
@.@@@@..@.
@@.@@@@.@@
.@@@@@@@.@
.@.@.@.@@@
@.@@@.@@@@
.@@@@@@@@.
@.@.@@@.@."""


def test_part1_example():
    assert part1(io.StringIO(EXAMPLE)) == 13


def test_part2_example():
    assert part2(io.StringIO(EXAMPLE)) == 43


def test_parse_grid():
    assert parse_grid(io.StringIO(".@\n@.\n")) == [[False, True], [True, False]]


def test_count_neighbours_full_grid():
    grid = parse_grid(io.StringIO("@@@\n@@@\n@@@"))
    assert count_neighbours(grid, 1, 1) == 8
    assert count_neighbours(grid, 0, 0) == 3
    assert count_neighbours(grid, 2, 1) == 5


def test_empty_grid_has_nothing_to_remove():
    assert part1(io.StringIO("")) == 0
    assert part2(io.StringIO("")) == 0


def test_full_grid_is_cleared_completely():
    assert part2(io.StringIO("@@@\n@@@\n@@@")) == 9