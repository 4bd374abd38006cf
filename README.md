# aoc2025

Solutions to the first five puzzles of the 2025 daily puzzle calendar. Each
day is a module with two functions, `part1` and `part2`. Each function takes
the puzzle input as an iterable of lines (an open text file or an
`io.StringIO` works) and returns the answer as an integer.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Each day has its own command. A command reads the file named by its first
argument, or `input.txt` in the current directory when none is given, and
prints the answer to part 2:

```
aoc2025-day01
aoc2025-day02 path/to/input.txt
aoc2025-day03
aoc2025-day04
aoc2025-day05
```

The same can be done with `python -m aoc2025.day01` and so on.

## Library use

```python
import io
from aoc2025 import day01, day05

print(day01.part1(io.StringIO("L68\nL30\nR48\n")))

with open("input.txt") as handle:
    print(day05.part2(handle))
```

## The days

- `day01`: turns a dial of 100 positions that starts at 50. `part1` counts
  the rotations that end on zero. `part2` counts every click that lands on
  zero. `mod` gives the position of a value on the dial and `quotient` the
  number of whole turns, rounded down. An empty line raises `ValueError`.
- `day02`: reads comma-separated `first-last` ranges from the first line and
  sums the ids in them whose digits repeat. `part1` counts an id only when it
  is made of two equal halves. `part2` counts an id when it is any pattern
  repeated two or more times, checked by `has_repeating_pattern`. A range
  without a `-` raises `ValueError`.
- `day03`: builds the largest joltage from each line of battery digits,
  keeping the digits in order. `part1` uses two digits and `part2` uses
  twelve; a line shorter than twelve digits raises `ValueError` in `part2`.
  `max_digit` returns the first greatest digit of a string and its index.
- `day04`: finds paper rolls (`@`) on a square grid that have fewer than four
  occupied neighbours. `part1` counts them once. `part2` removes them again
  and again until none are left to remove, and counts all removed.
  `parse_grid` reads the grid and `count_neighbours` counts the occupied
  cells around one position.
- `day05`: works with `a-b` ranges of fresh ingredient ids, followed by a
  blank line and a list of available ids. `part1` counts the available ids
  that fall inside any range. `part2` counts every id the ranges cover.
  `parse_ranges` reads the ranges up to the blank line and `merge_ranges`
  joins overlapping ones.

## What it does not do

The package does not fetch puzzle inputs; put each day's input in a file
yourself. Only days 1 to 5 are solved, and the commands print only the
answer to part 2.