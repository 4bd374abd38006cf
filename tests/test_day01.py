import io

import pytest

from aoc2025.day01 import mod, part1, part2, quotient

EXAMPLE = """L68
L30
R48
L5
R60
L55
L1
L99
R14
L82"""


def test_part1_example():
    assert part1(io.StringIO(EXAMPLE)) == 3


def test_part2_example():
    assert part2(io.StringIO(EXAMPLE)) == 6


def test_quotient():
    assert int(abs(quotient(50 + 1000))) == 10


def test_quotient_negative_rounds_down():
    assert quotient(-1) == -1.0


@pytest.mark.parametrize(
    "value, expected", [(0, 0), (99, 99), (100, 0), (-1, 99), (-250, 50)]
)
def test_mod(value, expected):
    assert mod(value) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("R1000", 10), ("L50", 1), ("L250", 3), ("R49", 0), ("L50\nL100", 2)],
)
def test_part2_counts_passes(text, expected):
    assert part2(io.StringIO(text)) == expected


def test_part1_counts_landing_on_zero():
    assert part1(io.StringIO("L150\nR100\nR1")) == 2


def test_empty_line_raises():
    with pytest.raises(ValueError):
        part1(io.StringIO("L10\n\nR5"))