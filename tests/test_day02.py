import io

import pytest

from aoc2025.day02 import has_repeating_pattern, part1, part2

EXAMPLE = (
    "11-22,95-115,998-1012,1188511880-1188511890,222220-222224,"
    "1698522-1698528,446443-446449,38593856-38593862,565653-565659,"
    "824824821-824824827,2121212118-2121212124"
)


def test_part1_example():
    assert part1(io.StringIO(EXAMPLE)) == 1227775554


def test_part2_example():
    assert part2(io.StringIO(EXAMPLE)) == 4174379265


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1234", False),
        ("123321", False),
        ("123123", True),
        ("2121212118", False),
        ("2121212119", False),
        ("2121212121", True),
    ],
)
def test_repeating_digits(text, expected):
    assert has_repeating_pattern(text) is expected


def test_single_character_has_no_pattern():
    assert has_repeating_pattern("7") is False


def test_part1_ignores_triple_repeats():
    assert part1(io.StringIO("111-111")) == 0
    assert part2(io.StringIO("111-111")) == 111


def test_malformed_range_raises():
    with pytest.raises(ValueError):
        part1(io.StringIO("12"))