"""Solutions to the 2025 daily puzzles, days 1 to 5."""

__version__ = "0.1.0"
__all__ = ["day01", "day02", "day03", "day04", "day05"]