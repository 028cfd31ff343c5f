"""Solutions to the Advent of Code 2024 puzzles, days 1 to 17, with a command-line runner."""

__version__ = "0.1.0"