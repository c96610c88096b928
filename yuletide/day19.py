"""Towel designs: which designs can be built from the available patterns, and in how many ways."""

from __future__ import annotations

import argparse
from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterable, Sequence


def parse_towels(text: str) -> tuple[list[str], list[str]]:
    """Read the puzzle input as ``(designs, patterns)``.

    The first line lists the comma-separated patterns. Every later non-empty
    line is a design.
    """
    lines = text.splitlines()
    if not lines:
        raise ValueError("input holds no pattern line")
    patterns = [part.strip() for part in lines[0].split(",")]
    designs = [line for line in lines[1:] if line]
    return designs, patterns


def _arrangement_counter(patterns: Sequence[str]) -> Callable[[str], int]:
    """Build a memoised function counting the ways a design splits into patterns."""
    if any(not pattern for pattern in patterns):
        raise ValueError("patterns must not be empty")
    available = tuple(patterns)

    @lru_cache(maxsize=None)
    def arrangements(design: str) -> int:
        total = 0
        for pattern in available:
            if design.startswith(pattern):
                rest = design[len(pattern):]
                total += arrangements(rest) if rest else 1
        return total

    return arrangements


def count_constructible(designs: Iterable[str], patterns: Sequence[str]) -> int:
    """Number of designs that can be made from the patterns at all."""
    arrangements = _arrangement_counter(patterns)
    return sum(1 for design in designs if arrangements(design) > 0)


def count_arrangements(designs: Iterable[str], patterns: Sequence[str]) -> int:
    """Total number of distinct ways to make every design from the patterns."""
    arrangements = _arrangement_counter(patterns)
    return sum(arrangements(design) for design in designs)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle for the given input file."""
    parser = argparse.ArgumentParser(prog="day19", description=__doc__)
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    designs, patterns = parse_towels(Path(args.input).read_text())
    if args.part == 1:
        print(count_constructible(designs, patterns))
    else:
        print(count_arrangements(designs, patterns))
    return 0