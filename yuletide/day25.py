"""Locks and keys: count the lock/key pairs whose pins do not overlap."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Sequence

Heights = tuple[int, ...]

MAX_HEIGHT = 5


def _blocks(text: str) -> list[list[str]]:
    blocks: list[list[str]] = []
    current: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if line:
            current.append(line)
        elif current:
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)
    return blocks


def _heights(block: Sequence[str]) -> Heights:
    counts: dict[int, int] = {}
    for line in block:
        for column, char in enumerate(line):
            if char == "#":
                counts[column] = counts[column] + 1 if column in counts else 0
    return tuple(counts[column] for column in sorted(counts))


def parse_schematics(text: str) -> tuple[list[Heights], list[Heights]]:
    """Read the schematics as ``(locks, keys)`` of column heights.

    Schematics are separated by blank lines. A schematic whose first character
    is ``#`` is a lock; any other is a key. A column's height is its number of
    ``#`` cells less one.
    """
    locks: list[Heights] = []
    keys: list[Heights] = []
    for block in _blocks(text):
        heights = _heights(block)
        (locks if block[0].startswith("#") else keys).append(heights)
    return locks, keys


def count_fitting(locks: Iterable[Heights], keys: Sequence[Heights]) -> int:
    """Number of lock/key pairs whose combined heights stay within every column."""
    total = 0
    for lock in locks:
        for key in keys:
            if len(key) < len(lock):
                raise ValueError("key has fewer columns than the lock")
            if all(pin + cut <= MAX_HEIGHT for pin, cut in zip(lock, key)):
                total += 1
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle for the given input file."""
    parser = argparse.ArgumentParser(prog="day25", description=__doc__)
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    locks, keys = parse_schematics(Path(args.input).read_text())
    print(count_fitting(locks, keys))
    return 0