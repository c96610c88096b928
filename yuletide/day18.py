"""Falling bytes on a memory grid: shortest escape route and the first cut-off."""

from __future__ import annotations

import argparse
from collections import deque
from pathlib import Path
from typing import Iterable, Sequence

Point = tuple[int, int]
Grid = list[list[bool]]

DEFAULT_SIZE = 71
DEFAULT_COUNT = 1024


def parse_bytes(text: str) -> list[Point]:
    """Read ``x,y`` coordinates, one per line."""
    points: list[Point] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.split(",")
        if len(parts) < 2:
            raise ValueError(f"malformed coordinate line {line!r}")
        x, y = int(parts[0]), int(parts[1])
        if x < 0 or y < 0:
            raise ValueError(f"negative coordinate in {line!r}")
        points.append((x, y))
    return points


def build_grid(points: Iterable[Point], width: int, height: int) -> Grid:
    """Return a ``height`` x ``width`` grid where ``grid[y][x]`` is True for corrupted cells."""
    grid = [[False] * width for _ in range(height)]
    for x, y in points:
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"point {(x, y)} lies outside the grid")
        grid[y][x] = True
    return grid


def _neighbours(grid: Grid, pos: Point) -> Iterable[Point]:
    row, col = pos
    if row > 0:
        yield row - 1, col
    if col < len(grid[0]) - 1:
        yield row, col + 1
    if row < len(grid) - 1:
        yield row + 1, col
    if col > 0:
        yield row, col - 1


def shortest_path(grid: Grid, start: Point, end: Point) -> int | None:
    """Length of the shortest walk between two ``(row, col)`` cells, or None if there is none."""
    costs = {start: 0}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == end:
            return costs[pos]
        for nxt in _neighbours(grid, pos):
            if grid[nxt[0]][nxt[1]] or nxt in costs:
                continue
            costs[nxt] = costs[pos] + 1
            queue.append(nxt)
    return None


def steps_after(
    points: Sequence[Point], count: int = DEFAULT_COUNT, size: int = DEFAULT_SIZE
) -> int | None:
    """Shortest path across a ``size`` grid once the first ``count`` bytes have fallen."""
    if len(points) < count:
        raise ValueError(f"need {count} points, got {len(points)}")
    grid = build_grid(points[:count], size, size)
    return shortest_path(grid, (0, 0), (size - 1, size - 1))


def first_blocking(points: Iterable[Point], size: int = DEFAULT_SIZE) -> Point | None:
    """The first byte after which the exit can no longer be reached, or None."""
    grid = build_grid((), size, size)
    for x, y in points:
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"point {(x, y)} lies outside the grid")
        grid[y][x] = True
        if shortest_path(grid, (0, 0), (size - 1, size - 1)) is None:
            return x, y
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle for the given input file."""
    parser = argparse.ArgumentParser(prog="day18", description=__doc__)
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    args = parser.parse_args(argv)

    points = parse_bytes(Path(args.input).read_text())
    if args.part == 1:
        steps = steps_after(points, args.count, args.size)
        print(0 if steps is None else steps)
    else:
        blocker = first_blocking(points, args.size)
        x, y = blocker if blocker is not None else (0, 0)
        print(f"{x},{y}")
    return 0