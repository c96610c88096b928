"""Race track cheats: how much time can be saved by walking through walls."""

from __future__ import annotations

import argparse
from collections import Counter, deque
from itertools import combinations
from pathlib import Path
from typing import Iterable, Sequence

Point = tuple[int, int]
PathNode = tuple[Point, int]

WALL = "#"


def parse_map(text: str) -> list[str]:
    """Split the track into its rows."""
    return text.splitlines()


def find_first(grid: Sequence[Sequence[str]], value: str) -> Point:
    """``(row, col)`` of the first cell holding ``value``."""
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell == value:
                return row, col
    raise ValueError(f"{value!r} not found on the map")


def _neighbours(grid: Sequence[Sequence[str]], pos: Point) -> Iterable[Point]:
    row, col = pos
    if row > 0:
        yield row - 1, col
    if col < len(grid[0]) - 1:
        yield row, col + 1
    if row < len(grid) - 1:
        yield row + 1, col
    if col > 0:
        yield row, col - 1


def shortest_path_nodes(
    grid: Sequence[Sequence[str]], start: Point, end: Point
) -> list[PathNode]:
    """The shortest path as ``(position, cost)`` pairs, from ``end`` back to ``start``.

    Walls block movement except on the end cell. An empty list means no path.
    """
    costs = {start: 0}
    previous: dict[Point, Point] = {}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == end:
            path = [(pos, costs[pos])]
            while pos in previous:
                pos = previous[pos]
                path.append((pos, costs[pos]))
            return path
        for nxt in _neighbours(grid, pos):
            if nxt != end and grid[nxt[0]][nxt[1]] == WALL:
                continue
            if nxt in costs:
                continue
            costs[nxt] = costs[pos] + 1
            previous[nxt] = pos
            queue.append(nxt)
    return []


def path_cost(grid: Sequence[Sequence[str]]) -> int | None:
    """Time of the fastest honest race from ``S`` to ``E``, or None if there is none."""
    path = shortest_path_nodes(grid, find_first(grid, "S"), find_first(grid, "E"))
    return path[0][1] if path else None


def count_wall_cheats(grid: Sequence[str], threshold: int = 100) -> int:
    """Count inner walls whose removal saves at least ``threshold`` picoseconds."""
    normal = path_cost(grid)
    if normal is None:
        raise ValueError("the track has no path from S to E")

    cells = [list(line) for line in grid]
    last_row, last_col = len(cells) - 1, len(cells[0]) - 1
    count = 0
    for row in range(1, last_row):
        for col in range(1, min(last_col, len(cells[row]))):
            if cells[row][col] != WALL:
                continue
            cells[row][col] = "."
            time = path_cost(cells)
            if time is not None and normal - time >= threshold:
                count += 1
            cells[row][col] = WALL
    return count


def manhattan_distance(a: Point, b: Point) -> int:
    """Grid distance between two positions."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def improvement(x_cost: int, y_cost: int, distance: int) -> int:
    """Time saved by jumping from the later cell to the earlier one, never below zero."""
    if x_cost < y_cost:
        raise ValueError("x_cost must not be smaller than y_cost")
    return max(x_cost - y_cost - distance, 0)


def find_cheats(
    path: Sequence[PathNode], max_distance: int = 20, threshold: int = 100
) -> dict[int, int]:
    """Map each saving of at least ``threshold`` to the number of cheats achieving it."""
    savings: Counter[int] = Counter()
    for (pos, cost), (next_pos, next_cost) in combinations(path, 2):
        distance = manhattan_distance(pos, next_pos)
        if distance > max_distance:
            continue
        saved = improvement(cost, next_cost, distance)
        if saved >= threshold:
            savings[saved] += 1
    return dict(savings)


def count_long_cheats(
    grid: Sequence[str], max_distance: int = 20, threshold: int = 100
) -> int:
    """Count cheats of up to ``max_distance`` steps saving at least ``threshold``."""
    path = shortest_path_nodes(grid, find_first(grid, "S"), find_first(grid, "E"))
    return sum(find_cheats(path, max_distance, threshold).values())


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle for the given input file."""
    parser = argparse.ArgumentParser(prog="day20", description=__doc__)
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    parser.add_argument("--threshold", type=int, default=100)
    args = parser.parse_args(argv)

    grid = parse_map(Path(args.input).read_text())
    if args.part == 1:
        print(count_wall_cheats(grid, args.threshold))
    else:
        print(count_long_cheats(grid, 20, args.threshold))
    return 0