"""LAN party: triangles of connected computers and the largest fully connected group."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Mapping, Sequence

Connection = tuple[str, str]


def parse_connections(text: str) -> list[Connection]:
    """Read ``a-b`` connections, one per line; lines without ``-`` are ignored."""
    connections: list[Connection] = []
    for line in text.splitlines():
        if "-" not in line:
            continue
        parts = line.split("-")
        connections.append((parts[0], parts[1]))
    return connections


def adjacency(connections: Iterable[Connection]) -> dict[str, list[str]]:
    """Map every computer to its neighbours, in the order the connections list them."""
    neighbours: dict[str, list[str]] = {}
    for a, b in connections:
        neighbours.setdefault(a, []).append(b)
        neighbours.setdefault(b, []).append(a)
    return neighbours


def count_t_triangles(connections: Iterable[Connection]) -> int:
    """Number of distinct triangles holding at least one computer whose name starts with ``t``."""
    pairs = adjacency(connections)
    triangles: set[tuple[str, ...]] = set()
    for computer, neighbours in pairs.items():
        for first in neighbours:
            for second in pairs.get(first, ()):
                if computer in pairs[second]:
                    triple = tuple(sorted((computer, first, second)))
                    if any(name.startswith("t") for name in triple):
                        triangles.add(triple)
    return len(triangles)


def _grow(
    computer: str,
    pairs: Mapping[str, Sequence[str]],
    linked: Mapping[str, set[str]],
    network: set[str],
    seen: dict[frozenset[str], None],
) -> None:
    key = frozenset(network)
    if key in seen:
        return
    seen[key] = None
    for neighbour in pairs.get(computer, ()):
        if all(node in linked[neighbour] for node in network):
            network.add(neighbour)
            _grow(neighbour, pairs, linked, network, seen)


def largest_network(connections: Iterable[Connection]) -> str:
    """The largest fully connected group found, as sorted names joined by commas."""
    pairs = adjacency(connections)
    if not pairs:
        raise ValueError("no connections given")
    linked = {name: set(neighbours) for name, neighbours in pairs.items()}
    seen: dict[frozenset[str], None] = {}
    for computer in pairs:
        _grow(computer, pairs, linked, {computer}, seen)

    biggest: frozenset[str] | None = None
    for network in seen:
        if biggest is None or len(network) > len(biggest):
            biggest = network
    assert biggest is not None
    return ",".join(sorted(biggest))


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle for the given input file."""
    parser = argparse.ArgumentParser(prog="day23", description=__doc__)
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    connections = parse_connections(Path(args.input).read_text())
    if args.part == 1:
        print(count_t_triangles(connections))
    else:
        print(largest_network(connections))
    return 0