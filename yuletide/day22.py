"""Monkey market: pseudo-random secret numbers and the best selling sequence."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Iterator, Sequence

MODULUS = 16777216
STEPS = 2000
_FIRST_PREVIOUS_PRICE = -1000

ChangeWindow = tuple[int, int, int, int]


def parse_secrets(text: str) -> list[int]:
    """Read one initial secret per line, ignoring blank lines."""
    secrets: list[int] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        value = int(line)
        if value < 0:
            raise ValueError(f"secret must not be negative: {line!r}")
        secrets.append(value)
    return secrets


def mix(secret: int, value: int) -> int:
    """Mix a value into the secret."""
    return secret ^ value


def prune(secret: int) -> int:
    """Keep the secret within the modulus."""
    return secret % MODULUS


def next_secret(secret: int) -> int:
    """The secret that follows ``secret``."""
    secret = prune(mix(secret, secret * 64))
    secret = prune(mix(secret, secret // 32))
    return prune(mix(secret, secret * 2048))


def _secrets(secret: int, steps: int) -> Iterator[int]:
    for _ in range(steps):
        secret = next_secret(secret)
        yield secret


def secret_after(secret: int, steps: int = STEPS) -> int:
    """The secret reached after ``steps`` evolutions."""
    if steps < 0:
        raise ValueError("steps must not be negative")
    for secret in _secrets(secret, steps):
        pass
    return secret


def sum_secrets(secrets: Iterable[int]) -> int:
    """Sum of every buyer's secret after the full number of evolutions."""
    return sum(secret_after(secret) for secret in secrets)


def price(secret: int) -> int:
    """The price a secret offers: its last decimal digit."""
    return secret % 10


def _price_changes(secret: int) -> list[tuple[int, int]]:
    """``(price, change)`` for each generated secret.

    The first change is taken against a previous price far outside the digit
    range, so no window containing it can ever be chosen.
    """
    changes: list[tuple[int, int]] = []
    previous = _FIRST_PREVIOUS_PRICE
    for value in _secrets(secret, STEPS):
        current = price(value)
        changes.append((current, current - previous))
        previous = current
    return changes


def _in_search_space(window: ChangeWindow) -> bool:
    i, j, k, l = window
    if not all(-9 <= change < 9 for change in window):
        return False
    if not -9 <= i + j + k + l <= 9:
        return False
    return -18 <= i + j + k <= 18 and -18 <= j + k + l <= 18


def best_banana_total(secrets: Iterable[int]) -> int:
    """Most bananas obtainable with a single sequence of four price changes."""
    totals: dict[ChangeWindow, int] = {}
    for secret in secrets:
        changes = _price_changes(secret)
        seen: set[ChangeWindow] = set()
        for first, second, third, fourth in zip(
            changes, changes[1:], changes[2:], changes[3:]
        ):
            window = (first[1], second[1], third[1], fourth[1])
            if window in seen:
                continue
            seen.add(window)
            totals[window] = totals.get(window, 0) + fourth[0]
    return max(
        (total for window, total in totals.items() if _in_search_space(window)),
        default=0,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle for the given input file."""
    parser = argparse.ArgumentParser(prog="day22", description=__doc__)
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    secrets = parse_secrets(Path(args.input).read_text())
    if args.part == 1:
        print(sum_secrets(secrets))
    else:
        print(best_banana_total(secrets))
    return 0