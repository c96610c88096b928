# yuletide

Solvers for advent-style programming puzzles. Each puzzle day is a module of
plain functions you can call, and each has a command that reads the puzzle
input and prints the answer.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Commands

Each command takes the path of the puzzle input as an optional argument
(`input.txt` in the current directory by default) and prints the result.
Where a day has two parts, `--part 1` (the default) or `--part 2` picks one.

| Command           | Puzzle                                                                 |
|-------------------|------------------------------------------------------------------------|
| `yuletide-day17`  | Part 1 runs a 3-bit computer program; part 2 finds a register A value that makes it print itself |
| `yuletide-day18`  | Part 1 finds the shortest path after falling bytes; part 2 the first byte that cuts it off. `--size` and `--count` set the grid size (71) and bytes fallen (1024) |
| `yuletide-day19`  | Part 1 counts towel designs that can be built; part 2 counts the ways to build them |
| `yuletide-day20`  | Part 1 counts single-wall cheats; part 2 counts cheats of up to 20 steps. `--threshold` sets the least saving counted (100) |
| `yuletide-day22`  | Part 1 sums evolved secret numbers; part 2 finds the best banana total for one sequence of price changes |
| `yuletide-day23`  | Part 1 counts triangles holding a `t` computer; part 2 prints the largest LAN party |
| `yuletide-day25`  | Counts the lock and key pairs that fit together                        |

For example:

```
yuletide-day22 my-inputs/day22.txt --part 2
```

## Library use

```python
from yuletide.day22 import mix, prune, sum_secrets

mix(42, 15)          # 37
prune(100000000)     # 16113920
sum_secrets([12])    # 4915986, the secret after 2000 rounds
```

```python
from yuletide.day19 import parse_towels, count_constructible, count_arrangements

with open("input.txt") as handle:
    designs, patterns = parse_towels(handle.read())
count_constructible(designs, patterns)
count_arrangements(designs, patterns)
```

Other modules you can use this way:

- `yuletide.tokenizer`: `tokenize` splits text into `Token`s of kind `TokenType` (literals and delimiters).
- `yuletide.day17`: `Registers`, `Instruction`, `parse_program`, `combo_operand`, `run`, `find_quine_input`.
- `yuletide.day18`: `parse_bytes`, `build_grid`, `shortest_path`, `steps_after`, `first_blocking`.
- `yuletide.day20`: `parse_map`, `find_first`, `path_cost`, `count_wall_cheats`, `shortest_path_nodes`, `manhattan_distance`, `improvement`, `find_cheats`, `count_long_cheats`.
- `yuletide.day22`: also `parse_secrets`, `next_secret`, `secret_after`, `price`, `best_banana_total`.
- `yuletide.day23`: `parse_connections`, `adjacency`, `count_t_triangles`, `largest_network`.
- `yuletide.day25`: `parse_schematics`, `count_fitting`.

## What is not included

The package has no solver for the keypad-robot puzzle (typing door codes
through chains of robot-operated keypads) and none for the logic-circuit
puzzle (simulating wires and gates or drawing the circuit as a graph). There
are no commands for those days.