"""Three-bit computer: run a program and search for an input that reproduces it."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterator, Sequence

from yuletide.tokenizer import TokenType, tokenize


@dataclass
class Registers:
    """The machine's three registers."""

    a: int
    b: int
    c: int


@dataclass(frozen=True)
class Instruction:
    """One opcode with its operand."""

    opcode: int
    operand: int


def parse_program(text: str) -> tuple[Registers, list[Instruction]]:
    """Read register values and the program from puzzle input."""
    tokens = tokenize(text)
    try:
        a, b, c = (int(tokens[index].value) for index in (2, 6, 10))
    except (IndexError, ValueError) as exc:
        raise ValueError("malformed register block") from exc

    entry = next(
        (
            index
            for index, token in enumerate(tokens)
            if token.kind is TokenType.LITERAL and token.value == "Program"
        ),
        None,
    )
    if entry is None:
        raise ValueError("no program found in input")

    values = [
        int(token.value)
        for token in tokens[entry + 1 :]
        if token.kind is TokenType.LITERAL and token.value.strip()
    ]
    if len(values) % 2:
        raise ValueError("program has an opcode without an operand")
    program = [Instruction(op, arg) for op, arg in zip(values[::2], values[1::2])]
    return Registers(a, b, c), program


def combo_operand(registers: Registers, operand: int) -> int:
    """Resolve a combo operand: 0-3 are literal, 4-6 name registers A-C."""
    if 0 <= operand <= 3:
        return operand
    if operand == 4:
        return registers.a
    if operand == 5:
        return registers.b
    if operand == 6:
        return registers.c
    raise ValueError(f"invalid combo operand {operand}")


def _execute(registers: Registers, program: Sequence[Instruction]) -> Iterator[int]:
    """Run the program, updating ``registers`` and yielding every output value."""
    pc = 0
    while pc < len(program):
        instruction = program[pc]
        operand = instruction.operand
        match instruction.opcode:
            case 0:
                registers.a >>= combo_operand(registers, operand)
            case 1:
                registers.b ^= operand
            case 2:
                registers.b = combo_operand(registers, operand) % 8
            case 3:
                pc = pc + 1 if registers.a == 0 else operand // 2
                continue
            case 4:
                registers.b ^= registers.c
            case 5:
                yield combo_operand(registers, operand) % 8
            case 6:
                registers.b = registers.a >> combo_operand(registers, operand)
            case 7:
                registers.c = registers.a >> combo_operand(registers, operand)
            case other:
                raise ValueError(f"invalid opcode {other}")
        pc += 1


def run(registers: Registers, program: Sequence[Instruction]) -> str:
    """Run the program on ``registers`` (updated in place) and return its output."""
    return ",".join(str(value) for value in _execute(registers, program))


def find_quine_input(
    registers: Registers, program: Sequence[Instruction], target: str
) -> int:
    """Search for a value of register A whose output, left-padded with zeros, equals ``target``.

    The candidate is built from octal digits; the rightmost mismatching output
    position decides which digit is advanced, with carry towards higher digits.
    """
    target = target.replace(",", "")
    width = len(target)
    if not width:
        raise ValueError("target must not be empty")

    digits = [0] * width
    while True:
        candidate = sum(digit << (3 * index) for index, digit in enumerate(digits))
        state = replace(registers, a=candidate)
        output = "".join(str(value) for value in _execute(state, program))
        if len(output) > width:
            raise ValueError("program output is longer than the target")
        output = output.rjust(width, "0")
        if output == target:
            return candidate

        mismatch = next(
            index for index in reversed(range(width)) if output[index] != target[index]
        )
        position = mismatch
        while position < width and digits[position] == 7:
            digits[position] = 0
            position += 1
        if position == width:
            raise ValueError("no register value reproduces the target")
        digits[position] += 1


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle for the given input file."""
    parser = argparse.ArgumentParser(prog="day17", description=__doc__)
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    registers, program = parse_program(Path(args.input).read_text())
    if args.part == 1:
        print(run(registers, program))
    else:
        target = "".join(f"{ins.opcode}{ins.operand}" for ins in program)
        print(find_quine_input(registers, program, target))
    return 0