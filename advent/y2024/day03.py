"""2024 day 3: Mull It Over."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MUL_RE = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_MUL_OR_TOGGLE_RE = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)|do\(\)|don't\(\)")

_GREEN = "\x1b[32m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


@dataclass(frozen=True)
class MulInstruction:
    """A ``mul(a,b)`` instruction found in corrupted memory."""

    factor_a: int
    factor_b: int


def scan_mul_instructions(text: str) -> list[MulInstruction]:
    """Return every well-formed ``mul(X,Y)`` instruction in order."""
    return [
        MulInstruction(int(match.group(1)), int(match.group(2)))
        for match in _MUL_RE.finditer(text)
    ]


def scan_enabled_mul_instructions(text: str, verbosity: int = 0) -> list[MulInstruction]:
    """Return the ``mul`` instructions left enabled by ``do()``/``don't()``.

    With a verbosity above zero every multiplication is printed, green when
    enabled and red when disabled.
    """
    instructions: list[MulInstruction] = []
    enabled = True
    for match in _MUL_OR_TOGGLE_RE.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        else:
            factor_a, factor_b = int(match.group(1)), int(match.group(2))
            if verbosity > 0:
                colour = _GREEN if enabled else _RED
                print(f"{colour}{factor_a}*{factor_b} {_RESET}", end="")
            if enabled:
                instructions.append(MulInstruction(factor_a, factor_b))
    if verbosity > 0:
        print()
    return instructions


def sum_multiplication_instructions(instructions: list[MulInstruction]) -> int:
    """Sum of all products."""
    return sum(i.factor_a * i.factor_b for i in instructions)


def solve(text: str) -> tuple[int, int]:
    """Return (sum of all multiplications, sum of enabled multiplications)."""
    return (
        sum_multiplication_instructions(scan_mul_instructions(text)),
        sum_multiplication_instructions(scan_enabled_mul_instructions(text)),
    )


def run(text: str, verbosity: int = 0) -> None:
    total = sum_multiplication_instructions(scan_mul_instructions(text))
    print(f"Multiplications sum: {total}")
    enabled_total = sum_multiplication_instructions(
        scan_enabled_mul_instructions(text, verbosity)
    )
    print(f"Multiplications sum of enabled instructions: {enabled_total}")