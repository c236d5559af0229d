"""2024 day 13: Claw Contraption."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from fractions import Fraction

from advent.mathutils import Point2D

_MACHINE_RE = re.compile(
    r"Button A: X\+([0-9]+), Y\+([0-9]+)\n"
    r"Button B: X\+([0-9]+), Y\+([0-9]+)\n"
    r"Prize: X=([0-9]+), Y=([0-9]+)"
)
_PRIZE_CORRECTION = 10000000000000
_EPSILON = Fraction(1, 10000)


@dataclass(frozen=True)
class ClawMachine:
    """A claw machine: how far each button moves the claw and where the prize is."""

    prize_location: Point2D
    movement_a: Point2D
    movement_b: Point2D
    starting_position: Point2D = field(default_factory=lambda: Point2D(0, 0))

    def winning_prize_cost(self) -> int:
        """Tokens needed to reach the prize (3 per A, 1 per B), or 0 if impossible."""
        a, b = self.movement_a, self.movement_b
        prize = self.prize_location
        determinant = a.x * b.y - b.x * a.y
        if determinant == 0:
            return 0
        presses_a = _near_integer(Fraction(prize.x * b.y - b.x * prize.y, determinant))
        presses_b = _near_integer(Fraction(a.x * prize.y - a.y * prize.x, determinant))
        if presses_a is None or presses_b is None:
            return 0
        return 3 * presses_a + presses_b


def _near_integer(value: Fraction) -> int | None:
    magnitude = abs(value)
    fractional = magnitude - math.floor(magnitude)
    if fractional < _EPSILON or fractional > 1 - _EPSILON:
        return round(value)
    return None


def parse_claw_machines(text: str, correct_prize_position: bool = False) -> list[ClawMachine]:
    """Parse every machine description; optionally shift prizes by 10^13."""
    offset = _PRIZE_CORRECTION if correct_prize_position else 0
    machines: list[ClawMachine] = []
    for match in _MACHINE_RE.finditer(text):
        ax, ay, bx, by, px, py = (int(group) for group in match.groups())
        machines.append(
            ClawMachine(
                prize_location=Point2D(px + offset, py + offset),
                movement_a=Point2D(ax, ay),
                movement_b=Point2D(bx, by),
            )
        )
    return machines


def solve(text: str) -> tuple[int, int]:
    """Return the fewest tokens to win all prizes, before and after correction."""
    return (
        sum(m.winning_prize_cost() for m in parse_claw_machines(text, False)),
        sum(m.winning_prize_cost() for m in parse_claw_machines(text, True)),
    )


def run(text: str, verbosity: int = 0) -> None:
    total = sum(m.winning_prize_cost() for m in parse_claw_machines(text, False))
    print(f"Fewest number of tokens spent to win all possible prizes: {total}")

    corrected_total = 0
    unsolvable = 0
    for m in parse_claw_machines(text, True):
        cost = m.winning_prize_cost()
        if cost == 0:
            solvability = "Unsolvable"
            unsolvable += 1
        else:
            solvability = "Solvable"
        if verbosity > 0:
            print(
                f"{solvability}: {m.movement_a.x}x + {m.movement_b.x}y = {m.prize_location.x}; "
                f"{m.movement_a.y}x + {m.movement_b.y}y = {m.prize_location.y}"
            )
        corrected_total += cost

    if verbosity > 0:
        print(f"{unsolvable} unsolvable with corrected prize coordinates")
    print(
        "Fewest number of tokens spent to win all possible prizes with corrected "
        f"prize coordinates: {corrected_total}"
    )