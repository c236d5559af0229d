"""2024 day 7: Bridge Repair."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from advent.mathutils import concatenate
from advent.parsing import parse_int_list


@dataclass(frozen=True)
class Operator:
    """A binary operator applied strictly left to right."""

    name: str
    apply: Callable[[int, int], int]

    def __call__(self, a: int, b: int) -> int:
        return self.apply(a, b)


ADD = Operator("+", operator.add)
MULTIPLY = Operator("*", operator.mul)
CONCATENATE = Operator("||", concatenate)


@dataclass
class Equation:
    """A calibration equation: a test value and its operands."""

    test_value: int
    numbers: list[int] = field(default_factory=list)

    def evaluate_validity(self, operators: Sequence[Operator], verbosity: int = 0) -> bool:
        """True when some choice of operators yields the test value.

        With a verbosity above two every complete evaluation is printed.
        """
        if not self.numbers:
            raise ValueError("equation has no numbers")
        target = self.test_value
        numbers = self.numbers
        verbose = verbosity > 2

        def evaluate(trail: str, current: int, index: int) -> bool:
            if index == len(numbers):
                if verbose:
                    if current == target:
                        print(f"{target} == {trail}")
                    else:
                        print(f"{target} != {trail} ({current})")
                return current == target
            # No operator can make the running value smaller.
            if current > target:
                return False
            number = numbers[index]
            return any(
                evaluate(
                    f"{trail} {op.name} {number}" if verbose else trail,
                    op(current, number),
                    index + 1,
                )
                for op in operators
            )

        return evaluate(str(numbers[0]), numbers[0], 1)


def parse_equation(line: str) -> Equation:
    """Parse ``value: n1 n2 ...``; raise ValueError when there is no value."""
    values = parse_int_list(line)
    if not values:
        raise ValueError(f"invalid equation '{line}'")
    return Equation(values[0], values[1:])


def format_equation(equation: Equation) -> str:
    """Render as ``value: n1 n2 ... `` with a trailing space."""
    return f"{equation.test_value}: " + "".join(f"{n} " for n in equation.numbers)


def _parse_equations(text: str) -> list[Equation]:
    return [parse_equation(line) for line in text.split("\n")]


def solve(text: str) -> tuple[int, int]:
    """Return calibration totals without and with the concatenation operator."""
    equations = _parse_equations(text)
    plain = sum(e.test_value for e in equations if e.evaluate_validity([ADD, MULTIPLY]))
    with_concat = sum(
        e.test_value
        for e in equations
        if e.evaluate_validity([CONCATENATE, ADD, MULTIPLY])
    )
    return plain, with_concat


def run(text: str, verbosity: int = 0) -> None:
    equations = _parse_equations(text)

    valid = [e.evaluate_validity([ADD, MULTIPLY], verbosity) for e in equations]
    total = sum(e.test_value for e, ok in zip(equations, valid) if ok)
    print(f"Total calibration result: {total}")

    concat_total = 0
    for equation, was_valid in zip(equations, valid):
        if equation.evaluate_validity([CONCATENATE, ADD, MULTIPLY], verbosity):
            if verbosity > 1 and not was_valid:
                print(f"{format_equation(equation)}now valid")
            concat_total += equation.test_value
        elif verbosity > 0:
            print(f"{format_equation(equation)}not valid")
    print(f"Total calibration result with concatenation operator: {concat_total}")