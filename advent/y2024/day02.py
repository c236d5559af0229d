"""2024 day 2: Red-Nosed Reports."""

from __future__ import annotations

from enum import IntEnum
from itertools import pairwise

from advent.parsing import parse_int_list


class ReportDirection(IntEnum):
    INCREASING = 0
    DECREASING = 1
    STEADY = 2


def parse_report(line: str) -> list[int]:
    """Return the levels of a report; raise ValueError if fewer than two."""
    levels = parse_int_list(line)
    if len(levels) < 2:
        raise ValueError("too few levels in report")
    return levels


def get_report_direction(a: int, b: int) -> ReportDirection:
    if a > b:
        return ReportDirection.DECREASING
    if a < b:
        return ReportDirection.INCREASING
    return ReportDirection.STEADY


def check_report_safety(levels: list[int]) -> bool:
    """A report is safe when strictly monotonic with steps of at most three."""
    if len(levels) < 2:
        return False
    direction = get_report_direction(levels[0], levels[1])
    if direction is ReportDirection.STEADY:
        return False
    return all(
        get_report_direction(a, b) is direction and abs(b - a) <= 3
        for a, b in pairwise(levels)
    )


def check_report_safety_problem_damper(levels: list[int]) -> bool:
    """Safe outright, or safe once any single level is removed."""
    if check_report_safety(levels):
        return True
    return any(
        check_report_safety(levels[:index] + levels[index + 1 :])
        for index in range(len(levels))
    )


def solve(text: str) -> tuple[int, int]:
    """Return (safe reports, safe reports with the dampener)."""
    safe = 0
    dampened = 0
    for line in text.split("\n"):
        levels = parse_report(line)
        safe += check_report_safety(levels)
        dampened += check_report_safety_problem_damper(levels)
    return safe, dampened


def run(text: str, verbosity: int = 0) -> None:
    safe, dampened = solve(text)
    print(f"Number of safe reports: {safe}.")
    print(f"Number of dampened safe reports: {dampened}.")