"""Command line entry point for the puzzle solutions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from advent.y2024 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
)

_DAYS = {
    "day01": ("Historian Hysteria", day01),
    "day02": ("Red-Nosed Reports", day02),
    "day03": ("Mull It Over", day03),
    "day04": ("Ceres Search", day04),
    "day05": ("Print Queue", day05),
    "day06": ("Guard Gallivant", day06),
    "day07": ("Bridge Repair", day07),
    "day08": ("Resonant Collinearity", day08),
    "day09": ("Disk Fragmenter", day09),
    "day10": ("Hoof It", day10),
    "day11": ("Plutonian Pebbles", day11),
    "day12": ("Garden Groups", day12),
    "day13": ("Claw Contraption", day13),
}

# Days that run on empty input when no input file is given.
_OPTIONAL_INPUT = {"day11", "day12", "day13"}


def _build_parser() -> tuple[argparse.ArgumentParser, argparse.ArgumentParser]:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="count", default=argparse.SUPPRESS, help="verbose output"
    )
    common.add_argument("-i", "--input", default=argparse.SUPPRESS, help="input file")

    root = argparse.ArgumentParser(
        prog="advent",
        description="Solutions for Advent Of Code",
        parents=[common],
    )
    years = root.add_subparsers(dest="year")
    year = years.add_parser(
        "2024", parents=[common], help="2024 solutions for Advent Of Code"
    )
    days = year.add_subparsers(dest="day")
    for name, (title, _) in _DAYS.items():
        day = days.add_parser(name, parents=[common], help=title)
        if name == "day07":
            day.add_argument("-e", "--equation", default="", help="Equation")
        elif name == "day11":
            day.add_argument(
                "-a",
                "--analytics",
                action="store_true",
                help="display analytics instead of solving challenge",
            )
            day.add_argument("-s", "--stones", default="", help="starting stone list")
            day.add_argument("-b", "--blinks", type=int, default=20, help="number of blinks")
    return root, year


def _read(path: str) -> str:
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Sequence[str] | None = None) -> int:
    root, year = _build_parser()
    args = root.parse_args(argv)

    if args.year is None:
        root.print_help()
        return 0
    if args.day is None:
        year.print_help()
        return 0

    verbosity = getattr(args, "verbose", 0) or 0
    input_path = getattr(args, "input", "") or ""
    name = args.day
    module = _DAYS[name][1]

    try:
        if name == "day07":
            if input_path:
                text = _read(input_path)
            elif args.equation:
                text = args.equation
            else:
                return 0
            module.run(text, verbosity)
        elif name == "day11":
            text = _read(input_path) if input_path else ""
            module.run(text, args.analytics, args.stones, args.blinks)
        elif name in _OPTIONAL_INPUT:
            text = _read(input_path) if input_path else ""
            module.run(text, verbosity)
        else:
            module.run(_read(input_path), verbosity)
    except (OSError, ValueError) as err:
        print(f"advent: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())