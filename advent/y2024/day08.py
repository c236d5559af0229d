"""2024 day 8: Resonant Collinearity."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from advent.mathutils import (
    Point2D,
    Size2D,
    calculate_slope_intercept,
    generate_unique_point_pairs,
)

_EPSILON = 1e-6


@dataclass
class AntennaMap:
    """Antenna positions grouped by frequency and the antinodes they create."""

    bounds: Size2D = field(default_factory=Size2D)
    antennas: dict[str, list[Point2D]] = field(default_factory=dict)
    antinodes: set[Point2D] = field(default_factory=set)


def generate_collinear_locations(
    point_a: Point2D, point_b: Point2D, bounds: Size2D
) -> list[Point2D]:
    """Return the whole-number grid points on the line through both points.

    Points are ordered by increasing x. A vertical line yields no points.
    """
    m, b = calculate_slope_intercept(point_a, point_b)
    locations: list[Point2D] = []
    for x in range(bounds.width):
        y = m * x + b
        if not math.isfinite(y):
            continue
        fractional, _ = math.modf(abs(y))
        if fractional < _EPSILON or fractional > 1 - _EPSILON:
            int_y = int(math.floor(y + 0.5)) if y >= 0 else -int(math.floor(-y + 0.5))
            if 0 <= int_y < bounds.height:
                locations.append(Point2D(x, int_y))
    return locations


def parse_antenna_map(text: str, harmonics: bool, verbosity: int = 0) -> AntennaMap:
    """Parse the map and compute antinode locations.

    Without harmonics each pair of same-frequency antennas produces the
    collinear grid points just beyond either antenna; with harmonics every
    collinear grid point is an antinode.
    """
    antenna_map = AntennaMap()
    width = 0
    height = 0
    for y, line in enumerate(text.split("\n")):
        width = 0
        for x, char in enumerate(line):
            if char != ".":
                antenna_map.antennas.setdefault(char, []).append(Point2D(x, y))
            width += 1
        height += 1
    antenna_map.bounds = Size2D(width, height)

    for locations in antenna_map.antennas.values():
        for pair in generate_unique_point_pairs(locations):
            collinear = generate_collinear_locations(pair.one, pair.two, antenna_map.bounds)

            if verbosity > 0:
                print(
                    f"Collinear points for ({pair.one.x},{pair.one.y}) "
                    f"({pair.two.x},{pair.two.y}): {collinear}"
                )

            if harmonics:
                antenna_map.antinodes.update(collinear)
                continue

            for i, point in enumerate(collinear):
                if point == pair.one:
                    if i > 0:
                        antinode = collinear[i - 1]
                        if verbosity > 0:
                            print(f"Antinode location: ({antinode.x},{antinode.y})")
                        antenna_map.antinodes.add(antinode)
                elif point == pair.two:
                    if i < len(collinear) - 1:
                        antinode = collinear[i + 1]
                        if verbosity > 0:
                            print(f"Antinode location: ({antinode.x},{antinode.y})")
                        antenna_map.antinodes.add(antinode)
                    break

    return antenna_map


def solve(text: str) -> tuple[int, int]:
    """Return unique antinode counts without and with harmonics."""
    return (
        len(parse_antenna_map(text, False).antinodes),
        len(parse_antenna_map(text, True).antinodes),
    )


def run(text: str, verbosity: int = 0) -> None:
    antenna_map = parse_antenna_map(text, False, verbosity)
    if verbosity > 0:
        print(antenna_map)
    print(f"Number of unique antinode locations: {len(antenna_map.antinodes)}")

    harmonic_map = parse_antenna_map(text, True, verbosity)
    if verbosity > 0:
        print(harmonic_map)
    print(
        "Number of unique antinode locations accounting for harmonics: "
        f"{len(harmonic_map.antinodes)}"
    )