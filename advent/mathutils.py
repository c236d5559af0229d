"""Integer and 2D grid helpers shared by the puzzle solutions."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import pairwise

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


@dataclass(frozen=True)
class Size2D:
    """Width and height of a grid."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Point2D:
    """A grid location; y grows downwards."""

    x: int
    y: int

    def up(self) -> Point2D:
        return Point2D(self.x, self.y - 1)

    def up_right(self) -> Point2D:
        return Point2D(self.x + 1, self.y - 1)

    def up_left(self) -> Point2D:
        return Point2D(self.x - 1, self.y - 1)

    def down(self) -> Point2D:
        return Point2D(self.x, self.y + 1)

    def down_right(self) -> Point2D:
        return Point2D(self.x + 1, self.y + 1)

    def down_left(self) -> Point2D:
        return Point2D(self.x - 1, self.y + 1)

    def left(self) -> Point2D:
        return Point2D(self.x - 1, self.y)

    def right(self) -> Point2D:
        return Point2D(self.x + 1, self.y)


@dataclass(frozen=True)
class PointPair:
    """Two points, ordered so that ``one`` sorts before ``two`` by (x, y)."""

    one: Point2D
    two: Point2D


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repetition."""
    factors: list[int] = []
    while n % 2 == 0 and n != 0:
        factors.append(2)
        n //= 2
    divisor = 3
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 2
    if n > 2:
        factors.append(n)
    return factors


def absolute_difference(a: int, b: int) -> int:
    return b - a if a < b else a - b


def sort_points(points: list[Point2D]) -> None:
    """Sort points in place, row by row and then by column."""
    points.sort(key=lambda p: (p.y, p.x))


def manhattan_distance(p1: Point2D, p2: Point2D) -> int:
    return absolute_difference(p1.x, p2.x) + absolute_difference(p1.y, p2.y)


def is_left(start: Point2D, end: Point2D, point: Point2D) -> int:
    """Cross product sign test of ``point`` against the line start→end."""
    return (end.x - start.x) * (point.y - start.y) - (point.x - start.x) * (end.y - start.y)


def point_in_poly_crossing(point: Point2D, vertices: Sequence[Point2D]) -> bool:
    """Crossing-number test; ``vertices`` must repeat the first vertex at the end."""
    crossings = 0
    for a, b in pairwise(vertices):
        if (a.y <= point.y < b.y) or (b.y <= point.y < a.y):
            vt = _trunc_div(point.y - a.y, b.y - a.y)
            if point.x < a.x + vt * (b.x - a.x):
                crossings += 1
    return crossings % 2 == 1


def int_pow(n: int, m: int) -> int:
    """Raise ``n`` to ``m``; exponents below one other than zero yield ``n``."""
    if m == 0:
        return 1
    return n ** max(m, 1)


def make_histogram(values: Iterable[int]) -> dict[int, int]:
    """Count how often each value occurs."""
    return dict(Counter(values))


def concatenate(a: int, b: int) -> int:
    """Join the decimal digits of ``a`` and ``b`` into one number."""
    padding = 10
    while padding <= b:
        padding *= 10
    return a * padding + b


def calculate_slope_intercept(point_a: Point2D, point_b: Point2D) -> tuple[float, float]:
    """Return (m, b) of the line y = mx + b through both points.

    A vertical line yields an infinite (or NaN) slope rather than an error.
    """
    dx = float(point_b.x - point_a.x)
    dy = float(point_b.y - point_a.y)
    if dx == 0.0:
        m = math.nan if dy == 0.0 else math.copysign(math.inf, dy)
    else:
        m = dy / dx
    product = m * point_a.x if point_a.x != 0 or not math.isinf(m) else math.nan
    return m, float(point_a.y) - product


def generate_unique_point_pairs(points: Sequence[Point2D]) -> list[PointPair]:
    """Return every unordered pair of points taken from distinct positions."""
    unique: dict[PointPair, None] = {}
    for i, first in enumerate(points):
        for j, second in enumerate(points):
            if i == j:
                continue
            low, high = sorted((first, second), key=lambda p: (p.x, p.y))
            unique.setdefault(PointPair(low, high), None)
    return list(unique)


def digit_count(number: int) -> int:
    """Number of decimal digits of ``number``, ignoring its sign."""
    return len(str(abs(number)))


def max_int_in_list(values: Iterable[int]) -> int:
    """Largest value, or the smallest 64-bit integer for an empty input."""
    return max(values, default=INT_MIN)


def min_int_in_list(values: Iterable[int]) -> int:
    """Smallest value, or the largest 64-bit integer for an empty input."""
    return min(values, default=INT_MAX)