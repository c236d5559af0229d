"""2024 day 10: Hoof It."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from advent.containers import FIFO
from advent.mathutils import Point2D, Size2D

TRAIL_PEAK_HEIGHT = 9
# Cells marked "." can never be part of a trail.
_IMPASSABLE = TRAIL_PEAK_HEIGHT + 1


@dataclass
class TopoMap:
    """A topographic height map and the positions of its trailheads."""

    bounds: Size2D = field(default_factory=Size2D)
    trailheads: list[Point2D] = field(default_factory=list)
    columns: list[list[int]] = field(default_factory=list)

    def get_height(self, location: Point2D) -> int:
        return self.columns[location.y][location.x]

    def _neighbours(self, position: Point2D) -> Iterator[Point2D]:
        if position.y > 0:
            yield position.up()
        if position.y < self.bounds.height - 1:
            yield position.down()
        if position.x > 0:
            yield position.left()
        if position.x < self.bounds.width - 1:
            yield position.right()

    def hike_scores(self) -> dict[Point2D, int]:
        """For each trailhead, the number of distinct peaks it can reach."""
        scores: dict[Point2D, int] = {}
        for trailhead in self.trailheads:
            positions: FIFO[Point2D] = FIFO()
            visited: set[Point2D] = set()
            score = 0
            positions.push(trailhead)
            while not positions.is_empty():
                position = positions.pop()
                current = self.get_height(position)
                for neighbour in self._neighbours(position):
                    if neighbour in visited:
                        continue
                    height = self.get_height(neighbour)
                    if height != current + 1:
                        continue
                    if height == TRAIL_PEAK_HEIGHT:
                        score += 1
                    else:
                        positions.push(neighbour)
                    visited.add(neighbour)
                visited.add(position)
            scores[trailhead] = score
        return scores

    def _rating_from(self, position: Point2D) -> int:
        current = self.get_height(position)
        rating = 0
        for neighbour in self._neighbours(position):
            height = self.get_height(neighbour)
            if height != current + 1:
                continue
            if height == TRAIL_PEAK_HEIGHT:
                rating += 1
            else:
                rating += self._rating_from(neighbour)
        return rating

    def hike_ratings(self) -> dict[Point2D, int]:
        """For each trailhead, the number of distinct trails starting there."""
        return {trailhead: self._rating_from(trailhead) for trailhead in self.trailheads}


def parse_topo_map(text: str) -> TopoMap:
    """Parse rows of height digits; ``.`` marks an impassable cell."""
    topo = TopoMap()
    width = 0
    height = 0
    for y, line in enumerate(text.split("\n")):
        width = 0
        row: list[int] = []
        for x, char in enumerate(line):
            value = _IMPASSABLE if char == "." else ord(char) - ord("0")
            if value == 0:
                topo.trailheads.append(Point2D(x, y))
            row.append(value)
            width += 1
        topo.columns.append(row)
        height += 1
    topo.bounds = Size2D(width, height)
    return topo


def solve(text: str) -> tuple[int, int]:
    """Return (sum of trailhead scores, sum of trailhead ratings)."""
    topo = parse_topo_map(text)
    return sum(topo.hike_scores().values()), sum(topo.hike_ratings().values())


def run(text: str, verbosity: int = 0) -> None:
    scores, ratings = solve(text)
    print(f"Sum of scores of all trailheads: {scores}")
    print(f"Sum of ratings of all trailheads: {ratings}")