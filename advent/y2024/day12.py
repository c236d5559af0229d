"""2024 day 12: Garden Groups."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass, field

from advent.mathutils import Point2D, Size2D

# Which corner of a plot a grid vertex is; diagonal corners differ in both bits.
_BOTTOM_LEFT = 0b01
_TOP_LEFT = 0b11
_TOP_RIGHT = 0b10
_BOTTOM_RIGHT = 0b00
_POSITION_MASK = 0b11


@dataclass
class Region:
    """A connected group of plots growing the same plant."""

    plant: str
    plots: set[Point2D] = field(default_factory=set)


@dataclass
class GardenMap:
    """The garden grid, plot positions per plant and the regions found."""

    bounds: Size2D = field(default_factory=Size2D)
    plants: dict[str, list[Point2D]] = field(default_factory=dict)
    regions: dict[int, Region] = field(default_factory=dict)
    columns: list[list[str]] = field(default_factory=list)

    def get_plant(self, location: Point2D) -> str:
        return self.columns[location.y][location.x]

    def num_regions(self) -> int:
        return len(self.regions)

    def region_area(self, region_id: int) -> int:
        region = self.regions.get(region_id)
        return len(region.plots) if region else 0

    def region_fencing_price(self, region_id: int) -> int:
        return self.region_area(region_id) * self.region_perimeter(region_id)

    def region_fencing_price_bulk_discount(self, region_id: int) -> int:
        return self.region_area(region_id) * self.region_perimeter_sides(region_id)

    def region_perimeter(self, region_id: int) -> int:
        """Number of unit fence segments around a region; 0 if it is unknown."""
        region = self.regions.get(region_id)
        if region is None:
            return 0
        perimeter = 0
        for p in region.plots:
            if p.y == 0 or self.get_plant(p.up()) != region.plant:
                perimeter += 1
            if p.y == self.bounds.height - 1 or self.get_plant(p.down()) != region.plant:
                perimeter += 1
            if p.x == 0 or self.get_plant(p.left()) != region.plant:
                perimeter += 1
            if p.x == self.bounds.width - 1 or self.get_plant(p.right()) != region.plant:
                perimeter += 1
        return perimeter

    def region_perimeter_sides(self, region_id: int) -> int:
        """Number of straight sides of a region, counted via its corners."""
        region = self.regions.get(region_id)
        if region is None:
            return 0
        shared: defaultdict[Point2D, list[int]] = defaultdict(list)
        for p in region.plots:
            shared[p].append(_TOP_LEFT)
            shared[p.right()].append(_TOP_RIGHT)
            shared[p.down()].append(_BOTTOM_LEFT)
            shared[p.down_right()].append(_BOTTOM_RIGHT)

        sides = 0
        for corners in shared.values():
            if len(corners) == 1 or len(corners) == 3:
                sides += 1
            elif len(corners) == 2:
                # Two plots touching only diagonally make two corners here.
                if (corners[0] ^ corners[1]) & _POSITION_MASK == _POSITION_MASK:
                    sides += 2
        return sides

    def _neighbours(self, position: Point2D) -> Iterator[Point2D]:
        if position.y > 0:
            yield position.up()
        if position.y < self.bounds.height - 1:
            yield position.down()
        if position.x > 0:
            yield position.left()
        if position.x < self.bounds.width - 1:
            yield position.right()


def parse_map(text: str) -> GardenMap:
    """Parse the garden and split it into regions, numbered in reading order."""
    garden = GardenMap()
    width = 0
    height = 0
    for y, line in enumerate(text.split("\n")):
        width = 0
        row: list[str] = []
        for x, char in enumerate(line):
            row.append(char)
            garden.plants.setdefault(char, []).append(Point2D(x, y))
            width += 1
        garden.columns.append(row)
        height += 1
    garden.bounds = Size2D(width, height)

    claimed: set[Point2D] = set()
    region_id = 0
    for y in range(height):
        for x in range(width):
            start = Point2D(x, y)
            if start in claimed:
                continue
            plant = garden.get_plant(start)
            plots = {start}
            pending = [start]
            while pending:
                current = pending.pop()
                for neighbour in garden._neighbours(current):
                    if neighbour not in plots and garden.get_plant(neighbour) == plant:
                        plots.add(neighbour)
                        pending.append(neighbour)
            claimed |= plots
            garden.regions[region_id] = Region(plant=plant, plots=plots)
            region_id += 1
    return garden


def solve(text: str) -> tuple[int, int]:
    """Return total fencing price, without and with the bulk discount."""
    garden = parse_map(text)
    regions = range(garden.num_regions())
    return (
        sum(garden.region_fencing_price(i) for i in regions),
        sum(garden.region_fencing_price_bulk_discount(i) for i in regions),
    )


def run(text: str, verbosity: int = 0) -> None:
    price, discounted = solve(text)
    print(f"Total cost of fencing: {price}")
    print(f"Total cost of fencing with bulk discount: {discounted}")