import pytest

from advent.mathutils import Point2D, Size2D
from advent.y2024.day12 import GardenMap, Region, parse_map, solve

SMALL = """AAAA
BBCD
BBCC
EEEC"""

SMALL_WITH_EXTRA_ROW = """AAAA
BBCD
BBCC
EEEC
AAAA"""

E_SHAPE = """EEEEE
EXXXX
EEEEE
EXXXX
EEEEE"""

LARGE = """RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE"""

DIAGONAL = """AAAAAA
AAABBA
AAABBA
ABBAAA
ABBAAA
AAAAAA"""


def P(x, y):
    return Point2D(x, y)


def test_parse_map():
    expected = GardenMap(
        bounds=Size2D(4, 5),
        plants={
            "A": [P(0, 0), P(1, 0), P(2, 0), P(3, 0), P(0, 4), P(1, 4), P(2, 4), P(3, 4)],
            "B": [P(0, 1), P(1, 1), P(0, 2), P(1, 2)],
            "C": [P(2, 1), P(2, 2), P(3, 2), P(3, 3)],
            "D": [P(3, 1)],
            "E": [P(0, 3), P(1, 3), P(2, 3)],
        },
        regions={
            0: Region("A", {P(0, 0), P(1, 0), P(2, 0), P(3, 0)}),
            1: Region("B", {P(0, 1), P(0, 2), P(1, 2), P(1, 1)}),
            2: Region("C", {P(2, 1), P(2, 2), P(3, 2), P(3, 3)}),
            3: Region("D", {P(3, 1)}),
            4: Region("E", {P(0, 3), P(1, 3), P(2, 3)}),
            5: Region("A", {P(0, 4), P(1, 4), P(2, 4), P(3, 4)}),
        },
        columns=[
            ["A", "A", "A", "A"],
            ["B", "B", "C", "D"],
            ["B", "B", "C", "C"],
            ["E", "E", "E", "C"],
            ["A", "A", "A", "A"],
        ],
    )
    assert parse_map(SMALL_WITH_EXTRA_ROW) == expected


@pytest.mark.parametrize(
    "region_id, area", [(0, 4), (1, 4), (2, 4), (3, 1), (4, 3), (5, 0)]
)
def test_region_area(region_id, area):
    assert parse_map(SMALL).region_area(region_id) == area


@pytest.mark.parametrize(
    "region_id, perimeter", [(0, 10), (1, 8), (2, 10), (3, 4), (4, 8), (5, 0)]
)
def test_region_perimeter(region_id, perimeter):
    assert parse_map(SMALL).region_perimeter(region_id) == perimeter


@pytest.mark.parametrize(
    "text, region_id, sides",
    [
        (SMALL, 0, 4),
        (SMALL, 1, 4),
        (SMALL, 2, 8),
        (SMALL, 3, 4),
        (SMALL, 4, 4),
        (SMALL, 5, 0),
        (E_SHAPE, 0, 12),
        (E_SHAPE, 1, 4),
        (E_SHAPE, 2, 4),
    ],
)
def test_region_perimeter_sides(text, region_id, sides):
    assert parse_map(text).region_perimeter_sides(region_id) == sides


@pytest.mark.parametrize(
    "region_id, price", [(0, 40), (1, 32), (2, 40), (3, 4), (4, 24), (5, 0)]
)
def test_region_fencing_price(region_id, price):
    assert parse_map(SMALL).region_fencing_price(region_id) == price


@pytest.mark.parametrize(
    "text, region_id, price",
    [
        (SMALL, 0, 16),
        (SMALL, 1, 16),
        (SMALL, 2, 32),
        (SMALL, 3, 4),
        (SMALL, 4, 12),
        (SMALL, 5, 0),
        (E_SHAPE, 0, 204),
        (E_SHAPE, 1, 16),
        (E_SHAPE, 2, 16),
    ],
)
def test_region_fencing_price_bulk_discount(text, region_id, price):
    assert parse_map(text).region_fencing_price_bulk_discount(region_id) == price


def test_total_map_fencing_price():
    garden = parse_map(LARGE)
    total = sum(garden.region_fencing_price(i) for i in range(garden.num_regions()))
    assert total == 1930


def test_total_map_fencing_price_bulk_discount():
    garden = parse_map(DIAGONAL)
    total = sum(
        garden.region_fencing_price_bulk_discount(i) for i in range(garden.num_regions())
    )
    assert total == 368


def test_num_regions_and_plants():
    garden = parse_map(SMALL)
    assert garden.num_regions() == 5
    assert garden.get_plant(P(3, 1)) == "D"


def test_regions_partition_the_map():
    garden = parse_map(LARGE)
    all_plots = [p for region in garden.regions.values() for p in region.plots]
    assert len(all_plots) == len(set(all_plots)) == 100
    for region in garden.regions.values():
        assert all(garden.get_plant(p) == region.plant for p in region.plots)


def test_solve():
    assert solve(LARGE)[0] == 1930
    assert solve(DIAGONAL)[1] == 368
    assert solve(SMALL) == (140, 80)