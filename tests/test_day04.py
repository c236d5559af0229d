from advent.mathutils import Point2D, Size2D
from advent.y2024.day04 import parse_letter_grid, solve

SAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX"""


def _by_row(points):
    return sorted(points, key=lambda p: (p.y, p.x))


def test_parse_letter_grid():
    grid = parse_letter_grid(SAMPLE)
    assert grid.bounds == Size2D(width=10, height=10)
    assert len(grid.rows) == 10
    assert grid.rows[0] == ["M", "M", "M", "S", "X", "X", "M", "A", "S", "M"]
    assert grid.rows[5] == ["X", "X", "A", "M", "M", "X", "X", "A", "M", "A"]
    assert grid.rows[9] == ["M", "X", "M", "X", "A", "X", "M", "A", "S", "X"]


def test_get_letter():
    grid = parse_letter_grid(SAMPLE)
    assert grid.get_letter(Point2D(0, 0)) == "M"
    assert grid.get_letter(Point2D(9, 9)) == "X"


def test_find_string():
    expected = [
        Point2D(5, 0),
        Point2D(4, 1),
        Point2D(9, 3),
        Point2D(9, 3),
        Point2D(0, 4),
        Point2D(6, 4),
        Point2D(6, 4),
        Point2D(5, 9),
        Point2D(5, 9),
        Point2D(5, 9),
        Point2D(9, 9),
        Point2D(9, 9),
        Point2D(0, 5),
        Point2D(1, 9),
        Point2D(3, 9),
        Point2D(3, 9),
        Point2D(6, 5),
        Point2D(4, 0),
    ]
    grid = parse_letter_grid(SAMPLE)
    assert grid.find_string("XMAS") == _by_row(expected)


def test_find_xmas():
    expected = [
        Point2D(2, 1),
        Point2D(6, 2),
        Point2D(7, 2),
        Point2D(2, 3),
        Point2D(4, 3),
        Point2D(1, 7),
        Point2D(3, 7),
        Point2D(5, 7),
        Point2D(7, 7),
    ]
    grid = parse_letter_grid(SAMPLE)
    assert grid.find_xmas() == _by_row(expected)


def test_find_string_small_grid():
    grid = parse_letter_grid("ABC\nDEF")
    assert grid.find_string("CBA") == [Point2D(2, 0)]
    assert grid.find_string("AE") == [Point2D(0, 0)]
    assert grid.find_string("XYZ") == []


def test_solve():
    assert solve(SAMPLE) == (18, 9)