"""2024 day 4: Ceres Search."""

from __future__ import annotations

from dataclasses import dataclass, field

from advent.mathutils import Point2D, Size2D, sort_points

# (dx, dy) in the order directions are searched.
_DIRECTIONS = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, -1),
    (-1, -1),
    (1, 1),
    (-1, 1),
)

# Up-left, up-right, down-left, down-right letters of an X-MAS.
_XMAS_PATTERNS = (
    ("M", "M", "S", "S"),
    ("S", "M", "S", "M"),
    ("M", "S", "M", "S"),
    ("S", "S", "M", "M"),
)


@dataclass
class LetterGrid:
    """A rectangular word-search grid."""

    bounds: Size2D = field(default_factory=Size2D)
    rows: list[list[str]] = field(default_factory=list)

    def get_letter(self, position: Point2D) -> str:
        return self.rows[position.y][position.x]

    def find_xmas(self) -> list[Point2D]:
        """Return the centres of every X-shaped pair of ``MAS``, sorted."""
        locations: list[Point2D] = []
        for y in range(1, self.bounds.height - 1):
            for x in range(1, self.bounds.width - 1):
                centre = Point2D(x, y)
                if self.get_letter(centre) != "A":
                    continue
                corners = (
                    self.get_letter(centre.up_left()),
                    self.get_letter(centre.up_right()),
                    self.get_letter(centre.down_left()),
                    self.get_letter(centre.down_right()),
                )
                locations.extend(centre for pattern in _XMAS_PATTERNS if corners == pattern)
        sort_points(locations)
        return locations

    def _fits(self, x: int, y: int, dx: int, dy: int, length: int) -> bool:
        if dx > 0 and x + length > self.bounds.width:
            return False
        if dx < 0 and x + 1 - length < 0:
            return False
        if dy > 0 and y + length > self.bounds.height:
            return False
        if dy < 0 and y + 1 - length < 0:
            return False
        return True

    def find_string(self, word: str) -> list[Point2D]:
        """Return the start of every occurrence of ``word`` in any of eight
        directions, one entry per occurrence, sorted by row then column."""
        locations: list[Point2D] = []
        for y in range(self.bounds.height):
            for x in range(self.bounds.width):
                for dx, dy in _DIRECTIONS:
                    if not self._fits(x, y, dx, dy, len(word)):
                        continue
                    if all(
                        self.rows[y + dy * i][x + dx * i] == letter
                        for i, letter in enumerate(word)
                    ):
                        locations.append(Point2D(x, y))
        sort_points(locations)
        return locations


def parse_letter_grid(text: str) -> LetterGrid:
    """Build a grid from newline-separated rows of letters."""
    rows = [list(line) for line in text.split("\n")]
    return LetterGrid(bounds=Size2D(len(rows[0]), len(rows)), rows=rows)


def solve(text: str) -> tuple[int, int]:
    """Return (occurrences of XMAS, occurrences of X-MAS)."""
    grid = parse_letter_grid(text)
    return len(grid.find_string("XMAS")), len(grid.find_xmas())


def run(text: str, verbosity: int = 0) -> None:
    xmas, x_mas = solve(text)
    print(f"'XMAS' appears: {xmas} times")
    print(f"X-MAS appears: {x_mas} times")