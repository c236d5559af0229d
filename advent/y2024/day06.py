"""2024 day 6: Guard Gallivant."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from advent.mathutils import Point2D, Size2D


class Cell(IntEnum):
    EMPTY = 0
    OBSTRUCTION = 1


class Direction(IntEnum):
    """Facing of the guard; values are bit flags for the visited record."""

    NORTH = 1
    EAST = 2
    SOUTH = 4
    WEST = 8


# Step taken when moving, and the facing after turning right.
_MOVES: dict[Direction, tuple[int, int, Direction]] = {
    Direction.NORTH: (0, -1, Direction.EAST),
    Direction.EAST: (1, 0, Direction.SOUTH),
    Direction.SOUTH: (0, 1, Direction.WEST),
    Direction.WEST: (-1, 0, Direction.NORTH),
}


@dataclass
class RoomMap:
    """The lab floor, the guard's state and the cells the guard has walked."""

    bounds: Size2D
    position: Point2D
    facing: Direction
    columns: list[list[Cell]]
    visited: list[list[int]]
    visited_cells: int = 0
    looping: bool = field(default=False)

    def get_cell(self, location: Point2D) -> Cell:
        return self.columns[location.y][location.x]

    def get_visited(self, location: Point2D) -> bool:
        return self.visited[location.y][location.x] != 0

    def set_visited(self, location: Point2D, facing: Direction) -> None:
        """Record a visit; revisiting a cell with the same facing means a loop."""
        if not self.get_visited(location):
            self.visited_cells += 1
        flags = self.visited[location.y][location.x]
        if flags & facing:
            self.looping = True
        self.visited[location.y][location.x] = flags | facing

    def add_obstruction(self, location: Point2D) -> None:
        self.columns[location.y][location.x] = Cell.OBSTRUCTION

    def are_looping(self) -> bool:
        return self.looping

    def walk(self) -> bool:
        """Take one step or turn; return True once the guard leaves the map."""
        dx, dy, turned = _MOVES[self.facing]
        nx, ny = self.position.x + dx, self.position.y + dy
        if not (0 <= nx < self.bounds.width and 0 <= ny < self.bounds.height):
            return True
        ahead = Point2D(nx, ny)
        if self.get_cell(ahead) is Cell.OBSTRUCTION:
            self.facing = turned
        else:
            self.position = ahead
            self.set_visited(ahead, self.facing)
        return False


def parse_map(text: str) -> RoomMap:
    """Parse the map; ``^`` marks the guard, facing north.

    A map without a guard places one at the origin, facing north.
    """
    columns: list[list[Cell]] = []
    visited: list[list[int]] = []
    start = Point2D(0, 0)
    for y, line in enumerate(text.split("\n")):
        row: list[Cell] = []
        for x, char in enumerate(line):
            if char == ".":
                row.append(Cell.EMPTY)
            elif char == "#":
                row.append(Cell.OBSTRUCTION)
            elif char == "^":
                start = Point2D(x, y)
                row.append(Cell.EMPTY)
        columns.append(row)
        visited.append([0] * len(line))

    room = RoomMap(
        bounds=Size2D(len(columns[0]), len(columns)),
        position=start,
        facing=Direction.NORTH,
        columns=columns,
        visited=visited,
    )
    room.set_visited(start, room.facing)
    return room


def _walk_out(room: RoomMap) -> None:
    while not room.walk():
        pass


def count_looping_obstructions(text: str, verbosity: int = 0) -> int:
    """Count the cells where one extra obstruction traps the guard in a loop."""
    room = parse_map(text)
    start = room.position
    count = 0
    for y in range(room.bounds.height):
        for x in range(room.bounds.width):
            location = Point2D(x, y)
            if location == start:
                continue
            obstructed = parse_map(text)
            obstructed.add_obstruction(location)
            while not obstructed.walk():
                if obstructed.are_looping():
                    if verbosity > 0:
                        print(f"Obstruction @ {x}x{y} loops guard")
                    count += 1
                    break
    return count


def solve(text: str) -> tuple[int, int]:
    """Return (distinct cells visited, obstruction positions causing a loop)."""
    room = parse_map(text)
    _walk_out(room)
    return room.visited_cells, count_looping_obstructions(text)


def run(text: str, verbosity: int = 0) -> None:
    room = parse_map(text)
    _walk_out(room)
    print(f"Total distinct positions visited by guard: {room.visited_cells}")
    loops = count_looping_obstructions(text, verbosity)
    print(f"Number of different positions to place obstruction to loop guard: {loops}")