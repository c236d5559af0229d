"""2024 day 1: Historian Hysteria."""

from __future__ import annotations

from advent.mathutils import absolute_difference, make_histogram
from advent.parsing import parse_int_list


def parse_location_ids(text: str) -> tuple[list[int], list[int]]:
    """Split each line into a left and right id; return both lists sorted.

    Raises ValueError for any line that does not hold exactly two integers.
    """
    left: list[int] = []
    right: list[int] = []
    for line in text.split("\n"):
        ids = parse_int_list(line)
        if len(ids) != 2:
            raise ValueError(f"invalid line '{line}'")
        left.append(ids[0])
        right.append(ids[1])
    return sorted(left), sorted(right)


def total_distance(left: list[int], right: list[int]) -> int:
    """Sum of the distances between paired ids of two sorted lists."""
    return sum(absolute_difference(a, b) for a, b in zip(left, right))


def calculate_similarity(left: list[int], right: list[int]) -> int:
    """Sum of each left id times the number of its occurrences on the right."""
    counts = make_histogram(right)
    return sum(value * counts.get(value, 0) for value in left)


def solve(text: str) -> tuple[int, int]:
    """Return (total distance, similarity score) for the puzzle input."""
    left, right = parse_location_ids(text)
    return total_distance(left, right), calculate_similarity(left, right)


def run(text: str, verbosity: int = 0) -> None:
    distance, similarity = solve(text)
    print(f"Total distance: {distance}.")
    print(f"Similarity: {similarity}.")