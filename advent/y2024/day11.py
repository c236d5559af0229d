"""2024 day 11: Plutonian Pebbles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from advent.mathutils import digit_count
from advent.parsing import parse_int_list


def split_digits(number: int) -> tuple[int, int]:
    """Split a number with an even digit count into its left and right halves."""
    divisor = 10
    while number // divisor > divisor:
        divisor *= 10
    return number // divisor, number % divisor


def _blink_value(value: int) -> tuple[int, ...]:
    if value == 0:
        return (1,)
    if digit_count(value) % 2 == 0:
        return split_digits(value)
    return (value * 2024,)


@dataclass
class StoneList:
    """Engraved stones in their line order."""

    stones: list[int] = field(default_factory=list)

    def blink(self) -> None:
        """Apply one blink to every stone at once."""
        self.stones = [new for value in self.stones for new in _blink_value(value)]


def parse_stones(text: str) -> StoneList:
    """Read the engraved numbers from the text."""
    return StoneList(parse_int_list(text))


def _count_after_blinks(values: Iterable[int], blinks: int) -> int:
    # Stone order does not affect how many stones there are, so count by value.
    counts = Counter(values)
    for _ in range(blinks):
        updated: Counter[int] = Counter()
        for value, count in counts.items():
            for new in _blink_value(value):
                updated[new] += count
        counts = updated
    return sum(counts.values())


def blink_analytics(text: str, blinks: int) -> list[int]:
    """Return the number of stones after each of ``blinks`` blinks."""
    stone_list = parse_stones(text)
    sizes: list[int] = []
    for _ in range(blinks):
        stone_list.blink()
        sizes.append(len(stone_list.stones))
    return sizes


def solve(text: str) -> tuple[int, int]:
    """Return the number of stones after 25 and after 75 blinks."""
    values = parse_int_list(text)
    return _count_after_blinks(values, 25), _count_after_blinks(values, 75)


def _print_sizes(prefix: str, sizes: list[int]) -> None:
    print(prefix + "".join(f"{size:5d} " for size in sizes))


def run(text: str, analytics: bool = False, stones: str = "", blinks: int = 20) -> None:
    if analytics:
        if stones:
            _print_sizes("Stone list size after blinks: ", blink_analytics(stones, blinks))
        else:
            for digit in range(10):
                _print_sizes(
                    f"[{digit}] Stone list size after blinks: ",
                    blink_analytics(str(digit), blinks),
                )
        return

    after_25, after_75 = solve(text)
    print(f"Stone list size after 25 blinks: {after_25}")
    print(f"Stone list size after 75 blinks: {after_75}")