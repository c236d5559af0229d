import pytest

from advent.y2024.day11 import (
    StoneList,
    blink_analytics,
    parse_stones,
    solve,
    split_digits,
)


def test_parse_stones():
    assert parse_stones("0 1 10 99 999") == StoneList([0, 1, 10, 99, 999])


@pytest.mark.parametrize(
    "number, left, right",
    [
        (12, 1, 2),
        (1212, 12, 12),
        (12345678, 1234, 5678),
        (1001, 10, 1),
    ],
)
def test_split_digits(number, left, right):
    assert split_digits(number) == (left, right)


@pytest.mark.parametrize(
    "text, blinks, expected",
    [
        ("0 1 10 99 999", 1, [1, 2024, 1, 0, 9, 9, 2021976]),
        (
            "125 17",
            6,
            [
                2097446912, 14168, 4048, 2, 0, 2, 4, 40, 48, 2024, 40, 48,
                80, 96, 2, 8, 6, 7, 6, 0, 3, 2,
            ],
        ),
    ],
)
def test_blink(text, blinks, expected):
    stone_list = parse_stones(text)
    for _ in range(blinks):
        stone_list.blink()
    assert stone_list.stones == expected


def test_blink_analytics_tracks_list_sizes():
    sizes = blink_analytics("125 17", 6)
    assert len(sizes) == 6
    assert sizes[-1] == 22


def test_analytics_matches_simulation():
    stone_list = parse_stones("0 1 10 99 999")
    expected = []
    for _ in range(5):
        stone_list.blink()
        expected.append(len(stone_list.stones))
    assert blink_analytics("0 1 10 99 999", 5) == expected


def test_solve_agrees_with_simulation_for_25_blinks():
    stone_list = parse_stones("125 17")
    for _ in range(25):
        stone_list.blink()
    after_25, after_75 = solve("125 17")
    assert after_25 == len(stone_list.stones)
    assert after_75 > after_25


def test_solve_empty_input_has_no_stones():
    assert solve("") == (0, 0)