import pytest

from advent.mathutils import Point2D
from advent.y2024.day13 import ClawMachine, parse_claw_machines, solve

ONE = """Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400"""

TWO = ONE + """

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176"""

FOUR = TWO + """

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279"""

RAW = [
    ((8400, 5400), (94, 34), (22, 67)),
    ((12748, 12176), (26, 66), (67, 21)),
    ((7870, 6450), (17, 86), (84, 37)),
    ((18641, 10279), (69, 23), (27, 71)),
]

C = 10000000000000


def _machines(count, offset):
    return [
        ClawMachine(
            starting_position=Point2D(0, 0),
            prize_location=Point2D(prize[0] + offset, prize[1] + offset),
            movement_a=Point2D(*a),
            movement_b=Point2D(*b),
        )
        for prize, a, b in RAW[:count]
    ]


@pytest.mark.parametrize("text, count", [(ONE, 1), (TWO, 2), (FOUR, 4)])
def test_parse_claw_machines(text, count):
    assert parse_claw_machines(text, False) == _machines(count, 0)


@pytest.mark.parametrize("text, count", [(ONE, 1), (TWO, 2), (FOUR, 4)])
def test_parse_claw_machines_correction(text, count):
    assert parse_claw_machines(text, True) == _machines(count, C)


def _single(prize, a, b):
    return (
        f"Button A: X+{a[0]}, Y+{a[1]}\n"
        f"Button B: X+{b[0]}, Y+{b[1]}\n"
        f"Prize: X={prize[0]}, Y={prize[1]}"
    )


@pytest.mark.parametrize("index, cost", [(0, 280), (1, 0), (2, 200), (3, 0)])
def test_winning_prize_cost(index, cost):
    machines = parse_claw_machines(_single(*RAW[index]), False)
    assert machines[0].winning_prize_cost() == cost


def test_total_winnable_prize_cost():
    machines = parse_claw_machines(FOUR, False)
    assert sum(m.winning_prize_cost() for m in machines) == 480


@pytest.mark.parametrize(
    "text, cost",
    [
        (_single((12898, 9663), (17, 37), (47, 12)), 814_332_248_346),
        (_single(*RAW[0]), 0),
        (_single(*RAW[1]), 459_236_326_669),
        (_single(*RAW[2]), 0),
        (_single(*RAW[3]), 416_082_282_239),
    ],
)
def test_winning_prize_cost_corrected(text, cost):
    machines = parse_claw_machines(text, True)
    assert machines[0].winning_prize_cost() == cost


def test_total_winnable_prize_cost_corrected():
    machines = parse_claw_machines(FOUR, True)
    assert sum(m.winning_prize_cost() for m in machines) == 875_318_608_908


def test_solve():
    assert solve(FOUR) == (480, 875_318_608_908)


def test_parallel_buttons_are_unsolvable():
    machine = ClawMachine(
        prize_location=Point2D(10, 10),
        movement_a=Point2D(1, 1),
        movement_b=Point2D(2, 2),
    )
    assert machine.winning_prize_cost() == 0