from advent.y2024.day03 import (
    MulInstruction,
    scan_enabled_mul_instructions,
    scan_mul_instructions,
    solve,
    sum_multiplication_instructions,
)

PART1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
PART2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_scan_mul_instructions():
    assert scan_mul_instructions(PART1) == [
        MulInstruction(2, 4),
        MulInstruction(5, 5),
        MulInstruction(11, 8),
        MulInstruction(8, 5),
    ]


def test_scan_rejects_long_numbers():
    assert scan_mul_instructions("mul(1234,5)mul(123,4)") == [MulInstruction(123, 4)]


def test_scan_enabled_mul_instructions():
    assert scan_enabled_mul_instructions(PART2) == [
        MulInstruction(2, 4),
        MulInstruction(8, 5),
    ]


def test_enabled_state_carries_across_lines():
    text = "don't()mul(1,2)\nmul(3,4)do()\nmul(5,6)"
    assert scan_enabled_mul_instructions(text) == [MulInstruction(5, 6)]


def test_sum_multiplication_instructions():
    instructions = [
        MulInstruction(2, 4),
        MulInstruction(5, 5),
        MulInstruction(11, 8),
        MulInstruction(8, 5),
    ]
    assert sum_multiplication_instructions(instructions) == 161


def test_solve():
    assert solve(PART1) == (161, 161)
    assert solve(PART2) == (161, 48)


def test_verbose_output_lists_multiplications(capsys):
    scan_enabled_mul_instructions(PART2, verbosity=1)
    out = capsys.readouterr().out
    assert "2*4" in out
    assert "5*5" in out
    assert out.endswith("\n")