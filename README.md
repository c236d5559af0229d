# advent

Solutions for the Advent of Code 2024 puzzles, days 1 to 13, usable as a
library or from the command line. The package has no dependencies beyond the
Python standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

The `advent` command takes a year, then a day, then the puzzle input:

```
advent 2024 day01 --input input.txt
```

Each day prints the answers to both parts of its puzzle. Common options:

- `-i`, `--input PATH` — the puzzle input file.
- `-v`, `--verbose` — more output; repeat for even more (`-vv`, `-vvv`).
  Days 3, 6, 7, 8 and 13 print extra detail when it is given; the others
  ignore it.

Some days take extra options:

- `day07` can take a single equation with `-e`/`--equation` instead of an
  input file; with neither, it prints nothing.
- `day11` has `-a`/`--analytics` to print how the stone count grows with each
  blink, `-s`/`--stones` for a starting stone list (without it, analytics are
  printed for each single stone 0 to 9), and `-b`/`--blinks` for the number of
  blinks (20 by default).
- `day11`, `day12` and `day13` run on empty input when no input file is given.

A file that cannot be read, or input that cannot be parsed, makes the command
print an error and exit with status 1.

Run `advent --help` or `advent 2024 --help` for the full list.

## Library

Each day lives in its own module under `advent.y2024`, from
`advent.y2024.day01` to `advent.y2024.day13`. Every day module offers
`solve(text)`, which returns the answers for both parts as a tuple, and
`run(text, ...)`, which prints them the way the command does. The parsing
functions and puzzle types behind them are public too:

```python
from advent.y2024 import day09

disk = day09.parse_disk("2333133121414131402")
disk.compact_files()
print(disk.calculate_checksum())  # 2858
```

Shared helpers:

- `advent.mathutils` — `Point2D`, `Size2D`, `PointPair` and integer helpers
  such as `prime_factors`, `int_pow`, `concatenate`, `digit_count` and
  `generate_unique_point_pairs`.
- `advent.parsing` — `parse_int_list` and
  `parse_int_list_removing_all_whitespace`, which pull integers out of text.
- `advent.containers` — `FIFO` and `Stack`; popping an empty one raises
  `IndexError`.

## What it does not cover

Only the 2024 puzzles for days 1 to 13 are included; there are no other
years and no later days. The package does not download puzzle inputs or
submit answers; you supply the input file yourself.