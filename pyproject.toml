[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent"
version = "0.1.0"
description = "Solutions for Advent of Code 2024 puzzles, with a command-line runner"
requires-python = ">=3.10"
keywords = ["advent-of-code", "puzzles", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
advent = "advent.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
