"""Advent of Code 2024 puzzle solutions, shared helpers and a command-line runner."""

__version__ = "0.1.0"