"""Advent of Code 2024 solutions for days 1 to 13, one module per day."""