"""Extraction of integers from puzzle text."""

import re

_INT_RE = re.compile(r"-?[0-9]+")


def parse_int_list(line: str) -> list[int]:
    """Return every (possibly negative) integer in ``line``, in order."""
    return [int(match) for match in _INT_RE.findall(line)]


def parse_int_list_removing_all_whitespace(line: str) -> list[int]:
    """Like :func:`parse_int_list`, but with all whitespace removed first."""
    return parse_int_list("".join(line.split()))