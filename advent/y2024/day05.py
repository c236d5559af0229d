"""2024 day 5: Print Queue."""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field

from advent.parsing import parse_int_list

_RULE_RE = re.compile(r"([0-9]+)\|([0-9]+)")


@dataclass
class OrderingRules:
    """For each page, the sorted pages that must be printed before it."""

    precursor_map: dict[int, list[int]] = field(default_factory=dict)

    def parse_ordering_rule(self, line: str) -> None:
        """Record a rule of the form ``X|Y``; raise ValueError otherwise."""
        match = _RULE_RE.search(line)
        if match is None:
            raise ValueError(f"invalid ordering rule '{line}'")
        precursor, page = int(match.group(1)), int(match.group(2))
        bisect.insort(self.precursor_map.setdefault(page, []), precursor)

    def get_page_precursors(self, page: int) -> list[int]:
        return self.precursor_map.get(page, [])


@dataclass
class Update:
    """The pages of one update, in print order."""

    pages: list[int]
    page_map: set[int] = field(init=False)

    def __post_init__(self) -> None:
        self.page_map = set(self.pages)

    def page_in_update(self, page: int) -> bool:
        return page in self.page_map

    def middle_page(self) -> int | None:
        """The middle page, or None when the page count is zero or even."""
        if not self.pages or len(self.pages) % 2 == 0:
            return None
        return self.pages[len(self.pages) // 2]

    def valid_order(self, rules: OrderingRules) -> bool:
        """True when every page follows all of its precursors in this update."""
        seen: set[int] = set()
        for page in self.pages:
            if any(
                self.page_in_update(precursor) and precursor not in seen
                for precursor in rules.get_page_precursors(page)
            ):
                return False
            seen.add(page)
        return True

    def fix_order(self, rules: OrderingRules) -> None:
        """Reorder the pages in place until all rules are satisfied."""
        page_list = list(self.pages)
        while True:
            seen: set[int] = set()
            new_list: list[int] = []
            reordered = False
            for page in page_list:
                if page in seen:
                    continue
                for precursor in rules.get_page_precursors(page):
                    if self.page_in_update(precursor) and precursor not in seen:
                        new_list.append(precursor)
                        seen.add(precursor)
                        reordered = True
                new_list.append(page)
                seen.add(page)
            if not reordered:
                self.pages[: len(page_list)] = page_list
                return
            page_list[: len(new_list)] = new_list


def parse_update(line: str) -> Update:
    """Parse a comma-separated list of page numbers."""
    return Update(parse_int_list(line))


def solve(text: str) -> tuple[int, int]:
    """Return (middle-page sum of valid updates, of corrected invalid updates)."""
    rules = OrderingRules()
    reading_rules = True
    valid_total = 0
    fixed_total = 0
    for line in text.split("\n"):
        if line == "":
            reading_rules = False
        if reading_rules:
            rules.parse_ordering_rule(line)
            continue
        update = parse_update(line)
        if update.valid_order(rules):
            valid_total += update.middle_page() or 0
        else:
            update.fix_order(rules)
            fixed_total += update.middle_page() or 0
    return valid_total, fixed_total


def run(text: str, verbosity: int = 0) -> None:
    valid_total, fixed_total = solve(text)
    print(f"Valid order middle page number sum: {valid_total}")
    print(f"Invalid order middle page number sum: {fixed_total}")