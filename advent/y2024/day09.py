"""2024 day 9: Disk Fragmenter."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import groupby

UNALLOCATED = -1


@dataclass
class File:
    """A file and the disk blocks it occupies."""

    id: int
    size: int = 0
    blocks: list[int] = field(default_factory=list)


@dataclass
class Disk:
    """A disk layout: its files and which file owns each block."""

    size: int = 0
    files: list[File] = field(default_factory=list)
    block_allocations: list[int] = field(default_factory=list)

    def describe(self) -> str:
        """Render each block as its file id, or ``.`` when free."""
        return "".join(
            "." if block == UNALLOCATED else str(block) for block in self.block_allocations
        )

    def _next_free_block(self, start: int) -> int | None:
        # The final block is never considered free space to move into.
        for index in range(start, len(self.block_allocations) - 1):
            if self.block_allocations[index] == UNALLOCATED:
                return index
        return None

    def compact_blocks(self) -> None:
        """Move file blocks one at a time from the end into the leftmost gaps."""
        free = self._next_free_block(0)
        if free is None:
            return
        for file in reversed(self.files[1:]):
            for index in reversed(range(len(file.blocks))):
                block = file.blocks[index]
                if free > block:
                    return
                self.block_allocations[free] = file.id
                self.block_allocations[block] = UNALLOCATED
                file.blocks[index] = free
                free = self._next_free_block(free + 1)
                if free is None:
                    return

    def _free_ranges(self) -> Iterator[tuple[int, int]]:
        """Yield (start, length) of each run of free blocks, last block excluded."""
        scanned = enumerate(self.block_allocations[:-1])
        for is_free, run in groupby(scanned, key=lambda item: item[1] == UNALLOCATED):
            if is_free:
                indices = [index for index, _ in run]
                yield indices[0], len(indices)

    def compact_files(self) -> None:
        """Move each whole file, highest id first, into the leftmost gap that fits."""
        for file in reversed(self.files[1:]):
            if not file.blocks:
                continue
            start = next(
                (s for s, length in self._free_ranges() if file.size <= length), None
            )
            if start is None or start > file.blocks[0]:
                continue
            old_start = file.blocks[0]
            for offset in range(file.size):
                self.block_allocations[start + offset] = file.id
            for offset in range(file.size):
                self.block_allocations[old_start + offset] = UNALLOCATED
            file.blocks = [start + offset for offset in range(file.size)]

    def calculate_checksum(self) -> int:
        """Sum of position times file id over all allocated blocks."""
        return sum(
            position * file_id
            for position, file_id in enumerate(self.block_allocations)
            if file_id != UNALLOCATED
        )


def parse_disk(text: str) -> Disk:
    """Parse a dense disk map of alternating file and free-space lengths.

    Surrounding whitespace is ignored; any other non-digit raises ValueError.
    """
    digits = [int(char) for char in text.strip()]
    disk = Disk()
    for file_id, index in enumerate(range(0, len(digits), 2)):
        allocation = digits[index]
        free = digits[index + 1] if index + 1 < len(digits) else 0
        start = len(disk.block_allocations)
        disk.files.append(
            File(id=file_id, size=allocation, blocks=list(range(start, start + allocation)))
        )
        disk.block_allocations.extend([file_id] * allocation)
        disk.block_allocations.extend([UNALLOCATED] * free)
    disk.size = len(disk.block_allocations)
    return disk


def solve(text: str) -> tuple[int, int]:
    """Return checksums after block compaction and after file compaction."""
    by_blocks = parse_disk(text)
    by_blocks.compact_blocks()
    by_files = parse_disk(text)
    by_files.compact_files()
    return by_blocks.calculate_checksum(), by_files.calculate_checksum()


def run(text: str, verbosity: int = 0) -> None:
    blocks_checksum, files_checksum = solve(text)
    print(f"Filesystem checksum after block compaction: {blocks_checksum}")
    print(f"Filesystem checksum after file compaction: {files_checksum}")