"""Worker that reads integer files and sorts what it read."""

from __future__ import annotations

import re
import sys
import time
from dataclasses import dataclass, field
from os import PathLike

from multisort.quicksort import sort_in_place

_INTEGER = re.compile(r"\s*([+-]?\d+)")


def read_integers(path: str | PathLike[str]) -> list[int]:
    """Read whitespace-separated integers from a file.

    Reading stops at the first token that does not start with an integer,
    as a formatted ``%d`` scan would.
    """
    with open(path, encoding="utf-8", errors="replace") as handle:
        text = handle.read()

    numbers = []
    position = 0
    while (match := _INTEGER.match(text, position)) is not None:
        numbers.append(int(match.group(1)))
        position = match.end()
    return numbers


@dataclass
class WorkerTask:
    """A batch of files handled by one worker, and what came of it."""

    files: list[str] = field(default_factory=list)
    values: list[int] = field(default_factory=list)
    elapsed: float = 0.0
    failed: list[str] = field(default_factory=list)

    @property
    def total_values(self) -> int:
        return len(self.values)

    def run(self) -> list[int]:
        """Read every assigned file, sort the values and return them.

        Files that cannot be opened are reported on stderr and skipped.
        """
        start = time.perf_counter()
        values: list[int] = []
        for name in self.files:
            try:
                values.extend(read_integers(name))
            except OSError:
                print(f"Error opening file {name}", file=sys.stderr)
                self.failed.append(name)
        sort_in_place(values)
        self.values = values
        self.elapsed = time.perf_counter() - start
        return values