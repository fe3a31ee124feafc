"""Command line entry: sort integer files in parallel and merge the results."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from os import PathLike

from multisort.merge import merge_sorted
from multisort.worker import WorkerTask

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """Raised when the command is invoked with invalid arguments."""


def distribute_files(files: Sequence[str], num_workers: int) -> list[list[str]]:
    """Deal files round-robin to at most ``num_workers`` workers.

    No more workers are used than there are files.
    """
    if num_workers <= 0:
        raise UsageError("Invalid number of threads")
    workers = min(num_workers, len(files))
    return [list(files[start::workers]) for start in range(workers)]


def sort_files(
    files: Sequence[str], num_workers: int
) -> tuple[list[int], list[WorkerTask]]:
    """Sort the integers of all files using parallel workers.

    Returns the merged sorted values and the worker tasks that ran.
    """
    tasks = [WorkerTask(files=batch) for batch in distribute_files(files, num_workers)]
    if not tasks:
        return [], tasks
    with ThreadPoolExecutor(max_workers=len(tasks)) as pool:
        runs = list(pool.map(WorkerTask.run, tasks))
    return merge_sorted(runs), tasks


def write_values(path: str | PathLike[str], values: Iterable[int]) -> None:
    """Write one integer per line to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{value}\n" for value in values)


def _parse_count(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``THREADS FILE... FLAG OUTPUT``; the next-to-last argument is ignored."""
    start = time.perf_counter()
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        if len(args) < 4:
            raise UsageError("Incorrect number of arguments")
        requested = _parse_count(args[0])
        if requested <= 0:
            raise UsageError("Invalid number of threads")
        inputs = args[1:-2]
        output = args[-1]
        values, tasks = sort_files(inputs, requested)
    except UsageError as error:
        print(error)
        return 1

    try:
        write_values(output, values)
    except OSError:
        print("Error opening output file")
        return 1

    for index in range(requested):
        if index < len(tasks):
            print(
                f"Thread {index} execution time: {tasks[index].elapsed:.9f} seconds."
            )
        else:
            print(f"Thread {index} did not run.")

    print(f"Total execution time: {time.perf_counter() - start:.9f} seconds")
    return 0