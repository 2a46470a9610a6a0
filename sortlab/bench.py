"""Time a sorting algorithm on integers read from standard input."""

from __future__ import annotations

import argparse
import itertools
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, TextIO

from sortlab.insertion import insertion_sort
from sortlab.merge import merge_sort, merge_sort_bottom_up, merge_sort_buffered

SortFunction = Callable[[list[Any]], None]

ALGORITHMS: dict[str, SortFunction] = {
    "insertion": insertion_sort,
    "merge": merge_sort,
    "merge-buffered": merge_sort_buffered,
    "merge-bottom-up": merge_sort_bottom_up,
}


@dataclass(frozen=True)
class SortResult:
    """The sorted items and how long sorting took, in microseconds."""

    items: list[Any]
    elapsed_us: int

    @property
    def ok(self) -> bool:
        """Whether the items came out in non-decreasing order."""
        return is_sorted(self.items)


def read_numbers(stream: TextIO) -> list[int]:
    """Read a count followed by that many whitespace-separated integers."""
    tokens = stream.read().split()
    if not tokens:
        raise ValueError("input is empty: expected a count")
    count = int(tokens[0])
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    values = tokens[1 : count + 1]
    if len(values) < count:
        raise ValueError(f"expected {count} numbers, got {len(values)}")
    return [int(token) for token in values]


def is_sorted(items: Iterable[Any]) -> bool:
    """Return True if every item is ``<=`` the one after it."""
    return all(a <= b for a, b in itertools.pairwise(items))


def time_sort(algorithm: SortFunction, items: Iterable[Any]) -> SortResult:
    """Sort a copy of *items* with *algorithm* and measure the elapsed time."""
    data = list(items)
    started = time.perf_counter_ns()
    algorithm(data)
    elapsed_us = (time.perf_counter_ns() - started) // 1000
    return SortResult(data, elapsed_us)


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers from stdin, sort them, report the time and verify the order."""
    parser = argparse.ArgumentParser(description="Time a sorting algorithm.")
    parser.add_argument(
        "--algorithm",
        choices=sorted(ALGORITHMS),
        default="merge",
        help="sorting algorithm to time (default: merge)",
    )
    args = parser.parse_args(argv)
    try:
        numbers = read_numbers(sys.stdin)
    except ValueError as exc:
        parser.error(str(exc))
    result = time_sort(ALGORITHMS[args.algorithm], numbers)
    print(f"Tempo para ordenar (us): {result.elapsed_us}", file=sys.stderr)
    if not result.ok:
        print("result is not sorted", file=sys.stderr)
        return 1
    print("ok")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())