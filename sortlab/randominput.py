"""Reproducible random input for the sorting benchmarks.

The numbers follow the additive feedback generator of the common C library
``rand()``, so a given seed always yields the same sequence.
"""

from __future__ import annotations

import argparse
import itertools
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

_MASK = 0xFFFFFFFF
_PARK_MILLER_MODULUS = 2**31 - 1
_DISCARDED = 310


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return -quotient if a < 0 else quotient


def _rand_stream(seed: int) -> Iterator[int]:
    seed &= _MASK
    if seed == 0:
        seed = 1
    word = seed - 2**32 if seed >= 2**31 else seed
    state = [word]
    for _ in range(30):
        hi = _trunc_div(word, 127773)
        lo = word - hi * 127773
        word = 16807 * lo - 2836 * hi
        if word < 0:
            word += _PARK_MILLER_MODULUS
        state.append(word)
    state = [value & _MASK for value in state]
    state.extend(state[:3])
    window: deque[int] = deque(state, maxlen=34)

    def advance() -> int:
        value = (window[-31] + window[-3]) & _MASK
        window.append(value)
        return value

    for _ in range(_DISCARDED):
        advance()
    while True:
        yield advance() >> 1


def generate_numbers(count: int, seed: int = 1) -> list[int]:
    """Return *count* pseudo-random integers in ``[0, 2**31 - 1]``."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return list(itertools.islice(_rand_stream(seed), count))


def format_input(numbers: Iterable[int]) -> str:
    """Render a count line followed by one number per line."""
    values = [str(n) for n in numbers]
    return "\n".join([str(len(values)), *values]) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print a random benchmark input of the requested size."""
    parser = argparse.ArgumentParser(description="Generate random input for the sorters.")
    parser.add_argument("count", type=int, help="how many numbers to generate")
    parser.add_argument("--seed", type=int, default=1, help="generator seed (default: 1)")
    args = parser.parse_args(argv)
    try:
        numbers = generate_numbers(args.count, args.seed)
    except ValueError as exc:
        parser.error(str(exc))
    sys.stdout.write(format_input(numbers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())