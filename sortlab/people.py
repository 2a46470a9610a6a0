"""Sorting records of people by name with the generic sorting algorithms."""

from __future__ import annotations

import argparse
import functools
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from sortlab.insertion import insertion_sort
from sortlab.merge import merge_sort

SortFunction = Callable[[list[Any]], None]


@dataclass
class Person:
    """A person ordered by name only."""

    name: str
    cpf: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.name < other.name

    def __str__(self) -> str:
        return f"{self.name} {self.cpf}"


def sample_people() -> list[Person]:
    """Return the fixed list of people used by the demonstration."""
    return [
        Person("Teste da Silva", 200),
        Person("Jacare da UFV", 100),
        Person("Capivaristo dos Lagos", 300),
        Person("Arthur Bernardes", 900),
        Person("Ubirajara Fernandes Vieira", 1000),
    ]


def format_people(people: Iterable[Person]) -> str:
    """Render one ``name cpf`` line per person."""
    return "".join(f"{person}\n" for person in people)


def demo(algorithm: SortFunction) -> str:
    """Sort a fixed list of integers and the sample people; return the report."""
    numbers = [5, 9, 10, 2, 4]
    people = sample_people()
    algorithm(numbers)
    algorithm(people)
    lines = ["ordenando inteiros", *(str(n) for n in numbers), "ordenando pessoas"]
    return "\n".join(lines) + "\n" + format_people(people)


_ALGORITHMS: dict[str, SortFunction] = {
    "insertion": insertion_sort,
    "merge": functools.partial(merge_sort, stable=False),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration with the chosen algorithm."""
    parser = argparse.ArgumentParser(description="Sort integers and people by name.")
    parser.add_argument(
        "algorithm",
        nargs="?",
        choices=sorted(_ALGORITHMS),
        default="insertion",
        help="sorting algorithm to use (default: insertion)",
    )
    args = parser.parse_args(argv)
    print(demo(_ALGORITHMS[args.algorithm]), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())