# sortlab

Small, readable implementations of classic comparison sorts, together with
the tools to feed them data and time them:

- **Insertion sort** (`sortlab.insertion.insertion_sort`) for any list of
  items that support `<`. It is stable.
- **Merge sort** (`sortlab.merge`) in three shapes:
  - `merge_sort`: the plain recursive version; every merge builds its own
    temporary list.
  - `merge_sort_buffered`: the recursive version sharing one scratch buffer,
    allocated once.
  - `merge_sort_bottom_up`: the iterative version that merges runs of width
    1, 2, 4, ... with one shared buffer.
- A generator of reproducible random input (`sortlab.randominput`), and a
  timing harness (`sortlab.bench`) that reads such input, sorts it, checks
  the result and reports how long sorting took.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the sorts

All sorts work in place and return `None`.

```python
from sortlab.insertion import insertion_sort
from sortlab.merge import merge_sort, merge_sort_buffered, merge_sort_bottom_up

numbers = [5, 9, 10, 2, 4]
insertion_sort(numbers)
print(numbers)          # [2, 4, 5, 9, 10]
```

The merge sorts take an optional half-open range `[start, stop)`, so part
of a list can be sorted while the rest is left alone; `stop` defaults to the
length of the list. A range outside the list raises `ValueError`.

```python
values = [9, 3, 7, 1, 0]
merge_sort_bottom_up(values, 1, 4)
print(values)           # [9, 1, 3, 7, 0]
```

`merge_sort` and `merge(items, start, mid, stop)` take a keyword-only
`stable` flag (default `True`). When it is true, equal items are taken from
the left run first, so the sort is stable; when false, a left item is taken
only if it is strictly smaller than the right one. `merge_sort_buffered`
and `merge_sort_bottom_up` always merge stably.

Anything with a `<` operator can be sorted. `sortlab.people.Person` is a
dataclass with `name` and `cpf` fields that orders people by name only and
prints as `name cpf`:

```python
from sortlab.insertion import insertion_sort
from sortlab.people import format_people, sample_people

people = sample_people()
insertion_sort(people)
print(format_people(people), end="")
```

`sortlab.people.demo(algorithm)` sorts the integers `5 9 10 2 4` and the
sample people with the given sort function and returns the report as text.

## Random input

`sortlab.randominput.generate_numbers(count, seed=1)` returns `count`
pseudo-random integers in `[0, 2**31 - 1]`. The sequence depends only on the
seed, so the same seed always gives the same numbers. A negative count
raises `ValueError`. `format_input(numbers)` renders the count on the first
line followed by one number per line.

## Timing

`sortlab.bench` provides:

- `read_numbers(stream)`: reads a count followed by that many
  whitespace-separated integers; extra tokens are ignored. Empty input, a
  negative count or too few numbers raise `ValueError`.
- `is_sorted(items)`: whether every item is `<=` the next.
- `time_sort(algorithm, items)`: sorts a copy of the items and returns a
  `SortResult` with the sorted `items`, `elapsed_us` (microseconds) and an
  `ok` property telling whether the result is in order.

## Command-line tools

Show a sort at work on a few integers and a list of people (the algorithm
is `insertion` or `merge`, default `insertion`):

```
sortlab-demo
sortlab-demo merge
```

Write random input: the count first, then one number per line. `--seed`
chooses the seed (default 1):

```
sortlab-random 100000 > input.txt
sortlab-random 100000 --seed 7 > input.txt
```

Sort that input and time it. The elapsed time goes to standard error as
`Tempo para ordenar (us): <n>`, and `ok` is printed once the result has
been checked to be in order (otherwise the command exits with status 1).
`--algorithm` chooses `insertion`, `merge` (the default),
`merge-buffered` or `merge-bottom-up`:

```
sortlab-bench < input.txt
sortlab-bench --algorithm insertion < input.txt
```

Run each command with `--help` to see its options.