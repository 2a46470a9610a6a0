from dataclasses import dataclass, field

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortlab.merge import merge, merge_sort, merge_sort_bottom_up, merge_sort_buffered


@dataclass
class Keyed:
    key: int
    tag: int = field(compare=False)

    def __lt__(self, other):
        return self.key < other.key


@given(values=st.lists(st.integers()))
def test_matches_builtin_sort(values):
    recursive = list(values)
    merge_sort(recursive)
    buffered = list(values)
    merge_sort_buffered(buffered)
    bottom_up = list(values)
    merge_sort_bottom_up(bottom_up)
    expected = sorted(values)
    assert recursive == expected
    assert buffered == expected
    assert bottom_up == expected


@given(keys=st.lists(st.integers(min_value=0, max_value=3)))
def test_stable_variants(keys):
    expected = [
        r.tag for r in sorted((Keyed(k, i) for i, k in enumerate(keys)), key=lambda r: r.key)
    ]

    recursive = [Keyed(k, i) for i, k in enumerate(keys)]
    merge_sort(recursive)
    assert [r.tag for r in recursive] == expected

    buffered = [Keyed(k, i) for i, k in enumerate(keys)]
    merge_sort_buffered(buffered)
    assert [r.tag for r in buffered] == expected

    bottom_up = [Keyed(k, i) for i, k in enumerate(keys)]
    merge_sort_bottom_up(bottom_up)
    assert [r.tag for r in bottom_up] == expected


@given(st.lists(st.integers()))
def test_unstable_merge_sort_still_sorts(values):
    items = list(values)
    merge_sort(items, stable=False)
    assert items == sorted(values)


def test_sorts_only_the_given_range():
    original = [9, 8, 7, 6, 5, 4, 3]
    expected = original[:2] + sorted(original[2:5]) + original[5:]

    recursive = list(original)
    merge_sort(recursive, 2, 5)
    assert recursive == expected

    buffered = list(original)
    merge_sort_buffered(buffered, 2, 5)
    assert buffered == expected

    bottom_up = list(original)
    merge_sort_bottom_up(bottom_up, 2, 5)
    assert bottom_up == expected


def test_invalid_range_raises():
    with pytest.raises(ValueError):
        merge_sort([1, 2], 0, 3)
    with pytest.raises(ValueError):
        merge_sort_buffered([1, 2], 0, 3)
    with pytest.raises(ValueError):
        merge_sort_bottom_up([1, 2], 0, 3)


def test_merge_two_runs():
    items = [1, 4, 8, 2, 3, 9]
    merge(items, 0, 3, 6)
    assert items == sorted([1, 4, 8, 2, 3, 9])


def test_merge_tie_order_depends_on_stability():
    first, second = Keyed(1, 0), Keyed(1, 1)
    stable = [first, second]
    merge(stable, 0, 1, 2, stable=True)
    assert [r.tag for r in stable] == [0, 1]
    unstable = [first, second]
    merge(unstable, 0, 1, 2, stable=False)
    assert [r.tag for r in unstable] == [1, 0]


def test_merge_rejects_bad_runs():
    with pytest.raises(ValueError):
        merge([1, 2, 3], 0, 3, 2)


def test_empty_range_is_noop():
    items = [3, 1, 2]
    merge_sort_bottom_up(items, 1, 1)
    assert items == [3, 1, 2]