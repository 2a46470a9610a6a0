"""Merge sort variants: top-down, top-down with one shared buffer, bottom-up."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence
from typing import Any


def _resolve(items: MutableSequence[Any], start: int, stop: int | None) -> tuple[int, int]:
    if stop is None:
        stop = len(items)
    if not 0 <= start <= stop <= len(items):
        raise ValueError(
            f"invalid range [{start}, {stop}) for a sequence of length {len(items)}"
        )
    return start, stop


def _merged(
    items: MutableSequence[Any], start: int, mid: int, stop: int, stable: bool
) -> Iterator[Any]:
    """Yield the merge of the sorted runs ``items[start:mid]`` and ``items[mid:stop]``.

    A stable merge takes the left item on ties; an unstable one takes the right.
    """
    i, j = start, mid
    while i < mid and j < stop:
        left, right = items[i], items[j]
        take_left = not (right < left) if stable else left < right
        if take_left:
            yield left
            i += 1
        else:
            yield right
            j += 1
    yield from (items[k] for k in range(i, mid))
    yield from (items[k] for k in range(j, stop))


def merge(
    items: MutableSequence[Any], start: int, mid: int, stop: int, *, stable: bool = True
) -> None:
    """Merge the sorted runs ``items[start:mid]`` and ``items[mid:stop]`` in place."""
    if not 0 <= start <= mid <= stop <= len(items):
        raise ValueError(
            f"invalid runs [{start}, {mid}) and [{mid}, {stop}) "
            f"for a sequence of length {len(items)}"
        )
    items[start:stop] = list(_merged(items, start, mid, stop, stable))


def _top_down(items: MutableSequence[Any], start: int, stop: int, stable: bool) -> None:
    if start < stop - 1:
        mid = (start + stop) // 2
        _top_down(items, start, mid, stable)
        _top_down(items, mid, stop, stable)
        items[start:stop] = list(_merged(items, start, mid, stop, stable))


def merge_sort(
    items: MutableSequence[Any],
    start: int = 0,
    stop: int | None = None,
    *,
    stable: bool = True,
) -> None:
    """Sort ``items[start:stop]`` in place by recursive merge sort.

    Each merge builds its own temporary list.
    """
    start, stop = _resolve(items, start, stop)
    _top_down(items, start, stop, stable)


def _merge_into(
    items: MutableSequence[Any], start: int, mid: int, stop: int, buffer: list[Any]
) -> None:
    size = stop - start
    for k, value in enumerate(_merged(items, start, mid, stop, True)):
        buffer[k] = value
    items[start:stop] = buffer[:size]


def _top_down_buffered(
    items: MutableSequence[Any], start: int, stop: int, buffer: list[Any]
) -> None:
    if start < stop - 1:
        mid = (start + stop) // 2
        _top_down_buffered(items, start, mid, buffer)
        _top_down_buffered(items, mid, stop, buffer)
        _merge_into(items, start, mid, stop, buffer)


def merge_sort_buffered(
    items: MutableSequence[Any], start: int = 0, stop: int | None = None
) -> None:
    """Sort ``items[start:stop]`` in place by recursive merge sort.

    A single scratch buffer is allocated once and shared by every merge.
    """
    start, stop = _resolve(items, start, stop)
    buffer: list[Any] = [None] * (stop - start)
    _top_down_buffered(items, start, stop, buffer)


def merge_sort_bottom_up(
    items: MutableSequence[Any], start: int = 0, stop: int | None = None
) -> None:
    """Sort ``items[start:stop]`` in place by iterative bottom-up merge sort.

    Runs of width 1, 2, 4, ... are merged pairwise using one shared buffer.
    """
    start, stop = _resolve(items, start, stop)
    size = stop - start
    buffer: list[Any] = [None] * size
    width = 1
    while width < size:
        for low in range(start, stop - 1, 2 * width):
            mid = min(low + width, stop)
            high = min(low + 2 * width, stop)
            _merge_into(items, low, mid, high, buffer)
        width *= 2