"""Insertion sort over mutable sequences whose items support ``<``."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort *items* in place, keeping equal items in their original order.

    Only the ``<`` operator of the items is used.  The prefix before the
    item being inserted is always sorted; the item is shifted left past
    every element it is strictly smaller than.
    """
    for i in range(1, len(items)):
        value = items[i]
        j = i
        while j > 0 and value < items[j - 1]:
            items[j] = items[j - 1]
            j -= 1
        items[j] = value