"""Classic quadratic in-place sorting algorithms."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` ascending in place with bubble sort.

    The sort is stable. It stops early once a pass makes no swap.
    """
    size = len(values)
    for done in range(size - 1):
        swapped = False
        for j in range(size - done - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            return


def insertion_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` ascending in place with insertion sort (stable)."""
    for i in range(1, len(values)):
        current = values[i]
        prev = i - 1
        while prev >= 0 and values[prev] > current:
            values[prev + 1] = values[prev]
            prev -= 1
        values[prev + 1] = current


def selection_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` ascending in place with selection sort (not stable)."""
    size = len(values)
    for i in range(size - 1):
        smallest_idx = min(range(i, size), key=values.__getitem__)
        values[i], values[smallest_idx] = values[smallest_idx], values[i]


def format_array(values: Iterable[Any]) -> str:
    """Render the elements separated by single spaces."""
    return " ".join(str(value) for value in values)