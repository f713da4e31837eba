"""Array problems solved with two or three moving indices."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any


def max_area(heights: Sequence[int]) -> int:
    """Return the most water held between two lines of ``heights``.

    The area between two lines is their distance times the shorter height.
    Fewer than two lines hold nothing, so the result is 0.
    """
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        width = right - left
        height = min(heights[left], heights[right])
        best = max(best, width * height)
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass.

    Anything that is neither 0 nor 1 is treated as a 2.
    """
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[high], nums[mid] = nums[mid], nums[high]
            high -= 1


def merge_sorted(
    a: MutableSequence[Any], m: int, b: Sequence[Any], n: int
) -> None:
    """Merge the first ``n`` items of sorted ``b`` into sorted ``a`` in place.

    ``a`` holds ``m`` sorted items followed by room for ``n`` more. Raises
    ValueError if the counts are negative or do not fit the sequences.
    """
    if m < 0 or n < 0:
        raise ValueError("counts must not be negative")
    if len(a) < m + n:
        raise ValueError(f"a has room for {len(a)} items, needs {m + n}")
    if len(b) < n:
        raise ValueError(f"b holds {len(b)} items, fewer than {n}")
    idx = m + n - 1
    i, j = m - 1, n - 1
    while i >= 0 and j >= 0:
        if a[i] >= b[j]:
            a[idx] = a[i]
            i -= 1
        else:
            a[idx] = b[j]
            j -= 1
        idx -= 1
    while j >= 0:
        a[idx] = b[j]
        j -= 1
        idx -= 1


def next_permutation(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` in place into the next lexicographic permutation.

    The last permutation (non-increasing order) wraps round to the first.
    """
    size = len(values)
    pivot = next(
        (i for i in range(size - 2, -1, -1) if values[i] < values[i + 1]), None
    )
    if pivot is None:
        values.reverse()
        return
    swap_with = next(
        i for i in range(size - 1, pivot, -1) if values[i] > values[pivot]
    )
    values[pivot], values[swap_with] = values[swap_with], values[pivot]
    values[pivot + 1:] = values[pivot + 1:][::-1]


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell.

    Returns 0 when no sale makes a profit. Raises ValueError on no prices.
    """
    if not prices:
        raise ValueError("max_profit needs at least one price")
    best = 0
    best_buy = prices[0]
    for price in prices[1:]:
        if price > best_buy:
            best = max(best, price - best_buy)
        best_buy = min(best_buy, price)
    return best