"""Classic comparison sorts and a helper that times them.

Every sort takes any iterable and returns a new ascending list; the input
is never modified.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "selection_sort",
    "quick_sort",
    "heap_sort",
    "merge_sort",
    "insertion_sort",
    "timed_sort",
]


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly moving the smallest remaining item to the front."""
    items = list(values)
    size = len(items)
    for position in range(size - 1):
        smallest = min(range(position, size), key=items.__getitem__)
        items[position], items[smallest] = items[smallest], items[position]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(values)
    for position in range(1, len(items)):
        key = items[position]
        slot = position - 1
        while slot >= 0 and items[slot] > key:
            items[slot + 1] = items[slot]
            slot -= 1
        items[slot + 1] = key
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    """Lomuto partition around the last element; return the pivot's index."""
    pivot = items[high]
    boundary = low - 1
    for current in range(low, high):
        if items[current] <= pivot:
            boundary += 1
            items[boundary], items[current] = items[current], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort with an in-place binary max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def timed_sort(
    sort: Callable[[Iterable[T]], list[T]], values: Iterable[T]
) -> tuple[list[T], float]:
    """Run ``sort`` on ``values`` and return the result with CPU seconds used."""
    items = list(values)
    start = time.process_time()
    result = sort(items)
    elapsed = time.process_time() - start
    return result, elapsed