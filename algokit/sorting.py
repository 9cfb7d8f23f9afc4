"""Sorting algorithms that return a new ascending list."""

from collections.abc import Iterable
from typing import Any


def _check_non_negative(values: list[int]) -> None:
    if any(value < 0 for value in values):
        raise ValueError("values must be non-negative integers")


def bucket_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by dropping each into a bucket of its own value."""
    items = list(values)
    if not items:
        return []
    _check_non_negative(items)
    bins: list[list[int]] = [[] for _ in range(max(items) + 1)]
    for value in items:
        bins[value].append(value)
    return [value for bucket in bins for value in reversed(bucket)]


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting how often each value occurs."""
    items = list(values)
    if not items:
        return []
    _check_non_negative(items)
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def cycle_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by rotating each cycle of the permutation into place."""
    items = list(values)
    n = len(items)

    def _position(start: int, element: Any) -> int:
        pos = start + sum(1 for other in items[start + 1:] if other < element)
        while element == items[pos]:
            pos += 1
        return pos

    for start in range(n - 1):
        element = items[start]
        pos = start + sum(1 for other in items[start + 1:] if other < element)
        if pos == start:
            continue
        while element == items[pos]:
            pos += 1
        items[pos], element = element, items[pos]

        while pos != start:
            pos = _position(start, element)
            if element != items[pos]:
                items[pos], element = element, items[pos]
    return items


def _sift_down(heap: list[Any], index: int, size: int) -> None:
    """Restore the max-heap order below ``index`` in the 1-based ``heap``."""
    last = size - 1
    while True:
        left, right = 2 * index, 2 * index + 1
        largest = index
        if left <= last and heap[left] > heap[index]:
            largest = left
        if right <= last and heap[right] > heap[largest]:
            largest = right
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    heap: list[Any] = [None, *values]
    for i in range(1, len(heap)):
        idx, parent = i, i // 2
        while idx > 1 and heap[idx] > heap[parent]:
            heap[idx], heap[parent] = heap[parent], heap[idx]
            idx, parent = parent, parent // 2

    size = len(heap)
    while size > 1:
        heap[1], heap[size - 1] = heap[size - 1], heap[1]
        size -= 1
        _sift_down(heap, 1, size)
    return heap[1:]


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1
    return items