"""Array and matrix routines."""

from collections.abc import Iterable, Sequence
from typing import Any


def _rows(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows


def transpose(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the transpose of ``matrix`` as a new list of rows."""
    return [list(column) for column in zip(*_rows(matrix))]


def reflect(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return ``matrix`` mirrored about its middle column."""
    return [row[::-1] for row in _rows(matrix)]


def rotate_clockwise(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return ``matrix`` rotated by 90 degrees clockwise."""
    return reflect(transpose(matrix))


def stock_span(prices: Iterable[Any]) -> list[int]:
    """Return, for each day, how many consecutive days up to it had a price no higher."""
    spans: list[int] = []
    stack: list[tuple[int, Any]] = []
    for price in prices:
        span = 1
        while stack and stack[-1][1] <= price:
            span += stack.pop()[0]
        spans.append(span)
        stack.append((span, price))
    return spans


def insert_at_start(items: Iterable[Any], element: Any) -> list[Any]:
    """Return a new list with ``element`` followed by ``items``."""
    return [element, *items]


def inverse(items: Sequence[int]) -> list[int]:
    """Return the inverse of a permutation of ``0..n-1``."""
    n = len(items)
    if sorted(items) != list(range(n)):
        raise ValueError("items must be a permutation of 0..n-1")
    result = [0] * n
    for index, value in enumerate(items):
        result[value] = index
    return result


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous, non-empty run of ``values``.

    An empty input gives 0.
    """
    items = list(values)
    if all(value >= 0 for value in items):
        return sum(items)
    if all(value < 0 for value in items):
        return max(items)
    running = 0
    best = 0
    for value in items:
        if running + value <= 0:
            running = 0
        else:
            running += value
            best = max(best, running)
    return best