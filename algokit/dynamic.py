"""Dynamic-programming problems: 0/1 knapsack and longest common subsequence."""

from collections.abc import Sequence
from functools import lru_cache


def _check_items(prices: Sequence[int], weights: Sequence[int], capacity: int) -> None:
    if len(prices) != len(weights):
        raise ValueError("prices and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")


def knapsack_top_down(prices: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the best total price of items fitting in ``capacity``, by memoised recursion."""
    _check_items(prices, weights, capacity)

    @lru_cache(maxsize=None)
    def _best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        excluded = _best(count - 1, room)
        weight = weights[count - 1]
        if room >= weight:
            included = prices[count - 1] + _best(count - 1, room - weight)
            return max(included, excluded)
        return excluded

    try:
        return _best(len(prices), capacity)
    finally:
        _best.cache_clear()


def knapsack_bottom_up(prices: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the best total price of items fitting in ``capacity``, by filling a table."""
    _check_items(prices, weights, capacity)
    previous = [0] * (capacity + 1)
    for price, weight in zip(prices, weights):
        current = [0] * (capacity + 1)
        for room in range(1, capacity + 1):
            best = previous[room]
            if room >= weight:
                best = max(best, price + previous[room - weight])
            current[room] = best
        previous = current
    return previous[capacity]


def longest_common_subsequence(first: Sequence, second: Sequence) -> int:
    """Return the length of the longest subsequence common to ``first`` and ``second``."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]