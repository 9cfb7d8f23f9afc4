import random

import pytest

from algokit.sorting import (
    bucket_sort,
    counting_sort,
    cycle_sort,
    heap_sort,
    insertion_sort,
)


def test_bucket_sort_source_cases():
    assert bucket_sort([4, 63, 1, 53, 87, 44, 36]) == [1, 4, 36, 44, 53, 63, 87]
    assert bucket_sort([5, 3, 12, 7, 21, 4]) == [3, 4, 5, 7, 12, 21]


def test_counting_sort_source_cases():
    assert counting_sort([34, 22, 65, 38, 99, 48]) == [22, 34, 38, 48, 65, 99]
    assert counting_sort([10, 72, 82, 30, 67, 28, 75, 1, 55, 34]) == [
        1, 10, 28, 30, 34, 55, 67, 72, 75, 82,
    ]


def test_cycle_sort_source_cases():
    assert cycle_sort([4, 2, 5, 1, 3]) == [1, 2, 3, 4, 5]
    assert cycle_sort([10, 31, 78, 23, 15, 64, 24, 4]) == [4, 10, 15, 23, 24, 31, 64, 78]


def test_heap_sort_source_cases():
    assert heap_sort([7, 6, 5, 4, 3, 2, 1]) == [1, 2, 3, 4, 5, 6, 7]
    assert heap_sort([39, 43, 6, -1, 0, 43, 65, 78, 3, 200]) == [
        -1, 0, 3, 6, 39, 43, 43, 65, 78, 200,
    ]


def test_insertion_sort_source_case():
    assert insertion_sort([4, 3, 5, 1, 2]) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("seed", range(10))
def test_matches_builtin_sorted_with_duplicates(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 40) for _ in range(rng.randint(1, 60))]
    expected = sorted(values)
    assert bucket_sort(values) == expected
    assert counting_sort(values) == expected
    assert cycle_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected


@pytest.mark.parametrize("seed", range(10))
def test_general_sorts_handle_negatives(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
    expected = sorted(values)
    assert cycle_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected


def test_input_is_not_modified():
    values = [3, 1, 2, 1]
    assert bucket_sort(values) == [1, 1, 2, 3]
    assert counting_sort(values) == [1, 1, 2, 3]
    assert cycle_sort(values) == [1, 1, 2, 3]
    assert heap_sort(values) == [1, 1, 2, 3]
    assert insertion_sort(values) == [1, 1, 2, 3]
    assert values == [3, 1, 2, 1]


def test_empty_input():
    assert bucket_sort([]) == []
    assert counting_sort([]) == []
    assert cycle_sort([]) == []
    assert heap_sort([]) == []
    assert insertion_sort([]) == []


def test_bucket_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        bucket_sort([3, -1, 2])


def test_counting_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_general_sorts_accept_strings():
    words = ["pear", "apple", "fig", "apple"]
    expected = ["apple", "apple", "fig", "pear"]
    assert cycle_sort(words) == expected
    assert heap_sort(words) == expected
    assert insertion_sort(words) == expected