import random

import pytest

from algolab.bucketsort import bucket_sort


@pytest.mark.parametrize("seed", range(5))
def test_random_values_are_sorted(seed):
    rng = random.Random(seed)
    data = [rng.uniform(-100.0, 100.0) for _ in range(200)]
    assert bucket_sort(data) == sorted(data)


def test_empty_input():
    assert bucket_sort([]) == []


def test_all_equal_values():
    data = [2.5] * 6
    assert bucket_sort(data) == data


def test_small_spread_is_still_sorted():
    data = [0.5, 0.2, 0.3, 0.25]
    assert bucket_sort(data) == sorted(data)


def test_input_is_left_untouched():
    data = [3.0, -1.0, 2.0]
    original = list(data)
    result = bucket_sort(data)
    assert data == original
    assert result == sorted(original)


def test_accepts_generator_and_keeps_duplicates():
    data = [5.0, 1.0, 5.0, 1.0, 3.0]
    result = bucket_sort(x for x in data)
    assert result == sorted(data)
    assert len(result) == len(data)


def test_extremes_land_in_edge_buckets():
    data = [10.0, -10.0, 0.0, 9.999, -9.999]
    assert bucket_sort(data) == sorted(data)