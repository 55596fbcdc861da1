import random

import pytest

from algolab.cmpsort import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
    three_way,
    tournament_sort,
    tree_sort,
)


class CountingCmp:
    def __init__(self, base=three_way):
        self.calls = 0
        self.base = base

    def __call__(self, a, b):
        self.calls += 1
        return self.base(a, b)


def _reversed(a, b):
    return three_way(b, a)


def _by_key(a, b):
    return three_way(a[0], b[0])


def _random_list(seed, size, low=-50, high=50):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


def test_three_way_signs():
    assert three_way(1, 2) < 0
    assert three_way(2, 1) > 0
    assert three_way(3, 3) == 0


@pytest.mark.parametrize(
    "sort",
    [bubble_sort, heap_sort, insertion_sort, merge_sort, quick_sort,
     selection_sort, shell_sort, tournament_sort, tree_sort],
)
@pytest.mark.parametrize("seed", range(5))
def test_sorts_random_lists(sort, seed):
    data = _random_list(seed, 37)
    items = list(data)
    sort(items)
    assert items == sorted(data)


@pytest.mark.parametrize(
    "sort",
    [bubble_sort, heap_sort, insertion_sort, merge_sort, quick_sort,
     selection_sort, shell_sort, tournament_sort, tree_sort],
)
def test_sorts_with_many_duplicates(sort):
    data = _random_list(99, 64, 0, 3)
    items = list(data)
    sort(items)
    assert items == sorted(data)


@pytest.mark.parametrize(
    "sort",
    [bubble_sort, heap_sort, insertion_sort, merge_sort, quick_sort,
     selection_sort, shell_sort, tournament_sort, tree_sort],
)
@pytest.mark.parametrize("data", [[], [7], [2, 1], [1, 2], [3, 3, 3]])
def test_sorts_small_inputs(sort, data):
    items = list(data)
    sort(items)
    assert items == sorted(data)


@pytest.mark.parametrize(
    "sort",
    [bubble_sort, heap_sort, insertion_sort, merge_sort, quick_sort,
     selection_sort, shell_sort, tournament_sort, tree_sort],
)
def test_sorts_with_reversed_comparator(sort):
    data = _random_list(7, 30)
    items = list(data)
    cmp = CountingCmp(_reversed)
    count = sort(items, cmp)
    assert items == sorted(data, reverse=True)
    assert 0 < count <= cmp.calls


@pytest.mark.parametrize(
    "sort",
    [bubble_sort, heap_sort, insertion_sort, merge_sort, quick_sort,
     selection_sort, shell_sort, tree_sort],
)
def test_reported_count_matches_comparator_calls(sort):
    items = _random_list(11, 40)
    cmp = CountingCmp()
    reported = sort(items, cmp)
    assert reported == cmp.calls


def test_tournament_count_bounded_by_calls():
    items = _random_list(12, 40)
    cmp = CountingCmp()
    reported = tournament_sort(items, cmp)
    assert 0 < reported <= cmp.calls


@pytest.mark.parametrize("sort", [bubble_sort, selection_sort])
@pytest.mark.parametrize("size", [0, 1, 5, 20])
def test_quadratic_sorts_fixed_count(sort, size):
    items = _random_list(size, size)
    assert sort(items) == size * (size - 1) // 2


def test_insertion_sort_on_sorted_input_is_linear():
    items = list(range(25))
    assert insertion_sort(items) == len(items) - 1


def test_insertion_sort_on_reversed_input_is_quadratic():
    items = list(range(25, 0, -1))
    assert insertion_sort(items) == 25 * 24 // 2
    assert items == list(range(1, 26))


@pytest.mark.parametrize("sort", [bubble_sort, insertion_sort, tree_sort])
def test_stable_sorts_keep_equal_keys_in_order(sort):
    data = [(k, i) for i, k in enumerate(_random_list(3, 40, 0, 4))]
    items = list(data)
    cmp = CountingCmp(_by_key)
    count = sort(items, cmp)
    assert items == sorted(data, key=lambda pair: pair[0])
    assert count == cmp.calls


def test_quick_sort_is_deterministic_with_seeded_rng():
    data = _random_list(21, 50)
    first = list(data)
    second = list(data)
    count_a = quick_sort(first, three_way, random.Random(5))
    count_b = quick_sort(second, three_way, random.Random(5))
    assert first == second == sorted(data)
    assert count_a == count_b


def test_tournament_sort_duplicates_across_subtrees():
    items = [1, 2, 2, 3]
    tournament_sort(items)
    assert items == [1, 2, 2, 3]


@pytest.mark.parametrize(
    "sort",
    [bubble_sort, heap_sort, insertion_sort, merge_sort, quick_sort,
     selection_sort, shell_sort, tournament_sort, tree_sort],
)
def test_sorts_strings(sort):
    data = ["pear", "apple", "fig", "kiwi", "banana"]
    items = list(data)
    sort(items)
    assert items == sorted(data)