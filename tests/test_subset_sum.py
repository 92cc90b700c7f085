from itertools import combinations

import pytest

from dpgraph.subset_sum import (
    can_partition_equal,
    has_subset_sum,
    min_partition_difference,
)


def test_every_subset_sum_is_found():
    values = [3, 34, 4, 12, 5, 2]
    for size in range(len(values) + 1):
        for combo in combinations(values, size):
            assert has_subset_sum(values, sum(combo))


def test_target_beyond_total_is_unreachable():
    values = [4, 7, 9]
    assert not has_subset_sum(values, sum(values) + 1)


def test_odd_target_from_even_values_is_unreachable():
    values = [2, 4, 6, 8]
    for target in range(1, sum(values), 2):
        assert not has_subset_sum(values, target)


def test_negative_inputs_raise():
    with pytest.raises(ValueError):
        has_subset_sum([1, -2], 1)
    with pytest.raises(ValueError):
        has_subset_sum([1, 2], -1)


def test_can_partition_worked_examples():
    assert can_partition_equal([1, 5, 11, 5]) is True
    assert can_partition_equal([1, 2, 3, 5]) is False


def test_odd_total_never_partitions():
    for values in ([1, 2], [3, 3, 3], [7]):
        assert can_partition_equal(values) is False


def test_duplicated_list_always_partitions():
    values = [3, 9, 14, 1]
    assert can_partition_equal(values + values) is True


def test_min_partition_difference_worked_example():
    assert min_partition_difference([1, 6, 11, 5]) == 1


def test_min_partition_difference_single_value():
    assert min_partition_difference([13]) == 13


def test_min_partition_difference_parity_and_bound():
    for values in ([3, 1, 4, 2, 2], [8, 6, 5], [10, 20, 15, 5, 25]):
        diff = min_partition_difference(values)
        assert diff % 2 == sum(values) % 2
        assert diff <= sum(values)


def test_zero_difference_iff_equal_partition():
    for values in ([1, 5, 11, 5], [1, 2, 3, 5], [2, 2], [9, 4, 6, 1]):
        assert (min_partition_difference(values) == 0) == can_partition_equal(values)