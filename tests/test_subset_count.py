import pytest

from dpgraph.subset_count import (
    MOD,
    count_partitions_with_difference,
    count_subsets_with_sum,
    target_sum_ways,
)


def test_count_subsets_example():
    assert count_subsets_with_sum([5, 2, 3, 10, 6, 8], 10) == 3


def test_count_subsets_complement_symmetry():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    total = sum(values)
    for t in range(total + 1):
        assert count_subsets_with_sum(values, t) == count_subsets_with_sum(
            values, total - t
        )


def test_count_subsets_zero_doubles_count():
    values = [2, 3, 5, 7]
    for t in range(sum(values) + 1):
        single = count_subsets_with_sum(values, t)
        assert count_subsets_with_sum([0, *values], t) == single + single
        assert count_subsets_with_sum([*values, 0], t) == single + single


def test_count_subsets_is_reduced_modulo():
    result = count_subsets_with_sum([0] * 40, 0)
    assert result == pow(2, 40, MOD)
    assert result < MOD


def test_count_subsets_rejects_bad_input():
    with pytest.raises(ValueError):
        count_subsets_with_sum([1, -2], 1)
    with pytest.raises(ValueError):
        count_subsets_with_sum([1, 2], -1)


def test_partitions_with_difference_example():
    assert count_partitions_with_difference([5, 2, 6, 4], 3) == 1


def test_partitions_with_impossible_difference():
    values = [1, 2, 3]
    assert not count_partitions_with_difference(values, sum(values) + 2)
    assert not count_partitions_with_difference(values, 1)


def test_target_sum_example():
    assert target_sum_ways([1, 1, 1, 1, 1], 3) == 5


def test_target_sum_matches_partition_count():
    values = [2, 1, 3, 2, 4]
    total = sum(values)
    for t in range(total + 1):
        assert target_sum_ways(values, t) == count_partitions_with_difference(values, t)


def test_target_sum_ways_cover_all_sign_choices():
    values = [1, 0, 2, 3]
    total = sum(values)
    counts = [target_sum_ways(values, t) for t in range(-total, total + 1)]
    assert sum(counts) == 2 ** len(values)
    assert counts == counts[::-1]


def test_target_sum_out_of_range():
    values = [1, 2]
    assert not target_sum_ways(values, sum(values) + 1)
    assert not target_sum_ways(values, -sum(values) - 1)


def test_target_sum_rejects_negative_values():
    with pytest.raises(ValueError):
        target_sum_ways([1, -1], 0)