import pytest

from dpgraph.knapsack import (
    coin_change,
    coin_change_ways,
    knapsack_01,
    unbounded_knapsack,
)


def test_knapsack_01_worked_example():
    assert knapsack_01(4, [4, 5, 1], [1, 2, 3]) == 3


def test_knapsack_01_everything_fits():
    weights = [2, 3, 4, 5]
    values = [3, 4, 5, 6]
    assert knapsack_01(sum(weights), weights, values) == sum(values)


def test_knapsack_01_monotonic_in_capacity():
    weights = [1, 3, 4, 5]
    values = [1, 4, 5, 7]
    results = [knapsack_01(c, weights, values) for c in range(15)]
    assert results == sorted(results)


def test_knapsack_01_heavy_item_is_left_out():
    assert knapsack_01(2, [3], [10]) == knapsack_01(2, [], [])


def test_knapsack_01_bounded_by_total_value():
    weights = [5, 4, 6, 3]
    values = [10, 40, 30, 50]
    for capacity in range(20):
        assert knapsack_01(capacity, weights, values) <= sum(values)


def test_knapsack_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        knapsack_01(5, [1, 2], [1])
    with pytest.raises(ValueError):
        unbounded_knapsack(5, [1], [1, 2])


def test_unbounded_at_least_as_good_as_01():
    weights = [2, 3, 7]
    values = [3, 5, 11]
    for capacity in range(25):
        assert unbounded_knapsack(capacity, weights, values) >= knapsack_01(
            capacity, weights, values
        )


def test_unbounded_single_item_matches_repeated_01():
    weight, value, capacity = 3, 7, 20
    copies = capacity // weight + 2
    assert unbounded_knapsack(capacity, [weight], [value]) == knapsack_01(
        capacity, [weight] * copies, [value] * copies
    )


def test_unbounded_zero_weight_raises():
    with pytest.raises(ValueError):
        unbounded_knapsack(5, [0, 1], [1, 1])


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        knapsack_01(-1, [1], [1])


def test_coin_change_worked_example():
    assert coin_change([1, 2, 5], 11) == 3


def test_coin_change_impossible_is_none():
    assert coin_change([2], 3) is None


def test_coin_change_unit_coin_uses_amount_coins():
    amount = 17
    assert coin_change([1], amount) == amount


def test_coin_change_order_of_coins_irrelevant():
    coins = [7, 3, 2, 11]
    for amount in range(40):
        assert coin_change(coins, amount) == coin_change(coins[::-1], amount)


def test_coin_change_ways_worked_example():
    assert coin_change_ways(5, [1, 2, 5]) == 4


def test_coin_change_ways_ignores_too_large_coins():
    assert coin_change_ways(5, [1, 2]) == coin_change_ways(5, [1, 2, 7])


def test_ways_and_fewest_agree_on_feasibility():
    coins = [4, 6, 9]
    for amount in range(30):
        fewest = coin_change(coins, amount)
        ways = coin_change_ways(amount, coins)
        assert (fewest is None) == (ways == 0)


def test_invalid_coins_raise():
    with pytest.raises(ValueError):
        coin_change([], 3)
    with pytest.raises(ValueError):
        coin_change_ways(3, [0, 1])