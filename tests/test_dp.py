import itertools

import pytest

from algokit.dp import (
    MOD,
    coin_change,
    count_coin_ways,
    count_fence_ways,
    fib,
    frog_jump,
    frog_jump_k,
    min_subset_difference,
    ninja_training,
    num_squares,
    rob,
    subset_sum_to_k,
)


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


@pytest.mark.parametrize("n", range(2, 30))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_negative_raises():
    with pytest.raises(ValueError):
        fib(-1)


def test_coin_change_source_example():
    assert coin_change([1, 2], 3) == 2


@pytest.mark.parametrize("amount", [0, 1, 7, 20])
def test_coin_change_unit_coin_uses_amount_coins(amount):
    assert coin_change([1], amount) == amount


def test_coin_change_impossible():
    assert coin_change([2], 3) == -1


def test_coin_change_invalid_input():
    with pytest.raises(ValueError):
        coin_change([0, 1], 3)
    with pytest.raises(ValueError):
        coin_change([1], -1)


def test_count_coin_ways_zero_total_has_one_way():
    assert count_coin_ways(0, [2, 3]) == 1


def test_count_coin_ways_negative_total():
    assert count_coin_ways(-3, [1]) == 0


@pytest.mark.parametrize("total", [1, 5, 12])
def test_count_coin_ways_single_unit_coin(total):
    assert count_coin_ways(total, [1]) == 1


def test_count_coin_ways_order_of_coins_irrelevant():
    assert count_coin_ways(11, [1, 2, 5]) == count_coin_ways(11, [5, 1, 2])


def test_count_coin_ways_rejects_zero_coin():
    with pytest.raises(ValueError):
        count_coin_ways(3, [0])


def test_frog_jump_flat_stones_cost_nothing():
    assert frog_jump([4, 4, 4, 4]) == 0
    assert frog_jump([9]) == 0


def test_frog_jump_matches_k_of_two():
    heights = [10, 20, 30, 10, 40, 5, 25]
    assert frog_jump(heights) == frog_jump_k(heights, 2)


def test_frog_jump_k_long_jump_is_direct():
    heights = [30, 10, 60, 10, 60, 50]
    assert frog_jump_k(heights, len(heights)) == abs(heights[-1] - heights[0])


def test_frog_jump_k_step_one_walks_every_stone():
    heights = [3, 8, 1, 6]
    expected = sum(abs(b - a) for a, b in zip(heights, heights[1:]))
    assert frog_jump_k(heights, 1) == expected


def test_frog_jump_k_invalid():
    with pytest.raises(ValueError):
        frog_jump_k([], 2)
    with pytest.raises(ValueError):
        frog_jump_k([1, 2], 0)


def test_rob_source_examples():
    assert rob([2, 7, 9, 3, 1]) == 12
    assert rob([1, 2, 3, 1]) == 4


def test_rob_small_cases():
    assert rob([]) == 0
    assert rob([5]) == 5
    assert rob([3, 8]) == 8


def test_rob_not_more_than_total():
    nums = [6, 1, 7, 2, 9, 4]
    assert rob(nums) <= sum(nums)


def test_fence_base_cases():
    assert count_fence_ways(1, 3) == 3
    assert count_fence_ways(2, 3) == 3 * 3


def test_fence_recurrence():
    k = 4
    for n in range(3, 15):
        expected = (count_fence_ways(n - 1, k) + count_fence_ways(n - 2, k)) * (k - 1) % MOD
        assert count_fence_ways(n, k) == expected


def test_fence_result_reduced_modulo():
    assert 0 <= count_fence_ways(500, 1000) < MOD


def test_fence_invalid_n():
    with pytest.raises(ValueError):
        count_fence_ways(0, 3)


def test_subset_sum_trivial_targets():
    values = [4, 1, 7]
    assert subset_sum_to_k(values, 0) is True
    assert subset_sum_to_k(values, sum(values)) is True
    assert subset_sum_to_k(values, sum(values) + 1) is False


@pytest.mark.parametrize("target", range(0, 16))
def test_subset_sum_against_enumeration(target):
    values = [2, 3, 7, 3]
    sums = {
        sum(combo)
        for size in range(len(values) + 1)
        for combo in itertools.combinations(values, size)
    }
    assert subset_sum_to_k(values, target) is (target in sums)


def test_subset_sum_invalid():
    with pytest.raises(ValueError):
        subset_sum_to_k([1, 2], -1)
    with pytest.raises(ValueError):
        subset_sum_to_k([1, -2], 1)


def test_ninja_single_day_takes_best_task():
    assert ninja_training([[5, 9, 2]]) == 9


def test_ninja_cannot_repeat_task():
    points = [[10, 0, 0], [10, 0, 0]]
    assert ninja_training(points) == 10


def test_ninja_invalid():
    with pytest.raises(ValueError):
        ninja_training([])
    with pytest.raises(ValueError):
        ninja_training([[1, 2]])


def test_min_subset_difference_source_example():
    assert min_subset_difference([1, 2, 3]) == 0


def test_min_subset_difference_single_value():
    assert min_subset_difference([5]) == 5


def test_min_subset_difference_parity_and_bound():
    values = [1, 5, 1, 8, 3]
    result = min_subset_difference(values)
    assert result % 2 == sum(values) % 2
    assert 0 <= result <= sum(values)


def test_min_subset_difference_invalid():
    with pytest.raises(ValueError):
        min_subset_difference([])


def test_num_squares_zero_and_perfect():
    assert num_squares(0) == 0
    for root in range(1, 10):
        assert num_squares(root * root) == 1


@pytest.mark.parametrize("n", range(1, 60))
def test_num_squares_at_most_four(n):
    assert 1 <= num_squares(n) <= 4


def test_num_squares_negative_raises():
    with pytest.raises(ValueError):
        num_squares(-4)