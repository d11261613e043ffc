"""Dynamic programming problems solved bottom-up."""

from __future__ import annotations

import math
from collections.abc import Sequence
from math import isqrt

MOD = 10**9 + 7
TASKS = 3


def fib(n: int) -> int:
    """The n-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n == 0:
        return 0
    prev2, prev1 = 0, 1
    for _ in range(n - 1):
        prev2, prev1 = prev1, prev1 + prev2
    return prev1


def _check_coins(coins: Sequence[int]) -> None:
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins adding up to ``amount``, or -1 when it cannot be made."""
    _check_coins(coins)
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    fewest = [0.0] + [math.inf] * amount
    for value in range(1, amount + 1):
        for coin in coins:
            if coin <= value and fewest[value - coin] + 1 < fewest[value]:
                fewest[value] = fewest[value - coin] + 1
    best = fewest[amount]
    return -1 if best == math.inf else int(best)


def count_coin_ways(total: int, coins: Sequence[int]) -> int:
    """Number of coin combinations (order ignored) adding up to ``total``."""
    _check_coins(coins)
    if total < 0:
        return 0
    ways = [1] + [0] * total
    for coin in coins:
        for value in range(coin, total + 1):
            ways[value] += ways[value - coin]
    return ways[total]


def frog_jump(heights: Sequence[int]) -> int:
    """Least energy to reach the last stone jumping one or two stones at a time."""
    prev2, prev1 = 0, 0
    for i in range(1, len(heights)):
        one = prev1 + abs(heights[i] - heights[i - 1])
        two = prev2 + abs(heights[i] - heights[i - 2]) if i > 1 else math.inf
        prev2, prev1 = prev1, min(one, two)
    return int(prev1)


def frog_jump_k(heights: Sequence[int], k: int) -> int:
    """Least energy to reach the last stone jumping up to ``k`` stones at a time."""
    if not heights:
        raise ValueError("heights must not be empty")
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    costs = [0]
    for i in range(1, len(heights)):
        costs.append(
            min(
                costs[j] + abs(heights[i] - heights[j])
                for j in range(max(0, i - k), i)
            )
        )
    return costs[-1]


def rob(nums: Sequence[int]) -> int:
    """Largest sum of values taken with no two neighbours; 0 for no houses."""
    if not nums:
        return 0
    prev2, prev1 = 0, nums[0]
    for value in nums[1:]:
        prev2, prev1 = prev1, max(prev2 + value, prev1)
    return prev1


def count_fence_ways(n: int, k: int) -> int:
    """Ways to paint ``n`` posts with ``k`` colours, no three neighbours alike, modulo 1e9+7."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if n == 1:
        return k
    prev2, prev1 = k, (k % MOD) * (k % MOD) % MOD
    for _ in range(3, n + 1):
        prev2, prev1 = prev1, ((prev2 + prev1) % MOD) * (k - 1) % MOD
    return prev1


def subset_sum_to_k(values: Sequence[int], k: int) -> bool:
    """True when some subset of ``values`` adds up to exactly ``k``."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    reachable = [True] + [False] * k
    for value in values:
        reachable = [
            reachable[target] or (value <= target and reachable[target - value])
            for target in range(k + 1)
        ]
    return reachable[k]


def ninja_training(points: Sequence[Sequence[int]]) -> int:
    """Most points over all days, never doing the same task on two days in a row."""
    if not points:
        raise ValueError("points must hold at least one day")
    if any(len(day) != TASKS for day in points):
        raise ValueError(f"each day must hold exactly {TASKS} task scores")
    # best[last]: best total so far given that task ``last`` is barred next.
    first = points[0]
    best = [
        max(first[task] for task in range(TASKS) if task != last)
        for last in range(TASKS + 1)
    ]
    for day in points[1:]:
        best = [
            max(day[task] + best[task] for task in range(TASKS) if task != last)
            for last in range(TASKS + 1)
        ]
    return best[TASKS]


def min_subset_difference(values: Sequence[int]) -> int:
    """Smallest difference between the sums of two parts splitting ``values``."""
    if not values:
        raise ValueError("values must not be empty")
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    total = sum(values)
    reachable = {0}
    for value in values:
        reachable |= {s + value for s in reachable}
    return min(abs(total - 2 * s) for s in reachable)


def num_squares(n: int) -> int:
    """Fewest perfect squares adding up to ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    fewest = [0] * (n + 1)
    for value in range(1, n + 1):
        fewest[value] = 1 + min(
            fewest[value - root * root] for root in range(1, isqrt(value) + 1)
        )
    return fewest[n]