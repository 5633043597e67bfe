"""Dynamic-programming problems: knapsacks, counting recurrences and memoised searches."""

from collections import Counter
from functools import lru_cache
from itertools import accumulate

_BUDGET_LIMIT = 100_000
_CAGE_MOD = 9901
_SUMS_MOD = 1_000_000_009
_DECOMPOSITION_MOD = 1_000_000_000
_NEXT_BLOCK = {"B": "O", "O": "J", "J": "B"}


def min_cost_for_customers(target, cities):
    """Cheapest spend reaching at least ``target`` customers.

    ``cities`` holds ``(cost, customers)`` pairs; each advert may be bought any
    number of times.  Spends are searched up to 100000.
    """
    if any(cost < 1 for cost, _ in cities):
        raise ValueError("advert costs must be positive")
    best = [0] * (_BUDGET_LIMIT + 1)
    for spend in range(1, _BUDGET_LIMIT + 1):
        gained = max(
            (best[spend - cost] + customers for cost, customers in cities if cost <= spend),
            default=0,
        )
        best[spend] = max(gained, 0)
        if best[spend] >= target:
            return spend
    raise ValueError("target cannot be reached within the spending limit")


def min_jump_energy(road):
    """Least energy to walk a B-O-J road from its first to its last block, or -1."""
    if not road:
        raise ValueError("road must not be empty")
    size = len(road)
    energy = [None] * size
    energy[-1] = 0
    for start in range(size - 2, -1, -1):
        wanted = _NEXT_BLOCK.get(road[start])
        energy[start] = min(
            (
                (stop - start) ** 2 + energy[stop]
                for stop in range(start + 1, size)
                if road[stop] == wanted and energy[stop] is not None
            ),
            default=None,
        )
    return -1 if energy[0] is None else energy[0]


def lion_cage_count(n):
    """Ways to place lions in a 2 x n cage with no two adjacent, modulo 9901."""
    if n < 1:
        raise ValueError("n must be at least 1")
    initial = (3, 7, 17, 41)
    if n <= len(initial):
        return initial[n - 1]
    previous, current = initial[-2], initial[-1]
    for _ in range(len(initial) + 1, n + 1):
        previous, current = current, (2 * current + previous) % _CAGE_MOD
    return current


def max_consulting_profit(schedule):
    """Best total pay from ``(days, pay)`` jobs offered on consecutive days."""
    days = len(schedule)
    earned = [0] * (days + 1)
    best = 0
    for day, (length, pay) in enumerate(schedule):
        best = max(best, earned[day])
        finish = day + length
        if finish <= days:
            earned[finish] = max(earned[finish], pay + best)
    return max(best, earned[days])


def sums_of_123(queries):
    """For each n, the ordered ways to write n as a sum of 1, 2 and 3, mod 1000000009."""
    queries = list(queries)
    if any(query < 0 for query in queries):
        raise ValueError("queries must not be negative")
    ways = [0, 1, 2, 4]
    for _ in range(len(ways), max(queries, default=0) + 1):
        ways.append((ways[-1] + ways[-2] + ways[-3]) % _SUMS_MOD)
    return [ways[query] for query in queries]


def partitions_into_123(n):
    """Unordered ways to write n as a sum of 1, 2 and 3."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways = [1] + [0] * n
    for part in (1, 2, 3):
        for total in range(part, n + 1):
            ways[total] += ways[total - part]
    return ways[n]


def count_decompositions(n, k):
    """Ordered ways to write n as a sum of k integers from 0 to n, mod 1000000000."""
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    row = [1] * k
    for _ in range(n):
        row = [total % _DECOMPOSITION_MOD for total in accumulate(row)]
    return row[-1] % _DECOMPOSITION_MOD if row else 0


def count_bridge_crossings(target, devil, angel):
    """Ways to spell ``target`` stepping forward and alternating between the bridges."""
    if len(devil) != len(angel):
        raise ValueError("both bridges must have the same length")
    bridges = (devil, angel)
    length = len(devil)

    @lru_cache(maxsize=None)
    def ways(start, side, matched):
        if matched == len(target):
            return 1
        letter = target[matched]
        return sum(
            ways(position + 1, 1 - side, matched + 1)
            for position in range(start, length)
            if bridges[side][position] == letter
        )

    return ways(0, 0, 0) + ways(0, 1, 0)


def min_reactivation_cost(memories, costs, required):
    """Smallest total cost of closing apps to free at least ``required`` memory."""
    if len(memories) != len(costs):
        raise ValueError("memories and costs must have the same length")
    if any(cost < 0 for cost in costs):
        raise ValueError("costs must not be negative")
    budget = sum(costs)
    freed = [0] * (budget + 1)
    for memory, cost in zip(memories, costs):
        for spend in range(budget, cost - 1, -1):
            freed[spend] = max(freed[spend], freed[spend - cost] + memory)
    for spend, amount in enumerate(freed):
        if amount >= required:
            return spend
    raise ValueError("not enough memory can be freed")


def coin_combinations(coins, amount):
    """Number of unordered ways to pay ``amount`` with the given coin values."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin < 1 for coin in coins):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


@lru_cache(maxsize=None)
def _weird(a, b, c):
    if a <= 0 or b <= 0 or c <= 0:
        return 1
    if a > 20 or b > 20 or c > 20:
        return _weird(20, 20, 20)
    if a < b < c:
        return _weird(a, b, c - 1) + _weird(a, b - 1, c - 1) - _weird(a, b - 1, c)
    return (
        _weird(a - 1, b, c)
        + _weird(a - 1, b - 1, c)
        + _weird(a - 1, b, c - 1)
        - _weird(a - 1, b - 1, c - 1)
    )


def weird_function(a, b, c):
    """The memoised three-argument recurrence w(a, b, c)."""
    return _weird(a, b, c)


def stone_game_winner(n):
    """Winner ("SK" or "CY") of the 1-3-4 stone game with n stones, SK moving first."""
    if n < 1:
        raise ValueError("n must be at least 1")
    first_wins = [False, True, False, True, True]
    for stones in range(len(first_wins), n + 1):
        first_wins.append(
            not (first_wins[stones - 1] and first_wins[stones - 3] and first_wins[stones - 4])
        )
    return "SK" if first_wins[n] else "CY"


def _subset_sums(values):
    sums = [0]
    for value in values:
        sums += [total + value for total in sums]
    return sums


def count_subsequence_sums(numbers, target):
    """Count non-empty subsequences whose elements sum to ``target``."""
    numbers = list(numbers)
    half = len(numbers) // 2
    right = Counter(_subset_sums(numbers[half:]))
    total = sum(right[target - left] for left in _subset_sums(numbers[:half]))
    return total - 1 if target == 0 else total


def _subarray_sums(values):
    for start in range(len(values)):
        yield from accumulate(values[start:])


def count_pair_subarray_sums(target, a, b):
    """Count pairs of subarrays, one from each list, whose sums add to ``target``."""
    counts = Counter(_subarray_sums(list(b)))
    return sum(counts[target - total] for total in _subarray_sums(list(a)))