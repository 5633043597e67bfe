import pytest

from algosolve.dynamic import (
    coin_combinations,
    count_bridge_crossings,
    count_decompositions,
    count_pair_subarray_sums,
    count_subsequence_sums,
    lion_cage_count,
    max_consulting_profit,
    min_cost_for_customers,
    min_jump_energy,
    min_reactivation_cost,
    partitions_into_123,
    stone_game_winner,
    sums_of_123,
    weird_function,
)


def test_min_cost_single_city_exact():
    assert min_cost_for_customers(10, [(5, 10)]) == 5


def test_min_cost_prefers_cheaper_city():
    assert min_cost_for_customers(1, [(7, 3), (2, 1)]) == 2


def test_min_cost_is_monotone_in_target():
    cities = [(3, 5), (1, 1), (4, 7)]
    costs = [min_cost_for_customers(t, cities) for t in range(1, 40)]
    assert costs == sorted(costs)


def test_min_cost_unreachable():
    with pytest.raises(ValueError):
        min_cost_for_customers(10**9, [(1, 1)])


def test_min_cost_rejects_free_advert():
    with pytest.raises(ValueError):
        min_cost_for_customers(3, [(0, 1)])


def test_jump_single_block():
    assert min_jump_energy("B") == 0


def test_jump_unreachable():
    assert min_jump_energy("BB") == -1


def test_jump_reachable_is_bounded():
    result = min_jump_energy("BOJB")
    assert 0 < result <= 9


def test_jump_empty_road():
    with pytest.raises(ValueError):
        min_jump_energy("")


@pytest.mark.parametrize("n, expected", [(1, 3), (2, 7), (3, 17), (4, 41)])
def test_lion_initial_values(n, expected):
    assert lion_cage_count(n) == expected


def test_lion_recurrence_holds():
    assert lion_cage_count(10) == (2 * lion_cage_count(9) + lion_cage_count(8)) % 9901
    assert 0 <= lion_cage_count(1000) < 9901


def test_lion_rejects_zero():
    with pytest.raises(ValueError):
        lion_cage_count(0)


def test_consulting_single_job():
    assert max_consulting_profit([(1, 50)]) == 50


def test_consulting_job_too_long():
    assert max_consulting_profit([(3, 50)]) == 0


def test_consulting_bounds():
    schedule = [(3, 10), (5, 20), (1, 10), (1, 20), (2, 15), (4, 40), (2, 200)]
    result = max_consulting_profit(schedule)
    fitting = [pay for day, (length, pay) in enumerate(schedule) if day + length <= len(schedule)]
    assert max(fitting) <= result <= sum(pay for _, pay in schedule)


def test_sums_initial():
    assert sums_of_123([1, 2, 3]) == [1, 2, 4]


def test_sums_recurrence_and_modulus():
    seven, eight, nine, ten = sums_of_123([7, 8, 9, 10])
    assert ten == seven + eight + nine
    (big,) = sums_of_123([100000])
    assert 0 <= big < 1_000_000_009


def test_sums_negative():
    with pytest.raises(ValueError):
        sums_of_123([-1])


def test_partitions_base_and_monotone():
    values = [partitions_into_123(n) for n in range(51)]
    assert values[0] == 1
    assert values == sorted(values)


def test_partitions_negative():
    with pytest.raises(ValueError):
        partitions_into_123(-1)


@pytest.mark.parametrize("n", [0, 1, 7, 200])
def test_decompositions_single_term(n):
    assert count_decompositions(n, 1) == 1


@pytest.mark.parametrize("n", [0, 5, 20])
def test_decompositions_two_terms(n):
    assert count_decompositions(n, 2) == n + 1


@pytest.mark.parametrize("k", [1, 4, 9])
def test_decompositions_of_one(k):
    assert count_decompositions(1, k) == k


def test_decompositions_zero_terms_and_errors():
    assert count_decompositions(5, 0) == 0
    with pytest.raises(ValueError):
        count_decompositions(-1, 2)


def test_bridge_example():
    assert count_bridge_crossings("RGS", "RINGSR", "GRGGNS") == 3


def test_bridge_symmetry():
    assert count_bridge_crossings("RGS", "GRGGNS", "RINGSR") == count_bridge_crossings(
        "RGS", "RINGSR", "GRGGNS"
    )


def test_bridge_empty_target_and_missing_letter():
    assert count_bridge_crossings("", "AB", "CD") == 2
    assert count_bridge_crossings("Z", "AB", "CD") == 0


def test_bridge_length_mismatch():
    with pytest.raises(ValueError):
        count_bridge_crossings("A", "AB", "A")


def test_reactivation_single_app():
    assert min_reactivation_cost([10], [3], 10) == 3


def test_reactivation_free_app():
    assert min_reactivation_cost([5, 5], [0, 4], 5) == 0


def test_reactivation_monotone():
    memories, costs = [30, 10, 20, 35, 40], [3, 0, 3, 5, 4]
    results = [min_reactivation_cost(memories, costs, need) for need in range(1, 136)]
    assert results == sorted(results)


def test_reactivation_errors():
    with pytest.raises(ValueError):
        min_reactivation_cost([5], [1], 6)
    with pytest.raises(ValueError):
        min_reactivation_cost([5, 1], [1], 1)


def test_coins_simple_cases():
    assert coin_combinations([1], 5) == 1
    assert coin_combinations([2], 3) == 0
    assert coin_combinations([3, 7], 0) == 1


def test_coins_extra_coin_never_hurts():
    assert coin_combinations([1, 2, 5], 20) >= coin_combinations([1, 2], 20)


def test_coins_invalid():
    with pytest.raises(ValueError):
        coin_combinations([0], 4)


def test_weird_base_cases():
    assert weird_function(-1, 5, 5) == 1
    assert weird_function(0, 0, 0) == 1


def test_weird_clamps_above_twenty():
    assert weird_function(50, 50, 50) == weird_function(20, 20, 20)
    assert weird_function(21, 1, 1) == weird_function(20, 20, 20)


@pytest.mark.parametrize("n, expected", [(1, "SK"), (2, "CY"), (3, "SK"), (4, "SK")])
def test_stone_initial(n, expected):
    assert stone_game_winner(n) == expected


def test_stone_results_are_players():
    assert {stone_game_winner(n) for n in range(1, 200)} == {"SK", "CY"}


def test_stone_rejects_zero():
    with pytest.raises(ValueError):
        stone_game_winner(0)


def test_subsequence_example():
    assert count_subsequence_sums([-7, -3, -2, 5, 8], 0) == 1


def test_subsequence_trivial():
    assert count_subsequence_sums([5], 5) == 1
    assert count_subsequence_sums([], 0) == 0


def test_subsequence_whole_sum_bounds():
    numbers = [3, -1, 4, 1, -5, 9]
    result = count_subsequence_sums(numbers, sum(numbers))
    assert 1 <= result <= 2 ** len(numbers) - 1


def test_pair_example():
    assert count_pair_subarray_sums(5, [1, 3, 1, 2], [1, 3, 2]) == 7


def test_pair_single_elements():
    assert count_pair_subarray_sums(3, [1], [2]) == 1


def test_pair_symmetry():
    a, b = [2, -1, 3, 4], [1, 1, 5]
    assert count_pair_subarray_sums(6, a, b) == count_pair_subarray_sums(6, b, a)