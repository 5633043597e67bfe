# algosolve

A library of solutions to classic algorithm exercises. Each exercise is a
plain Python function or class. It takes its input as Python values and
returns its answer. It does not read standard input and does not print.

The package uses only the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algosolve.textmatch`: pattern and string problems. It includes
  `matches_signal`, `submarine_verdict`, `min_mismatch`, `count_occurrences`,
  `kmp_search`, `check_markup`, `wildcard_matches` and
  `largest_after_removal`.
- `algosolve.numbers`: number theory. It includes `count_square_free`,
  `consecutive_prime_sums`, `divisor_sum_total`, `card_scores`,
  `adversarial_sequence` and the `BadnessTable` class, which has a `count`
  method.
- `algosolve.monotonic`: stacks, deques and two pointers. It includes
  `sliding_minimums`, `count_good_numbers`, `shortest_subarray_at_least`,
  `count_visible_pairs`, `count_rooftop_views`, `largest_rectangle` and
  `membership`.
- `algosolve.dynamic`: dynamic programming. It includes `coin_combinations`,
  `max_consulting_profit`, `min_jump_energy`, `count_subsequence_sums`,
  `count_pair_subarray_sums`, `weird_function` and `stone_game_winner`,
  among others.
- `algosolve.heaps`: priority-queue problems. It includes `max_jewel_value`,
  `votes_to_bribe`, `evacuation_plan`, `min_merge_cost`, `max_tied_sum`,
  `select_vents`, `common_subsequence` and `min_unplugs`.
- `algosolve.greedy`: greedy strategies. It includes `max_after_swaps`,
  `min_group_cost`, `max_word_sum`, `bubble_passes`, `min_transfers`,
  `max_triple_imbalance`, `smallest_unmeasurable`, `max_delivered` and
  `can_cross`.
- `algosolve.graphs`: union-find with `max_docked_planes` and
  `min_friend_cost`. It also has `RootedTree`, whose `lca` and `distance`
  methods answer queries on a tree, plus `is_bipartite` and `min_burn_time`.
- `algosolve.ordering`: topological orderings. It includes
  `semester_levels`, `critical_path`, `min_completion_time`, `best_cycle`,
  `base_parts`, `strahler_order` and `reorder_ranking`.
- `algosolve.grids`: breadth-first searches on grids. It includes
  `min_walls_to_break`, `current_percolates`, `min_life_loss`,
  `wall_reach_map`, `paintings`, `sections_and_spaces`, `format_sections`
  and `elevator_presses`.
- `algosolve.search`: backtracking. It includes `longest_unique_path`,
  `max_pipelines`, `steal_documents`, `min_team_difference`, `best_lineup`,
  `min_ladder_additions` and `min_blind_spots`.
- `algosolve.simulation`: step-by-step simulations with `roll_dice`,
  `cleaned_cells`, `count_slopes` and `gear_score`.
- `algosolve.cube`: a 3×3 cube. `Cube` has `turn`, `upper_face` and
  `stickers` methods, and `solve_cube` applies a list of moves such as
  `"L-"`.
- `algosolve.slopes`: walking times over a trail with `TrailProfile`, whose
  `time` method gives the time between two numbered points.

Invalid input raises `ValueError`. A few functions report an impossible case
through their return value:

- `min_friend_cost` returns `None` when the cost is over budget.
- `elevator_presses` returns `None` when the goal cannot be reached.
- `reorder_ranking` returns `None` when the swaps cannot all be applied.
- Some functions return `-1`, as their docstrings state.

## Example

```python
from algosolve.textmatch import kmp_search
from algosolve.graphs import RootedTree

print(kmp_search("ABC ABCDAB ABCDABCDABDE", "ABCDABD"))  # [16]

tree = RootedTree(4, [(1, 2), (1, 3), (3, 4)])
print(tree.lca(2, 4))  # 1
```

## What the package does not do

The package has no command-line program and does not parse the text formats
in which these exercises are usually posed. To use it, call the functions
from Python with lists, tuples and strings.