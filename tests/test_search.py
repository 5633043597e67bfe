import pytest

from algosolve.search import (
    best_lineup,
    longest_unique_path,
    max_pipelines,
    min_blind_spots,
    min_ladder_additions,
    min_team_difference,
    steal_documents,
)

TEAM_MATRIX = [
    [0, 1, 2, 3],
    [4, 0, 5, 6],
    [7, 1, 0, 2],
    [3, 4, 5, 0],
]


def test_longest_path_covers_a_ring_of_letters():
    board = ["AB", "DC"]
    assert longest_unique_path(board) == len(set("".join(board)))


def test_longest_path_along_single_row():
    row = "ABCDE"
    assert longest_unique_path([row]) == len(row)


def test_longest_path_stops_before_repeat():
    assert longest_unique_path(["ABA"]) == len("AB")


def test_longest_path_bounded_by_distinct_letters():
    board = ["CAAB", "ADCE", "AAAA"]
    result = longest_unique_path(board)
    assert 1 <= result <= len(set("".join(board)))


def test_longest_path_rejects_empty_board():
    with pytest.raises(ValueError):
        longest_unique_path([])


def test_pipelines_fill_open_grid():
    grid = ["....", "....", "...."]
    assert max_pipelines(grid) == len(grid)


def test_pipelines_blocked_by_wall_column():
    assert max_pipelines(["..x.", "..x.", "..x."]) == 0


def test_pipelines_share_single_gap():
    assert max_pipelines(["..x.", "....", "..x."]) == 1


def test_steal_everything_open():
    grid = ["$$", "$$"]
    assert steal_documents(grid, "0") == sum(row.count("$") for row in grid)


def test_locked_door_needs_key():
    grid = ["**A**", "*$$$*", "*****"]
    assert steal_documents(grid, "0") == 0
    assert steal_documents(grid, "a") == sum(row.count("$") for row in grid)


def test_no_keys_marker_matches_empty_key_list():
    grid = ["**A**", "*$$$*", "*****"]
    assert steal_documents(grid, "0") == steal_documents(grid, "")


def test_key_found_after_door_opens_it():
    grid = ["*A*a", "*$**", "****"]
    assert steal_documents(grid, "0") == sum(row.count("$") for row in grid)


def test_team_difference_sample_balanced():
    assert min_team_difference(TEAM_MATRIX) == 0


def test_team_difference_invariant_under_transpose():
    transposed = [list(col) for col in zip(*TEAM_MATRIX)]
    matrix = [[0, 2, 9, 1], [3, 0, 4, 8], [5, 7, 0, 6], [2, 1, 3, 0]]
    assert min_team_difference(transposed) == min_team_difference(TEAM_MATRIX)
    assert min_team_difference([list(c) for c in zip(*matrix)]) == min_team_difference(matrix)


def test_team_difference_invariant_under_relabelling():
    matrix = [[0, 2, 9, 1], [3, 0, 4, 8], [5, 7, 0, 6], [2, 1, 3, 0]]
    order = [2, 0, 3, 1]
    relabelled = [[matrix[a][b] for b in order] for a in order]
    assert min_team_difference(relabelled) == min_team_difference(matrix)


def test_team_difference_rejects_bad_input():
    with pytest.raises(ValueError):
        min_team_difference([[0]])
    with pytest.raises(ValueError):
        min_team_difference([[0, 1], [1]])


def test_lineup_takes_the_only_assignment():
    abilities = [[i + 1 if i == j else 0 for j in range(11)] for i in range(11)]
    assert best_lineup(abilities) == sum(range(1, 12))


def test_lineup_small_permutation():
    abilities = [[5, 0, 0], [0, 0, 7], [0, 3, 0]]
    assert best_lineup(abilities) == sum(map(sum, abilities))


def test_lineup_invariant_under_row_order():
    abilities = [[4, 2, 0], [3, 0, 5], [1, 6, 2]]
    assert best_lineup(abilities[::-1]) == best_lineup(abilities)


def test_lineup_without_full_assignment():
    assert best_lineup([[1, 0], [2, 0]]) == 0


def test_lineup_rejects_non_square():
    with pytest.raises(ValueError):
        best_lineup([[1, 2]])


def test_ladder_no_rungs_needed():
    assert min_ladder_additions(5, 6, []) == 0


def test_ladder_impossible():
    assert min_ladder_additions(2, 1, [(1, 1)]) == -1


def test_ladder_one_rung_cancels_another():
    assert min_ladder_additions(2, 2, [(1, 1)]) == 1


def test_ladder_result_in_range():
    result = min_ladder_additions(4, 4, [(1, 1), (2, 2), (3, 3)])
    assert result in (-1, 0, 1, 2, 3)


def test_ladder_rejects_rung_outside_board():
    with pytest.raises(ValueError):
        min_ladder_additions(3, 3, [(4, 1)])


def test_blind_spots_without_cameras():
    office = [[0, 0, 0], [0, 0, 0]]
    assert min_blind_spots(office) == len(office) * len(office[0])


def test_blind_spots_all_directions_camera():
    assert min_blind_spots([[0, 0, 0], [0, 5, 0], [0, 0, 0]]) == 4


def test_blind_spots_two_way_camera_covers_row():
    assert min_blind_spots([[0, 2, 0]]) == 0


def test_blind_spots_bounded_by_empty_cells():
    office = [[0, 1, 0, 6], [0, 6, 3, 0], [4, 0, 0, 0]]
    empty = sum(row.count(0) for row in office)
    assert 0 <= min_blind_spots(office) <= empty


def test_blind_spots_rejects_unknown_cell():
    with pytest.raises(ValueError):
        min_blind_spots([[0, 7]])