import pytest

from manuscript_sort.config import GOAL
from manuscript_sort.heuristics import (ManhattanDistance, MisplacedTiles, build_heuristic,
                                        check_admissibility, h1, h2, true_distance)
from manuscript_sort.problem import neighbors, scramble

from conftest import HARDEST, NEAR, ROTATED_ROW, UNSOLVABLE


def test_scenario_values():
    assert h1(NEAR) == 2
    assert h2(NEAR) == 2
    assert h1(GOAL) == 0 and h2(GOAL) == 0


def test_rotated_row_values():
    assert h1(ROTATED_ROW) == 3
    assert h2(ROTATED_ROW) == 4


def test_hardest_position_values():
    assert h2(HARDEST) == 21
    assert h1(HARDEST) == 7


@pytest.mark.parametrize("seed", range(12))
def test_h1_le_h2_le_true_distance(seed):
    s = scramble(GOAL, steps=14, seed=seed)
    d = true_distance(s)
    assert d is not None
    assert h1(s) <= h2(s) <= d


def test_h2_changes_by_one_per_move():
    s = scramble(GOAL, steps=9, seed=11)
    for n in neighbors(s):
        assert abs(h2(n) - h2(s)) == 1


def test_objects_match_functions_for_custom_goal():
    goal = (0, 1, 2, 3, 4, 5, 6, 7, 8)
    s = scramble(goal, steps=10, seed=5)
    assert MisplacedTiles(goal).h(s) == h1(s, goal)
    assert ManhattanDistance(goal).h(s) == h2(s, goal)
    assert ManhattanDistance().h(NEAR) == 2


def test_build_heuristic():
    assert isinstance(build_heuristic("h1"), MisplacedTiles)
    assert isinstance(build_heuristic("h2"), ManhattanDistance)
    assert build_heuristic("h2").name == "h2 - Manhattan Distance"
    with pytest.raises(ValueError):
        build_heuristic("h3")


def test_true_distance():
    assert true_distance(GOAL) == 0
    assert true_distance(NEAR) == 2
    assert true_distance(ROTATED_ROW) > h2(ROTATED_ROW)


def test_true_distance_unreachable():
    assert true_distance(UNSOLVABLE) is None


def test_check_admissibility_along_path():
    path = [NEAR, (1, 2, 3, 4, 5, 6, 7, 0, 8), GOAL]
    rows = check_admissibility(path, ManhattanDistance())
    assert [r["h_star"] for r in rows] == [2, 1, 0]
    assert all(r["ok"] for r in rows)
