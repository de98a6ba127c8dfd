import pytest

from manuscript_sort.config import GOAL
from manuscript_sort.problem import ManuscriptProblem, action

# two moves from the goal: Down, Right
NEAR = (1, 2, 3, 4, 0, 6, 7, 5, 8)
# row 0 rotated; h2 = 4 but the optimum is longer
ROTATED_ROW = (3, 1, 2, 4, 5, 6, 7, 8, 0)
# one of the two 31-move positions
HARDEST = (8, 6, 7, 2, 5, 4, 3, 0, 1)
# odd permutation of the goal, cannot be solved
UNSOLVABLE = (2, 1, 3, 4, 5, 6, 7, 8, 0)


@pytest.fixture
def near_problem():
    return ManuscriptProblem(NEAR)


@pytest.fixture
def solved_problem():
    return ManuscriptProblem(GOAL)


def assert_valid_path(path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    for a, b in zip(path, path[1:]):
        assert action(a, b) is not None
