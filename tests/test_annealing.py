import pytest

from manuscript_sort.annealing import simulated_annealing
from manuscript_sort.config import GOAL
from manuscript_sort.heuristics import h2
from manuscript_sort.problem import ManuscriptProblem

from conftest import HARDEST, assert_valid_path


def _run(seed, iterations=3000):
    steps = []
    res = simulated_annealing(ManuscriptProblem(HARDEST), max_iterations=iterations, seed=seed,
                              on_step=lambda i, cand, ok, T: steps.append((i, cand, ok)))
    return res, steps


def test_same_seed_same_walk():
    a, steps_a = _run(7)
    b, steps_b = _run(7)
    assert steps_a == steps_b
    assert a.success == b.success
    assert a.states_explored == b.states_explored
    for key in ("final_energy", "best_energy", "best_state", "accepted", "final_temperature"):
        assert a.details[key] == b.details[key]


def test_start_is_goal(solved_problem):
    res = simulated_annealing(solved_problem)
    assert res.success
    assert res.states_explored == 1
    assert res.path == [GOAL]
    assert res.details["accepted"] == 0


def test_iteration_cap_cools_every_iteration():
    res = simulated_annealing(ManuscriptProblem(HARDEST), max_iterations=10, seed=1)
    assert not res.success
    assert res.path is None
    assert res.details["iterations"] == 10
    assert res.states_explored == 10
    assert res.details["reason"] == "iteration_limit"
    assert res.details["final_temperature"] == pytest.approx(1000.0 * 0.9995 ** 10)


def test_temperature_floor_stops_walk():
    res = simulated_annealing(ManuscriptProblem(HARDEST), initial_temp=1.0, cooling_rate=0.5,
                              min_temp=0.1, seed=1)
    # T = 1, .5, .25, .125 are above the floor
    assert res.details["iterations"] == 4
    assert res.details["reason"] == "temperature_floor"
    assert not res.success


def test_best_energy_tracks_minimum():
    res, steps = _run(3)
    assert res.details["best_energy"] <= h2(HARDEST)
    assert res.details["best_energy"] == h2(res.details["best_state"])
    assert res.details["best_energy"] <= res.details["final_energy"]
    assert res.details["accepted"] == sum(1 for _, _, ok in steps if ok)


def test_improving_moves_always_accepted():
    _, steps = _run(11, iterations=500)
    prev = h2(HARDEST)
    for _, cand, ok in steps:
        if h2(cand) < prev:
            assert ok
        if ok:
            prev = h2(cand)


def test_success_path_is_a_walk(near_problem):
    res = simulated_annealing(near_problem, seed=42)
    assert res.success
    assert_valid_path(res.path, near_problem.initial_state(), GOAL)
    assert res.details["final_energy"] == 0
