from __future__ import annotations
from typing import Callable, List, Optional
import logging
import math
import random

from .config import (SA_COOLING_RATE, SA_INITIAL_TEMP, SA_LOG_EVERY, SA_MAX_ITERATIONS,
                     SA_MIN_TEMP, SA_SEED)
from .heuristics import ManhattanDistance
from .problem import Config, ManuscriptProblem
from .records import SearchResult, Stopwatch

logger = logging.getLogger(__name__)

# (iteration, candidate, accepted, temperature before cooling)
OnStep = Optional[Callable[[int, Config, bool, float], None]]


def simulated_annealing(problem: ManuscriptProblem,
                        initial_temp: float = SA_INITIAL_TEMP,
                        cooling_rate: float = SA_COOLING_RATE,
                        min_temp: float = SA_MIN_TEMP,
                        max_iterations: int = SA_MAX_ITERATIONS,
                        seed: Optional[int] = SA_SEED,
                        *, on_step: OnStep = None) -> SearchResult:
    """
    Random-walk descent on Manhattan-distance energy.

    Improving moves are always taken; a move that raises energy by dE is taken
    with probability exp(-dE / T). T is multiplied by `cooling_rate` every
    iteration, accepted or not. Runs until energy 0, `max_iterations`, or
    T <= `min_temp`. The best state ever seen is tracked separately since the
    walk can go uphill.
    """
    energy = ManhattanDistance(problem.goal)
    rng = random.Random(seed)
    clock = Stopwatch()

    current = problem.initial_state()
    current_e = energy.h(current)
    best, best_e = current, current_e
    walk: List[Config] = [current]

    T = initial_temp
    explored = 0
    accepted = 0
    success = False
    it = 0

    while it < max_iterations and T > min_temp:
        explored += 1

        if current_e == 0:
            success = True
            break

        nxt = rng.choice(problem.neighbors(current))
        next_e = energy.h(nxt)
        delta = next_e - current_e

        take = delta < 0 or rng.random() < math.exp(-delta / T)
        if take:
            current, current_e = nxt, next_e
            walk.append(current)
            accepted += 1
            if current_e < best_e:
                best, best_e = current, current_e

        if on_step is not None:
            on_step(it, nxt, take, T)

        T *= cooling_rate
        it += 1

        if it % SA_LOG_EVERY == 0:
            logger.debug("annealing iteration %d: T=%.4f, current h2=%d, best h2=%d",
                         it, T, current_e, best_e)

    # goal accepted on the very last permitted iteration
    if current_e == 0:
        success = True

    elapsed = clock.elapsed_ms()
    if success:
        reason = "goal"
    elif it >= max_iterations:
        reason = "iteration_limit"
    else:
        reason = "temperature_floor"
    return SearchResult("Simulated Annealing", energy.name, success, explored, elapsed,
                        walk if success else None,
                        {"final_temperature": T, "best_energy": best_e, "best_state": best,
                         "final_energy": current_e, "accepted": accepted, "iterations": it,
                         "seed": seed, "reason": reason})
