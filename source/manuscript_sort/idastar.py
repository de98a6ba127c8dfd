from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union
import logging

from .problem import Config, ManuscriptProblem
from .records import SearchResult, Stopwatch

logger = logging.getLogger(__name__)


# Outcome of one threshold-bounded probe
@dataclass(frozen=True)
class Found:
    path: Tuple[Config, ...]


@dataclass(frozen=True)
class Bound:
    value: int  # smallest f seen above the threshold


@dataclass(frozen=True)
class Exhausted:
    pass


EXHAUSTED = Exhausted()
Outcome = Union[Found, Bound, Exhausted]


def probe(problem: ManuscriptProblem, heuristic, path: Tuple[Config, ...],
          g: int, threshold: int) -> Tuple[Outcome, int]:
    """
    Depth-first descent from path[-1] while f = g + h stays within `threshold`.
    Returns the outcome and the number of states explored below (and including) this one.
    Neighbours already on `path` are skipped.
    """
    s = path[-1]
    f = g + heuristic.h(s)
    if f > threshold:
        return Bound(f), 0
    explored = 1
    if problem.is_goal(s):
        return Found(path), explored

    best: Optional[int] = None
    for s2 in problem.neighbors(s):
        if s2 in path:
            continue
        outcome, n = probe(problem, heuristic, path + (s2,), g + problem.step_cost(s, s2), threshold)
        explored += n
        if isinstance(outcome, Found):
            return outcome, explored
        if isinstance(outcome, Bound) and (best is None or outcome.value < best):
            best = outcome.value
    if best is None:
        return EXHAUSTED, explored
    return Bound(best), explored


def idastar(problem: ManuscriptProblem, heuristic, max_threshold: Optional[int] = None) -> SearchResult:
    """
    Iterative-deepening A*. The threshold starts at h(start) and after each probe
    rises to the smallest f that exceeded it. Stops on Found or Exhausted, or
    when the threshold would pass `max_threshold` (if given).

    A start of the wrong parity is rejected up front: path-local cycle checks
    cannot exhaust its half of the state space, so the probes would never end.
    """
    clock = Stopwatch()
    start = problem.initial_state()
    threshold = heuristic.h(start)
    if not problem.solvable():
        logger.debug("idastar[%s]: start cannot reach goal (parity mismatch)", heuristic.key)
        return SearchResult("Iterative Deepening A* (IDA*)", heuristic.name, False, 0,
                            clock.elapsed_ms(), None,
                            {"iterations": 0, "final_threshold": threshold, "reason": "unsolvable"})
    explored = 0
    iteration = 0
    path = None
    reason = "exhausted"

    while True:
        iteration += 1
        outcome, n = probe(problem, heuristic, (start,), 0, threshold)
        explored += n

        if isinstance(outcome, Found):
            path = list(outcome.path)
            reason = "found"
            break
        if isinstance(outcome, Exhausted):
            break

        logger.debug("idastar[%s] iteration %d: threshold=%d -> next=%d (states so far: %d)",
                     heuristic.key, iteration, threshold, outcome.value, explored)
        if max_threshold is not None and outcome.value > max_threshold:
            reason = "threshold_limit"
            break
        threshold = outcome.value

    elapsed = clock.elapsed_ms()
    return SearchResult("Iterative Deepening A* (IDA*)", heuristic.name, path is not None,
                        explored, elapsed, path,
                        {"iterations": iteration, "final_threshold": threshold, "reason": reason})
