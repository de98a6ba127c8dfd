"""
Two-player reading of the board: MAX (the sorter) moves toward the goal,
MIN (the glitch) moves away from it. Utility is -h2, so 0 is best for MAX.

Both searches keep the ancestors of the current line in a frozenset so a line
never revisits one of its own states; siblings do not share it.
"""
from __future__ import annotations
from typing import Callable, FrozenSet, Optional, Tuple
import logging
import math

from .config import ADVERSARIAL_DEPTH, GOAL
from .heuristics import h2
from .problem import Config, ManuscriptProblem, action
from .records import AdversarialResult, Stopwatch

logger = logging.getLogger(__name__)


def utility(state: Config, goal: Config = GOAL) -> int:
    return -h2(state, goal)


# -----------------------------
# Minimax
# -----------------------------
def minimax_value(problem: ManuscriptProblem, state: Config, depth: int, is_max: bool,
                  path: FrozenSet[Config]) -> Tuple[int, int]:
    """(value, evaluations) of `state` with `depth` plies left."""
    evaluations = 1
    if depth == 0 or problem.is_goal(state):
        return utility(state, problem.goal), evaluations

    best: Optional[int] = None
    for s2 in problem.neighbors(state):
        if s2 in path:
            continue
        val, n = minimax_value(problem, s2, depth - 1, not is_max, path | {s2})
        evaluations += n
        if best is None or (val > best if is_max else val < best):
            best = val

    if best is None:  # every child is an ancestor
        return utility(state, problem.goal), evaluations
    return best, evaluations


# -----------------------------
# Alpha-beta
# -----------------------------
def alphabeta_value(problem: ManuscriptProblem, state: Config, depth: int,
                    alpha: float, beta: float, is_max: bool,
                    path: FrozenSet[Config]) -> Tuple[int, int]:
    """Same value as minimax_value for the same arguments; children after a cutoff are skipped."""
    evaluations = 1
    if depth == 0 or problem.is_goal(state):
        return utility(state, problem.goal), evaluations

    best: Optional[int] = None
    for s2 in problem.neighbors(state):
        if s2 in path:
            continue
        val, n = alphabeta_value(problem, s2, depth - 1, alpha, beta, not is_max, path | {s2})
        evaluations += n
        if is_max:
            if best is None or val > best:
                best = val
            alpha = max(alpha, best)
        else:
            if best is None or val < best:
                best = val
            beta = min(beta, best)
        if beta <= alpha:
            break

    if best is None:
        return utility(state, problem.goal), evaluations
    return best, evaluations


# -----------------------------
# Root drivers
# -----------------------------
ChildValue = Callable[[Config, FrozenSet[Config]], Tuple[int, int]]


def _decide(problem: ManuscriptProblem, depth: int, name: str, child_value: ChildValue) -> AdversarialResult:
    clock = Stopwatch()
    root = problem.initial_state()
    if depth <= 0 or problem.is_goal(root):
        return AdversarialResult(name, depth, utility(root, problem.goal), None, None, 1, clock.elapsed_ms())

    # every root child gets a full evaluation; the first strictly best one wins
    best_val: Optional[int] = None
    best_state: Optional[Config] = None
    total = 0
    base = frozenset([root])
    for s2 in problem.neighbors(root):
        val, n = child_value(s2, base | {s2})
        total += n
        if best_val is None or val > best_val:
            best_val, best_state = val, s2

    move = action(root, best_state) if best_state is not None else None
    elapsed = clock.elapsed_ms()
    logger.debug("%s depth=%d: move=%s value=%s evaluations=%d", name, depth, move, best_val, total)
    return AdversarialResult(name, depth, best_val, move, best_state, total, elapsed)


def minimax(problem: ManuscriptProblem, depth: int = ADVERSARIAL_DEPTH) -> AdversarialResult:
    return _decide(problem, depth, "Minimax",
                   lambda s, p: minimax_value(problem, s, depth - 1, False, p))


def alpha_beta(problem: ManuscriptProblem, depth: int = ADVERSARIAL_DEPTH) -> AdversarialResult:
    return _decide(problem, depth, "Alpha-Beta Pruning",
                   lambda s, p: alphabeta_value(problem, s, depth - 1, -math.inf, math.inf, False, p))


def pruning_savings(mm: AdversarialResult, ab: AdversarialResult) -> float:
    """Percentage of minimax evaluations that alpha-beta did not need."""
    if mm.evaluations <= 0:
        return 0.0
    return (1.0 - ab.evaluations / mm.evaluations) * 100.0
