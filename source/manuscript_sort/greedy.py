from __future__ import annotations
from heapq import heappush, heappop
from typing import Callable, Dict, List, Optional, Set, Tuple
import logging

from .heuristics import ManhattanDistance
from .problem import Config, ManuscriptProblem, reconstruct_path
from .records import SearchResult, Stopwatch

logger = logging.getLogger(__name__)


def greedy(problem: ManuscriptProblem, heuristic=None, *,
           on_generate: Optional[Callable[[Config, Config], None]] = None) -> SearchResult:
    """
    Greedy best-first search, priority = h only (Manhattan distance by default).

    The same value may sit in the heap several times; copies are dropped when
    popped if the value was already expanded, and only first pops are counted.
    Equal h values come out in insertion order.
    """
    if heuristic is None:
        heuristic = ManhattanDistance(problem.goal)
    clock = Stopwatch()
    start = problem.initial_state()

    openpq: List[Tuple[int, int, Config]] = []
    heappush(openpq, (heuristic.h(start), 0, start))
    parent: Dict[Config, Optional[Config]] = {start: None}
    visited: Set[Config] = set()
    tie = 1
    explored = 0
    path = None

    while openpq:
        _, _, s = heappop(openpq)
        if s in visited:
            continue
        visited.add(s)
        explored += 1

        if problem.is_goal(s):
            path = reconstruct_path(parent, s)
            break

        for s2 in problem.neighbors(s):
            if s2 in visited:
                continue
            if s2 not in parent:
                parent[s2] = s
            heappush(openpq, (heuristic.h(s2), tie, s2))
            tie += 1
            if on_generate is not None:
                on_generate(s, s2)

    elapsed = clock.elapsed_ms()
    logger.debug("greedy: explored=%d pushed=%d found=%s", explored, tie, path is not None)
    return SearchResult("Greedy Best-First Search", heuristic.name, path is not None,
                        explored, elapsed, path, {"pushed": tie})
