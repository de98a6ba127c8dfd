from __future__ import annotations
from heapq import heappush, heappop
from typing import Callable, Dict, List, Optional, Tuple
import logging

from .problem import Config, ManuscriptProblem, reconstruct_path
from .records import SearchResult, Stopwatch

logger = logging.getLogger(__name__)


def astar(problem: ManuscriptProblem, heuristic, *,
          on_generate: Optional[Callable[[Config, Config], None]] = None) -> SearchResult:
    """
    A* with f = g + h, ties broken by smaller h and then by insertion order.

    best_g holds the cheapest known cost per value; a neighbour is (re)pushed only
    when its new g is strictly lower. Entries popped with g above best_g are stale
    and skipped. Every pop counts as an explored state.
    """
    clock = Stopwatch()
    start = problem.initial_state()
    h0 = heuristic.h(start)

    # (f, h, tie, g, state)
    openpq: List[Tuple[int, int, int, int, Config]] = []
    heappush(openpq, (h0, h0, 0, 0, start))
    best_g: Dict[Config, int] = {start: 0}
    parent: Dict[Config, Optional[Config]] = {start: None}
    tie = 1
    explored = 0
    stale = 0
    path = None

    while openpq:
        _, _, _, g, s = heappop(openpq)
        explored += 1

        if problem.is_goal(s):
            path = reconstruct_path(parent, s)
            break

        if g > best_g[s]:
            stale += 1
            continue

        for s2 in problem.neighbors(s):
            g2 = g + problem.step_cost(s, s2)
            old = best_g.get(s2)
            if old is not None and g2 >= old:
                continue
            best_g[s2] = g2
            parent[s2] = s
            h2 = heuristic.h(s2)
            heappush(openpq, (g2 + h2, h2, tie, g2, s2))
            tie += 1
            if on_generate is not None:
                on_generate(s, s2)

    elapsed = clock.elapsed_ms()
    logger.debug("astar[%s]: explored=%d stale=%d found=%s", heuristic.key, explored, stale, path is not None)
    return SearchResult("A* Search", heuristic.name, path is not None, explored, elapsed, path,
                        {"generated": tie, "stale_skipped": stale,
                         "cost": len(path) - 1 if path else None})
