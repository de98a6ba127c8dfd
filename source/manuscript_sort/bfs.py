from __future__ import annotations
from typing import Callable, Deque, Dict, Optional, Set
from collections import deque
import logging

from .problem import Config, ManuscriptProblem, reconstruct_path
from .records import SearchResult, Stopwatch

logger = logging.getLogger(__name__)

OnGenerate = Optional[Callable[[Config, Config], None]]


def bfs(problem: ManuscriptProblem, *, on_generate: OnGenerate = None) -> SearchResult:
    """
    Breadth-first search. FIFO frontier, goal test at dequeue.
    A value is marked visited when it is pushed, so it enters the frontier at most once.
    """
    clock = Stopwatch()
    start = problem.initial_state()

    frontier: Deque[Config] = deque([start])
    visited: Set[Config] = {start}
    parent: Dict[Config, Optional[Config]] = {start: None}

    explored = 0
    max_frontier = 1
    path = None

    while frontier:
        if len(frontier) > max_frontier:
            max_frontier = len(frontier)

        s = frontier.popleft()
        explored += 1

        if problem.is_goal(s):
            path = reconstruct_path(parent, s)
            break

        for s2 in problem.neighbors(s):
            if s2 in visited:
                continue
            visited.add(s2)
            parent[s2] = s
            frontier.append(s2)
            if on_generate is not None:
                on_generate(s, s2)

    elapsed = clock.elapsed_ms()
    logger.debug("bfs: explored=%d max_frontier=%d found=%s", explored, max_frontier, path is not None)
    return SearchResult("Breadth-First Search (BFS)", "", path is not None, explored, elapsed,
                        path, {"max_frontier": max_frontier})
