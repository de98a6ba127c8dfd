from __future__ import annotations
from typing import Callable, Dict, List, Optional, Set, Tuple
import logging

from .config import DFS_DEPTH_LIMIT
from .problem import Config, ManuscriptProblem, reconstruct_path
from .records import SearchResult, Stopwatch

logger = logging.getLogger(__name__)


def dfs(problem: ManuscriptProblem, depth_limit: int = DFS_DEPTH_LIMIT, *,
        on_generate: Optional[Callable[[Config, Config], None]] = None) -> SearchResult:
    """
    Depth-bounded depth-first search with an explicit LIFO stack.

    Values are marked visited when expanded; a popped value that was already
    expanded is dropped without counting. Nodes at `depth_limit` are goal-tested
    but not expanded. Returns the first goal reached, which need not be optimal.
    """
    clock = Stopwatch()
    start = problem.initial_state()

    stack: List[Tuple[Config, int]] = [(start, 0)]
    parent: Dict[Config, Optional[Config]] = {start: None}
    visited: Set[Config] = set()

    explored = 0
    cutoffs = 0
    path = None

    while stack:
        s, depth = stack.pop()
        if s in visited:
            continue
        visited.add(s)
        explored += 1

        if problem.is_goal(s):
            path = reconstruct_path(parent, s)
            break

        if depth >= depth_limit:
            cutoffs += 1
            continue

        for s2 in problem.neighbors(s):
            if s2 in visited:
                continue
            # latest push wins; it is also the entry popped first
            parent[s2] = s
            stack.append((s2, depth + 1))
            if on_generate is not None:
                on_generate(s, s2)

    elapsed = clock.elapsed_ms()
    logger.debug("dfs: explored=%d cutoffs=%d found=%s", explored, cutoffs, path is not None)
    return SearchResult("Depth-First Search (DFS)", f"Depth Limit = {depth_limit}",
                        path is not None, explored, elapsed, path,
                        {"depth_limit": depth_limit, "depth_cutoffs": cutoffs})
