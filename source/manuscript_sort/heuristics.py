# ===============================================================
#  Heuristics for the 3x3 manuscript board (blank slides only)
# ===============================================================

from __future__ import annotations
from typing import Dict, List, Optional, Tuple
from collections import deque

from .config import GOAL, SIZE
from .problem import Config, neighbors

# -----------------------------
# I. Goal cell lookup
# -----------------------------
def goal_positions(goal: Config) -> Dict[int, Tuple[int, int]]:
    return {v: divmod(i, SIZE) for i, v in enumerate(goal)}

_CANONICAL_POS = goal_positions(GOAL)

# -----------------------------
# II. h1: misplaced tiles
# -----------------------------
def h1(c: Config, goal: Config = GOAL) -> int:
    """Number of non-blank tiles not on their goal cell. Each needs at least one move."""
    return sum(1 for i in range(SIZE * SIZE) if c[i] != 0 and c[i] != goal[i])

# -----------------------------
# III. h2: Manhattan distance
# -----------------------------
def h2(c: Config, goal: Config = GOAL) -> int:
    """
    Sum over non-blank tiles of |row - goal_row| + |col - goal_col|.
    A move shifts one tile by one cell, so this never overestimates and
    is at least h1 (a misplaced tile is at distance >= 1).
    """
    pos = _CANONICAL_POS if goal == GOAL else goal_positions(goal)
    dist = 0
    for i, v in enumerate(c):
        if v == 0:
            continue
        r, col = divmod(i, SIZE)
        gr, gc = pos[v]
        dist += abs(r - gr) + abs(col - gc)
    return dist

# -----------------------------
# IV. Heuristic objects
# -----------------------------
class MisplacedTiles:
    name = "h1 - Misplaced Tiles"
    key = "h1"

    def __init__(self, goal: Config = GOAL):
        self.goal = goal

    def h(self, state: Config) -> int:
        return h1(state, self.goal)


class ManhattanDistance:
    name = "h2 - Manhattan Distance"
    key = "h2"

    def __init__(self, goal: Config = GOAL):
        self.goal = goal
        self._pos = goal_positions(goal)

    def h(self, state: Config) -> int:
        dist = 0
        for i, v in enumerate(state):
            if v:
                r, col = divmod(i, SIZE)
                gr, gc = self._pos[v]
                dist += abs(r - gr) + abs(col - gc)
        return dist


def build_heuristic(name: str, goal: Config = GOAL):
    if name == "h1":
        return MisplacedTiles(goal)
    if name == "h2":
        return ManhattanDistance(goal)
    raise ValueError("heuristic name must be 'h1' or 'h2'.")

# -----------------------------
# V. h*(n) and admissibility
# -----------------------------
def true_distance(start: Config, goal: Config = GOAL) -> Optional[int]:
    """Optimal number of moves from `start` to `goal` (plain BFS); None if unreachable."""
    if start == goal:
        return 0
    q = deque([(start, 0)])
    seen = {start}
    while q:
        s, d = q.popleft()
        for t in neighbors(s):
            if t in seen:
                continue
            if t == goal:
                return d + 1
            seen.add(t)
            q.append((t, d + 1))
    return None


def check_admissibility(path: List[Config], heuristic) -> List[dict]:
    """h(n) <= h*(n) for every state along a solution path; one row per step."""
    goal = path[-1]
    rows: List[dict] = []
    for k, s in enumerate(path):
        h_n = heuristic.h(s)
        h_star = true_distance(s, goal)
        rows.append({"step": k, "h": h_n, "h_star": h_star,
                     "ok": h_star is not None and h_n <= h_star})
    return rows
