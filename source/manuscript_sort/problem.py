from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple
import random

from .config import GOAL, SIZE

Config = Tuple[int, ...]  # flat 3x3, row-major, 0 = blank

# Direction vectors of the blank: Up, Down, Left, Right
DR = (-1, 1, 0, 0)
DC = (0, 0, -1, 1)
DIR_NAMES = ("Up", "Down", "Left", "Right")

# -----------------------------
# Core operations
# -----------------------------
def validate(c: Iterable[int]) -> Config:
    """Return `c` as a Config, or raise ValueError if it is not a permutation of 0..8."""
    t = tuple(c)
    if len(t) != SIZE * SIZE or sorted(t) != list(range(SIZE * SIZE)):
        raise ValueError(f"invalid configuration: {t!r}")
    return t

def find_blank(c: Config) -> int:
    return c.index(0)

def swap(c: Config, i: int, j: int) -> Config:
    if i == j:
        return c
    a = list(c)
    a[i], a[j] = a[j], a[i]
    return tuple(a)

def neighbors(c: Config) -> List[Config]:
    """Configurations reachable in one move, always in Up, Down, Left, Right order."""
    z = find_blank(c)
    r, col = divmod(z, SIZE)
    out: List[Config] = []
    for d in range(4):
        nr, nc = r + DR[d], col + DC[d]
        if 0 <= nr < SIZE and 0 <= nc < SIZE:
            out.append(swap(c, z, nr * SIZE + nc))
    return out

def is_goal(c: Config, goal: Config = GOAL) -> bool:
    return c == goal

def action(src: Config, dst: Config) -> Optional[str]:
    """Name of the blank move turning `src` into `dst`; None when they are not adjacent."""
    a, b = find_blank(src), find_blank(dst)
    dr = b // SIZE - a // SIZE
    dc = b % SIZE - a % SIZE
    for d in range(4):
        if DR[d] == dr and DC[d] == dc:
            if swap(src, a, b) == dst:
                return DIR_NAMES[d]
            return None
    return None

def moves_along(path: List[Config]) -> List[str]:
    return [action(path[i - 1], path[i]) or "?" for i in range(1, len(path))]

def reconstruct_path(parent: Dict[Config, Optional[Config]], goal: Config) -> List[Config]:
    """
    Walk predecessor links from `goal` back to the start (the key mapped to None),
    then reverse. Empty list when `goal` was never recorded.
    """
    if goal not in parent:
        return []
    path: List[Config] = []
    cur: Optional[Config] = goal
    while cur is not None:
        path.append(cur)
        cur = parent.get(cur)
    path.reverse()
    return path

# -----------------------------
# Solvability / random starts
# -----------------------------
def _inversions(c: Config, goal: Config) -> int:
    # count inversions relative to goal order so any goal works
    rank = {v: i for i, v in enumerate(goal)}
    arr = [rank[v] for v in c if v != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv

def is_solvable(c: Config, goal: Config = GOAL) -> bool:
    """3x3 board: reachable iff the inversion parities (w.r.t. goal order) match."""
    return _inversions(c, goal) % 2 == 0

def scramble(goal: Config = GOAL, steps: int = 20, seed: Optional[int] = None) -> Config:
    """Random legal walk of `steps` moves from `goal`, never undoing the previous move."""
    rnd = random.Random(seed)
    s = goal
    prev: Optional[Config] = None
    for _ in range(steps):
        cand = [n for n in neighbors(s) if n != prev]
        prev, s = s, rnd.choice(cand)
    return s

# -----------------------------
# Problem
# -----------------------------
class ManuscriptProblem:
    """Start/goal pair shared by every strategy."""

    def __init__(self, initial: Iterable[int], goal: Iterable[int] = GOAL):
        self._initial = validate(initial)
        self.goal = validate(goal)

    def initial_state(self) -> Config:
        return self._initial

    def is_goal(self, state: Config) -> bool:
        return state == self.goal

    def neighbors(self, state: Config) -> List[Config]:
        return neighbors(state)

    def step_cost(self, state: Config, next_state: Config) -> int:
        return 1

    def solvable(self) -> bool:
        return is_solvable(self._initial, self.goal)

    def __repr__(self) -> str:
        return f"ManuscriptProblem(initial={self._initial}, goal={self.goal})"
