from __future__ import annotations
from typing import List, Tuple

from .config import DEFAULT_GOAL_LINE, SIZE
from .problem import Config


class MalformedInputError(ValueError):
    """Configuration text that cannot be turned into a valid 3x3 board."""


def parse_state(text: str) -> Config:
    """
    Parse "123;B46;758", "1 2 3 4 0 6 7 5 8" or "123 456 78B" into a Config.
    'B' (any case) or '0' is the blank; ';' and whitespace are ignored.
    """
    cleaned = "".join(text.split()).replace(";", "").replace("B", "0").replace("b", "0")
    n = SIZE * SIZE
    if len(cleaned) != n:
        raise MalformedInputError(f"expected {n} tiles, got {len(cleaned)} in {text!r}")
    bad = [ch for ch in cleaned if ch not in "012345678"]
    if bad:
        raise MalformedInputError(f"invalid tile {bad[0]!r} in {text!r}")
    state = tuple(int(ch) for ch in cleaned)
    missing = sorted(set(range(n)) - set(state))
    if missing:
        dup = sorted({v for v in state if state.count(v) > 1})
        raise MalformedInputError(f"duplicate {dup} / missing {missing} in {text!r}")
    return state


def read_input(path: str) -> Tuple[Config, Config]:
    """Line 1: start. Line 2 (optional): goal, canonical goal otherwise. Blank lines are skipped."""
    with open(path, "r", encoding="utf-8") as f:
        lines: List[str] = [line.strip() for line in f if line.strip()]
    if not lines:
        raise MalformedInputError(f"{path}: no start configuration")
    start = parse_state(lines[0])
    goal = parse_state(lines[1] if len(lines) > 1 else DEFAULT_GOAL_LINE)
    return start, goal
