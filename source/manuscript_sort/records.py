from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import time

from .problem import Config, moves_along


@dataclass
class SearchResult:
    algorithm: str
    heuristic: str
    success: bool
    states_explored: int
    elapsed_ms: float
    path: Optional[List[Config]] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def moves(self) -> List[str]:
        return moves_along(self.path) if self.path else []

    @property
    def path_length(self) -> Optional[int]:
        if not self.path:
            return None
        return len(self.path) - 1


@dataclass
class AdversarialResult:
    algorithm: str
    depth: int
    value: int
    best_move: Optional[str]
    best_state: Optional[Config]
    evaluations: int
    elapsed_ms: float


class Stopwatch:
    """Wall-clock timer in milliseconds (perf_counter)."""

    def __init__(self):
        self._t0 = time.perf_counter()

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._t0) * 1000.0
