from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .adversarial import pruning_savings
from .config import SIZE
from .problem import Config
from .records import AdversarialResult, SearchResult

RULE = "=" * 60


# ------------------------------------------------
# Board rendering
def _cell(v: int) -> str:
    return "B" if v == 0 else str(v)

def state_to_string(c: Config) -> str:
    """'1 2 3 / B 4 6 / 7 5 8'"""
    rows = [" ".join(_cell(v) for v in c[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)]
    return " / ".join(rows)

def state_to_grid(c: Config) -> str:
    return "\n".join(" ".join(_cell(v) for v in c[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)) + "\n"


# ------------------------------------------------
# Single runs
def format_result(res: SearchResult) -> str:
    lines = [RULE, "Algorithm    : " + res.algorithm + (f" ({res.heuristic})" if res.heuristic else ""), RULE,
             "Status       : " + ("SUCCESS" if res.success else "FAILURE"),
             f"States Explored: {res.states_explored}",
             f"Time Taken   : {res.elapsed_ms:.2f} ms"]

    if res.success and res.path:
        moves = res.moves
        lines.append(f"Path Length  : {res.path_length} moves")
        lines.append("Path         : " + (" -> ".join(moves) if moves else "(already at goal)"))
        lines.append("")
        lines.append("Step-by-step:")
        lines.append("Initial State:")
        lines.append(state_to_grid(res.path[0]).rstrip("\n"))
        for i, mv in enumerate(moves, start=1):
            lines.append(f"  | Move {i}: {mv}")
            lines.append("  v")
            lines.append(state_to_grid(res.path[i]).rstrip("\n"))

    d = res.details
    if "iterations" in d and "final_threshold" in d:
        lines.append(f"Total IDA* iterations: {d['iterations']}")
    if "final_temperature" in d:
        lines.append(f"Final Temperature: {d['final_temperature']:.6f}")
        lines.append(f"Best h2 achieved : {d['best_energy']}")
        if not res.success:
            lines.append("Best state found (not goal):")
            lines.append(state_to_grid(d["best_state"]).rstrip("\n"))
    if not res.success and d.get("reason") not in (None, "goal", "found"):
        lines.append(f"Stopped      : {d['reason']}")
    return "\n".join(lines) + "\n"


def format_adversarial(res: AdversarialResult) -> str:
    lines = [f"--- {res.algorithm} ---",
             f"  Best move: {res.best_move or '-'} (utility={res.value})",
             f"  States evaluated: {res.evaluations}",
             f"  Time: {res.elapsed_ms:.2f} ms"]
    if res.best_state is not None:
        lines.append("  Resulting state:")
        lines.append(state_to_grid(res.best_state).rstrip("\n"))
    return "\n".join(lines) + "\n"


def format_comparison(mm: AdversarialResult, ab: AdversarialResult) -> str:
    same = mm.best_move == ab.best_move and mm.value == ab.value
    lines = [RULE, f"COMPARISON: Minimax vs Alpha-Beta (depth={mm.depth})", RULE,
             "                    Minimax    Alpha-Beta",
             f"States evaluated:   {mm.evaluations:<11d}{ab.evaluations}",
             f"Time (ms):          {mm.elapsed_ms:<11.2f}{ab.elapsed_ms:.2f}",
             "Same best move?     " + ("YES (pruning is lossless)" if same else "NO (unexpected)")]
    if mm.evaluations > 0:
        lines.append(f"Pruning saved:      {pruning_savings(mm, ab):.1f}% of state evaluations")
    return "\n".join(lines) + "\n"


# ------------------------------------------------
# Many runs
@dataclass
class RunSummary:
    trials: int
    found_rate: float
    avg_length: float
    avg_explored: float
    avg_time_ms: float


def summarize(results: Dict[str, List[SearchResult]]) -> Dict[str, RunSummary]:
    summary: Dict[str, RunSummary] = {}
    for name, runs in results.items():
        found = [r for r in runs if r.success]
        n = max(1, len(runs))
        summary[name] = RunSummary(
            trials=len(runs),
            found_rate=len(found) / n,
            avg_length=(sum(r.path_length or 0 for r in found) / len(found)) if found else float("nan"),
            avg_explored=sum(r.states_explored for r in runs) / n,
            avg_time_ms=sum(r.elapsed_ms for r in runs) / n,
        )
    return summary


def format_summary(title: str, summary: Dict[str, RunSummary], order: Optional[Iterable[str]] = None) -> str:
    lines = [f"\n{title}", "=" * 90,
             f"{'Algorithm':<26}{'Trials':>8}{'Found%':>10}{'Avg Len':>12}{'Avg Explored':>15}{'Avg Time (ms)':>15}",
             "-" * 90]
    keys = list(order) if order is not None else list(summary)
    keys += [k for k in summary if k not in keys]
    for k in keys:
        if k not in summary:
            continue
        row = summary[k]
        lines.append(f"{k:<26}{row.trials:>8d}{row.found_rate * 100:>9.1f}%{row.avg_length:>12.2f}"
                     f"{row.avg_explored:>15.2f}{row.avg_time_ms:>15.2f}")
    lines.append("=" * 90)
    return "\n".join(lines)
