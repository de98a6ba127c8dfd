# source/manuscript_sort/experiments.py
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Sequence
import argparse
import logging
import os
import sys

from .adversarial import alpha_beta, minimax
from .annealing import simulated_annealing
from .astar import astar
from .bfs import bfs
from .config import (ADVERSARIAL_DEPTH, ALGORITHMS, DEFAULT_INPUT, DFS_DEPTH_LIMIT, GOAL,
                     SA_MAX_ITERATIONS, SA_SEED, TREE_DEFAULT_EDGES)
from .dfs import dfs
from .greedy import greedy
from .heuristics import build_heuristic, h1, h2
from .idastar import idastar
from .parsing import MalformedInputError, parse_state, read_input
from .problem import ManuscriptProblem, scramble
from .records import SearchResult
from .report import format_adversarial, format_comparison, format_result, format_summary, state_to_grid, state_to_string, summarize
from .tree_tracer import SearchTreeTracer

Runner = Callable[[ManuscriptProblem, argparse.Namespace], SearchResult]

# key -> runner; adversarial is reported separately
RUNNERS: Dict[str, Runner] = {
    "bfs":        lambda p, a: bfs(p),
    "dfs":        lambda p, a: dfs(p, depth_limit=a.depth_limit),
    "greedy":     lambda p, a: greedy(p, build_heuristic("h2", p.goal)),
    "astar-h1":   lambda p, a: astar(p, build_heuristic("h1", p.goal)),
    "astar-h2":   lambda p, a: astar(p, build_heuristic("h2", p.goal)),
    "idastar-h1": lambda p, a: idastar(p, build_heuristic("h1", p.goal), max_threshold=a.ida_max_threshold),
    "idastar-h2": lambda p, a: idastar(p, build_heuristic("h2", p.goal), max_threshold=a.ida_max_threshold),
    "annealing":  lambda p, a: simulated_annealing(p, max_iterations=a.sa_iterations, seed=a.sa_seed),
}

SECTIONS = [
    ("SECTION 2A: UNINFORMED SEARCH", ("bfs", "dfs")),
    ("SECTION 2B: INFORMED SEARCH", ("greedy", "astar-h1", "astar-h2")),
    ("SECTION 2C: MEMORY-BOUNDED & LOCAL SEARCH", ("idastar-h1", "idastar-h2", "annealing")),
    ("SECTION 2D: ADVERSARIAL SEARCH", ("adversarial",)),
]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="manuscript-sort",
                                 description="Compare search strategies on the 3x3 manuscript board.")
    ap.add_argument("input", nargs="?", default=None,
                    help=f"input file: line 1 start, line 2 goal (optional). Default: {DEFAULT_INPUT}")
    ap.add_argument("--start", help="start configuration, e.g. '123;B46;758'")
    ap.add_argument("--goal", help="goal configuration (default 123 456 78B)")
    ap.add_argument("--algo", action="append", choices=ALGORITHMS,
                    help="algorithm to run (repeatable); default: all")
    ap.add_argument("--depth-limit", type=int, default=DFS_DEPTH_LIMIT, help="DFS depth bound")
    ap.add_argument("--adv-depth", type=int, default=ADVERSARIAL_DEPTH, help="minimax/alpha-beta lookahead")
    ap.add_argument("--sa-seed", type=int, default=SA_SEED)
    ap.add_argument("--sa-iterations", type=int, default=SA_MAX_ITERATIONS)
    ap.add_argument("--ida-max-threshold", type=int, default=None,
                    help="give up IDA* once the threshold would exceed this value")
    ap.add_argument("--random", type=int, default=0, metavar="N",
                    help="run N scrambled starts and print a summary table")
    ap.add_argument("--shuffle-k", type=int, default=20, help="scramble length for --random")
    ap.add_argument("--seed", type=int, default=0, help="base seed for --random")
    ap.add_argument("--tree-dot", default=None, metavar="PATH",
                    help="write the first --tree-n A* (h2) edges with graphviz")
    ap.add_argument("--tree-n", type=int, default=TREE_DEFAULT_EDGES)
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def load_problem(args: argparse.Namespace) -> ManuscriptProblem:
    if args.start:
        start = parse_state(args.start)
        goal = parse_state(args.goal) if args.goal else GOAL
    else:
        start, goal = read_input(args.input or DEFAULT_INPUT)
        if args.goal:
            goal = parse_state(args.goal)
    return ManuscriptProblem(start, goal)


def run_selected(problem: ManuscriptProblem, args: argparse.Namespace,
                 selected: Sequence[str]) -> Dict[str, SearchResult]:
    out: Dict[str, SearchResult] = {}
    for key in selected:
        if key not in RUNNERS:
            continue
        out[key] = RUNNERS[key](problem, args)
    return out


def print_header(problem: ManuscriptProblem) -> None:
    s0 = problem.initial_state()
    print("Start State: " + state_to_string(s0))
    print("Goal  State: " + state_to_string(problem.goal))
    print("Start Grid:\n" + state_to_grid(s0))
    print(f"h1 (Misplaced Tiles)    = {h1(s0, problem.goal)}")
    print(f"h2 (Manhattan Distance) = {h2(s0, problem.goal)}")
    print()


def run_report(problem: ManuscriptProblem, args: argparse.Namespace, selected: Sequence[str]) -> None:
    print_header(problem)
    for title, keys in SECTIONS:
        keys = [k for k in keys if k in selected]
        if not keys:
            continue
        print("*" * 60)
        print("*  " + title)
        print("*" * 60)
        print()
        for key, res in run_selected(problem, args, keys).items():
            print(format_result(res))
        if "adversarial" in keys:
            print(f"Adversarial Search Depth: {args.adv_depth}")
            print("Utility function: u(s) = -ManhattanDistance(s)\n")
            mm = minimax(problem, args.adv_depth)
            print(format_adversarial(mm))
            ab = alpha_beta(problem, args.adv_depth)
            print(format_adversarial(ab))
            print(format_comparison(mm, ab))


def run_random(args: argparse.Namespace, selected: Sequence[str]) -> None:
    goal = parse_state(args.goal) if args.goal else GOAL
    results: Dict[str, List[SearchResult]] = {k: [] for k in selected if k in RUNNERS}
    for key in selected:
        if key not in RUNNERS:
            print(f"[SKIP] {key}: not part of the random-start comparison")
    for i in range(args.random):
        s0 = scramble(goal, steps=args.shuffle_k, seed=args.seed + i)
        print(f"[Case {i}] start={state_to_string(s0)}")
        for key, res in run_selected(ManuscriptProblem(s0, goal), args, selected).items():
            results[key].append(res)
    print(format_summary(f"Comparison over {args.random} scrambled starts (k={args.shuffle_k})",
                         summarize(results), order=ALGORITHMS))


def write_tree(problem: ManuscriptProblem, path: str, n: int) -> str:
    tracer = SearchTreeTracer(n_limit=n)
    astar(problem, build_heuristic("h2", problem.goal), on_generate=tracer.on_generate)
    base, _ = os.path.splitext(path)
    d = os.path.dirname(base)
    if d:
        os.makedirs(d, exist_ok=True)
    return tracer.render(base)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    selected = list(dict.fromkeys(args.algo)) if args.algo else list(ALGORITHMS)
    print(f"[CONFIG] algorithms={','.join(selected)}")

    try:
        if args.random:
            run_random(args, selected)
            return 0
        problem = load_problem(args)
    except MalformedInputError as e:
        print(f"[ERROR] malformed input: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"[ERROR] cannot read input: {e}", file=sys.stderr)
        return 2

    run_report(problem, args, selected)
    if args.tree_dot:
        out = write_tree(problem, args.tree_dot, args.tree_n)
        print(f"[TREE] search tree written to: {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
