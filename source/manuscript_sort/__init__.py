from .problem import (Config, ManuscriptProblem, action, is_goal, is_solvable, neighbors,
                      reconstruct_path, scramble)
from .heuristics import ManhattanDistance, MisplacedTiles, build_heuristic, h1, h2
from .records import AdversarialResult, SearchResult
from .bfs import bfs
from .dfs import dfs
from .greedy import greedy
from .astar import astar
from .idastar import idastar
from .annealing import simulated_annealing
from .adversarial import alpha_beta, minimax, pruning_savings
from .parsing import MalformedInputError, parse_state, read_input

__version__ = "1.0.0"
