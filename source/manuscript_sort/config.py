# ----- BOARD -----
SIZE = 3
GOAL = (1, 2, 3, 4, 5, 6, 7, 8, 0)   # 0 = blank
DEFAULT_GOAL_LINE = "123 456 78B"
DEFAULT_INPUT = "input.txt"

# ----- UNINFORMED -----
DFS_DEPTH_LIMIT = 50                 # known max optimal depth for 3x3 is 31

# ----- SIMULATED ANNEALING -----
SA_INITIAL_TEMP = 1000.0
SA_COOLING_RATE = 0.9995
SA_MIN_TEMP = 0.001
SA_MAX_ITERATIONS = 500_000
SA_SEED = 42
SA_LOG_EVERY = 100_000

# ----- ADVERSARIAL -----
ADVERSARIAL_DEPTH = 6

# ----- CLI / EXPERIMENTS -----
ALGORITHMS = ("bfs", "dfs", "greedy", "astar-h1", "astar-h2",
              "idastar-h1", "idastar-h2", "annealing", "adversarial")
TREE_DEFAULT_EDGES = 30
