# tree_tracer.py
from typing import Dict, List, Optional, Tuple
import logging

import graphviz

from .config import SIZE
from .problem import Config, action

logger = logging.getLogger(__name__)


class SearchTreeTracer:
    """
    Collects parent -> child edges reported by a strategy's on_generate hook;
    stops recording after n_limit edges.
    """
    def __init__(self, n_limit: int = 50):
        self.n_limit = max(1, n_limit)
        self.generated = 0
        self.edges: List[Tuple[str, str, str]] = []   # (u_id, v_id, move)
        self.id_of: Dict[Config, str] = {}
        self.state_of: Dict[str, Config] = {}
        self._next_id = 0

    def _label(self, state: Config) -> str:
        if state not in self.id_of:
            nid = "S" if self._next_id == 0 else f"N{self._next_id}"
            self.id_of[state] = nid
            self.state_of[nid] = state
            self._next_id += 1
        return self.id_of[state]

    def on_generate(self, parent: Config, child: Config) -> None:
        if self.generated >= self.n_limit:
            return
        u = self._label(parent)
        v = self._label(child)
        self.edges.append((u, v, action(parent, child) or "?"))
        self.generated += 1

    @property
    def full(self) -> bool:
        return self.generated >= self.n_limit

    def to_digraph(self) -> graphviz.Digraph:
        dot = graphviz.Digraph("SearchTree", format="png")
        dot.attr("node", shape="box", fontname="Courier", fontsize="10")

        def label_for_state(state: Config) -> str:
            return "\n".join(" ".join("_" if v == 0 else str(v) for v in state[r * SIZE:(r + 1) * SIZE])
                             for r in range(SIZE))

        for nid, st in self.state_of.items():
            dot.node(nid, label_for_state(st))
        for u, v, mv in self.edges:
            dot.edge(u, v, label=mv, fontsize="9")
        return dot

    def to_dot(self) -> str:
        return self.to_digraph().source

    def render(self, filename: str, directory: Optional[str] = None) -> str:
        """Render to PNG; without the `dot` executable, save the DOT source instead."""
        dot = self.to_digraph()
        try:
            return dot.render(filename=filename, directory=directory, cleanup=True)
        except graphviz.ExecutableNotFound as e:
            logger.debug("graphviz executable missing (%s), saving DOT source", e)
            return dot.save(filename=f"{filename}.dot", directory=directory)
