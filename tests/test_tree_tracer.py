import graphviz

from manuscript_sort.astar import astar
from manuscript_sort.heuristics import ManhattanDistance
from manuscript_sort.tree_tracer import SearchTreeTracer

from conftest import NEAR


def test_tracer_records_first_edges(near_problem):
    tracer = SearchTreeTracer(n_limit=3)
    astar(near_problem, ManhattanDistance(), on_generate=tracer.on_generate)
    assert tracer.full
    assert tracer.edges == [("S", "N1", "Up"), ("S", "N2", "Down"), ("S", "N3", "Left")]
    assert tracer.state_of["S"] == NEAR


def test_tracer_digraph_source(near_problem):
    tracer = SearchTreeTracer(n_limit=10)
    astar(near_problem, ManhattanDistance(), on_generate=tracer.on_generate)
    dot = tracer.to_digraph()
    assert isinstance(dot, graphviz.Digraph)
    src = tracer.to_dot()
    assert "digraph SearchTree" in src
    assert "S -> N2" in src
    assert "Right" in src
    assert "1 2 3" in src
    assert "4 _ 6" in src


def test_render_falls_back_to_dot_source(near_problem, tmp_path, monkeypatch):
    def no_dot(self, *args, **kwargs):
        raise graphviz.ExecutableNotFound(["dot"])

    monkeypatch.setattr(graphviz.Digraph, "render", no_dot)
    tracer = SearchTreeTracer(n_limit=5)
    astar(near_problem, ManhattanDistance(), on_generate=tracer.on_generate)
    out = tracer.render("tree", directory=str(tmp_path))
    assert out.endswith("tree.dot")
    assert (tmp_path / "tree.dot").read_text(encoding="utf-8").startswith("digraph SearchTree")
