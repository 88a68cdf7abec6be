"""
Unit tests for the graph registry, plus cross-representation equivalence.
"""

import random

import pytest

from edge_list_graph import EdgeListGraph
from graph import Graph
from graph_factory import GraphRegistry, empty_graph, registry
from vertex_list_graph import VertexListGraph


def test_default_registry_kinds():
    assert registry.kinds() == ["edges", "vertices"]
    assert registry.all() == {"edges": EdgeListGraph, "vertices": VertexListGraph}


def test_empty_graph_defaults_to_edge_list():
    g = empty_graph()

    assert isinstance(g, EdgeListGraph)
    assert g.vertices() == set()


def test_empty_graph_returns_fresh_instances():
    a = empty_graph("vertices")
    b = empty_graph("vertices")
    a.add_vertex("A")

    assert isinstance(a, VertexListGraph)
    assert b.vertices() == set()


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError, match="matrix"):
        empty_graph("matrix")


def test_register_rejects_duplicates_and_non_graphs():
    reg = GraphRegistry()
    reg.register("edges", EdgeListGraph)

    with pytest.raises(ValueError):
        reg.register("edges", VertexListGraph)
    with pytest.raises(ValueError):
        reg.register("dict", dict)
    with pytest.raises(ValueError):
        reg.register("instance", EdgeListGraph())

    assert reg.kinds() == ["edges"]


def test_all_returns_copy():
    kinds = registry.all()
    kinds.clear()

    assert registry.kinds() == ["edges", "vertices"]


# --- cross-representation equivalence -----------------------------------------------


def _observe(g: Graph, labels):
    return (
        g.vertices(),
        {v: g.targets(v) for v in labels},
        {v: g.sources(v) for v in labels},
        g.edge_count(),
    )


def _apply(g: Graph, op):
    name, args = op
    return getattr(g, name)(*args)


def _assert_equivalent(ops, labels):
    edges = empty_graph("edges")
    vertices = empty_graph("vertices")

    for step, op in enumerate(ops):
        assert _apply(edges, op) == _apply(vertices, op), f"step {step}: {op}"
        assert _observe(edges, labels) == _observe(vertices, labels), f"step {step}: {op}"

    edges.check_invariants()
    vertices.check_invariants()


def test_scripted_sequence_is_equivalent():
    ops = [
        ("add_vertex", ("A",)),
        ("set_edge", ("A", "B", 10)),
        ("set_edge", ("A", "C", 20)),
        ("set_edge", ("B", "C", 30)),
        ("set_edge", ("C", "C", 1)),
        ("set_edge", ("A", "B", 5)),
        ("set_edge", ("D", "E", 0)),
        ("add_vertex", ("A",)),
        ("remove_vertex", ("B",)),
        ("remove_vertex", ("B",)),
        ("set_edge", ("A", "C", 0)),
        ("set_edge", ("C", "A", 2)),
        ("remove_vertex", ("C",)),
    ]
    _assert_equivalent(ops, labels="ABCDE")


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_random_sequences_are_equivalent(seed):
    rng = random.Random(seed)
    labels = "ABCDEF"
    ops = []
    for _ in range(200):
        roll = rng.random()
        if roll < 0.15:
            ops.append(("add_vertex", (rng.choice(labels),)))
        elif roll < 0.25:
            ops.append(("remove_vertex", (rng.choice(labels),)))
        else:
            weight = rng.choice([0, 0, 1, 2, 3, 10])
            ops.append(("set_edge", (rng.choice(labels), rng.choice(labels), weight)))

    _assert_equivalent(ops, labels)
