import math

import pytest

from citypath.domain.errors import (
    DuplicateVertexError,
    GraphError,
    InvalidWeightError,
    NegativeWeightError,
    UnknownVertexError,
)
from citypath.domain.models import Edge, Point
from citypath.graph.graph import Graph


def test_add_vertex_with_coordinates():
    graph = Graph()
    vertex = graph.add_vertex("Boston", 10, 20)

    assert vertex.location == Point(10.0, 20.0)
    assert "Boston" in graph
    assert len(graph) == 1
    assert graph.vertex("Boston") is vertex


def test_add_vertex_without_coordinates():
    graph = Graph()
    vertex = graph.add_vertex(0)

    assert vertex.location is None
    assert not vertex.has_location


def test_duplicate_vertex_rejected():
    graph = Graph()
    graph.add_vertex("A")

    with pytest.raises(DuplicateVertexError) as excinfo:
        graph.add_vertex("A")
    assert excinfo.value.vertex == "A"


def test_half_coordinates_rejected():
    graph = Graph()
    with pytest.raises(GraphError):
        graph.add_vertex("A", x=1.0)


@pytest.mark.parametrize(
    "x, y", [(math.nan, 0.0), (0.0, math.inf), (-math.inf, 1.0)]
)
def test_non_finite_coordinates_rejected(x, y):
    graph = Graph()
    with pytest.raises(GraphError, match="non-finite coordinates"):
        graph.add_vertex("A", x, y)
    assert "A" not in graph


def test_undirected_edge_adds_both_arcs():
    graph = Graph()
    graph.add_vertex("A")
    graph.add_vertex("B")
    graph.add_undirected_edge("A", "B", 2.5)

    assert graph.neighbors("A") == (Edge("A", "B", 2.5),)
    assert graph.neighbors("B") == (Edge("B", "A", 2.5),)
    assert graph.edge_count == 2


def test_edge_to_unknown_vertex_rejected():
    graph = Graph()
    graph.add_vertex("A")

    with pytest.raises(UnknownVertexError) as excinfo:
        graph.add_undirected_edge("A", "Z", 1.0)
    assert excinfo.value.vertex == "Z"
    # nothing was half-added
    assert graph.neighbors("A") == ()


def test_negative_weight_rejected():
    graph = Graph()
    graph.add_vertex("A")
    graph.add_vertex("B")

    with pytest.raises(NegativeWeightError) as excinfo:
        graph.add_edge("A", "B", -1.0)
    assert excinfo.value.weight == -1.0


@pytest.mark.parametrize("weight", [math.inf, math.nan])
def test_non_finite_weight_rejected(weight):
    graph = Graph()
    graph.add_vertex("A")
    graph.add_vertex("B")

    with pytest.raises(InvalidWeightError):
        graph.add_edge("A", "B", weight)


def test_zero_weight_allowed():
    graph = Graph()
    graph.add_vertex("A")
    graph.add_vertex("B")
    graph.add_edge("A", "B", 0)

    assert graph.neighbors("A")[0].weight == 0.0


def test_unknown_vertex_lookup():
    graph = Graph()
    with pytest.raises(UnknownVertexError):
        graph.vertex("nowhere")
    with pytest.raises(UnknownVertexError):
        graph.neighbors("nowhere")


def test_edge_between_prefers_cheapest_parallel_arc():
    graph = Graph()
    graph.add_vertex("A")
    graph.add_vertex("B")
    graph.add_edge("A", "B", 4.0)
    graph.add_edge("A", "B", 1.5)

    assert graph.edge_between("A", "B") == Edge("A", "B", 1.5)
    assert graph.edge_between("B", "A") is None


def test_revision_changes_on_mutation():
    graph = Graph()
    start = graph.revision
    graph.add_vertex("A")
    graph.add_vertex("B")
    graph.add_edge("A", "B", 1.0)

    assert graph.revision == start + 3


def test_compute_euclidean_distances():
    graph = Graph()
    graph.add_vertex("A", 0, 0)
    graph.add_vertex("B", 3, 4)
    graph.add_undirected_edge("A", "B", 100.0)

    graph.compute_euclidean_distances()

    assert graph.neighbors("A")[0].weight == pytest.approx(5.0)
    assert graph.neighbors("B")[0].weight == pytest.approx(5.0)


def test_euclidean_distances_need_coordinates():
    graph = Graph()
    graph.add_vertex("A", 0, 0)
    graph.add_vertex("B")
    graph.add_edge("A", "B", 1.0)

    with pytest.raises(GraphError, match="B has no coordinates"):
        graph.compute_euclidean_distances()


def test_euclidean_overflow_keeps_previous_weights():
    graph = Graph()
    graph.add_vertex("A", 1e308, 0)
    graph.add_vertex("B", -1e308, 0)
    graph.add_undirected_edge("A", "B", 7.0)
    revision = graph.revision

    with pytest.raises(InvalidWeightError) as excinfo:
        graph.compute_euclidean_distances()
    assert math.isinf(excinfo.value.weight)
    assert excinfo.value.source == "A"
    assert excinfo.value.target == "B"
    assert graph.neighbors("A") == (Edge("A", "B", 7.0),)
    assert graph.revision == revision


def test_adjacency_listing_keeps_insertion_order():
    graph = Graph()
    for name in ["A", "B", "C"]:
        graph.add_vertex(name)
    graph.add_undirected_edge("A", "B", 1.0)
    graph.add_undirected_edge("A", "C", 5.0)

    assert graph.adjacency_listing() == [
        ("A", [("B", 1.0), ("C", 5.0)]),
        ("B", [("A", 1.0)]),
        ("C", [("A", 5.0)]),
    ]
