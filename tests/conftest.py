import pytest

from graph_model import Edge, Vertex, build_graph


def make_edges(triples):
    """Build Edge objects from (left, right, weight) triples"""
    vertices = {}
    edges = []
    for left, right, weight in triples:
        for name in (left, right):
            if name not in vertices:
                vertices[name] = Vertex(name)
        edges.append(Edge(vertices[left], vertices[right], weight))
    return edges


def keys(edges):
    return [edge.key for edge in edges]


@pytest.fixture
def complete_graph():
    return build_graph(5, 42, 1.0, max_attempts=1)


@pytest.fixture
def sparse_graph():
    return build_graph(15, 7, 0.8, max_attempts=1)
