"""Tests for the graph/MST figure."""

from graph_model import Representation
from mst_algorithms import prim_mst
from visualize_mst import visualize


def test_visualize_saves_figure(complete_graph, tmp_path):
    result = prim_mst(complete_graph, Representation.MATRIX)
    image = tmp_path / "prim.png"

    mst_graph = visualize(complete_graph, result, str(image))

    assert image.exists()
    assert mst_graph.number_of_nodes() == complete_graph.num_vertices
    assert mst_graph.number_of_edges() == complete_graph.num_vertices - 1
