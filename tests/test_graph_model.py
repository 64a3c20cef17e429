"""Tests for random graph generation and the graph views."""

import pytest

from graph_model import Edge, Representation, Vertex, build_graph
from mst_errors import DisconnectedGraphError, VertexError


class TestEdge:
    def test_orders_by_weight_then_names(self):
        v0, v1, v2 = Vertex(0), Vertex(1), Vertex(2)
        a = Edge(v0, v1, 2)
        b = Edge(v0, v2, 2)
        c = Edge(v1, v2, 2)
        d = Edge(v0, v1, 3)

        assert a < b < c < d
        assert not d < a
        assert sorted([d, c, b, a]) == [a, b, c, d]

    def test_connected_vertex(self):
        v0, v1 = Vertex(0), Vertex(1)
        edge = Edge(v0, v1, 4)

        assert edge.connected_vertex(v0) is v1
        assert edge.connected_vertex(v1) is v0

    def test_connected_vertex_rejects_foreign_vertex(self):
        edge = Edge(Vertex(0), Vertex(1), 4)

        with pytest.raises(VertexError):
            edge.connected_vertex(Vertex(2))

    def test_edge_is_immutable(self):
        edge = Edge(Vertex(0), Vertex(1), 4)

        with pytest.raises(AttributeError):
            edge.weight = 7


class TestVertex:
    def test_add_edge_and_lookup(self):
        v0, v1 = Vertex(0), Vertex(1)
        edge = Edge(v0, v1, 3)
        v0.add_edge(edge)

        assert v0.get_edge(1) is edge
        assert v0.get_edge(2) is None
        assert v0.edges == [edge]

    def test_duplicate_edge_rejected(self):
        v0, v1 = Vertex(0), Vertex(1)
        v0.add_edge(Edge(v0, v1, 3))

        with pytest.raises(VertexError):
            v0.add_edge(Edge(v0, v1, 5))


class TestGeneration:
    def test_complete_graph(self, complete_graph):
        """p=1.0 connects every pair on the first attempt."""
        g = complete_graph

        assert g.attempts == 1
        assert g.edge_count == 5 * 4 // 2
        assert g.is_connected()
        for vertex in g.vertices:
            assert len(vertex.edges) == 4

    def test_weights_in_range(self, sparse_graph):
        for edge in sparse_graph.edges:
            assert 1 <= edge.weight <= sparse_graph.num_vertices
            assert edge.left.name < edge.right.name

    def test_same_seed_same_graph(self):
        g1 = build_graph(12, 99, 0.8, max_attempts=1)
        g2 = build_graph(12, 99, 0.8, max_attempts=1)

        assert [e.key for e in g1.edges] == [e.key for e in g2.edges]
        assert g1.matrix == g2.matrix
        assert g1.adj_list == g2.adj_list

    def test_two_vertices(self):
        g = build_graph(2, 1, 1.0)

        assert g.edge_count == 1
        assert g.matrix[0][1] == g.matrix[1][0] == g.edges[0].weight

    def test_generation_time_recorded(self, complete_graph):
        assert complete_graph.generation_time_ms >= 0.0

    def test_attempt_cap(self):
        """Without any edges the graph never connects."""
        with pytest.raises(DisconnectedGraphError):
            build_graph(3, 5, 0.0, max_attempts=3)


class TestViews:
    def test_matrix_is_symmetric(self, sparse_graph):
        n = sparse_graph.num_vertices
        for i in range(n):
            assert sparse_graph.matrix[i][i] == 0
            for j in range(n):
                assert sparse_graph.matrix[i][j] == sparse_graph.matrix[j][i]

    def test_list_and_matrix_agree(self, sparse_graph):
        g = sparse_graph
        for i, neighbors in enumerate(g.adj_list):
            from_matrix = [j for j, w in enumerate(g.matrix[i]) if w > 0]
            assert sorted(neighbors) == from_matrix
            for j in neighbors:
                assert g.edge_between(i, j).weight == g.matrix[i][j]

    def test_edges_match_views(self, sparse_graph):
        g = sparse_graph
        matrix_edges = sum(1 for row in g.matrix for w in row if w > 0) // 2
        list_edges = sum(len(neighbors) for neighbors in g.adj_list) // 2

        assert g.edge_count == matrix_edges == list_edges

    def test_neighbors_same_for_both_representations(self, sparse_graph):
        for name in range(sparse_graph.num_vertices):
            from_list = sorted(sparse_graph.neighbors(name, Representation.LIST))
            from_matrix = sorted(sparse_graph.neighbors(name, Representation.MATRIX))
            assert from_list == from_matrix

    def test_edge_between_missing(self):
        g = build_graph(4, 3, 1.0)
        g.vertices[0]._edge_by_neighbor.pop(1)

        with pytest.raises(VertexError):
            g.edge_between(0, 1)


class TestConnectivity:
    def test_predecessors(self, sparse_graph):
        g = sparse_graph
        assert g.is_connected()

        assert g.predecessors[0] is None
        for v in range(1, g.num_vertices):
            pred = g.predecessors[v]
            assert pred is not None
            assert g.matrix[v][pred] > 0

    def test_visited_flags_reset(self, sparse_graph):
        sparse_graph.is_connected()

        assert not any(v.visited for v in sparse_graph.vertices)

    def test_dfs_follows_edge_order(self):
        """On a complete graph the DFS walks 0 -> 1 -> 2 -> ... as a chain."""
        g = build_graph(5, 8, 1.0)
        g.is_connected()

        assert g.predecessors == [None, 0, 1, 2, 3]

    def test_detects_disconnected_structure(self, complete_graph):
        g = complete_graph
        # Detach vertex 4 from everything
        for vertex in g.vertices:
            vertex.edges = [
                e for e in vertex.edges if 4 not in (e.left.name, e.right.name)
            ]

        assert g.count_reachable() == 4
        assert not g.is_connected()
        assert g.predecessors[4] is None
