"""
Cross-check MST results against NetworkX
"""

import networkx as nx

from union_find import UnionFind


def to_networkx(graph):
    """Create a NetworkX graph with the same vertices and weighted edges"""
    G = nx.Graph()
    G.add_nodes_from(range(graph.num_vertices))
    for edge in graph.edges:
        G.add_edge(edge.left.name, edge.right.name, weight=edge.weight)
    return G


def networkx_mst_weight(graph):
    """Total weight of the MST computed by NetworkX"""
    mst = nx.minimum_spanning_tree(to_networkx(graph), weight="weight")
    return sum(data["weight"] for _, _, data in mst.edges(data=True))


def is_spanning_tree(graph, mst_edges):
    """Replay the edges through a union-find: n-1 edges, no cycle, one component"""
    if len(mst_edges) != graph.num_vertices - 1:
        return False

    partition = UnionFind(graph.num_vertices)
    for edge in mst_edges:
        if not partition.union(edge.left.name, edge.right.name):
            return False

    return partition.count == 1


def verify_mst(graph, result):
    """Compare an MSTResult with NetworkX"""
    expected_weight = networkx_mst_weight(graph)
    spanning = is_spanning_tree(graph, result.edges)

    return {
        "algorithm": result.algorithm,
        "representation": result.representation.value,
        "sort": result.sort_type.value if result.sort_type else None,
        "mst_weight": result.total_weight,
        "networkx_weight": expected_weight,
        "is_spanning_tree": spanning,
        "is_correct": spanning and result.total_weight == expected_weight,
    }
