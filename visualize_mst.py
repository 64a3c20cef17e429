"""
Draw a graph next to its minimum spanning tree
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import networkx as nx

from check_mst import to_networkx


def visualize(graph, result, save_path="mst.png"):
    """Save the graph and the MST side by side and return the MST graph"""
    G = to_networkx(graph)
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

    # Same layout for both panels
    pos = nx.spring_layout(G, seed=42)

    # Original graph
    ax1.set_title(
        f"Graph (n={graph.num_vertices}, seed={graph.seed}, p={graph.p})",
        fontsize=14,
        fontweight="bold",
    )
    nx.draw(
        G,
        pos,
        ax=ax1,
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="gray",
    )
    edge_labels = nx.get_edge_attributes(G, "weight")
    nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax1)

    # MST
    title = f"MST ({result.algorithm}, {result.representation.value}"
    if result.sort_type is not None:
        title += f", {result.sort_type.value}"
    title += f") weight = {result.total_weight}"
    ax2.set_title(title, fontsize=14, fontweight="bold")

    mst_graph = nx.Graph()
    mst_graph.add_nodes_from(G.nodes())
    for edge in result.edges:
        mst_graph.add_edge(edge.left.name, edge.right.name, weight=edge.weight)

    nx.draw(
        mst_graph,
        pos,
        ax=ax2,
        with_labels=True,
        node_color="lightgreen",
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="red",
        width=3,
    )
    if result.edges:
        mst_labels = nx.get_edge_attributes(mst_graph, "weight")
        nx.draw_networkx_edge_labels(mst_graph, pos, mst_labels, ax=ax2)

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)

    return mst_graph
