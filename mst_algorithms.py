"""
Kruskal's and Prim's minimum spanning tree algorithms
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import List, Optional

from edge_sorting import SortType, get_sorter, sort_graph_edges
from graph_model import Edge, Representation
from indexed_min_pq import IndexedMinPQ
from mst_errors import DisconnectedGraphError
from union_find import UnionFind

logger = logging.getLogger(__name__)

START_VERTEX = 0


@dataclass
class MSTResult:
    algorithm: str
    edges: List[Edge]
    total_weight: int
    elapsed_ms: float
    representation: Representation
    sort_type: Optional[SortType] = None


def kruskal_mst(graph, representation, sort_type, rng=None):
    """
    Kruskal's algorithm over the edges of one representation, sorted with
    the given strategy.
    """
    start = time.perf_counter()

    sorted_result = sort_graph_edges(get_sorter(sort_type, rng=rng), graph, representation)
    edges = sorted_result.edges

    partition = UnionFind(graph.num_vertices)
    mst = []
    index = 0

    while len(mst) < graph.num_vertices - 1:
        if index >= len(edges):
            raise DisconnectedGraphError(
                f"Ran out of edges after accepting {len(mst)} of "
                f"{graph.num_vertices - 1} MST edges"
            )

        edge = edges[index]
        if partition.union(edge.left.name, edge.right.name):
            mst.append(edge)
        index += 1

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    total_weight = sum(edge.weight for edge in mst)
    logger.debug(
        "Kruskal (%s, %s): weight %d in %.3f ms",
        representation.value,
        sort_type.value,
        total_weight,
        elapsed_ms,
    )

    return MSTResult(
        algorithm="KRUSKAL",
        edges=mst,
        total_weight=total_weight,
        elapsed_ms=elapsed_ms,
        representation=representation,
        sort_type=sort_type,
    )


def prim_mst(graph, representation):
    """Prim's algorithm from vertex 0 using an indexed min-priority-queue"""
    start = time.perf_counter()

    pq = IndexedMinPQ(graph.num_vertices)
    for name in range(graph.num_vertices):
        if name == START_VERTEX:
            pq.insert(name, 0, parent=START_VERTEX)
        else:
            pq.insert(name, math.inf)

    mst = []
    while not pq.is_empty():
        u = pq.extract_min()
        if pq.priority_of(u) == math.inf:
            raise DisconnectedGraphError(f"Vertex {u} is not reachable from {START_VERTEX}")

        if u != START_VERTEX:
            mst.append(graph.edge_between(pq.parent_of(u), u))

        for v, weight in graph.neighbors(u, representation):
            if pq.contains(v) and weight < pq.priority_of(v):
                pq.decrease_key(v, weight, parent=u)

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    total_weight = sum(edge.weight for edge in mst)
    logger.debug(
        "Prim (%s): weight %d in %.3f ms", representation.value, total_weight, elapsed_ms
    )

    return MSTResult(
        algorithm="PRIM",
        edges=mst,
        total_weight=total_weight,
        elapsed_ms=elapsed_ms,
        representation=representation,
    )
