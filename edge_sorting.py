"""
Edge sorting strategies benchmarked over both graph representations
"""

import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Protocol

from graph_model import Edge, Representation


class SortType(Enum):
    INSERTION = "INSERTION SORT"
    COUNT = "COUNT SORT"
    QUICK = "QUICKSORT"


@dataclass
class SortResult:
    edges: List[Edge]
    elapsed_ms: float
    sort_type: SortType
    representation: Representation


class EdgeSorter(Protocol):
    sort_type: SortType
    elapsed_ms: dict

    def sort(self, edges: List[Edge]) -> List[Edge]: ...


# ----------------------------
# Edge extraction
# ----------------------------


def edges_from_adjacency_list(graph):
    """Collect each edge once by looking it up on the vertices of the list"""
    edges = []
    seen = set()

    for name, neighbors in enumerate(graph.adj_list):
        vertex = graph.vertices[name]
        for neighbor in neighbors:
            edge = vertex.get_edge(neighbor)
            if edge is not None and edge not in seen:
                seen.add(edge)
                edges.append(edge)

    return edges


def edges_from_matrix(graph):
    """Collect each edge once, skipping the symmetric half of the matrix"""
    edges = []
    visited = set()

    for i, row in enumerate(graph.matrix):
        for j, weight in enumerate(row):
            if (j, i) in visited or weight <= 0:
                continue
            edges.append(graph.edge_between(i, j))
            visited.add((i, j))

    return edges


def extract_edges(graph, representation):
    if representation is Representation.LIST:
        return edges_from_adjacency_list(graph)
    return edges_from_matrix(graph)


# ----------------------------
# Strategies
# ----------------------------


class InsertionSort:
    sort_type = SortType.INSERTION

    def __init__(self):
        self.elapsed_ms = {}

    def sort(self, edges):
        a = list(edges)
        for i in range(1, len(a)):
            j = i
            while j > 0 and a[j] < a[j - 1]:
                a[j], a[j - 1] = a[j - 1], a[j]
                j -= 1
        return a


class CountSort:
    """Stable key-indexed counting by edge weight"""

    sort_type = SortType.COUNT

    def __init__(self):
        self.elapsed_ms = {}

    def sort(self, edges):
        if not edges:
            return []

        r = max(edge.weight for edge in edges) + 1
        # weight + 1 is written, so the counts need r + 1 slots
        count = [0] * (r + 1)

        for edge in edges:
            count[edge.weight + 1] += 1

        for i in range(r):
            count[i + 1] += count[i]

        aux = [None] * len(edges)
        for edge in edges:
            aux[count[edge.weight]] = edge
            count[edge.weight] += 1

        return aux


class QuickSort:
    """Randomized quicksort with a two-way Hoare partition"""

    sort_type = SortType.QUICK

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.elapsed_ms = {}

    def sort(self, edges):
        a = list(edges)
        self.shuffle(a)
        self._quick_sort(a, 0, len(a) - 1)
        return a

    def shuffle(self, a):
        """Fisher-Yates shuffle"""
        for i in range(len(a) - 1, 0, -1):
            r = self.rng.randrange(i + 1)
            a[i], a[r] = a[r], a[i]

    def _quick_sort(self, a, lo, hi):
        # Recurse into the smaller half and loop on the larger one
        while lo < hi:
            j = self._partition(a, lo, hi)
            if j - lo < hi - j:
                self._quick_sort(a, lo, j - 1)
                lo = j + 1
            else:
                self._quick_sort(a, j + 1, hi)
                hi = j - 1

    @staticmethod
    def _partition(a, lo, hi):
        pivot = a[lo]
        i = lo
        j = hi + 1

        while True:
            i += 1
            while a[i] < pivot:
                if i == hi:
                    break
                i += 1

            j -= 1
            while pivot < a[j]:
                if j == lo:
                    break
                j -= 1

            if i >= j:
                break
            a[i], a[j] = a[j], a[i]

        a[lo], a[j] = a[j], a[lo]
        return j


SORTERS = {
    SortType.INSERTION: InsertionSort,
    SortType.COUNT: CountSort,
    SortType.QUICK: QuickSort,
}


def get_sorter(sort_type, rng=None):
    """Return a fresh sorter for the given sort type"""
    if sort_type is SortType.QUICK:
        return QuickSort(rng=rng)
    return SORTERS[sort_type]()


def sort_graph_edges(sorter, graph, representation):
    """Extract the edges of one representation and sort them, timing both"""
    start = time.perf_counter()
    edges = sorter.sort(extract_edges(graph, representation))
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    sorter.elapsed_ms[representation] = elapsed_ms
    return SortResult(
        edges=edges,
        elapsed_ms=elapsed_ms,
        sort_type=sorter.sort_type,
        representation=representation,
    )


def sorted_edges(graph, representation, sort_type, rng=None):
    return sort_graph_edges(get_sorter(sort_type, rng=rng), graph, representation)
