"""
Random undirected weighted graph used by the MST benchmark

The graph keeps a single canonical list of Edge objects and exposes two
derived views of it: an adjacency list and an adjacency matrix.
"""

import logging
import random
import time
from dataclasses import dataclass
from enum import Enum

from mst_errors import DisconnectedGraphError, VertexError

logger = logging.getLogger(__name__)

MIN_WEIGHT = 1


class Representation(Enum):
    LIST = "LIST"
    MATRIX = "MATRIX"


class Vertex:
    """A named graph node and the edges incident to it"""

    def __init__(self, name):
        self.name = name
        self.visited = False
        self.edges = []
        self._edge_by_neighbor = {}

    def add_edge(self, edge):
        """Attach an edge that has this vertex as one of its endpoints"""
        neighbor = edge.connected_vertex(self).name
        if neighbor in self._edge_by_neighbor:
            raise VertexError(
                f"Edge ({self.name}, {neighbor}) already exists on vertex {self.name}"
            )
        self._edge_by_neighbor[neighbor] = edge
        self.edges.append(edge)

    def get_edge(self, neighbor_name):
        """Return the edge to the named neighbor, or None"""
        return self._edge_by_neighbor.get(neighbor_name)

    def visit(self):
        self.visited = True

    def reset(self):
        self.visited = False

    def __repr__(self):
        return f"Vertex({self.name})"


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Weighted connection between two vertices.

    Edges order by weight, then by the left endpoint's name, then by the
    right endpoint's name.
    """

    left: Vertex
    right: Vertex
    weight: int

    @property
    def key(self):
        return (self.weight, self.left.name, self.right.name)

    def __lt__(self, other):
        return self.key < other.key

    def connected_vertex(self, current):
        """Return the endpoint opposite to `current`"""
        if current is self.left:
            return self.right
        if current is self.right:
            return self.left
        raise VertexError(
            f"Vertex {current.name} is not an endpoint of edge "
            f"({self.left.name}, {self.right.name})"
        )

    def __repr__(self):
        return f"Edge({self.left.name}, {self.right.name}, weight={self.weight})"


class Graph:
    """
    Connected random graph built from (num_vertices, seed, p).

    Every unordered pair of vertices is connected with probability p and
    weights are drawn uniformly from [1, num_vertices]. Generation repeats
    until the graph is connected; max_attempts caps the number of tries.
    """

    def __init__(self, num_vertices, seed, p, max_attempts=None):
        self.num_vertices = num_vertices
        self.seed = seed
        self.p = p
        self.max_attempts = max_attempts

        self.vertices = []
        self.adj_list = []
        self.matrix = []
        self.edges = []
        self.predecessors = [None] * num_vertices

        self.generation_time_ms = 0.0
        self.attempts = 0

        self.generate()

    def generate(self):
        """Generate edges until the graph is connected"""
        start = time.perf_counter()
        self.attempts = 0

        while True:
            self.attempts += 1
            self._reset_graphs()

            # Both streams restart from the same seeds on every attempt
            r_connect = random.Random(self.seed)
            r_weight = random.Random(self.seed * 2)

            for i in range(self.num_vertices):
                for j in range(i + 1, self.num_vertices):
                    if r_connect.random() < self.p:
                        weight = r_weight.randint(MIN_WEIGHT, self.num_vertices)
                        self._add_edge(i, j, weight)

            if self.is_connected():
                break

            logger.debug(
                "Attempt %d produced a disconnected graph (n=%d, seed=%d, p=%s)",
                self.attempts,
                self.num_vertices,
                self.seed,
                self.p,
            )
            if self.max_attempts is not None and self.attempts >= self.max_attempts:
                raise DisconnectedGraphError(
                    f"No connected graph after {self.attempts} attempts "
                    f"(n={self.num_vertices}, seed={self.seed}, p={self.p})"
                )

        self.generation_time_ms = (time.perf_counter() - start) * 1000.0
        logger.info(
            "Generated connected graph: %d vertices, %d edges in %.3f ms",
            self.num_vertices,
            len(self.edges),
            self.generation_time_ms,
        )

    def _add_edge(self, i, j, weight):
        edge = Edge(self.vertices[i], self.vertices[j], weight)

        self.vertices[i].add_edge(edge)
        self.vertices[j].add_edge(edge)

        self.adj_list[i].append(j)
        self.adj_list[j].append(i)

        self.matrix[i][j] = weight
        self.matrix[j][i] = weight

        self.edges.append(edge)

    @property
    def edge_count(self):
        return len(self.edges)

    def edge_between(self, u, v):
        """Return the canonical edge connecting u and v"""
        edge = self.vertices[u].get_edge(v)
        if edge is None:
            raise VertexError(f"No edge between {u} and {v}")
        return edge

    def neighbors(self, name, representation):
        """Yield (neighbor, weight) pairs of a vertex from the chosen view"""
        if representation is Representation.LIST:
            for neighbor in self.adj_list[name]:
                yield neighbor, self.edge_between(name, neighbor).weight
        else:
            for neighbor, weight in enumerate(self.matrix[name]):
                if weight > 0:
                    yield neighbor, weight

    # ---------------- Connectivity ----------------

    def is_connected(self):
        """Check whether every vertex is reachable from vertex 0"""
        return self.count_reachable() == self.num_vertices

    def count_reachable(self):
        """
        Depth-first search from vertex 0.

        Records the predecessor of every visited vertex (None for the root)
        and returns the number of vertices reached. Visited flags are reset
        afterwards.
        """
        self.predecessors = [None] * self.num_vertices
        try:
            return self._dfs(self.vertices[0])
        finally:
            self._reset_vertices()

    def _dfs(self, root):
        count = 0
        stack = [(root, None)]

        while stack:
            current, prev = stack.pop()
            if current.visited:
                continue

            current.visit()
            count += 1
            if prev is not None:
                self.predecessors[current.name] = prev.name

            # Reversed so neighbors are explored in insertion order
            for edge in reversed(current.edges):
                following = edge.connected_vertex(current)
                if not following.visited:
                    stack.append((following, current))

        return count

    # ---------------- Reset ----------------

    def _reset_vertices(self):
        for vertex in self.vertices:
            vertex.reset()

    def _reset_graphs(self):
        n = self.num_vertices
        self.vertices = [Vertex(i) for i in range(n)]
        self.adj_list = [[] for _ in range(n)]
        self.matrix = [[0] * n for _ in range(n)]
        self.edges = []


def build_graph(num_vertices, seed, p, max_attempts=None):
    """Build a connected random graph"""
    return Graph(num_vertices, seed, p, max_attempts=max_attempts)
