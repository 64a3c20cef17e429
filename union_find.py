"""
Disjoint-set forest used by Kruskal's algorithm
"""


class UnionFind:
    """Union by rank with path compression over the elements 0..n-1"""

    def __init__(self, n):
        # Every element starts as the root of its own set
        self.parent = list(range(n))
        self.rank = [0] * n
        self.count = n

    def find(self, v):
        """Return the root of v, repointing the path at the root"""
        if self.parent[v] != v:
            self.parent[v] = self.find(self.parent[v])
        return self.parent[v]

    def union(self, u, v):
        """Merge the sets containing u and v. Returns False if already merged"""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False

        if self.rank[root_u] > self.rank[root_v]:
            self.parent[root_v] = root_u
        else:
            self.parent[root_u] = root_v
            if self.rank[root_u] == self.rank[root_v]:
                self.rank[root_v] += 1

        self.count -= 1
        return True

    def connected(self, u, v):
        return self.find(u) == self.find(v)
