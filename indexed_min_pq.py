"""
Indexed binary min-heap over the vertex names 0..capacity-1

Heap slots are stored from index 1 to N. Parallel arrays map each heap slot
to a vertex name and each vertex name back to its slot, so a vertex's
priority can be lowered in place.
"""

import math


class IndexedMinPQ:
    def __init__(self, capacity):
        self.capacity = capacity
        self.n = 0
        self.heap = [0] * (capacity + 1)  # slot -> name
        self.position = [0] * capacity  # name -> slot, 0 when not enqueued
        self.priority = [math.inf] * capacity
        self.parent = [None] * capacity
        self._enqueued = [False] * capacity

    def __len__(self):
        return self.n

    def is_empty(self):
        return self.n == 0

    def contains(self, name):
        self._validate(name)
        return self.position[name] != 0

    def insert(self, name, priority, parent=None):
        self._validate(name)
        if self.contains(name):
            raise ValueError(f"Vertex {name} is already in the priority queue")

        self.n += 1
        self.heap[self.n] = name
        self.position[name] = self.n
        self.priority[name] = priority
        self.parent[name] = parent
        self._enqueued[name] = True
        self._swim(self.n)

    def min(self):
        if self.is_empty():
            raise IndexError("Priority queue has no elements")
        return self.heap[1]

    def extract_min(self):
        """Remove and return the name with the smallest priority"""
        if self.is_empty():
            raise IndexError("Priority queue has no elements")

        name = self.heap[1]
        self._swap(1, self.n)
        self.n -= 1
        self._sink(1)

        self.position[name] = 0
        return name

    def decrease_key(self, name, priority, parent=None):
        """Lower the priority of an enqueued name and record its new parent"""
        if not self.contains(name):
            raise KeyError(name)
        if priority > self.priority[name]:
            raise ValueError(
                f"New priority {priority} is greater than the current "
                f"priority {self.priority[name]} of vertex {name}"
            )

        self.priority[name] = priority
        self.parent[name] = parent
        self._swim(self.position[name])

    def priority_of(self, name):
        self._check_enqueued(name)
        return self.priority[name]

    def parent_of(self, name):
        self._check_enqueued(name)
        return self.parent[name]

    # ---------------- Heap helpers ----------------

    def _swim(self, k):
        while k > 1 and self._greater(k // 2, k):
            self._swap(k, k // 2)
            k = k // 2

    def _sink(self, k):
        while 2 * k <= self.n:
            j = 2 * k
            if j < self.n and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._swap(k, j)
            k = j

    def _greater(self, i, j):
        return self.priority[self.heap[i]] > self.priority[self.heap[j]]

    def _swap(self, i, j):
        self.heap[i], self.heap[j] = self.heap[j], self.heap[i]
        self.position[self.heap[i]] = i
        self.position[self.heap[j]] = j

    def _validate(self, name):
        if not 0 <= name < self.capacity:
            raise IndexError(f"Vertex {name} is outside 0..{self.capacity - 1}")

    def _check_enqueued(self, name):
        self._validate(name)
        if not self._enqueued[name]:
            raise KeyError(name)
