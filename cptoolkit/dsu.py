"""Disjoint set union (union-find) structure."""


class DSU:
    """Disjoint sets over the elements ``0 .. n-1``.

    Uses union by rank and path compression.
    """

    def __init__(self, n):
        if n < 0:
            raise ValueError("number of elements must be non-negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n
        self._sets = n

    def _check(self, i):
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} out of range")

    def find(self, i):
        """Return the representative of the set holding ``i``."""
        self._check(i)
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def merge(self, i, j):
        """Join the sets of ``i`` and ``j``; return True if they were separate."""
        x, y = self.find(i), self.find(j)
        if x == y:
            return False
        self._sets -= 1
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        self._size[y] += self._size[x]
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        return True

    def size_of_set(self, i):
        """Return the number of elements in the set holding ``i``."""
        return self._size[self.find(i)]

    def num_sets(self):
        """Return the current number of disjoint sets."""
        return self._sets