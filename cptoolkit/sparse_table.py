"""Sparse table for idempotent range queries."""


class SparseTable:
    """Answers range queries over a static sequence in constant time.

    ``combine`` must be associative and idempotent (min, max, gcd, ...).
    """

    def __init__(self, values, combine=min):
        values = list(values)
        if not values:
            raise ValueError("sparse table needs at least one value")
        n = len(values)
        self._combine = combine
        self._log = [0] * (n + 1)
        for i in range(2, n + 1):
            self._log[i] = self._log[i // 2] + 1
        self._levels = [values]
        width = 2
        while width <= n:
            prev = self._levels[-1]
            half = width // 2
            self._levels.append([combine(a, b) for a, b in zip(prev, prev[half:])])
            width *= 2
        self._n = n

    def query(self, left, right):
        """Combine the values at positions ``left`` through ``right`` inclusive."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"invalid range [{left}, {right}]")
        j = self._log[right - left + 1]
        level = self._levels[j]
        return self._combine(level[left], level[right - (1 << j) + 1])