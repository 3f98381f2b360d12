"""Single-source and all-pairs shortest paths.

Distances to unreachable nodes are reported as ``None``.
"""

import heapq


class NegativeCycleError(ValueError):
    """Raised when a negative cycle is reachable from the source."""


def _improves(candidate, current):
    return current is None or candidate < current


def bellman_ford(edges, n, source):
    """Shortest distances from ``source`` over directed ``(u, v, w)`` edges."""
    dist = [None] * n
    dist[source] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in edges:
            if dist[u] is not None and _improves(dist[u] + w, dist[v]):
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    for u, v, w in edges:
        if dist[u] is not None and _improves(dist[u] + w, dist[v]):
            raise NegativeCycleError("negative cycle reachable from source")
    return dist


def dijkstra(adj, source):
    """Shortest distances from ``source``; ``adj[u]`` lists ``(v, weight)`` pairs."""
    dist = [None] * len(adj)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d != dist[u]:
            continue
        for v, weight in adj[u]:
            candidate = d + weight
            if _improves(candidate, dist[v]):
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def floyd_warshall(matrix):
    """Return all-pairs shortest distances for a square matrix.

    ``None`` marks a missing edge in the input and an unreachable pair in the
    result. The input matrix is left unchanged.
    """
    g = [list(row) for row in matrix]
    n = len(g)
    if any(len(row) != n for row in g):
        raise ValueError("matrix must be square")
    for k in range(n):
        row_k = g[k]
        for row in g:
            via = row[k]
            if via is None:
                continue
            for j, k_to_j in enumerate(row_k):
                if k_to_j is not None and _improves(via + k_to_j, row[j]):
                    row[j] = via + k_to_j
    return g


def shortest_routes(n, flights):
    """Distances from city 1 to cities ``1..n`` over directed ``(a, b, cost)`` flights."""
    adj = [[] for _ in range(n + 1)]
    for a, b, cost in flights:
        adj[a].append((b, cost))
    return dijkstra(adj, 1)[1:]


def all_pairs_routes(n, roads, queries):
    """Answer ``(a, b)`` distance queries over undirected ``(a, b, length)`` roads."""
    g = [[None] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        g[i][i] = 0
    for a, b, length in roads:
        for u, v in ((a, b), (b, a)):
            g[u][v] = length if g[u][v] is None else min(g[u][v], length)
    g = floyd_warshall(g)
    return [g[a][b] for a, b in queries]