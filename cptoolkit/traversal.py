"""Breadth-first search, Eulerian paths and topological sorting."""

from collections import deque
from collections.abc import Mapping


def _as_mapping(adj):
    if isinstance(adj, Mapping):
        return {node: list(nbrs) for node, nbrs in adj.items()}
    return {node: list(nbrs) for node, nbrs in enumerate(adj)}


def bfs(adj, source):
    """Return the nodes reachable from ``source`` in breadth-first order.

    ``adj`` maps each node (or list index) to its neighbours.
    """
    graph = _as_mapping(adj)
    seen = {source}
    order = []
    queue = deque([source])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in graph.get(node, ()):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return order


def eulerian_path(adj, start):
    """Return a walk from ``start`` that uses every undirected edge once.

    ``adj`` lists each edge at both endpoints. Raises ValueError when the
    number of odd-degree nodes rules out an Eulerian path. The input is not
    modified.
    """
    graph = _as_mapping(adj)
    odd = sum(len(nbrs) % 2 for nbrs in graph.values())
    if odd not in (0, 2):
        raise ValueError("graph has no Eulerian path")
    stack = [start]
    path = []
    while stack:
        current = stack[-1]
        nbrs = graph.get(current)
        if nbrs:
            nxt = nbrs.pop()
            graph[nxt].remove(current)
            stack.append(nxt)
        else:
            path.append(stack.pop())
    path.reverse()
    return path


def topological_sort(adj):
    """Order nodes ``0..n-1`` so every edge points forward (Kahn's algorithm).

    Nodes on or behind a cycle are left out, so a result shorter than
    ``len(adj)`` means the graph is not acyclic.
    """
    graph = [list(nbrs) for nbrs in adj]
    indegree = [0] * len(graph)
    for nbrs in graph:
        for v in nbrs:
            indegree[v] += 1
    queue = deque(node for node, deg in enumerate(indegree) if deg == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for v in graph[node]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return order