"""Maximum flow, minimum cut and bipartite matching."""

from collections import deque


def _augmenting_parents(adj, residual, source):
    parent = {source: None}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if residual[node][nxt] > 0 and nxt not in parent:
                parent[nxt] = node
                queue.append(nxt)
    return parent


def max_flow(adj, capacity, source, sink):
    """Compute the maximum flow from ``source`` to ``sink``.

    ``adj[u]`` lists the neighbours of ``u`` in both directions and
    ``capacity[u][v]`` is the capacity of edge ``u -> v``. Returns
    ``(flow, residual)`` where ``residual`` is a fresh residual capacity
    matrix; ``capacity`` itself is not modified.
    """
    if source == sink:
        raise ValueError("source and sink must differ")
    residual = [list(row) for row in capacity]
    flow = 0
    while True:
        parent = _augmenting_parents(adj, residual, source)
        if sink not in parent:
            return flow, residual
        path = []
        node = sink
        while node != source:
            path.append((parent[node], node))
            node = parent[node]
        pushed = min(residual[u][v] for u, v in path)
        for u, v in path:
            residual[u][v] -= pushed
            residual[v][u] += pushed
        flow += pushed


def _network(size, edges):
    adj = [dict() for _ in range(size)]
    for u, v in edges:
        adj[u][v] = None
        adj[v][u] = None
    return [list(nbrs) for nbrs in adj]


def download_speed(n, connections):
    """Maximum speed from computer 1 to ``n`` over directed ``(a, b, c)`` links."""
    capacity = [[0] * n for _ in range(n)]
    for a, b, c in connections:
        capacity[a - 1][b - 1] += c
    adj = _network(n, ((a - 1, b - 1) for a, b, _ in connections))
    flow, _ = max_flow(adj, capacity, 0, n - 1)
    return flow


def police_chase(n, streets):
    """Return the fewest streets to close so crossing 1 cannot reach ``n``.

    Streets are undirected ``(a, b)`` pairs; the result lists them as
    ``(a, b)`` with ``a`` on crossing 1's side.
    """
    capacity = [[0] * n for _ in range(n)]
    for a, b in streets:
        capacity[a - 1][b - 1] = 1
        capacity[b - 1][a - 1] = 1
    adj = _network(n, ((a - 1, b - 1) for a, b in streets))
    _, residual = max_flow(adj, capacity, 0, n - 1)
    reachable = _augmenting_parents(adj, residual, 0)
    return [
        (u + 1, v + 1)
        for u in range(n)
        if u in reachable
        for v in adj[u]
        if v not in reachable
    ]


def school_dance(n, m, pairs):
    """Return a largest set of ``(boy, girl)`` dance pairs.

    Boys are numbered ``1..n``, girls ``1..m`` and ``pairs`` lists who may
    dance together.
    """
    sink = n + m + 1
    size = sink + 1
    capacity = [[0] * size for _ in range(size)]
    edges = []
    for boy, girl in pairs:
        girl_node = n + girl
        if capacity[boy][girl_node]:
            continue
        capacity[boy][girl_node] = 1
        edges.append((boy, girl_node))
    for boy in range(1, n + 1):
        capacity[0][boy] = 1
        edges.append((0, boy))
    for girl_node in range(n + 1, sink):
        capacity[girl_node][sink] = 1
        edges.append((girl_node, sink))
    adj = _network(size, edges)
    _, residual = max_flow(adj, capacity, 0, sink)
    return [
        (boy, girl_node - n)
        for boy in range(1, n + 1)
        for girl_node in adj[boy]
        if capacity[boy][girl_node] == 1 and residual[boy][girl_node] == 0
    ]