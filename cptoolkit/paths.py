"""Path and cycle finding: grid mazes, shortest hops and round trips."""

from collections import deque

_MOVES = ((1, 0, "D"), (-1, 0, "U"), (0, 1, "R"), (0, -1, "L"))


def _adjacency(n, edges, directed=False):
    adj = [[] for _ in range(n + 1)]
    for a, b in edges:
        adj[a].append(b)
        if not directed:
            adj[b].append(a)
    return adj


def _locate(rows, mark):
    for i, row in enumerate(rows):
        j = row.find(mark)
        if j != -1:
            return i, j
    raise ValueError(f"grid has no {mark!r} cell")


def labyrinth(grid):
    """Return a shortest move string (``UDLR``) from ``A`` to ``B``, or ``None``.

    ``#`` cells are walls; every other cell can be walked on.
    """
    rows = [str(row) for row in grid]
    start = _locate(rows, "A")
    goal = _locate(rows, "B")
    came_from = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            break
        r, c = cell
        for dr, dc, move in _MOVES:
            nr, nc = r + dr, c + dc
            nxt = (nr, nc)
            if (
                0 <= nr < len(rows)
                and 0 <= nc < len(rows[nr])
                and rows[nr][nc] != "#"
                and nxt not in came_from
            ):
                came_from[nxt] = (move, cell)
                queue.append(nxt)
    if goal not in came_from:
        return None
    moves = []
    cell = goal
    while came_from[cell] is not None:
        move, cell = came_from[cell]
        moves.append(move)
    return "".join(reversed(moves))


def message_route(n, connections):
    """Return a route with the fewest computers from 1 to ``n``, or ``None``."""
    adj = _adjacency(n, connections)
    parent = {1: None}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        if node == n:
            break
        for nxt in adj[node]:
            if nxt not in parent:
                parent[nxt] = node
                queue.append(nxt)
    if n not in parent:
        return None
    route = []
    node = n
    while node is not None:
        route.append(node)
        node = parent[node]
    route.reverse()
    return route


def _close_cycle(ancestor, node, parent):
    chain = [node]
    while node != ancestor:
        node = parent[node]
        chain.append(node)
    chain.reverse()
    chain.append(ancestor)
    return chain


def round_trip(n, roads):
    """Return a cycle of at least three cities over undirected roads, or ``None``.

    The cycle is given as a list of cities whose first and last entries match.
    """
    adj = _adjacency(n, roads)
    visited = [False] * (n + 1)
    parent = [0] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    parent[v] = u
                    stack.append((v, iter(adj[v])))
                    break
                if v != parent[u]:
                    return _close_cycle(v, u, parent)
            else:
                stack.pop()
    return None


def round_trip_directed(n, flights):
    """Return a directed cycle following the flights, or ``None``.

    The cycle is given as a list of cities whose first and last entries match.
    """
    adj = _adjacency(n, flights, directed=True)
    state = [0] * (n + 1)  # 0 unseen, 1 on the current path, 2 finished
    parent = [0] * (n + 1)
    for root in range(1, n + 1):
        if state[root]:
            continue
        state[root] = 1
        stack = [(root, iter(adj[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if state[v] == 0:
                    state[v] = 1
                    parent[v] = u
                    stack.append((v, iter(adj[v])))
                    break
                if state[v] == 1:
                    return _close_cycle(v, u, parent)
            else:
                state[u] = 2
                stack.pop()
    return None