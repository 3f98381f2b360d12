"""Connectivity problems on undirected and directed graphs and grids."""

from .dsu import DSU


def _adjacency(n, edges, directed=False):
    adj = [[] for _ in range(n + 1)]
    for a, b in edges:
        adj[a].append(b)
        if not directed:
            adj[b].append(a)
    return adj


def _reachable(adj, start):
    seen = {start}
    stack = [start]
    while stack:
        node = stack.pop()
        for nxt in adj[node]:
            if nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    return seen


def building_roads(n, roads):
    """Return the fewest new roads that connect cities ``1..n``.

    Each component is represented by its smallest city, and consecutive
    representatives are joined in ascending order.
    """
    dsu = DSU(n + 1)
    for a, b in roads:
        dsu.merge(a, b)
    seen = set()
    representatives = []
    for city in range(1, n + 1):
        root = dsu.find(city)
        if root not in seen:
            seen.add(root)
            representatives.append(city)
    return list(zip(representatives, representatives[1:]))


def building_teams(n, friendships):
    """Split pupils ``1..n`` into teams 1 and 2 so friends never share a team.

    Returns the team of each pupil in order, or ``None`` when no split exists.
    The first pupil of every component is placed in team 2.
    """
    adj = _adjacency(n, friendships)
    team = [0] * (n + 1)
    for start in range(1, n + 1):
        if team[start]:
            continue
        team[start] = 2
        stack = [start]
        while stack:
            u = stack.pop()
            for v in adj[u]:
                if not team[v]:
                    team[v] = 3 - team[u]
                    stack.append(v)
                elif team[v] == team[u]:
                    return None
    return team[1:]


def count_rooms(grid):
    """Count the connected regions of non-wall (``#``) cells in ``grid``."""
    rows = [str(row) for row in grid]
    height = len(rows)
    seen = set()
    rooms = 0
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell == "#" or (i, j) in seen:
                continue
            rooms += 1
            seen.add((i, j))
            stack = [(i, j)]
            while stack:
                r, c = stack.pop()
                for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                    if (
                        0 <= nr < height
                        and 0 <= nc < len(rows[nr])
                        and rows[nr][nc] != "#"
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return rooms


def flight_routes_check(n, flights):
    """Check that every city ``1..n`` can reach every other by directed flights.

    Returns ``None`` when it can, otherwise a pair ``(a, b)`` of cities such
    that there is no route from ``a`` to ``b``.
    """
    forward = _adjacency(n, flights, directed=True)
    backward = _adjacency(n, ((b, a) for a, b in flights), directed=True)
    from_first = _reachable(forward, 1)
    for city in range(1, n + 1):
        if city not in from_first:
            return (1, city)
    to_first = _reachable(backward, 1)
    for city in range(1, n + 1):
        if city not in to_first:
            return (city, 1)
    return None