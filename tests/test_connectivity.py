import pytest

from cptoolkit.connectivity import (
    building_roads,
    building_teams,
    count_rooms,
    flight_routes_check,
)
from cptoolkit.dsu import DSU
from cptoolkit.traversal import bfs


def _components(n, roads):
    dsu = DSU(n + 1)
    for a, b in roads:
        dsu.merge(a, b)
    return len({dsu.find(i) for i in range(1, n + 1)})


@pytest.mark.parametrize(
    "n, roads",
    [
        (4, [(1, 2), (3, 4)]),
        (6, [(1, 6), (2, 5)]),
        (5, []),
        (3, [(1, 2), (2, 3)]),
    ],
)
def test_building_roads_connects_everything(n, roads):
    new = building_roads(n, roads)
    assert len(new) == _components(n, roads) - 1
    assert _components(n, roads + new) == 1


def test_building_roads_uses_smallest_representatives():
    assert building_roads(4, [(1, 2), (3, 4)]) == [(1, 3)]


def test_building_roads_single_component_needs_nothing():
    assert building_roads(3, [(1, 2), (2, 3)]) == []


def test_building_teams_separates_friends():
    friendships = [(1, 2), (1, 3), (4, 5)]
    teams = building_teams(5, friendships)
    assert len(teams) == 5
    assert set(teams) <= {1, 2}
    for a, b in friendships:
        assert teams[a - 1] != teams[b - 1]


def test_building_teams_first_pupil_in_team_two():
    teams = building_teams(2, [(1, 2)])
    assert teams == [2, 1]


def test_building_teams_odd_cycle_is_impossible():
    assert building_teams(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_count_rooms_sample():
    grid = [
        "########",
        "#..#...#",
        "####.#.#",
        "#..#...#",
        "########",
    ]
    assert count_rooms(grid) == 3


def test_count_rooms_isolated_cells():
    row = "#".join(["."] * 7)
    assert count_rooms([row]) == row.count(".")


def test_count_rooms_single_open_area_equals_one_room_per_grid():
    grids = [["...", "...", "..."], ["#"], [".#.", "###", ".#."]]
    counts = [count_rooms(g) for g in grids]
    assert counts[0] == count_rooms(["."])
    assert counts[1] == count_rooms(["###"])
    assert counts[2] == "".join(grids[2]).count(".")


def test_flight_routes_strongly_connected():
    assert flight_routes_check(3, [(1, 2), (2, 3), (3, 1)]) is None


@pytest.mark.parametrize(
    "n, flights",
    [
        (4, [(1, 2), (2, 3)]),
        (2, [(1, 2)]),
        (3, [(2, 1), (3, 1)]),
        (3, [(1, 2), (2, 1), (1, 3)]),
    ],
)
def test_flight_routes_reports_missing_route(n, flights):
    pair = flight_routes_check(n, flights)
    a, b = pair
    adj = {city: [] for city in range(1, n + 1)}
    for u, v in flights:
        adj[u].append(v)
    assert b not in bfs(adj, a)
    assert 1 in pair