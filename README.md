# cptoolkit

A library of algorithms of the kind used in competitive programming:
disjoint sets, sparse tables, order-statistic sets, graph traversal,
shortest paths, maximum flow, number theory, counting and planar geometry.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `cptoolkit.dsu` | `DSU`: disjoint-set union with union by rank, path compression and set sizes |
| `cptoolkit.sparse_table` | `SparseTable`: constant-time range queries for an idempotent `combine` (default `min`) |
| `cptoolkit.ordered_set` | `OrderedSet` with `find_by_order` and `order_of_key` |
| `cptoolkit.numtheory` | `MOD`, `mod_pow`, `tower_pow`, `euler_phi`, `extended_gcd`, `sieve_primes`, `Factorials` |
| `cptoolkit.traversal` | `bfs`, `eulerian_path`, `topological_sort` |
| `cptoolkit.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `shortest_routes`, `all_pairs_routes`, `NegativeCycleError` |
| `cptoolkit.connectivity` | `building_roads`, `building_teams`, `count_rooms`, `flight_routes_check` |
| `cptoolkit.paths` | `labyrinth`, `message_route`, `round_trip`, `round_trip_directed` |
| `cptoolkit.flow` | `max_flow`, `download_speed`, `police_chase`, `school_dance` |
| `cptoolkit.geometry` | `Location`, `cross_product`, `segments_intersect`, `point_location`, `polygon_area` |
| `cptoolkit.counting` | `binomial`, `catalan`, `bracket_sequences`, `derangements`, `creating_strings`, `distributing_apples`, `prime_multiples`, `fibonacci` |
| `cptoolkit.divisors` | `common_divisors`, `count_divisors`, `divisor_analysis`, `sum_of_divisors` |

`MOD` is 10^9 + 7; the counting and divisor functions return results modulo it.

## Conventions

- Graph helpers in `connectivity`, `paths`, `flow` and the `shortest_routes`
  / `all_pairs_routes` functions take nodes numbered from 1, with edges as
  tuples. The lower-level functions (`dijkstra`, `bellman_ford`,
  `floyd_warshall`, `topological_sort`, `max_flow`) work on 0-based lists.
- Shortest-path functions report an unreachable node as `None`.
  `bellman_ford` raises `NegativeCycleError` (a `ValueError`) when a negative
  cycle is reachable from the source. `floyd_warshall` takes `None` for a
  missing edge and returns a new matrix.
- Functions that search for something that may not exist (`labyrinth`,
  `message_route`, `round_trip`, `round_trip_directed`, `building_teams`,
  `flight_routes_check`) return `None` when there is no answer.
- `max_flow` returns `(flow, residual)` and does not modify the capacity
  matrix it is given.
- Invalid arguments raise `ValueError` (or `IndexError` for out-of-range
  positions in `DSU`, `SparseTable` and `OrderedSet`).

## Examples

Disjoint sets:

```python
from cptoolkit.dsu import DSU

sets = DSU(5)
sets.merge(0, 1)      # True
sets.merge(3, 4)      # True
sets.size_of_set(1)   # 2
sets.num_sets()       # 3
```

Range minimum queries:

```python
from cptoolkit.sparse_table import SparseTable

table = SparseTable([5, 2, 7, 1, 9], min)
table.query(0, 2)     # 2
table.query(1, 4)     # 1
```

Order statistics:

```python
from cptoolkit.ordered_set import OrderedSet

s = OrderedSet([10, 30, 20])
s.find_by_order(1)    # 20
s.order_of_key(25)    # 2
```

Number theory:

```python
from cptoolkit.numtheory import Factorials, extended_gcd, mod_pow, sieve_primes

mod_pow(2, 10)                  # 1024
extended_gcd(30, 12)            # (6, 1, -2): 30*1 + 12*(-2) == 6
sieve_primes(30)                # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

facts = Factorials(100, 1_000_000_007)
facts.choose(10, 3)             # 120
```

Shortest paths:

```python
from cptoolkit.shortest_paths import dijkstra

adj = [[(1, 4), (2, 1)], [], [(1, 2)]]
dijkstra(adj, 0)                # [0, 3, 1]
```

Graph problems:

```python
from cptoolkit.connectivity import building_roads, flight_routes_check
from cptoolkit.flow import download_speed
from cptoolkit.paths import labyrinth, message_route

building_roads(4, [(1, 2), (3, 4)])                           # [(1, 3)]
flight_routes_check(4, [(1, 2), (2, 3), (3, 1), (1, 4)])      # (4, 1)
message_route(5, [(1, 2), (2, 3), (1, 4), (4, 5)])            # [1, 4, 5]
labyrinth(["A.B"])                                            # "RR"
download_speed(4, [(1, 2, 3), (2, 4, 2), (1, 3, 4), (3, 4, 5)])  # 6
```

Counting and divisors:

```python
from cptoolkit.counting import binomial, creating_strings, derangements, fibonacci
from cptoolkit.divisors import count_divisors, divisor_analysis, sum_of_divisors

binomial(5, 2)                  # 10
derangements(4)                 # 9
creating_strings("aabac")       # 20
fibonacci(10)                   # 55
count_divisors(12)              # 6
divisor_analysis([(2, 2), (3, 1)])  # (6, 28, 1728)
sum_of_divisors(5)              # 21
```

Geometry:

```python
from cptoolkit.geometry import point_location, polygon_area, segments_intersect

segments_intersect((0, 0), (2, 2), (0, 2), (2, 0))   # True
point_location((0, 0), (2, 0), (1, 1))                # Location.LEFT
polygon_area([(0, 0), (4, 0), (4, 3), (0, 3)])        # twice the area: 24
```

## What it does not do

cptoolkit is a library only. It has no command-line program and does not
read problem input from standard input or print answers; callers pass
Python values in and get Python values back.