import random

import pytest

from cptoolkit.dsu import DSU


def test_initial_singletons():
    n = 6
    dsu = DSU(n)
    assert dsu.num_sets() == n
    for i in range(n):
        assert dsu.find(i) == i
        assert dsu.size_of_set(i) == 1


def test_merge_joins_sets():
    dsu = DSU(5)
    assert dsu.merge(0, 1) is True
    assert dsu.find(0) == dsu.find(1)
    assert dsu.size_of_set(0) == 2
    assert dsu.size_of_set(1) == 2
    assert dsu.num_sets() == 4


def test_merge_same_set_is_noop():
    dsu = DSU(4)
    dsu.merge(0, 1)
    dsu.merge(1, 2)
    before = dsu.num_sets()
    assert dsu.merge(0, 2) is False
    assert dsu.num_sets() == before
    assert dsu.size_of_set(2) == 3


def test_chain_merges_into_one_set():
    n = 50
    dsu = DSU(n)
    for i in range(n - 1):
        dsu.merge(i, i + 1)
    assert dsu.num_sets() == 1
    assert all(dsu.size_of_set(i) == n for i in range(n))


def test_random_merges_keep_invariants():
    rng = random.Random(7)
    n = 200
    dsu = DSU(n)
    for _ in range(120):
        dsu.merge(rng.randrange(n), rng.randrange(n))
    roots = [dsu.find(i) for i in range(n)]
    assert dsu.num_sets() == len(set(roots))
    for i in range(n):
        assert dsu.size_of_set(i) == roots.count(roots[i])


def test_out_of_range_raises():
    dsu = DSU(3)
    with pytest.raises(IndexError):
        dsu.find(3)
    with pytest.raises(IndexError):
        dsu.merge(-1, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DSU(-1)