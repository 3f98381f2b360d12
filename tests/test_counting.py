from itertools import permutations
from math import comb

import pytest

from cptoolkit.counting import (
    binomial,
    bracket_sequences,
    catalan,
    creating_strings,
    derangements,
    distributing_apples,
    fibonacci,
    prime_multiples,
)
from cptoolkit.numtheory import MOD


@pytest.mark.parametrize("n,k", [(5, 3), (8, 1), (10, 0), (10, 10), (60, 30), (3000, 1234)])
def test_binomial_matches_math_comb(n, k):
    assert binomial(n, k) == comb(n, k) % MOD


def test_binomial_out_of_range_k():
    assert binomial(4, 7) == comb(4, 7)
    assert binomial(4, -1) == comb(4, 7)


def test_binomial_negative_n():
    with pytest.raises(ValueError):
        binomial(-1, 0)


@pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 40])
def test_catalan_matches_formula(n):
    assert catalan(n) == comb(2 * n, n) // (n + 1) % MOD


def test_bracket_sequences_odd_is_zero():
    assert bracket_sequences(7) == 0


@pytest.mark.parametrize("n", [0, 2, 6, 20])
def test_bracket_sequences_even(n):
    assert bracket_sequences(n) == catalan(n // 2)


def test_derangements_base_cases():
    assert derangements(1) == 0
    assert derangements(2) == 1


@pytest.mark.parametrize("n", [3, 4, 5, 6, 7])
def test_derangements_brute_force(n):
    count = sum(
        all(p[i] != i for i in range(n)) for p in permutations(range(n))
    )
    assert derangements(n) == count


def test_derangements_invalid():
    with pytest.raises(ValueError):
        derangements(0)


@pytest.mark.parametrize("text", ["aabac", "abc", "zzzz", "abcabcd"])
def test_creating_strings_brute_force(text):
    assert creating_strings(text) == len(set(permutations(text)))


@pytest.mark.parametrize("children,apples", [(3, 2), (1, 9), (4, 0), (50, 70)])
def test_distributing_apples_matches_comb(children, apples):
    assert distributing_apples(children, apples) == comb(children + apples - 1, children - 1) % MOD


def test_distributing_apples_invalid():
    with pytest.raises(ValueError):
        distributing_apples(0, 3)


@pytest.mark.parametrize("n,primes", [(20, [2, 5]), (100, [2, 3, 7]), (50, [3]), (30, [2, 3, 5, 7])])
def test_prime_multiples_brute_force(n, primes):
    expected = sum(any(x % p == 0 for p in primes) for x in range(1, n + 1))
    assert prime_multiples(n, primes) == expected


def test_prime_multiples_large_product_capped():
    n = 10**18
    primes = [999999937, 999999929, 999999893]
    single = sum(n // p for p in primes)
    pairs = sum(n // (a * b) for i, a in enumerate(primes) for b in primes[i + 1:])
    assert prime_multiples(n, primes) == single - pairs


def test_fibonacci_small_values():
    a, b = 0, 1
    for n in range(40):
        assert fibonacci(n) == a % MOD
        a, b = b, a + b


@pytest.mark.parametrize("n", [10**6, 10**12, 10**18])
def test_fibonacci_doubling_identity(n):
    fn, fn1 = fibonacci(n), fibonacci(n + 1)
    assert fibonacci(2 * n) == fn * (2 * fn1 - fn) % MOD


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-3)