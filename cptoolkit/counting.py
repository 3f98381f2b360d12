"""Counting problems modulo 1e9+7: binomials, Catalan numbers and more."""

from collections import Counter
from functools import lru_cache
from itertools import combinations

from .numtheory import MOD, Factorials, mod_pow


@lru_cache(maxsize=4)
def _table_of_size(limit):
    return Factorials(limit, MOD)


def _table(n):
    limit = 1024
    while limit < n:
        limit *= 2
    return _table_of_size(limit)


def binomial(n, k):
    """Return ``C(n, k) % MOD``; zero when ``k`` is outside ``0..n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return _table(n).choose(n, k)


def catalan(n):
    """Return the ``n``-th Catalan number modulo ``MOD``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    value = 1
    for i in range(1, n + 1):
        value = 2 * (2 * i - 1) * value % MOD * mod_pow(i + 1, MOD - 2) % MOD
    return value


def bracket_sequences(n):
    """Count valid bracket sequences of length ``n`` modulo ``MOD``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n % 2:
        return 0
    return catalan(n // 2)


def derangements(n):
    """Count permutations of ``n`` items with no fixed point, modulo ``MOD``."""
    if n < 1:
        raise ValueError("n must be positive")
    previous, current = 0, 0  # values for n-1 and n, starting at n = 1
    if n == 1:
        return current
    previous, current = 0, 1
    for i in range(3, n + 1):
        previous, current = current, (current + previous) * (i - 1) % MOD
    return current


def creating_strings(text):
    """Count distinct strings formed by reordering ``text``, modulo ``MOD``."""
    table = _table(len(text))
    result = table.factorial(len(text))
    for count in Counter(text).values():
        result = result * table.inverse_factorial(count) % MOD
    return result


def distributing_apples(children, apples):
    """Count ways to share ``apples`` among ``children``, modulo ``MOD``."""
    if children < 1:
        raise ValueError("there must be at least one child")
    if apples < 0:
        raise ValueError("apples must be non-negative")
    return binomial(children + apples - 1, children - 1)


def prime_multiples(n, primes):
    """Count integers in ``1..n`` divisible by at least one of ``primes``."""
    primes = list(primes)
    total = 0
    for size in range(1, len(primes) + 1):
        sign = 1 if size % 2 else -1
        for subset in combinations(primes, size):
            product = 1
            for p in subset:
                if product > n // p:
                    product = n + 1
                    break
                product *= p
            total += sign * (n // product)
    return total


def _mat_mul(a, b):
    (a00, a01), (a10, a11) = a
    (b00, b01), (b10, b11) = b
    return (
        ((a00 * b00 + a01 * b10) % MOD, (a00 * b01 + a01 * b11) % MOD),
        ((a10 * b00 + a11 * b10) % MOD, (a10 * b01 + a11 * b11) % MOD),
    )


def fibonacci(n):
    """Return the ``n``-th Fibonacci number modulo ``MOD``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    result = ((1, 0), (0, 1))
    base = ((1, 1), (1, 0))
    exponent = n - 1
    while exponent:
        if exponent & 1:
            result = _mat_mul(result, base)
        base = _mat_mul(base, base)
        exponent >>= 1
    return result[0][0]