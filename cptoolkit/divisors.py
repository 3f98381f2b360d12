"""Divisor counting, sums and related queries."""

from collections import Counter
from math import isqrt

from .numtheory import MOD, mod_pow

_PHI = MOD - 1


def _divisors(n):
    for i in range(1, isqrt(n) + 1):
        if n % i == 0:
            yield i
            if i != n // i:
                yield n // i


def common_divisors(numbers):
    """Return the largest integer dividing at least two of ``numbers``."""
    counts = Counter()
    for number in numbers:
        if number < 1:
            raise ValueError("numbers must be positive")
        counts.update(_divisors(number))
    shared = [d for d, c in counts.items() if c >= 2]
    if not shared:
        raise ValueError("at least two numbers are required")
    return max(shared)


def count_divisors(n):
    """Return the number of positive divisors of ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    total = 1
    i = 2
    while i * i <= n:
        if n % i == 0:
            exponent = 0
            while n % i == 0:
                exponent += 1
                n //= i
            total *= exponent + 1
        i += 1
    if n > 1:
        total *= 2
    return total


def divisor_analysis(factors):
    """Analyse the number given by ``(prime, exponent)`` pairs.

    Returns ``(count, total, product)`` of its divisors, each modulo ``MOD``.
    """
    factors = list(factors)
    number = 1
    count = 1
    count_mod_2phi = 1
    total = 1
    for prime, exponent in factors:
        if prime < 2 or exponent < 0:
            raise ValueError("factors must be primes with non-negative exponents")
        number = number * mod_pow(prime, exponent) % MOD
        count = count * (exponent + 1) % MOD
        count_mod_2phi = count_mod_2phi * (exponent + 1) % (2 * _PHI)
        numerator = (mod_pow(prime, exponent + 1) - 1) % MOD
        total = total * numerator % MOD * mod_pow(prime - 1, MOD - 2) % MOD
    product = mod_pow(number, count_mod_2phi // 2)
    if count_mod_2phi % 2:
        root = 1
        for prime, exponent in factors:
            root = root * mod_pow(prime, (exponent % (2 * _PHI)) // 2 % _PHI) % MOD
        product = product * root % MOD
    return count, total, product


def _triangle(n):
    return n * (n + 1) // 2 % MOD


def sum_of_divisors(n):
    """Return the sum of sigma(k) for ``k`` in ``1..n``, modulo ``MOD``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    result = 0
    i = 1
    while i <= n:
        quotient = n // i
        following = n // quotient + 1
        span = (_triangle(following - 1) - _triangle(i - 1)) % MOD
        result = (result + quotient % MOD * span) % MOD
        i = following
    return result