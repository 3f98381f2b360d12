"""Modular arithmetic, factorial tables and classic number-theory helpers."""

from itertools import accumulate
from math import isqrt

MOD = 10**9 + 7


def mod_pow(base, exponent, modulus=MOD):
    """Compute ``base ** exponent % modulus`` by binary exponentiation."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    base %= modulus
    result = 1
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def tower_pow(a, b, c):
    """Compute ``a ** (b ** c)`` modulo ``MOD``, reducing the exponent by Fermat."""
    return mod_pow(a, mod_pow(b, c, MOD - 1), MOD)


class Factorials:
    """Precomputed factorials and inverse factorials up to ``limit``.

    ``modulus`` must be a prime larger than ``limit``.
    """

    def __init__(self, limit, modulus=MOD):
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.modulus = modulus
        self._fac = list(
            accumulate(range(1, limit + 1), lambda acc, i: acc * i % modulus, initial=1)
        )
        top = mod_pow(self._fac[limit], modulus - 2, modulus)
        descending = accumulate(
            range(limit, 0, -1), lambda acc, i: acc * i % modulus, initial=top
        )
        self._inv = list(descending)[::-1]

    def _check(self, n):
        if not 0 <= n <= self.limit:
            raise ValueError(f"{n} is outside the table range 0..{self.limit}")

    def factorial(self, n):
        """Return ``n! % modulus``."""
        self._check(n)
        return self._fac[n]

    def inverse_factorial(self, n):
        """Return the modular inverse of ``n!``."""
        self._check(n)
        return self._inv[n]

    def choose(self, n, k):
        """Return the binomial coefficient ``C(n, k) % modulus``."""
        self._check(n)
        if k < 0 or k > n:
            return 0
        return self._fac[n] * self._inv[k] % self.modulus * self._inv[n - k] % self.modulus


def euler_phi(n):
    """Return how many integers in ``1..n`` are coprime with ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    result = n
    p = 2
    while p * p <= n:
        if n % p == 0:
            while n % p == 0:
                n //= p
            result -= result // p
        p += 1
    if n > 1:
        result -= result // n
    return result


def extended_gcd(a, b):
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def sieve_primes(n):
    """Return all primes up to and including ``n``."""
    if n < 2:
        return []
    is_prime = bytearray([1]) * (n + 1)
    is_prime[0] = is_prime[1] = 0
    for p in range(2, isqrt(n) + 1):
        if is_prime[p]:
            is_prime[p * p::p] = bytes(len(range(p * p, n + 1, p)))
    return [i for i, flag in enumerate(is_prime) if flag]