"""Integer arithmetic: divisors, multiples, factorials, powers and primes."""

from __future__ import annotations

__all__ = [
    "gcd",
    "lcm",
    "factorial",
    "power",
    "is_prime",
    "is_odd",
    "prime_factors",
]


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``.

    Signs are ignored. ``gcd(0, 0)`` is 0.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``.

    The result is never negative. When both numbers are zero there is no
    common divisor to work from, and the result is 0.
    """
    divisor = gcd(a, b)
    if divisor == 0:
        return 0
    return abs(a * b) // divisor


def factorial(n: int) -> int:
    """Return ``n!``.

    Raises ValueError for negative ``n``, where the factorial is not defined.
    """
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def power(base: int, exponent: int) -> int:
    """Multiply ``base`` by itself ``exponent`` times.

    Exponents below one give the empty product, 1.
    """
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime, by trial division up to its square root."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def is_odd(n: int) -> bool:
    """Tell whether ``n`` is odd by looking at its lowest bit."""
    return bool(n & 1)


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repeats.

    Numbers below 2 have no prime factors and give an empty list.
    """
    factors: list[int] = []
    candidate = 2
    while candidate <= n:
        while n % candidate == 0:
            factors.append(candidate)
            n //= candidate
        candidate += 1
    return factors