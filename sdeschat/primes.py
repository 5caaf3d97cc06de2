"""Prime factorisation and primitive roots for Diffie-Hellman parameters."""

from __future__ import annotations

from collections.abc import Iterable

from .dh import fast_mod_exp


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``."""
    while b:
        a, b = b, a % b
    return a


def find_factors(p: int) -> list[int]:
    """Return the prime factors of ``p - 1`` in ascending order, with repeats."""
    if p < 1:
        raise ValueError("p must be positive")
    n = p - 1
    factors: list[int] = []
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 1
    if n > 1:
        factors.append(n)
    return factors


def is_primitive_root(n: int, p: int, factors: Iterable[int]) -> bool:
    """Tell whether ``n`` is a primitive root of the prime ``p``.

    ``factors`` are the prime factors of ``p - 1``.
    """
    return all(fast_mod_exp(n, (p - 1) // factor, p) != 1 for factor in factors)


def find_primitive_root(p: int) -> int:
    """Return the smallest primitive root of ``p`` that is at least 2."""
    factors = find_factors(p)
    for candidate in range(2, p):
        if is_primitive_root(candidate, p, factors):
            return candidate
    raise ValueError(f"no primitive root found for {p}")