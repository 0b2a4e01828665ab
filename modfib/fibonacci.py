"""
Fibonacci numbers modulo a fixed prime.
"""

from __future__ import annotations

import logging

from .matrix import GENERATOR, MOD, check_modulus, power

BASE_CASE_CUTOFF = 2

logger = logging.getLogger(__name__)


def _check_index(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("n must be non-negative")


def fibonacci_mod(n: int, modulus: int = MOD) -> int:
    """Return Fib(n) mod `modulus` in O(log n) time and O(1) memory.

    Uses G**k == [[Fib(k+1), Fib(k)], [Fib(k), Fib(k-1)]] for G = [[1, 1], [1, 0]].

    >>> fibonacci_mod(0)
    0
    >>> fibonacci_mod(10)
    55
    >>> fibonacci_mod(50)
    586268941
    """
    _check_index(n)
    check_modulus(modulus)
    if n < BASE_CASE_CUTOFF:
        return n
    logger.debug("fibonacci_mod: n=%d exponent_bits=%d", n, (n - 1).bit_length())
    return power(GENERATOR, n - 1, modulus).a


def fibonacci_table(n: int, modulus: int = MOD) -> int:
    """Return Fib(n) mod `modulus` from a table of every term, O(n) time and memory."""
    _check_index(n)
    check_modulus(modulus)
    if n < BASE_CASE_CUTOFF:
        return n
    fib = [0] * (n + 1)
    fib[1] = 1
    for i in range(2, n + 1):
        fib[i] = (fib[i - 1] + fib[i - 2]) % modulus
    return fib[n]


def fibonacci_window(n: int, modulus: int = MOD) -> int:
    """Return Fib(n) mod `modulus` keeping only the last two terms, O(n) time."""
    _check_index(n)
    check_modulus(modulus)
    fib = [0, 1]
    for i in range(2, n + 1):
        # slot i % 2 holds Fib(i - 2); overwrite it with Fib(i)
        fib[i % 2] = (fib[(i + 1) % 2] + fib[i % 2]) % modulus
    return fib[n % 2]


__all__ = ["MOD", "fibonacci_mod", "fibonacci_table", "fibonacci_window"]
