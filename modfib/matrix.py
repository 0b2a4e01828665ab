"""
Modular 2x2 matrices.
"""

from __future__ import annotations

from .types import Matrix2

MOD = 1_000_000_007

IDENTITY = Matrix2(a=1, b=0, c=0, d=1)
GENERATOR = Matrix2(a=1, b=1, c=1, d=0)


def check_modulus(modulus: int) -> None:
    if isinstance(modulus, bool) or not isinstance(modulus, int):
        raise TypeError(f"modulus must be an int, got {type(modulus).__name__}")
    if modulus < 2:
        raise ValueError("modulus must be at least 2")


def multiply(x: Matrix2, y: Matrix2, modulus: int = MOD) -> Matrix2:
    """Return x * y with every entry reduced into [0, modulus).

    >>> multiply(GENERATOR, GENERATOR).rows()
    ((2, 1), (1, 1))
    """
    m = modulus
    return Matrix2(
        a=(x.a * y.a % m + x.b * y.c % m) % m,
        b=(x.a * y.b % m + x.b * y.d % m) % m,
        c=(x.c * y.a % m + x.d * y.c % m) % m,
        d=(x.c * y.b % m + x.d * y.d % m) % m,
    )


def power(base: Matrix2, e: int, modulus: int = MOD) -> Matrix2:
    """Return base**e by squaring, reading e from its lowest bit upwards.

    Performs e.bit_length() squarings and one extra multiply per set bit.

    >>> power(GENERATOR, 0).rows()
    ((1, 0), (0, 1))
    >>> power(GENERATOR, 10).rows()
    ((89, 55), (55, 34))
    """
    if e < 0:
        raise ValueError("exponent must be non-negative")

    acc = IDENTITY
    while e > 0:
        if e & 1:
            acc = multiply(acc, base, modulus)
        base = multiply(base, base, modulus)
        e >>= 1
    return acc


__all__ = ["GENERATOR", "IDENTITY", "MOD", "check_modulus", "multiply", "power"]
