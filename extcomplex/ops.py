"""
Functional surface of the extended complex arithmetic.

Every function accepts ``PolarValue`` instances, ``(r, t)`` pairs or plain
reals, and returns a new ``PolarValue``.  None of them raise for numeric
input: degenerate combinations produce the universal NaN value instead.
"""

from __future__ import annotations

from .angle import normalize, sincospi
from .polar import PolarValue

__all__ = [
    "normalize",
    "sincospi",
    "multiply",
    "divide",
    "reciprocal",
    "unary_minus",
    "absolute",
    "sign",
    "sqrt",
    "power",
    "to_rect",
    "from_rect",
    "add",
    "subtract",
]


def multiply(z1, z2) -> PolarValue:
    """``(r1·r2, normalize(t1 + t2))``; 0·inf in the modulus is NaN."""
    return PolarValue.of(z1).multiply(z2)


def divide(z1, z2) -> PolarValue:
    return PolarValue.of(z1).divide(z2)


def reciprocal(z) -> PolarValue:
    """``(1/r, -t)``, keeping t = 1 as is."""
    return PolarValue.of(z).reciprocal()


def unary_minus(z) -> PolarValue:
    return PolarValue.of(z).negate()


def absolute(z) -> PolarValue:
    return PolarValue.of(z).absolute()


def sign(z) -> PolarValue:
    return PolarValue.of(z).sign()


def sqrt(z) -> PolarValue:
    return PolarValue.of(z).sqrt()


def power(base, exponent) -> PolarValue:
    """Total exponentiation; see ``PolarValue.power``."""
    return PolarValue.of(base).power(exponent)


def to_rect(z) -> tuple[float, float]:
    return PolarValue.of(z).to_rect()


def from_rect(x: float, y: float) -> PolarValue:
    return PolarValue.from_rect(x, y)


def add(z1, z2) -> PolarValue:
    return PolarValue.of(z1).add(z2)


def subtract(z1, z2) -> PolarValue:
    return PolarValue.of(z1).subtract(z2)
