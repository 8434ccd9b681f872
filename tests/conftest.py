"""
Pytest fixtures for extended complex arithmetic tests.
"""

import math

import pytest

from extcomplex import Canonical, PolarValue


@pytest.fixture
def canonical():
    """All canonical members in table order."""
    return list(Canonical)


@pytest.fixture
def zero_exponents():
    """Every exponent with a literal zero modulus."""
    return [
        PolarValue(0.0, 0.0),
        PolarValue(0.0, 1.0),
        PolarValue(0.0, 0.5),
        PolarValue(0.0, -0.5),
        PolarValue(0.0, math.nan),
    ]


@pytest.fixture
def finite_nonzero():
    """Finite, nonzero values at dyadic and at rounded (non-dyadic) angles."""
    return [
        PolarValue(1.0, 0.0),
        PolarValue(2.0, 0.5),
        PolarValue(3.0, 1.0),
        PolarValue(1.0, 0.25),
        PolarValue(5.0, -0.75),
        PolarValue(0.5, 0.375),
        PolarValue(1.0, 0.3),
        PolarValue(2.5, 0.1),
        PolarValue(7.0, 1 / 3),
        PolarValue(1.0, -0.2),
        PolarValue(2.5, 0.6),
        PolarValue(7.0, 0.9),
        PolarValue(1.0, -0.7),
    ]


def approx_polar(z, r, t, rel=1e-12, abs_=1e-12):
    """Check a finite result against an expected (r, t) within tolerance."""
    assert z.r == pytest.approx(r, rel=rel, abs=abs_)
    assert z.t == pytest.approx(t, rel=rel, abs=abs_)
