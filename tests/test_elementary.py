import math

import pytest

from extcomplex import (
    COMPLEX_INFINITY,
    COMPLEX_ZERO,
    INFINITY,
    NAN,
    NEG_INFINITY,
    NEG_ZERO,
    ZERO,
    ZERO_I,
    PolarValue,
    absolute,
    divide,
    multiply,
    reciprocal,
    sign,
    sqrt,
    unary_minus,
)


class TestMultiply:
    def test_moduli_multiply_and_angles_add(self):
        assert multiply((2.0, 0.25), (3.0, 0.5)) == (6.0, 0.75)

    def test_angle_wraps_into_range(self):
        assert multiply((1.0, 0.75), (1.0, 0.5)) == (1.0, -0.75)
        assert multiply((1.0, 0.5), (1.0, 0.5)) == (1.0, 1.0)

    def test_zero_times_infinity_is_nan(self):
        assert multiply(ZERO, INFINITY) == NAN
        assert multiply(COMPLEX_ZERO, COMPLEX_INFINITY) == NAN

    def test_directed_zeros(self):
        assert multiply(NEG_ZERO, NEG_ZERO) == ZERO
        assert multiply(ZERO_I, (2.0, 0.5)) == NEG_ZERO

    def test_generic_direction_propagates(self):
        assert multiply(COMPLEX_ZERO, (2.0, 0.0)) == COMPLEX_ZERO


class TestReciprocal:
    @pytest.mark.parametrize(
        "z, expected",
        [
            ((2.0, 0.25), (0.5, -0.25)),
            ((4.0, 1.0), (0.25, 1.0)),
            ((1.0, -0.5), (1.0, 0.5)),
            (ZERO, INFINITY),
            (NEG_ZERO, NEG_INFINITY),
            (ZERO_I, (math.inf, -0.5)),
            (INFINITY, ZERO),
            (COMPLEX_ZERO, COMPLEX_INFINITY),
            (COMPLEX_INFINITY, COMPLEX_ZERO),
            (NAN, NAN),
        ],
    )
    def test_values(self, z, expected):
        assert reciprocal(z) == expected

    @pytest.mark.parametrize("z", [(2.0, 0.25), (0.5, -0.75), (4.0, 1.0), (1.0, 0.5), (2.0, 0.3), (0.5, 1 / 3), (4.0, -0.6)])
    def test_is_an_involution(self, z):
        assert reciprocal(reciprocal(z)) == z

    @pytest.mark.parametrize("z", [(3.0, 0.3), (7.0, -0.1), (49.0, 0.6)])
    def test_involution_with_rounded_modulus(self, z):
        r, t = z
        back = reciprocal(reciprocal(z))
        assert back.r == pytest.approx(r, rel=1e-15)
        assert back.t == t

    def test_zero_angle_stays_positive_zero(self):
        assert math.copysign(1.0, reciprocal((2.0, 0.0)).t) == 1.0
        assert math.copysign(1.0, reciprocal(ZERO).t) == 1.0

    def test_divide(self):
        assert divide((6.0, 0.75), (2.0, 0.5)) == (3.0, 0.25)
        assert divide((1.0, 0.0), ZERO) == INFINITY


class TestUnaryMinus:
    @pytest.mark.parametrize(
        "z, expected",
        [
            ((1.0, 0.0), (1.0, 1.0)),
            ((1.0, 1.0), (1.0, 0.0)),
            ((2.0, 0.5), (2.0, -0.5)),
            ((2.0, -0.5), (2.0, 0.5)),
            ((3.0, 0.25), (3.0, -0.75)),
            (INFINITY, NEG_INFINITY),
            (ZERO, NEG_ZERO),
            (COMPLEX_ZERO, COMPLEX_ZERO),
            (NAN, NAN),
        ],
    )
    def test_values(self, z, expected):
        assert unary_minus(z) == expected

    def test_matches_multiplication_by_minus_one(self, finite_nonzero):
        for z in finite_nonzero:
            assert unary_minus(z) == multiply(z, (1.0, 1.0))


class TestAbsoluteAndSign:
    def test_absolute(self):
        assert absolute((2.0, 0.75)) == (2.0, 0.0)
        assert absolute(COMPLEX_ZERO) == ZERO
        assert absolute(NEG_INFINITY) == INFINITY
        assert absolute(NAN) == NAN

    @pytest.mark.parametrize(
        "z, expected",
        [
            ((5.0, 0.25), (1.0, 0.25)),
            ((0.0, 0.5), (0.0, 0.5)),
            (NEG_INFINITY, (1.0, 1.0)),
            (COMPLEX_ZERO, COMPLEX_ZERO),
            (COMPLEX_INFINITY, (1.0, math.nan)),
            (NAN, NAN),
        ],
    )
    def test_sign(self, z, expected):
        assert sign(z) == expected

    @pytest.mark.parametrize(
        "z",
        [(2.0, 0.25), (3.0, 1.0), (0.5, -0.5), (7.0, -0.75), (0.0, 0.5), (0.0, math.nan)],
    )
    def test_absolute_times_sign_restores_value(self, z):
        assert multiply(absolute(z), sign(z)) == z


class TestSqrt:
    @pytest.mark.parametrize(
        "z, expected",
        [
            ((4.0, 1.0), (2.0, 0.5)),
            ((4.0, -0.5), (2.0, -0.25)),
            ((1.0, 0.5), (1.0, 0.25)),
            (ZERO_I, (0.0, 0.25)),
            (INFINITY, INFINITY),
            (COMPLEX_ZERO, COMPLEX_ZERO),
            (NAN, NAN),
        ],
    )
    def test_values(self, z, expected):
        assert sqrt(z) == expected

    def test_result_stays_in_principal_half_plane(self, canonical):
        for member in canonical:
            t = sqrt(member.polar).t
            assert math.isnan(t) or -0.5 < t <= 0.5

    def test_negative_modulus_is_nan(self):
        assert sqrt(PolarValue(-4.0, 0.0)) == NAN
