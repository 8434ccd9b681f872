import functools
import math
import numbers
from enum import Enum

import numpy as np

from .angle import normalize, sincospi


def _guarded_mul(coeff: float, value: float) -> float:
    """``coeff * value``, except a literal zero coefficient wins over inf/NaN."""
    return 0.0 if coeff == 0 else coeff * value


def _same(a: float, b: float) -> bool:
    return a == b or (math.isnan(a) and math.isnan(b))


def _operator(method, reflected: bool = False):
    """Wrap a binary method as operator sugar (coerce or NotImplemented)."""

    @functools.wraps(method)
    def wrapper(self, other):
        try:
            other = PolarValue.of(other)
        except (TypeError, ValueError):
            return NotImplemented
        return method(other, self) if reflected else method(self, other)

    return wrapper


class PolarValue:
    """
    An immutable extended complex number in polar form.

    Stored as ``(r, t)``: the modulus ``r`` (0, positive, +inf or NaN) and
    the angle ``t`` as a fraction of a half-turn, canonically in (-1, 1].

    Zero and infinite moduli keep a direction: t in {0, 1, 0.5, -0.5} gives
    the directed zeros/infinities, t = NaN the generic complex zero/infinity.
    A NaN modulus always carries a NaN angle (the single universal NaN).

    Constructors
    ------------
    PolarValue(r, t)              -> r·e^{iπt}
    PolarValue.of((r, t))         -> coerce a pair, a real or a PolarValue
    PolarValue.from_rect(x, y)    -> x + y i
    """

    __slots__ = ("_r", "_t")

    # ---------- construction ----------
    def __init__(self, r: float, t: float):
        r, t = float(r), float(t)
        if math.isnan(r):
            t = math.nan
        self._r = r
        self._t = t

    @classmethod
    def of(cls, value) -> "PolarValue":
        """Coerce a PolarValue, an ``(r, t)`` pair or a real number."""
        if isinstance(value, PolarValue):
            return value
        if isinstance(value, numbers.Real):
            return cls.from_real(value)
        if isinstance(value, (str, bytes)):
            raise TypeError(f"Cannot interpret {value!r} as a polar value")
        try:
            items = tuple(value)
        except TypeError:
            raise TypeError(f"Cannot interpret {value!r} as a polar value") from None
        if len(items) != 2:
            raise ValueError("Polar form needs (r, t)")
        return cls(*items)

    @classmethod
    def from_real(cls, x: float) -> "PolarValue":
        """A real number on the real axis; -0.0 becomes the directed zero -0."""
        x = float(x)
        if math.isnan(x):
            return NAN
        return cls(abs(x), 1.0 if math.copysign(1.0, x) < 0 else 0.0)

    @classmethod
    def from_rect(cls, x: float, y: float) -> "PolarValue":
        """
        Build a value from Cartesian coordinates.

        (0, 0) carries no direction and gives the generic complex zero.
        Points on an axis get an exact axis angle.  An infinite coordinate
        (overflow of a finite sum) gives the infinity along that axis, or the
        generic infinity when both coordinates are infinite.
        """
        x, y = float(x), float(y)
        if math.isnan(x) or math.isnan(y):
            return NAN
        if x == 0 and y == 0:
            return COMPLEX_ZERO
        if x == 0:
            return cls(abs(y), 0.5 if y > 0 else -0.5)
        if y == 0:
            return cls(abs(x), 0.0 if x > 0 else 1.0)
        if math.isinf(x) and math.isinf(y):
            return COMPLEX_INFINITY
        if math.isinf(x):
            return cls(math.inf, 0.0 if x > 0 else 1.0)
        if math.isinf(y):
            return cls(math.inf, 0.5 if y > 0 else -0.5)

        modulus = math.hypot(x, y)
        if math.isinf(modulus):
            return cls(modulus, normalize(math.atan2(y, x) / math.pi))
        half_turns = math.acos(max(-1.0, min(1.0, x / modulus))) / math.pi
        if y < 0 and half_turns != 1:
            half_turns = 0.0 - half_turns
        return cls(modulus, half_turns)

    # ---------- basic properties ----------
    @property
    def r(self) -> float:
        return self._r

    @property
    def t(self) -> float:
        return self._t

    def __iter__(self):
        yield self._r
        yield self._t

    @property
    def is_nan(self) -> bool:
        return math.isnan(self._r)

    @property
    def is_zero(self) -> bool:
        return self._r == 0

    @property
    def is_infinite(self) -> bool:
        return math.isinf(self._r)

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self._r)

    @property
    def is_generic(self) -> bool:
        """Zero or infinite modulus with an unknown direction."""
        return (self.is_zero or self.is_infinite) and math.isnan(self._t)

    @property
    def is_canonical(self) -> bool:
        r, t = self
        if math.isnan(r):
            return math.isnan(t)
        if r < 0:
            return False
        if r == 0 or math.isinf(r):
            return math.isnan(t) or t in (0.0, 1.0, 0.5, -0.5)
        return -1.0 < t <= 1.0

    # ---------- elementary ops ----------
    def multiply(self, other) -> "PolarValue":
        other = PolarValue.of(other)
        return PolarValue(self._r * other._r, normalize(self._t + other._t))

    def reciprocal(self) -> "PolarValue":
        r, t = self
        # t == 1 is its own negation: there is no -1 representative
        return PolarValue(math.inf if r == 0 else 1.0 / r, t if t == 1 else 0.0 - t)

    def divide(self, other) -> "PolarValue":
        return self.multiply(PolarValue.of(other).reciprocal())

    def negate(self) -> "PolarValue":
        """Rotate by a half-turn."""
        return PolarValue(self._r, normalize(self._t + 1.0))

    def absolute(self) -> "PolarValue":
        return PolarValue(self._r, 0.0)

    def sign(self) -> "PolarValue":
        """Unit value in the same direction; zero stays zero, infinity gives 1."""
        r = self._r
        if math.isnan(r):
            return NAN
        return PolarValue(0.0 if r == 0 else 1.0, self._t)

    def sqrt(self) -> "PolarValue":
        """Principal square root; halving a canonical angle keeps it canonical."""
        with np.errstate(invalid="ignore"):
            return PolarValue(np.sqrt(self._r), self._t / 2.0)

    # ---------- power ----------
    def power(self, other) -> "PolarValue":
        """
        Raise to an extended complex exponent.

        With base ``r·e^{iπt}`` and exponent ``s·e^{iπb}``::

            |z| = exp(s · (cos(πb)·ln r − sin(πb)·πt))
            arg = s · (cos(πb)·πt + sin(πb)·ln r)

        An exponent with literal zero modulus gives exactly 1 for every base,
        NaN included.  Products whose trig coefficient is a literal zero are
        taken as 0 even against an infinite or NaN factor, so the limit wins
        over 0·inf.  A zero base with a non-real exponent direction has no
        limit and gives NaN.
        """
        other = PolarValue.of(other)
        r, t = self
        s, b = other
        if s == 0:
            return PolarValue(1.0, 0.0)

        with np.errstate(all="ignore"):
            sbpi, cbpi = sincospi(b)
            logr = np.log(r)
            tpi = t * math.pi

            if sbpi != 0 and r == 0:
                mag = math.nan
            else:
                mag = np.exp(s * (cbpi * logr - _guarded_mul(sbpi, tpi)))

            if sbpi == 0 and tpi == 0 and logr != 0:
                ang = 0.0               # positive real to a real power
            else:
                ang = (cbpi * tpi + _guarded_mul(sbpi, logr)) * s / math.pi

        return PolarValue(mag, normalize(ang))

    # ---------- rectangular bridge & addition ----------
    def to_rect(self) -> tuple[float, float]:
        """
        Cartesian ``(x, y)``.

        A zero modulus is the origin whatever its direction.  Infinite moduli
        only keep the components along an exact axis, e.g. (inf, 0) for +inf.
        """
        r = self._r
        if r == 0:
            return 0.0, 0.0
        s, c = sincospi(self._t)
        return _guarded_mul(c, r), _guarded_mul(s, r)

    def add(self, other) -> "PolarValue":
        other = PolarValue.of(other)
        r, t = self
        s, b = other
        if math.isnan(r) or math.isnan(s):
            return NAN
        if t == b:
            return PolarValue(r + s, t)
        if math.isinf(r) and math.isinf(s):
            # opposite directions along one line: inf - inf
            return NAN if abs(t - b) == 1 else COMPLEX_INFINITY
        if math.isinf(r):
            return PolarValue(r, t)
        if math.isinf(s):
            return PolarValue(s, b)
        if r == s and b == normalize(t + 1.0):
            # exactly the half-turn rotation negate() builds
            return COMPLEX_ZERO

        x1, y1 = self.to_rect()
        x2, y2 = other.to_rect()
        return PolarValue.from_rect(x1 + x2, y1 + y2)

    def subtract(self, other) -> "PolarValue":
        return self.add(PolarValue.of(other).negate())

    # ---------- dunder sugar ----------
    __mul__ = _operator(multiply)
    __rmul__ = _operator(multiply, reflected=True)
    __truediv__ = _operator(divide)
    __rtruediv__ = _operator(divide, reflected=True)
    __add__ = _operator(add)
    __radd__ = _operator(add, reflected=True)
    __sub__ = _operator(subtract)
    __rsub__ = _operator(subtract, reflected=True)
    __pow__ = _operator(power)
    __rpow__ = _operator(power, reflected=True)
    __neg__ = negate
    __abs__ = absolute

    def __eq__(self, other):
        """Component-wise equality where NaN matches NaN; pairs compare too."""
        if isinstance(other, numbers.Real):
            return NotImplemented
        try:
            other = PolarValue.of(other)
        except (TypeError, ValueError):
            return NotImplemented
        return _same(self._r, other._r) and _same(self._t, other._t)

    def __hash__(self):
        # same as the matching (r, t) tuple when neither part is NaN
        return hash(tuple(None if math.isnan(v) else v for v in self))

    def __repr__(self):
        return f"PolarValue({self._r:g}, {self._t:g})"


class Canonical(Enum):
    """The named values the pairwise truth tables are built over."""

    ZERO = ("0", 0.0, 0.0)
    NEG_ZERO = ("-0", 0.0, 1.0)
    ZERO_I = ("0i", 0.0, 0.5)
    COMPLEX_ZERO = ("c0", 0.0, math.nan)
    ONE = ("1", 1.0, 0.0)
    TWO = ("2", 2.0, 0.0)
    NEG_ONE = ("-1", 1.0, 1.0)
    NEG_TWO = ("-2", 2.0, 1.0)
    IMAG_UNIT = ("i", 1.0, 0.5)
    ONE_PLUS_I = ("1+i", math.sqrt(2.0), 0.25)
    INFINITY = ("inf", math.inf, 0.0)
    NEG_INFINITY = ("-inf", math.inf, 1.0)
    INFINITY_I = ("inf*i", math.inf, 0.5)
    COMPLEX_INFINITY = ("cinf", math.inf, math.nan)
    NAN = ("nan", math.nan, math.nan)

    def __init__(self, label, r, t):
        self.label = label
        self.polar = PolarValue(r, t)


ZERO = Canonical.ZERO.polar
NEG_ZERO = Canonical.NEG_ZERO.polar
ZERO_I = Canonical.ZERO_I.polar
NEG_ZERO_I = PolarValue(0.0, -0.5)
COMPLEX_ZERO = Canonical.COMPLEX_ZERO.polar
ONE = Canonical.ONE.polar
NEG_ONE = Canonical.NEG_ONE.polar
IMAG_UNIT = Canonical.IMAG_UNIT.polar
NEG_IMAG_UNIT = PolarValue(1.0, -0.5)
INFINITY = Canonical.INFINITY.polar
NEG_INFINITY = Canonical.NEG_INFINITY.polar
INFINITY_I = Canonical.INFINITY_I.polar
NEG_INFINITY_I = PolarValue(math.inf, -0.5)
COMPLEX_INFINITY = Canonical.COMPLEX_INFINITY.polar
NAN = Canonical.NAN.polar
