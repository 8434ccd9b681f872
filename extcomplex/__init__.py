# Extended complex arithmetic in polar form
"""
Complex numbers as ``(modulus, angle / pi)`` pairs, extended with directed
zeros, directed infinities, a generic complex zero, a generic complex
infinity and a universal NaN.  Every operation is total: any combination of
inputs, however degenerate, gives a defined value consistent with the
limiting behaviour.
"""

from .angle import normalize, sincospi
from .ops import (
    absolute,
    add,
    divide,
    from_rect,
    multiply,
    power,
    reciprocal,
    sign,
    sqrt,
    subtract,
    to_rect,
    unary_minus,
)
from .polar import (
    COMPLEX_INFINITY,
    COMPLEX_ZERO,
    IMAG_UNIT,
    INFINITY,
    INFINITY_I,
    NAN,
    NEG_IMAG_UNIT,
    NEG_INFINITY,
    NEG_INFINITY_I,
    NEG_ONE,
    NEG_ZERO,
    NEG_ZERO_I,
    ONE,
    ZERO,
    ZERO_I,
    Canonical,
    PolarValue,
)

__version__ = "0.1.0"
__all__ = [
    "PolarValue",
    "Canonical",
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
    "ZERO",
    "NEG_ZERO",
    "ZERO_I",
    "NEG_ZERO_I",
    "COMPLEX_ZERO",
    "ONE",
    "NEG_ONE",
    "IMAG_UNIT",
    "NEG_IMAG_UNIT",
    "INFINITY",
    "NEG_INFINITY",
    "INFINITY_I",
    "NEG_INFINITY_I",
    "COMPLEX_INFINITY",
    "NAN",
]
