"""
Pairwise truth tables over the canonical values.

Each table evaluates one binary operation on every ordered pair of
``Canonical`` members (row = left operand, column = right operand).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator

import numpy as np
import pandas as pd

from . import ops
from .polar import Canonical, PolarValue

logger = logging.getLogger(__name__)

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
OPERATIONS = {                  # name → (function, symbol)
    "pow": (ops.power, "^"),
    "mul": (ops.multiply, "*"),
    "div": (ops.divide, "/"),
    "add": (ops.add, "+"),
    "sub": (ops.subtract, "-"),
}
INFINITY_TEXT = "Infinity"        # console spelling of the cells
NAN_TEXT = "NaN"

BinaryOp = Callable[[PolarValue, PolarValue], PolarValue]


def canonical_values() -> list[Canonical]:
    """The 15 canonical members, in table order."""
    return list(Canonical)


def resolve_operation(op: str | BinaryOp) -> tuple[BinaryOp, str]:
    """Map an operation name (or a callable) to ``(function, symbol)``."""
    if callable(op):
        return op, getattr(op, "__name__", "?")
    try:
        return OPERATIONS[op]
    except KeyError:
        raise ValueError(
            f"Unknown operation {op!r}; expected one of {', '.join(OPERATIONS)}"
        ) from None


def format_number(x: float) -> str:
    """Shortest round-trip text: integers without ".0", Infinity, NaN."""
    if math.isnan(x):
        return NAN_TEXT
    if math.isinf(x):
        return INFINITY_TEXT if x > 0 else "-" + INFINITY_TEXT
    if x == 0:
        return "0"
    text = repr(x)
    return text[:-2] if text.endswith(".0") else text


def format_cell(z: PolarValue) -> str:
    r, t = z
    return f"({format_number(r)},{format_number(t)})"


def _results(fn: BinaryOp) -> Iterator[tuple[Canonical, Canonical, PolarValue]]:
    values = canonical_values()
    for a in values:
        for b in values:
            yield a, b, fn(a.polar, b.polar)


def truth_table(op: str | BinaryOp = "pow") -> tuple[np.ndarray, np.ndarray]:
    """
    Evaluate ``op`` over all canonical pairs.

    Returns
    -------
    moduli, angles : np.ndarray
        Float arrays of shape (15, 15).
    """
    fn, symbol = resolve_operation(op)
    n = len(Canonical)
    moduli = np.empty((n, n))
    angles = np.empty((n, n))
    index = {member: i for i, member in enumerate(canonical_values())}

    for a, b, result in _results(fn):
        moduli[index[a], index[b]], angles[index[a], index[b]] = result

    logger.debug(
        "%s table: %d of %d cells are NaN",
        op if isinstance(op, str) else symbol,
        int(np.isnan(moduli).sum()),
        moduli.size,
    )
    return moduli, angles


def truth_lines(op: str | BinaryOp = "pow") -> Iterator[str]:
    """Yield one ``"a ^ b = (r,t)"`` line per ordered pair."""
    fn, symbol = resolve_operation(op)
    for a, b, result in _results(fn):
        yield f"{a.label} {symbol} {b.label} = {format_cell(result)}"


def truth_frame(op: str | BinaryOp = "pow") -> pd.DataFrame:
    """The table as a labelled DataFrame of ``"(r,t)"`` strings."""
    fn, _ = resolve_operation(op)
    labels = [member.label for member in canonical_values()]
    cells = [format_cell(result) for _, _, result in _results(fn)]
    n = len(labels)
    df = pd.DataFrame(
        [cells[i * n:(i + 1) * n] for i in range(n)],
        index=labels,
        columns=labels,
    )
    df.index.name = "left"
    return df
