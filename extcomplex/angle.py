"""
Angle helpers for values stored as fractions of a half-turn.

An angle ``t`` means ``t * pi`` radians.  The canonical range is the
half-open interval (-1, 1]; -1 is never used so that the direction pi has
exactly one representative (1).
"""

from __future__ import annotations

import math

import numpy as np


def normalize(t: float) -> float:
    """
    Reduce an arbitrary angle into (-1, 1].

    Equivalent to ``t + 2 * floor((1 - t) / 2)``.  Angles already in range
    are returned unchanged (the correction term is exactly 0), so small
    negative inputs keep their full precision.  NaN and infinities map to NaN.
    """
    with np.errstate(invalid="ignore"):
        t = float(t + 2.0 * np.floor((1.0 - t) / 2.0))
    if t <= -1.0:                      # rounding can land on the excluded end
        t += 2.0
    return t


def sincospi(t: float) -> tuple[float, float]:
    """
    Return ``(sin(t*pi), cos(t*pi))``, exact on the axes.

    At t in {0, 1} the sine is exactly 0 and the cosine exactly +-1; at
    t in {0.5, -0.5} the cosine is exactly 0 and the sine exactly +-1.
    Callers rely on these zeros being literal, not round-off residue.

    Off-axis angles are folded into [0, 0.5] before evaluation so that
    rotating by a half-turn flips both signs without changing magnitudes.
    """
    if not -1.0 < t <= 1.0:
        t = normalize(t)
    if t == 0:
        return 0.0, 1.0
    if t == 1:
        return 0.0, -1.0
    if t == 0.5:
        return 1.0, 0.0
    if t == -0.5:
        return -1.0, 0.0

    a = abs(t)
    mirrored = a > 0.5
    if mirrored:
        a = 1.0 - a
    x = a * math.pi
    s, c = float(np.sin(x)), float(np.cos(x))
    if mirrored:
        c = -c
    if t < 0:
        s = -s
    return s, c
