"""Cubic-bezier timing functions (CSS ``cubic-bezier(x1, y1, x2, y2)``).

The curve runs from (0, 0) to (1, 1) with two free control points. For a
time fraction ``x`` we solve ``Bx(s) == x`` for the curve parameter ``s``
and return ``By(s)``. The solver seeds ``s`` from a precomputed sample
table, refines it with Newton-Raphson, and falls back to bisection where the
slope is too flat for Newton to converge.
"""
from __future__ import annotations

import math
from typing import Callable

_NEWTON_ITERATIONS = 4
_NEWTON_MIN_SLOPE = 0.001
_SUBDIVISION_PRECISION = 1e-7
_SUBDIVISION_MAX_ITERATIONS = 10

_SPLINE_TABLE_SIZE = 11
_SAMPLE_STEP = 1.0 / (_SPLINE_TABLE_SIZE - 1)


def _a(p1: float, p2: float) -> float:
    return 1.0 - 3.0 * p2 + 3.0 * p1


def _b(p1: float, p2: float) -> float:
    return 3.0 * p2 - 6.0 * p1


def _c(p1: float) -> float:
    return 3.0 * p1


def _calc_bezier(s: float, p1: float, p2: float) -> float:
    """Point on one axis of the curve at parameter ``s`` (Horner form)."""
    return ((_a(p1, p2) * s + _b(p1, p2)) * s + _c(p1)) * s


def _slope(s: float, p1: float, p2: float) -> float:
    """dB/ds on one axis at parameter ``s``."""
    return 3.0 * _a(p1, p2) * s * s + 2.0 * _b(p1, p2) * s + _c(p1)


def _bisect(x: float, lo: float, hi: float, x1: float, x2: float) -> float:
    s = lo
    for _ in range(_SUBDIVISION_MAX_ITERATIONS):
        s = lo + (hi - lo) / 2.0
        dx = _calc_bezier(s, x1, x2) - x
        if abs(dx) <= _SUBDIVISION_PRECISION:
            break
        if dx > 0.0:
            hi = s
        else:
            lo = s
    return s


def _newton(x: float, guess: float, x1: float, x2: float) -> float:
    s = guess
    for _ in range(_NEWTON_ITERATIONS):
        slope = _slope(s, x1, x2)
        if slope == 0.0:
            return s
        s -= (_calc_bezier(s, x1, x2) - x) / slope
    return s


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """Build a timing function from two control points.

    ``x1`` and ``x2`` must lie in [0, 1] so that the curve is a function of
    time; ``y1`` and ``y2`` are free, which allows overshoot. The returned
    function maps 0 to 0 and 1 to 1 exactly.

    Raises:
        ValueError: If any value is not finite, or ``x1`` or ``x2`` is
            outside [0, 1].
    """
    if not all(math.isfinite(p) for p in (x1, y1, x2, y2)):
        raise ValueError(f"bezier control points must be finite, got {(x1, y1, x2, y2)}")
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError(f"bezier x values must be in [0, 1], got x1={x1}, x2={x2}")

    if x1 == y1 and x2 == y2:
        return _identity

    samples = [_calc_bezier(i * _SAMPLE_STEP, x1, x2) for i in range(_SPLINE_TABLE_SIZE)]

    def param_for_x(x: float) -> float:
        interval_start = 0.0
        sample = 1
        last_sample = _SPLINE_TABLE_SIZE - 1
        while sample != last_sample and samples[sample] <= x:
            interval_start += _SAMPLE_STEP
            sample += 1
        sample -= 1

        # Linear interpolation inside the sampled interval for the first guess.
        dist = (x - samples[sample]) / (samples[sample + 1] - samples[sample])
        guess = interval_start + dist * _SAMPLE_STEP

        initial_slope = _slope(guess, x1, x2)
        if initial_slope >= _NEWTON_MIN_SLOPE:
            return _newton(x, guess, x1, x2)
        if initial_slope == 0.0:
            return guess
        return _bisect(x, interval_start, interval_start + _SAMPLE_STEP, x1, x2)

    def timing(x: float) -> float:
        if x == 0.0 or x == 1.0:
            return float(x)
        return _calc_bezier(param_for_x(x), y1, y2)

    return timing


def _identity(t: float) -> float:
    return t
