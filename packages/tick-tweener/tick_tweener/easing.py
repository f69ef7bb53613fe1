"""Easing curves for tween interpolation.

An easing spec is resolved once into an immutable :class:`Easing`; the
tweener snapshots that object per run and calls :meth:`Easing.apply` on
every tick.
"""
from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Union

from tick_tweener.bezier import cubic_bezier

logger = logging.getLogger(__name__)

EasingFunction = Callable[[float], float]
ControlPoints = tuple[float, float, float, float]

DEFAULT_EASING = "ease-in-out"

# ``None`` marks the identity curve.
PRESETS: dict[str, ControlPoints | None] = {
    "linear": None,
    "ease": (0.25, 0.1, 0.25, 1.0),
    "ease-in": (0.42, 0.0, 1.0, 1.0),
    "ease-out": (0.0, 0.0, 0.58, 1.0),
    "ease-in-out": (0.42, 0.0, 0.58, 1.0),
    "ease-in-quad": (0.55, 0.085, 0.68, 0.53),
    "ease-out-quad": (0.25, 0.46, 0.45, 0.94),
    "ease-in-out-quad": (0.455, 0.03, 0.515, 0.955),
    "ease-in-cubic": (0.55, 0.055, 0.675, 0.19),
    "ease-out-cubic": (0.215, 0.61, 0.355, 1.0),
    "ease-in-out-cubic": (0.645, 0.045, 0.355, 1.0),
    "ease-in-quart": (0.895, 0.03, 0.685, 0.22),
    "ease-out-quart": (0.165, 0.84, 0.44, 1.0),
    "ease-in-out-quart": (0.77, 0.0, 0.175, 1.0),
}


def linear(t: float) -> float:
    return t


@dataclass(frozen=True)
class Easing:
    """A resolved easing curve.

    Attributes:
        fn: The raw evaluator, defined on [0, 1].
        name: Preset name, ``cubic-bezier(...)`` label, or None for a
            caller-supplied function.
    """

    fn: EasingFunction
    name: str | None = None

    def apply(self, t: float) -> float:
        """Evaluate at ``t`` clamped to [0, 1].

        Only the input is clamped. Curves that overshoot (back, elastic)
        pass their output through unchanged.
        """
        return self.fn(max(0.0, min(1.0, t)))

    @property
    def function(self) -> EasingFunction:
        return self.fn


EasingSpec = Union[str, Sequence[float], EasingFunction, Easing]


def _bezier_label(points: ControlPoints) -> str:
    return "cubic-bezier({}, {}, {}, {})".format(*points)


@lru_cache(maxsize=None)
def _preset(key: str) -> Easing:
    points = PRESETS[key]
    if points is None:
        return Easing(linear, key)
    return Easing(cubic_bezier(*points), key)


def preset(name: str) -> Easing:
    """Look up a preset by name, case-insensitively.

    Unknown names log a warning and fall back to ``ease-in-out``.

    Raises:
        TypeError: If ``name`` is not a string.
    """
    if not isinstance(name, str):
        raise TypeError(f"preset name must be a string, got {type(name).__name__}")
    key = name.strip().lower()
    if key not in PRESETS:
        logger.warning(
            "Unknown easing preset %r, falling back to %s", name, DEFAULT_EASING
        )
        key = DEFAULT_EASING
    return _preset(key)


def bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """Build an :class:`Easing` from cubic-bezier control points."""
    points = (float(x1), float(y1), float(x2), float(y2))
    return Easing(cubic_bezier(*points), _bezier_label(points))


def _from_points(points: Sequence[object]) -> Easing:
    if len(points) != 4 or not all(
        isinstance(p, numbers.Real) and not isinstance(p, bool) and math.isfinite(p)
        for p in points
    ):
        logger.warning(
            "Malformed cubic-bezier control points %r, falling back to %s",
            points,
            DEFAULT_EASING,
        )
        return _preset(DEFAULT_EASING)
    try:
        return bezier(*points)  # type: ignore[arg-type]
    except ValueError as exc:
        logger.warning("%s, falling back to %s", exc, DEFAULT_EASING)
        return _preset(DEFAULT_EASING)


def resolve_easing(spec: EasingSpec | None) -> Easing:
    """Resolve any easing spec into an :class:`Easing`.

    Accepts an :class:`Easing` (returned as is), a preset name, four
    control points, or a plain function. ``None`` means the default curve.

    Raises:
        TypeError: If ``spec`` is none of the above.
    """
    if spec is None:
        return _preset(DEFAULT_EASING)
    if isinstance(spec, Easing):
        return spec
    if isinstance(spec, str):
        return preset(spec)
    if callable(spec):
        return Easing(spec)
    if isinstance(spec, Sequence):
        return _from_points(spec)
    raise TypeError(f"Cannot resolve easing from {type(spec).__name__}: {spec!r}")
