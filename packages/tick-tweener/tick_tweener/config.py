"""Tweener configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from tick_tweener.easing import DEFAULT_EASING, EasingSpec

ChangeHook = Callable[[float, float], bool]
UpdateHook = Callable[[float, float], None]
CompleteHook = Callable[[float], None]


@dataclass(frozen=True)
class TweenerConfig:
    """Immutable configuration for a Tweener.

    Attributes:
        duration: Run length in milliseconds. Zero or negative completes on
            the first running tick.
        delay: Milliseconds between a request and the start of interpolation.
        easing: Preset name, four control points, a function, or an Easing.
        on_change: ``(current, target) -> bool`` consulted by ``set_target``;
            a falsy result jumps to the target without animating.
        on_update: ``(current, progress)`` called on every running tick.
        on_complete: ``(final)`` called once when a run completes.
    """

    duration: float
    delay: float = 0.0
    easing: EasingSpec = DEFAULT_EASING
    on_change: ChangeHook | None = None
    on_update: UpdateHook | None = None
    on_complete: CompleteHook | None = None

    def __post_init__(self) -> None:
        check_duration(self.duration)
        if not math.isfinite(self.delay):
            raise ValueError(f"delay must be finite, got {self.delay}")
        if self.delay < 0:
            raise ValueError(f"delay must be non-negative, got {self.delay}")


def check_duration(duration: float) -> None:
    if not math.isfinite(duration):
        raise ValueError(f"duration must be finite, got {duration}")
