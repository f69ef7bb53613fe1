"""AnimationRun record and tweener states."""
from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tick_tweener.easing import Easing


class TweenState(Enum):
    IDLE = "idle"
    DELAYING = "delaying"
    RUNNING = "running"


@dataclass
class AnimationRun:
    """One in-flight tween. Owned and mutated by a single Tweener."""

    from_value: float
    to_value: float
    start_time: float  # scheduler clock, ms
    duration: float  # ms
    easing: Easing
    future: Future[None] = field(default_factory=Future)
    handle: Any = None  # pending scheduler handle, None between ticks
    running: bool = True
