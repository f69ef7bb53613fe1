"""tick-tweener - Eased value tweening driven by a frame scheduler."""
from __future__ import annotations

from tick_tweener.bezier import cubic_bezier
from tick_tweener.components import AnimationRun, TweenState
from tick_tweener.config import TweenerConfig
from tick_tweener.easing import PRESETS, Easing, bezier, preset, resolve_easing
from tick_tweener.scheduler import AsyncioScheduler, FrameScheduler, ManualScheduler
from tick_tweener.tweener import Tweener, chain

__all__ = [
    "Tweener",
    "TweenerConfig",
    "TweenState",
    "AnimationRun",
    "chain",
    "Easing",
    "PRESETS",
    "preset",
    "bezier",
    "cubic_bezier",
    "resolve_easing",
    "FrameScheduler",
    "ManualScheduler",
    "AsyncioScheduler",
]
