"""Tweener - animates one number towards a target on a frame scheduler."""
from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable
from concurrent.futures import Future
from dataclasses import replace
from functools import partial

from tick_tweener.components import AnimationRun, TweenState
from tick_tweener.config import TweenerConfig, check_duration
from tick_tweener.easing import DEFAULT_EASING, Easing, EasingSpec, resolve_easing
from tick_tweener.scheduler import FrameScheduler

logger = logging.getLogger(__name__)


def _check_target(target: float) -> float:
    if not isinstance(target, numbers.Real) or isinstance(target, bool):
        raise TypeError(f"target must be a real number, got {type(target).__name__}")
    if not math.isfinite(target):
        raise ValueError(f"target must be finite, got {target}")
    return float(target)


def _resolved() -> Future[None]:
    future: Future[None] = Future()
    future.set_result(None)
    return future


class Tweener:
    """Interpolates a single value from its current state to a target.

    At most one run is live at a time. Starting a run or stopping cancels
    the pending tick first, and the future of a superseded run is
    cancelled rather than left pending.
    """

    def __init__(self, config: TweenerConfig, scheduler: FrameScheduler) -> None:
        self._config = config
        self._scheduler = scheduler
        self._easing: Easing = resolve_easing(config.easing)
        self._run: AnimationRun | None = None
        self._current_value: float = 0.0

    # --- Queries ---

    @property
    def config(self) -> TweenerConfig:
        return self._config

    @property
    def easing(self) -> Easing:
        return self._easing

    @property
    def current_value(self) -> float:
        """Last interpolated value. Valid while idle."""
        return self._current_value

    @current_value.setter
    def current_value(self, value: float) -> None:
        value = _check_target(value)
        self.stop()
        self._current_value = value

    @property
    def is_animating(self) -> bool:
        return self._run is not None and self._run.running

    @property
    def state(self) -> TweenState:
        run = self._run
        if run is None:
            return TweenState.IDLE
        if self._scheduler.now() < run.start_time:
            return TweenState.DELAYING
        return TweenState.RUNNING

    # --- Configuration ---

    def set_easing(self, easing: EasingSpec | None) -> None:
        """Change the curve for runs started after this call."""
        if easing is None:
            easing = DEFAULT_EASING
        self._easing = resolve_easing(easing)
        self._config = replace(self._config, easing=easing)

    def set_duration(self, duration: float) -> None:
        """Change the duration (ms) for runs started after this call."""
        check_duration(duration)
        self._config = replace(self._config, duration=duration)

    # --- Control ---

    def set_target(self, target: float) -> Future[None]:
        """Move to ``target``, animating unless ``on_change`` says not to."""
        target = _check_target(target)
        on_change = self._config.on_change
        if on_change is not None and not on_change(self._current_value, target):
            self.stop()
            self._current_value = target
            return _resolved()
        return self.animate_to(target)

    def animate_to(self, target: float) -> Future[None]:
        """Start a run from the current value to ``target``.

        Returns a future that resolves when this run completes. It is
        cancelled if the run is stopped or superseded, and cancelling it
        stops the run.
        """
        target = _check_target(target)
        self.stop()

        run = AnimationRun(
            from_value=self._current_value,
            to_value=target,
            start_time=self._scheduler.now() + self._config.delay,
            duration=self._config.duration,
            easing=self._easing,
        )
        self._run = run
        run.future.add_done_callback(partial(self._on_future_done, run))
        run.handle = self._scheduler.request_tick(partial(self._tick, run))
        logger.debug(
            "Tween %s -> %s over %sms (delay %sms, easing %s)",
            run.from_value,
            run.to_value,
            run.duration,
            self._config.delay,
            run.easing.name,
        )
        return run.future

    def stop(self) -> None:
        """Cancel the live run, if any. No completion hook fires."""
        run = self._run
        if run is None:
            return
        if run.handle is not None:
            self._scheduler.cancel_tick(run.handle)
            run.handle = None
        run.running = False
        self._run = None
        logger.debug("Tween to %s cancelled at %s", run.to_value, self._current_value)
        run.future.cancel()

    # --- Ticking ---

    def _on_future_done(self, run: AnimationRun, future: Future[None]) -> None:
        if future.cancelled() and self._run is run:
            self.stop()

    def _tick(self, run: AnimationRun, now: float) -> None:
        if self._run is not run:
            return
        run.handle = None
        try:
            self._advance(run, now)
        except Exception as exc:
            if self._run is run:
                run.running = False
                self._run = None
            if not run.future.done():
                run.future.set_exception(exc)
            raise

    def _advance(self, run: AnimationRun, now: float) -> None:
        if now < run.start_time:
            run.handle = self._scheduler.request_tick(partial(self._tick, run))
            return

        if run.duration <= 0:
            progress = 1.0
        else:
            progress = min((now - run.start_time) / run.duration, 1.0)

        if progress < 1.0:
            eased = run.easing.apply(progress)
            self._current_value = run.from_value + (run.to_value - run.from_value) * eased
        else:
            self._current_value = run.to_value

        on_update = self._config.on_update
        if on_update is not None:
            on_update(self._current_value, progress)
            if self._run is not run:
                # The hook stopped or retargeted this tweener.
                return

        if progress < 1.0:
            run.handle = self._scheduler.request_tick(partial(self._tick, run))
        else:
            self._complete(run)

    def _complete(self, run: AnimationRun) -> None:
        run.running = False
        self._run = None
        logger.debug("Tween completed at %s", run.to_value)
        try:
            on_complete = self._config.on_complete
            if on_complete is not None:
                on_complete(run.to_value)
        finally:
            if not run.future.done():
                run.future.set_result(None)


def chain(steps: Iterable[tuple[Tweener, float]]) -> Future[None]:
    """Run ``(tweener, target)`` steps one after another.

    Each ``animate_to`` is issued only after the previous step's future
    completed. A cancelled or failed step ends the chain with the same
    outcome; cancelling the returned future cancels the step in flight.
    """
    remaining = list(steps)
    done: Future[None] = Future()
    current: list[Future[None]] = []

    def start_next(previous: Future[None] | None) -> None:
        if done.done():
            return
        if previous is not None:
            if previous.cancelled():
                done.cancel()
                return
            exc = previous.exception()
            if exc is not None:
                done.set_exception(exc)
                return
        if not remaining:
            done.set_result(None)
            return
        try:
            tweener, target = remaining.pop(0)
            step = tweener.animate_to(target)
        except Exception as exc:
            done.set_exception(exc)
            return
        current[:] = [step]
        step.add_done_callback(start_next)

    def on_done(future: Future[None]) -> None:
        if future.cancelled():
            for step in current:
                step.cancel()

    done.add_done_callback(on_done)
    start_next(None)
    return done
