"""Frame schedulers that drive tweener ticks.

A scheduler runs a callback once before the next frame, can cancel a
pending callback, and exposes a monotonic clock in milliseconds. Tweeners
only ever talk to the :class:`FrameScheduler` protocol, so a host can drive
them from a display loop, an asyncio loop, or a virtual clock.
"""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Protocol, runtime_checkable

TickCallback = Callable[[float], None]


@runtime_checkable
class FrameScheduler(Protocol):
    def request_tick(self, callback: TickCallback) -> Any: ...

    def cancel_tick(self, handle: Any) -> None: ...

    def now(self) -> float: ...


class ManualScheduler:
    """Deterministic scheduler on a virtual clock.

    Time only moves when the owner calls :meth:`step`, :meth:`run` or
    :meth:`advance`. Ticks requested while a frame is being flushed run on
    the next frame, never the current one.
    """

    def __init__(self, fps: int = 60, start: float = 0.0) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._frame_ms = 1000.0 / fps
        self._now = start
        self._frame = 0
        self._next_handle = 0
        self._pending: dict[int, TickCallback] = {}

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def frame_ms(self) -> float:
        return self._frame_ms

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def pending(self) -> int:
        return len(self._pending)

    def now(self) -> float:
        return self._now

    def request_tick(self, callback: TickCallback) -> int:
        self._next_handle += 1
        self._pending[self._next_handle] = callback
        return self._next_handle

    def cancel_tick(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def _flush(self) -> int:
        snapshot = list(self._pending)
        ran = 0
        for handle in snapshot:
            # A callback may cancel a tick later in this snapshot.
            callback = self._pending.pop(handle, None)
            if callback is None:
                continue
            callback(self._now)
            ran += 1
        return ran

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms`` and run pending ticks once."""
        if ms < 0:
            raise ValueError("cannot move the clock backwards")
        self._now += ms
        self._frame += 1
        return self._flush()

    def step(self) -> int:
        """Advance one frame. Returns the number of ticks that ran."""
        return self.advance(self._frame_ms)

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()

    def run_until_idle(self, max_frames: int = 100_000) -> int:
        """Step until no ticks are pending. Returns the frames stepped."""
        frames = 0
        while self._pending:
            if frames >= max_frames:
                raise RuntimeError(f"still {len(self._pending)} ticks pending after {max_frames} frames")
            self.step()
            frames += 1
        return frames


class AsyncioScheduler:
    """Drives ticks from an asyncio event loop at a fixed frame rate.

    The clock is ``loop.time()`` in milliseconds, which is monotonic.
    """

    def __init__(self, fps: int = 60, loop: asyncio.AbstractEventLoop | None = None) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._interval = 1.0 / fps
        self._loop = loop

    @property
    def fps(self) -> int:
        return self._fps

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self._get_loop().time() * 1000.0

    def request_tick(self, callback: TickCallback) -> asyncio.TimerHandle:
        return self._get_loop().call_later(self._interval, self._fire, callback)

    def cancel_tick(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()

    def _fire(self, callback: TickCallback) -> None:
        callback(self.now())
