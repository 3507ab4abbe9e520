from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional


TickCallback = Callable[[], None]


class DriverState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class TkTickSource:
    """
    Periodic tick on the Tk event loop.

    Tk's after() is one-shot, so each tick re-arms the next one before
    calling back. stop() cancels the pending call.
    """

    def __init__(self, widget: Any, interval_ms: int = 17):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.widget = widget
        self.interval_ms = int(interval_ms)
        self._callback: Optional[TickCallback] = None
        self._after_id: Optional[str] = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback
        self._after_id = self.widget.after(self.interval_ms, self._fire)

    def stop(self) -> None:
        if self._after_id is not None:
            self.widget.after_cancel(self._after_id)
        self._after_id = None
        self._callback = None

    def _fire(self) -> None:
        callback = self._callback
        if callback is None:
            return
        self._after_id = self.widget.after(self.interval_ms, self._fire)
        callback()


class ManualTickSource:
    """Tick source driven by explicit advance() calls (headless runs, tests)."""

    def __init__(self):
        self._callback: Optional[TickCallback] = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback

    def stop(self) -> None:
        self._callback = None

    def advance(self, ticks: int = 1) -> int:
        """Fires up to `ticks` ticks; returns how many actually fired."""
        fired = 0
        for _ in range(ticks):
            if self._callback is None:
                break
            self._callback()
            fired += 1
        return fired


class FrameDriver:
    """
    Two-state machine (STOPPED/RUNNING) that owns the frame counter.
    Each tick advances the counter and asks for exactly one redraw.
    """

    def __init__(self, tick_source, request_redraw: Callable[[], None], frame_number: int = 0):
        self.tick_source = tick_source
        self.request_redraw = request_redraw
        self._frame_number = int(frame_number)
        self._state = DriverState.STOPPED

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is DriverState.RUNNING

    def start(self) -> None:
        if self._state is DriverState.RUNNING:
            return
        self.tick_source.start(self.tick)
        self._state = DriverState.RUNNING

    def stop(self) -> None:
        if self._state is DriverState.STOPPED:
            return
        self.tick_source.stop()
        self._state = DriverState.STOPPED

    def set_running(self, running: bool) -> None:
        if running:
            self.start()
        else:
            self.stop()

    def tick(self) -> None:
        self._frame_number += 1
        self.request_redraw()
