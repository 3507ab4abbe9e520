from __future__ import annotations

import pytest

from animation import DriverState, FrameDriver, ManualTickSource, TkTickSource


class RecordingTicks(ManualTickSource):
    def __init__(self):
        super().__init__()
        self.starts = 0
        self.stops = 0

    def start(self, callback) -> None:
        self.starts += 1
        super().start(callback)

    def stop(self) -> None:
        self.stops += 1
        super().stop()


class FakeWidget:
    """Minimal stand-in for Tk's after()/after_cancel()."""

    def __init__(self):
        self.pending = {}
        self.delays = []
        self._next = 0

    def after(self, ms, fn):
        self._next += 1
        after_id = f"after#{self._next}"
        self.pending[after_id] = fn
        self.delays.append(ms)
        return after_id

    def after_cancel(self, after_id):
        self.pending.pop(after_id, None)

    def fire_next(self):
        after_id = next(iter(self.pending))
        self.pending.pop(after_id)()


def _driver():
    ticks = RecordingTicks()
    redraws = []
    driver = FrameDriver(ticks, request_redraw=lambda: redraws.append(driver.frame_number))
    return driver, ticks, redraws


def test_initially_stopped_at_frame_zero() -> None:
    driver, ticks, redraws = _driver()
    assert driver.state is DriverState.STOPPED
    assert driver.frame_number == 0
    assert not ticks.running


def test_toggle_on_then_off_without_tick_keeps_counter() -> None:
    driver, ticks, redraws = _driver()
    driver.set_running(True)
    assert driver.state is DriverState.RUNNING
    driver.set_running(False)
    assert driver.state is DriverState.STOPPED
    assert driver.frame_number == 0
    assert redraws == []
    assert ticks.advance(1) == 0


def test_sixty_ticks_advance_counter_with_one_redraw_each() -> None:
    driver, ticks, redraws = _driver()
    driver.set_running(True)
    assert ticks.advance(60) == 60
    assert driver.frame_number == 60
    assert redraws == list(range(1, 61))


def test_counter_is_kept_across_stop_and_restart() -> None:
    driver, ticks, redraws = _driver()
    driver.start()
    ticks.advance(5)
    driver.stop()
    assert ticks.advance(3) == 0
    assert driver.frame_number == 5
    driver.start()
    ticks.advance(2)
    assert driver.frame_number == 7


def test_repeated_toggles_are_noops() -> None:
    driver, ticks, redraws = _driver()
    driver.stop()
    assert ticks.stops == 0
    driver.start()
    driver.start()
    assert ticks.starts == 1
    driver.stop()
    driver.stop()
    assert ticks.stops == 1


def test_tk_tick_source_rearms_and_cancels() -> None:
    widget = FakeWidget()
    source = TkTickSource(widget, interval_ms=17)
    calls = []
    source.start(lambda: calls.append(len(widget.pending)))
    assert source.running
    assert widget.delays == [17]
    widget.fire_next()
    # next tick was armed before the callback ran
    assert calls == [1]
    widget.fire_next()
    assert calls == [1, 1]
    source.stop()
    assert widget.pending == {}
    assert not source.running


def test_tk_driven_frame_driver() -> None:
    widget = FakeWidget()
    redraws = []
    driver = FrameDriver(TkTickSource(widget), request_redraw=lambda: redraws.append(1))
    driver.set_running(True)
    for _ in range(3):
        widget.fire_next()
    driver.set_running(False)
    assert driver.frame_number == 3
    assert len(redraws) == 3
    assert widget.pending == {}


def test_tk_tick_source_rejects_bad_interval() -> None:
    with pytest.raises(ValueError):
        TkTickSource(FakeWidget(), interval_ms=0)
