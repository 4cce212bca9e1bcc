# -*- coding: utf-8 -*-

from typing import Optional

from setbreaker.config import WHEEL_BURST_IDLE_MS, WHEEL_UNITS_PER_NOTCH
from setbreaker.core.scheduler import IntervalHandle
from setbreaker.core.scroll_monitor import ScrollMonitor


class WheelGesture:
    """
    Mouse wheels have no press/release, so a burst of notches is treated as
    one drag: it begins on the first notch and ends after idle_ms without one.
    """

    def __init__(
        self,
        scroll_monitor: ScrollMonitor,
        scheduler,
        idle_ms: int = WHEEL_BURST_IDLE_MS,
        units_per_notch: int = WHEEL_UNITS_PER_NOTCH,
    ):
        self.scroll_monitor = scroll_monitor
        self.scheduler = scheduler
        self.idle_ms = idle_ms
        self.units_per_notch = units_per_notch

        self.active = False
        self.offset = 0
        self._end_job: Optional[IntervalHandle] = None

    def notch(self, direction: int) -> None:
        """direction: -1 up, +1 down."""
        if not self.active:
            self.active = True
            self.scroll_monitor.drag_begin(self.offset)

        self.offset += direction * self.units_per_notch
        self.scroll_monitor.drag_update(self.offset)

        self._cancel_end()
        self._end_job = self.scheduler.after(self.idle_ms, self._end)

    def cancel(self) -> None:
        """Drop the current burst without waiting for the idle gap."""
        self._cancel_end()
        if self.active:
            self.active = False
            self.scroll_monitor.drag_end()

    def _end(self) -> None:
        self._end_job = None
        self.active = False
        self.scroll_monitor.drag_end()

    def _cancel_end(self) -> None:
        if self._end_job is not None:
            self._end_job.cancel()
            self._end_job = None
