# -*- coding: utf-8 -*-

from typing import Callable, List, Optional


class IntervalHandle:
    """Cancellable repeating job returned by a scheduler."""

    def __init__(self, interval_ms: int, fn: Callable[[], None]):
        self.interval_ms = int(interval_ms)
        self.fn = fn
        self.active = True
        self._on_cancel: Optional[Callable[[], None]] = None

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        if self._on_cancel:
            self._on_cancel()
            self._on_cancel = None


class _Scheduler:
    def every(self, interval_ms: int, fn: Callable[[], None]) -> IntervalHandle:
        raise NotImplementedError

    def after(self, delay_ms: int, fn: Callable[[], None]) -> IntervalHandle:
        """One-shot job: an interval that cancels itself on first fire."""
        holder = {}

        def _once():
            holder["handle"].cancel()
            fn()

        holder["handle"] = self.every(delay_ms, _once)
        return holder["handle"]


class TkScheduler(_Scheduler):
    """
    Interval jobs on a Tk widget's event loop (after / after_cancel).
    Everything runs on the UI thread, so no locking.
    """

    def __init__(self, widget):
        self.widget = widget

    def every(self, interval_ms: int, fn: Callable[[], None]) -> IntervalHandle:
        handle = IntervalHandle(interval_ms, fn)
        job = {"id": None}

        def _fire():
            job["id"] = None
            if not handle.active:
                return
            handle.fn()
            # fn may have cancelled us
            if handle.active:
                job["id"] = self.widget.after(handle.interval_ms, _fire)

        def _cancel():
            if job["id"] is not None:
                self.widget.after_cancel(job["id"])
                job["id"] = None

        handle._on_cancel = _cancel
        job["id"] = self.widget.after(handle.interval_ms, _fire)
        return handle


class ManualScheduler(_Scheduler):
    """
    Deterministic scheduler driven by advance(ms).
    Tests step time explicitly instead of waiting on a real clock.
    """

    def __init__(self):
        self.now_ms = 0
        self._jobs: List[dict] = []

    def every(self, interval_ms: int, fn: Callable[[], None]) -> IntervalHandle:
        handle = IntervalHandle(interval_ms, fn)
        entry = {"handle": handle, "due": self.now_ms + handle.interval_ms}
        self._jobs.append(entry)

        def _cancel():
            if entry in self._jobs:
                self._jobs.remove(entry)

        handle._on_cancel = _cancel
        return handle

    @property
    def active_count(self) -> int:
        return sum(1 for e in self._jobs if e["handle"].active)

    def advance(self, ms: int) -> None:
        target = self.now_ms + int(ms)
        while True:
            due = [e for e in self._jobs if e["handle"].active and e["due"] <= target]
            if not due:
                break
            entry = min(due, key=lambda e: e["due"])
            self.now_ms = entry["due"]
            entry["due"] += entry["handle"].interval_ms
            entry["handle"].fn()
        self.now_ms = target

    def step(self, ticks: int = 1, interval_ms: int = 1000) -> None:
        for _ in range(int(ticks)):
            self.advance(interval_ms)
