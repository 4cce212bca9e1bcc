# -*- coding: utf-8 -*-

import logging
from typing import Callable, Optional

from setbreaker.config import TICK_INTERVAL_MS, WARNING_THRESHOLD_SEC
from setbreaker.core.content_gate import ContentGate
from setbreaker.core.scheduler import IntervalHandle
from setbreaker.core.timer_engine import TimerEngine
from setbreaker.domain.models import (
    ExpiryChoice,
    FeedbackStyle,
    Preferences,
    TimerSnapshot,
)
from setbreaker.services.feedback import Feedback
from setbreaker.services.preferences_service import PreferencesService

log = logging.getLogger("SetBreaker.timer")


class TimerService:
    """
    Orchestrates:
    - TimerEngine state
    - the one-second interval (start/pause/reset arm and cancel it)
    - ContentGate derived from expiry
    - feedback pulses
    - Callbacks for UI

    Every command returns the resulting snapshot.
    """

    def __init__(
        self,
        prefs: PreferencesService,
        scheduler,
        feedback: Optional[Feedback] = None,
        gate: Optional[ContentGate] = None,
    ):
        self.prefs = prefs
        self.scheduler = scheduler
        self.feedback = feedback or Feedback()
        self.gate = gate or ContentGate()

        self.engine = TimerEngine(rest_period_sec=prefs.current.rest_period_sec)
        self._interval: Optional[IntervalHandle] = None

        self._on_tick: Optional[Callable[[TimerSnapshot], None]] = None
        self._on_state_change: Optional[Callable[[TimerSnapshot], None]] = None
        self._on_expired: Optional[Callable[[TimerSnapshot], None]] = None

        self.prefs.subscribe(self._on_prefs_changed)

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[TimerSnapshot], None]) -> None:
        self._on_tick = fn

    def set_on_state_change(self, fn: Callable[[TimerSnapshot], None]) -> None:
        self._on_state_change = fn

    def set_on_expired(self, fn: Callable[[TimerSnapshot], None]) -> None:
        self._on_expired = fn

    def _emit_tick(self) -> None:
        if self._on_tick:
            self._on_tick(self.engine.snapshot())

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.engine.snapshot())

    def _emit_expired(self) -> None:
        if self._on_expired:
            self._on_expired(self.engine.snapshot())

    # ----- Public API -----
    def get_snapshot(self) -> TimerSnapshot:
        return self.engine.snapshot()

    @property
    def blocked(self) -> bool:
        return self.gate.blocked

    def boot(self) -> TimerSnapshot:
        """Launch behaviour: full clock, auto-start if enabled."""
        self.engine.reset()
        self._sync_gate()
        if self.prefs.current.auto_start_timer:
            return self.start()
        self._emit_state_change()
        return self.get_snapshot()

    def start(self) -> TimerSnapshot:
        """Start when idle, pause when running."""
        if self.engine.is_expired:
            log.info("start ignored while expired")
            return self.get_snapshot()

        self.feedback.pulse(FeedbackStyle.MEDIUM)
        self.engine.toggle()
        if self.engine.is_running:
            self._arm()
            log.info("timer started at %ss", self.engine.remaining_sec)
        else:
            self._disarm()
            log.info("timer paused at %ss", self.engine.remaining_sec)

        self._emit_state_change()
        return self.get_snapshot()

    def pause(self) -> TimerSnapshot:
        if self.engine.is_running:
            self.engine.pause()
            self._disarm()
            log.info("timer paused at %ss", self.engine.remaining_sec)
            self._emit_state_change()
        return self.get_snapshot()

    def reset(self) -> TimerSnapshot:
        self.feedback.pulse(FeedbackStyle.LIGHT)
        self._disarm()
        self.engine.reset()
        self._sync_gate()
        log.info("timer reset to %ss", self.engine.remaining_sec)

        if self.prefs.current.auto_start_timer:
            return self.start()

        self._emit_state_change()
        return self.get_snapshot()

    def extend_rest(self) -> TimerSnapshot:
        self.feedback.pulse(FeedbackStyle.MEDIUM)
        self.engine.rewind()
        self._sync_gate()
        self._arm()
        log.info("rest extended to %ss", self.engine.remaining_sec)
        self._emit_state_change()
        return self.get_snapshot()

    def acknowledge_expiry(self, choice: ExpiryChoice) -> TimerSnapshot:
        if not self.engine.is_expired:
            log.info("acknowledgment ignored, nothing expired")
            return self.get_snapshot()
        if choice is ExpiryChoice.START_NEXT_SET:
            return self.reset()
        if choice is ExpiryChoice.EXTEND_REST:
            return self.extend_rest()
        raise ValueError(f"Unknown expiry choice: {choice!r}")

    def handle_scroll(self) -> TimerSnapshot:
        """Consumer of the scroll monitor's signal."""
        if not self.prefs.current.start_on_scroll:
            return self.get_snapshot()
        if self.engine.is_running or self.gate.blocked:
            return self.get_snapshot()

        self.engine.reset()
        self.feedback.pulse(FeedbackStyle.SOFT)
        log.info("start on scroll")
        return self.start()

    def tick(self) -> None:
        """
        Called once per second by the interval while running.
        """
        if not self.engine.is_running:
            return

        expired = self.engine.tick()
        remaining = self.engine.remaining_sec

        if not expired and remaining <= WARNING_THRESHOLD_SEC:
            self.feedback.pulse(FeedbackStyle.RIGID)

        self._emit_tick()

        if expired:
            self._disarm()
            self._sync_gate()
            self.feedback.warning()
            log.info("rest period complete")
            self._emit_expired()
            self._emit_state_change()

    # ----- internals -----
    def _arm(self) -> None:
        if self._interval is not None and self._interval.active:
            return
        self._interval = self.scheduler.every(TICK_INTERVAL_MS, self.tick)

    def _disarm(self) -> None:
        if self._interval is not None:
            self._interval.cancel()
            self._interval = None

    def _sync_gate(self) -> None:
        self.gate.sync(self.engine.state)

    def _on_prefs_changed(self, prefs: Preferences) -> None:
        if prefs.rest_period_sec != self.engine.rest_period_sec:
            self.engine.set_rest_period(prefs.rest_period_sec)
            log.info("rest period now %ss", prefs.rest_period_sec)
            self._emit_tick()
