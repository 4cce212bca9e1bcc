# -*- coding: utf-8 -*-

from setbreaker.domain.models import TimerSnapshot, TimerState


class TimerEngine:
    """
    Pure rest-period countdown (no Tkinter, no scheduling).
    Service triggers tick() once per second while running.

    States: IDLE (fresh or paused), RUNNING, EXPIRED.
    """

    def __init__(self, rest_period_sec: int = 60):
        self._check_period(rest_period_sec)
        self.rest_period_sec = int(rest_period_sec)
        self.remaining_sec = self.rest_period_sec
        self.state = TimerState.IDLE

    @staticmethod
    def _check_period(rest_period_sec: int) -> None:
        if int(rest_period_sec) <= 0:
            raise ValueError("Rest period must be positive.")

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            state=self.state,
            remaining_sec=self.remaining_sec,
            rest_period_sec=self.rest_period_sec,
        )

    @property
    def is_running(self) -> bool:
        return self.state is TimerState.RUNNING

    @property
    def is_expired(self) -> bool:
        return self.state is TimerState.EXPIRED

    def toggle(self) -> None:
        # start <-> pause; expired needs an acknowledgment first
        if self.state is TimerState.RUNNING:
            self.state = TimerState.IDLE
        elif self.state is TimerState.IDLE:
            self.state = TimerState.RUNNING

    def pause(self) -> None:
        if self.state is TimerState.RUNNING:
            self.state = TimerState.IDLE

    def reset(self) -> None:
        self.remaining_sec = self.rest_period_sec
        self.state = TimerState.IDLE

    def rewind(self) -> None:
        """Refill the clock and keep counting (used by extend-rest)."""
        self.remaining_sec = self.rest_period_sec
        self.state = TimerState.RUNNING

    def set_rest_period(self, rest_period_sec: int) -> None:
        self._check_period(rest_period_sec)
        old = self.rest_period_sec
        self.rest_period_sec = int(rest_period_sec)

        if self.state is TimerState.IDLE and self.remaining_sec == old:
            # untouched clock follows the new period
            self.remaining_sec = self.rest_period_sec
        else:
            self.remaining_sec = min(self.remaining_sec, self.rest_period_sec)

    def tick(self) -> bool:
        """
        Returns True if the countdown expired on this tick.
        """
        if self.state is not TimerState.RUNNING:
            return False

        if self.remaining_sec > 0:
            self.remaining_sec -= 1

        if self.remaining_sec <= 0:
            self.remaining_sec = 0
            self.state = TimerState.EXPIRED
            return True

        return False
