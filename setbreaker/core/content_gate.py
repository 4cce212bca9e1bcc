# -*- coding: utf-8 -*-

import logging
from typing import Callable, List

from setbreaker.config import BLOCK_MESSAGE
from setbreaker.domain.models import TimerState

log = logging.getLogger("SetBreaker.gate")


class ContentGate:
    """
    Blocked iff the timer is expired. Holds no state of its own beyond the
    last value it saw, which it uses to notify listeners on change only.
    """

    def __init__(self, message: str = BLOCK_MESSAGE):
        self.message = message
        self._blocked = False
        self._listeners: List[Callable[[bool], None]] = []

    @property
    def blocked(self) -> bool:
        return self._blocked

    def subscribe(self, fn: Callable[[bool], None]) -> None:
        self._listeners.append(fn)

    def sync(self, state: TimerState) -> bool:
        """Re-derive from timer state. Returns the current blocked flag."""
        blocked = state is TimerState.EXPIRED
        if blocked != self._blocked:
            self._blocked = blocked
            log.info("content %s", "blocked" if blocked else "unblocked")
            for fn in list(self._listeners):
                fn(blocked)
        return self._blocked
