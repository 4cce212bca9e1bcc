# -*- coding: utf-8 -*-

import logging
from typing import Callable, Optional

from setbreaker.config import SCROLL_THRESHOLD

log = logging.getLogger("SetBreaker.scroll")


class ScrollMonitor:
    """
    Watches one drag gesture at a time and emits at most one
    "scrolled" signal per gesture once the offset moves past the threshold.
    """

    def __init__(
        self,
        on_scrolled: Optional[Callable[[], None]] = None,
        threshold: float = SCROLL_THRESHOLD,
    ):
        self.on_scrolled = on_scrolled
        self.threshold = threshold

        self.tracking = False
        self._start_offset = 0.0

    def drag_begin(self, offset: float) -> None:
        self.tracking = True
        self._start_offset = float(offset)

    def drag_update(self, offset: float) -> bool:
        """
        Returns True if this update emitted the scrolled signal.
        """
        if not self.tracking:
            return False

        if abs(float(offset) - self._start_offset) > self.threshold:
            self.tracking = False
            log.debug("scroll past threshold (%.1f)", self.threshold)
            if self.on_scrolled:
                self.on_scrolled()
            return True

        return False

    def drag_end(self) -> None:
        self.tracking = False


def scroll_offset_px(first: float, last: float, visible_px: int) -> float:
    """
    Document scroll offset in pixels from a yview pair (visible fractions)
    and the viewport height.
    """
    shown = float(last) - float(first)
    if shown <= 0:
        return 0.0
    return float(first) * visible_px / shown
