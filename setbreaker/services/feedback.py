# -*- coding: utf-8 -*-

import logging

from setbreaker.domain.models import FeedbackStyle

log = logging.getLogger("SetBreaker.feedback")


class Feedback:
    """
    Fire-and-forget feedback sink. The base class only logs, which is
    what runs when there is no UI to buzz.
    """

    def pulse(self, style: FeedbackStyle) -> None:
        log.debug("pulse %s", style.value)

    def warning(self) -> None:
        log.info("warning notification")


class TkFeedback(Feedback):
    """Desktop stand-in for haptics: the warning rings the Tk bell."""

    def __init__(self, widget):
        self.widget = widget

    def warning(self) -> None:
        super().warning()
        self.widget.bell()
