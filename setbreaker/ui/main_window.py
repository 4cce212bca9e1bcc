# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from typing import Optional

from setbreaker.config import APP_TITLE
from setbreaker.core.scroll_monitor import ScrollMonitor
from setbreaker.domain.models import ExpiryChoice, Preferences, TimerSnapshot
from setbreaker.services.feedback import Feedback
from setbreaker.services.preferences_service import PreferencesService
from setbreaker.services.timer_service import TimerService
from setbreaker.ui.expiry_dialog import ExpiryDialog
from setbreaker.ui.feed_view import FeedView
from setbreaker.ui.settings_window import SettingsWindow
from setbreaker.ui.timer_bar import TimerBar

log = logging.getLogger("SetBreaker.ui")


class MainWindow:
    def __init__(
        self,
        root: tk.Tk,
        timer_service: TimerService,
        prefs: PreferencesService,
        scroll_monitor: ScrollMonitor,
        feedback: Feedback,
    ):
        self.root = root
        self.timer_service = timer_service
        self.prefs = prefs
        self.scroll_monitor = scroll_monitor
        self.feedback = feedback

        self.root.title(APP_TITLE)
        self.root.geometry("480x860")

        self._settings: Optional[SettingsWindow] = None
        self._dialog: Optional[ExpiryDialog] = None

        self._build_ui()

        # wire callbacks from services -> UI
        self.timer_service.set_on_tick(self.timer_bar.on_snapshot)
        self.timer_service.set_on_state_change(self.timer_bar.on_snapshot)
        self.timer_service.set_on_expired(self._on_expired)
        self.timer_service.gate.subscribe(self._on_gate_change)
        self.prefs.subscribe(self._on_prefs_changed)
        self.scroll_monitor.on_scrolled = self.timer_service.handle_scroll

        self.feed.load(self.prefs.current.platform.url)

    def _build_ui(self):
        self.timer_bar = TimerBar(
            self.root,
            timer_service=self.timer_service,
            on_open_settings=self._open_settings,
        )
        self.timer_bar.pack(fill="x")

        self.feed = FeedView(self.root, scroll_monitor=self.scroll_monitor)
        self.feed.pack(fill="both", expand=True)

    def run(self):
        self.timer_service.boot()
        self.root.mainloop()

    # ----- callbacks -----
    def _on_gate_change(self, blocked: bool):
        self.feed.set_blocked(blocked, self.timer_service.gate.message)

    def _on_expired(self, snap: TimerSnapshot):
        if self._dialog is not None:
            return
        self._dialog = ExpiryDialog(self.root, on_choice=self._on_expiry_choice)

    def _on_expiry_choice(self, choice: ExpiryChoice):
        self._dialog = None
        log.info("expiry acknowledged: %s", choice.value)
        self.timer_service.acknowledge_expiry(choice)

    def _on_prefs_changed(self, prefs: Preferences):
        self.feed.load(prefs.platform.url)

    # ----- settings -----
    def _open_settings(self):
        if self._settings is not None and self._settings.winfo_exists():
            self._settings.lift()
            return
        self._settings = SettingsWindow(self.root, self.prefs, self.feedback)
