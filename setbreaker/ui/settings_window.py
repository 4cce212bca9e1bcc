# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk

from setbreaker.config import (
    ABOUT_TEXT,
    REST_PERIOD_MAX_SEC,
    REST_PERIOD_MIN_SEC,
    REST_PERIOD_STEP_SEC,
)
from setbreaker.domain.models import FeedbackStyle, Platform
from setbreaker.services.feedback import Feedback
from setbreaker.services.preferences_service import PreferencesService


class SettingsWindow(tk.Toplevel):
    """Every control writes through to preferences as soon as it changes."""

    def __init__(self, master, prefs: PreferencesService, feedback: Feedback):
        super().__init__(master)
        self.prefs = prefs
        self.feedback = feedback

        self.title("Settings")
        self.resizable(False, False)
        self.transient(master)

        cur = prefs.current
        self.platform_var = tk.StringVar(value=cur.platform.value)
        self.rest_var = tk.IntVar(value=cur.rest_period_sec)
        self.auto_var = tk.BooleanVar(value=cur.auto_start_timer)
        self.scroll_var = tk.BooleanVar(value=cur.start_on_scroll)

        self._build_ui()
        self.bind("<Escape>", lambda e: self.destroy())

    def _build_ui(self):
        outer = ttk.Frame(self, padding=14)
        outer.pack(fill="both", expand=True)
        outer.columnconfigure(0, weight=1)

        social = ttk.Labelframe(outer, text="Social Media", padding=10)
        social.grid(row=0, column=0, sticky="ew")
        for i, p in enumerate(Platform):
            ttk.Radiobutton(
                social,
                text=p.value,
                value=p.value,
                variable=self.platform_var,
                command=self._platform_changed,
            ).grid(row=0, column=i, padx=(0, 12))

        timer = ttk.Labelframe(outer, text="Timer Settings", padding=10)
        timer.grid(row=1, column=0, sticky="ew", pady=(10, 0))
        timer.columnconfigure(0, weight=1)

        ttk.Label(timer, text="Rest Period (seconds)").grid(row=0, column=0, sticky="w")
        # readonly keeps the value on the step grid
        self.rest_spin = ttk.Spinbox(
            timer,
            from_=REST_PERIOD_MIN_SEC,
            to=REST_PERIOD_MAX_SEC,
            increment=REST_PERIOD_STEP_SEC,
            textvariable=self.rest_var,
            width=6,
            state="readonly",
            command=self._rest_changed,
        )
        self.rest_spin.grid(row=0, column=1, sticky="e")

        ttk.Checkbutton(
            timer,
            text="Auto-start Timer",
            variable=self.auto_var,
            command=self._auto_changed,
        ).grid(row=1, column=0, columnspan=2, sticky="w", pady=(8, 0))

        ttk.Checkbutton(
            timer,
            text="Start on Scroll",
            variable=self.scroll_var,
            command=self._scroll_changed,
        ).grid(row=2, column=0, columnspan=2, sticky="w", pady=(4, 0))

        about = ttk.Labelframe(outer, text="About", padding=10)
        about.grid(row=2, column=0, sticky="ew", pady=(10, 0))
        ttk.Label(about, text=ABOUT_TEXT, wraplength=320, foreground="gray").pack(anchor="w")

        ttk.Button(outer, text="Done", command=self.destroy).grid(
            row=3, column=0, sticky="e", pady=(12, 0)
        )

    def _changed(self, **change):
        self.feedback.pulse(FeedbackStyle.LIGHT)
        self.prefs.update(**change)

    def _platform_changed(self):
        self._changed(platform=Platform.parse(self.platform_var.get()))

    def _rest_changed(self):
        self._changed(rest_period_sec=self.rest_var.get())

    def _auto_changed(self):
        self._changed(auto_start_timer=self.auto_var.get())

    def _scroll_changed(self):
        self._changed(start_on_scroll=self.scroll_var.get())
