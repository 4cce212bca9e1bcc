# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Callable

from setbreaker.config import WARNING_THRESHOLD_SEC
from setbreaker.domain.models import TimerSnapshot
from setbreaker.services.timer_service import TimerService
from setbreaker.utils import format_time


class TimerBar(ttk.Frame):
    def __init__(
        self,
        master,
        timer_service: TimerService,
        on_open_settings: Callable[[], None],
    ):
        super().__init__(master, padding=(12, 8))

        self.timer_service = timer_service
        self.on_open_settings = on_open_settings

        self._default_fg = None

        self._build_ui()

        # initial render
        self._render(self.timer_service.get_snapshot())

    def _build_ui(self):
        self.columnconfigure(2, weight=1)

        self.time_var = tk.StringVar(value="01:00")
        self.time_label = tk.Label(
            self, textvariable=self.time_var, font=("Sans", 32, "bold"), width=5, anchor="w"
        )
        self.time_label.grid(row=0, column=0, sticky="w", padx=(0, 16))
        self._default_fg = self.time_label.cget("fg")

        btns = ttk.Frame(self)
        btns.grid(row=0, column=1, sticky="w")

        self.start_btn = ttk.Button(btns, text="Start", command=self._start)
        self.reset_btn = ttk.Button(btns, text="Reset", command=self._reset)
        self.start_btn.grid(row=0, column=0, padx=(0, 6))
        self.reset_btn.grid(row=0, column=1)

        self.settings_btn = ttk.Button(self, text="⚙", width=3, command=self.on_open_settings)
        self.settings_btn.grid(row=0, column=3, sticky="e")

    def _start(self):
        self.timer_service.start()

    def _reset(self):
        self.timer_service.reset()

    # ---- Service callbacks ----
    def on_snapshot(self, snap: TimerSnapshot):
        self._render(snap)

    def _render(self, snap: TimerSnapshot):
        self.time_var.set(format_time(snap.remaining_sec))
        # last seconds in red
        fg = "red" if snap.remaining_sec < WARNING_THRESHOLD_SEC else self._default_fg
        self.time_label.configure(fg=fg)

        self.start_btn.configure(text="Pause" if snap.is_running else "Start")
        if snap.blocked:
            self.start_btn.state(["disabled"])
        else:
            self.start_btn.state(["!disabled"])
