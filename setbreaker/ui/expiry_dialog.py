# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Callable

from setbreaker.config import BLOCK_MESSAGE, EXPIRY_TITLE
from setbreaker.domain.models import ExpiryChoice


class ExpiryDialog(tk.Toplevel):
    """
    Modal end-of-rest alert. Closing the window counts as "Extend Rest",
    the same as the cancel role of the alert it replaces.
    """

    def __init__(self, master, on_choice: Callable[[ExpiryChoice], None]):
        super().__init__(master)
        self.on_choice = on_choice
        self._done = False

        self.title(EXPIRY_TITLE)
        self.resizable(False, False)
        self.transient(master)
        self.attributes("-topmost", True)

        body = ttk.Frame(self, padding=16)
        body.pack(fill="both", expand=True)

        ttk.Label(body, text=EXPIRY_TITLE, font=("Sans", 12, "bold")).pack(anchor="w")
        ttk.Label(body, text=BLOCK_MESSAGE).pack(anchor="w", pady=(4, 12))

        btns = ttk.Frame(body)
        btns.pack(fill="x")
        ttk.Button(
            btns,
            text="Start Next Set",
            command=lambda: self._choose(ExpiryChoice.START_NEXT_SET),
        ).pack(side="left")
        ttk.Button(
            btns,
            text="Extend Rest",
            command=lambda: self._choose(ExpiryChoice.EXTEND_REST),
        ).pack(side="right")

        self.protocol("WM_DELETE_WINDOW", lambda: self._choose(ExpiryChoice.EXTEND_REST))
        self.bind("<Return>", lambda e: self._choose(ExpiryChoice.START_NEXT_SET))

        self.wait_visibility()
        self.grab_set()
        self.focus_set()

    def _choose(self, choice: ExpiryChoice):
        if self._done:
            return
        self._done = True
        try:
            self.grab_release()
        except tk.TclError:
            pass
        self.destroy()
        self.on_choice(choice)
