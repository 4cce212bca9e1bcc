# -*- coding: utf-8 -*-

import logging
import tkinter as tk

from tkinterweb import HtmlFrame

from setbreaker.config import BLOCK_MESSAGE
from setbreaker.core.scheduler import TkScheduler
from setbreaker.core.scroll_monitor import ScrollMonitor, scroll_offset_px
from setbreaker.core.wheel_gesture import WheelGesture

log = logging.getLogger("SetBreaker.ui")


class FeedView(tk.Frame):
    """
    The social feed viewport plus its blocking overlay.

    Pointer drags anywhere in the view (page or scrollbar) report the
    document scroll offset to the ScrollMonitor; mouse-wheel bursts go
    through WheelGesture.
    """

    def __init__(self, master, scroll_monitor: ScrollMonitor, bg: str = "#FFFFFF"):
        super().__init__(master, bg=bg)
        self.scroll_monitor = scroll_monitor
        self.wheel = WheelGesture(scroll_monitor, TkScheduler(self))

        self._enabled = True
        self._url = None
        self._last_offset = 0.0

        self.html_view = HtmlFrame(self, horizontal_scrollbar="auto")
        self.html_view.pack(fill="both", expand=True)

        # bind_all so scrollbar drags inside the frame are seen too
        self.bind_all("<ButtonPress-1>", self._on_press, add="+")
        self.bind_all("<B1-Motion>", self._on_motion, add="+")
        self.bind_all("<ButtonRelease-1>", self._on_release, add="+")
        self.html_view.bind("<MouseWheel>", self._on_wheel, add="+")
        self.html_view.bind("<Button-4>", lambda e: self._wheel_step(-1), add="+")
        self.html_view.bind("<Button-5>", lambda e: self._wheel_step(1), add="+")

        self.overlay = tk.Frame(self, bg="#1F2937", takefocus=1)
        self.overlay_label = tk.Label(
            self.overlay,
            text=BLOCK_MESSAGE,
            bg="#1F2937",
            fg="white",
            font=("Montserrat", 16, "bold"),
        )
        self.overlay_label.place(relx=0.5, rely=0.5, anchor="center")

    def load(self, url: str) -> None:
        if url == self._url:
            return
        self._url = url
        log.info("loading %s", url)
        self.html_view.load_website(url)

    # ---- gate ----
    def set_blocked(self, blocked: bool, message: str = BLOCK_MESSAGE) -> None:
        self._enabled = not blocked
        if blocked:
            self.wheel.cancel()
            self.scroll_monitor.drag_end()
            self.overlay_label.configure(text=message)
            self.overlay.place(relx=0, rely=0, relwidth=1, relheight=1)
            self.overlay.lift()
            # keys would otherwise keep scrolling the page underneath
            self.overlay.focus_set()
        else:
            self.overlay.place_forget()

    def _scroll_offset(self) -> float:
        try:
            first, last = self.tk.splitlist(self.tk.call(self.html_view.html, "yview"))
            self._last_offset = scroll_offset_px(first, last, self.html_view.winfo_height())
        except tk.TclError:
            pass
        return self._last_offset

    def _owns(self, widget) -> bool:
        me, w = str(self), str(widget)
        return w == me or w.startswith(me + ".")

    # ---- pointer drag ----
    def _on_press(self, event):
        if self._enabled and self._owns(event.widget):
            self.scroll_monitor.drag_begin(self._scroll_offset())

    def _on_motion(self, event):
        if self._enabled and self._owns(event.widget):
            self.scroll_monitor.drag_update(self._scroll_offset())

    def _on_release(self, event):
        if self._owns(event.widget):
            self.scroll_monitor.drag_end()

    # ---- wheel ----
    def _on_wheel(self, event):
        if event.delta:
            self._wheel_step(-1 if event.delta > 0 else 1)

    def _wheel_step(self, direction: int):
        if self._enabled:
            self.wheel.notch(direction)
