# -*- coding: utf-8 -*-

from dataclasses import dataclass
from enum import Enum

from setbreaker.config import (
    DEFAULT_AUTO_START,
    DEFAULT_REST_PERIOD_SEC,
    DEFAULT_START_ON_SCROLL,
)


class Platform(Enum):
    INSTAGRAM = "Instagram"
    TIKTOK = "TikTok"

    @property
    def url(self) -> str:
        if self is Platform.TIKTOK:
            return "https://www.tiktok.com"
        return "https://www.instagram.com"

    @classmethod
    def parse(cls, value: str) -> "Platform":
        v = (value or "").strip().lower()
        for p in cls:
            if p.value.lower() == v or p.name.lower() == v:
                return p
        raise ValueError(f"Unknown platform: {value!r}")


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    EXPIRED = "expired"


class ExpiryChoice(Enum):
    START_NEXT_SET = "start_next_set"
    EXTEND_REST = "extend_rest"


class FeedbackStyle(Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    SOFT = "soft"
    RIGID = "rigid"


@dataclass(frozen=True)
class Preferences:
    rest_period_sec: int = DEFAULT_REST_PERIOD_SEC
    auto_start_timer: bool = DEFAULT_AUTO_START
    start_on_scroll: bool = DEFAULT_START_ON_SCROLL
    platform: Platform = Platform.INSTAGRAM


@dataclass(frozen=True)
class TimerSnapshot:
    state: TimerState
    remaining_sec: int
    rest_period_sec: int

    @property
    def is_running(self) -> bool:
        return self.state is TimerState.RUNNING

    @property
    def blocked(self) -> bool:
        return self.state is TimerState.EXPIRED
