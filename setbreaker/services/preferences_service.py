# services/preferences_service.py
# -*- coding: utf-8 -*-

import dataclasses
import logging
from typing import Callable, Dict, List, Optional

from setbreaker.config import (
    DEFAULT_REST_PERIOD_SEC,
    REST_PERIOD_MAX_SEC,
    REST_PERIOD_MIN_SEC,
    REST_PERIOD_STEP_SEC,
)
from setbreaker.domain.models import Platform, Preferences
from setbreaker.storage.repos import AppStateRepo

log = logging.getLogger("SetBreaker.prefs")

# persisted key names
KEY_REST_PERIOD = "restPeriod"
KEY_AUTO_START = "autoStartTimer"
KEY_START_ON_SCROLL = "startOnScroll"
KEY_PLATFORM = "selectedSocialMedia"

_FIELD_KEYS = {
    "rest_period_sec": KEY_REST_PERIOD,
    "auto_start_timer": KEY_AUTO_START,
    "start_on_scroll": KEY_START_ON_SCROLL,
    "platform": KEY_PLATFORM,
}


def clamp_rest_period(value) -> int:
    """Snap to the nearest step and keep inside [min, max]."""
    try:
        sec = int(value)
    except (TypeError, ValueError):
        return DEFAULT_REST_PERIOD_SEC
    steps = int(round(sec / REST_PERIOD_STEP_SEC))
    sec = steps * REST_PERIOD_STEP_SEC
    return max(REST_PERIOD_MIN_SEC, min(REST_PERIOD_MAX_SEC, sec))


def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    return default


def _dump_bool(value: bool) -> str:
    return "1" if value else "0"


class PreferencesService:
    """
    Typed view over the four persisted settings.
    Subscribers get the new Preferences after every successful update().
    """

    def __init__(self, state_repo: AppStateRepo):
        self.state = state_repo
        self._subscribers: List[Callable[[Preferences], None]] = []
        self._prefs = self._read()

    @property
    def current(self) -> Preferences:
        return self._prefs

    def subscribe(self, fn: Callable[[Preferences], None]) -> None:
        self._subscribers.append(fn)

    def unsubscribe(self, fn: Callable[[Preferences], None]) -> None:
        if fn in self._subscribers:
            self._subscribers.remove(fn)

    def update(self, **changes) -> Preferences:
        unknown = set(changes) - set(_FIELD_KEYS)
        if unknown:
            raise ValueError(f"Unknown preference: {', '.join(sorted(unknown))}")

        if "rest_period_sec" in changes:
            changes["rest_period_sec"] = clamp_rest_period(changes["rest_period_sec"])
        if "platform" in changes and not isinstance(changes["platform"], Platform):
            changes["platform"] = Platform.parse(changes["platform"])
        for flag in ("auto_start_timer", "start_on_scroll"):
            if flag in changes:
                changes[flag] = bool(changes[flag])

        new = dataclasses.replace(self._prefs, **changes)
        if new == self._prefs:
            return self._prefs

        self.state.set_many(self._dump(new))
        self._prefs = new
        log.info("preferences updated: %s", changes)

        for fn in list(self._subscribers):
            fn(new)
        return new

    # ----- persistence -----
    def _read(self) -> Preferences:
        raw = self.state.get_all()
        defaults = Preferences()

        rest = raw.get(KEY_REST_PERIOD)
        rest_sec = clamp_rest_period(rest) if rest is not None else defaults.rest_period_sec

        platform = defaults.platform
        if raw.get(KEY_PLATFORM):
            try:
                platform = Platform.parse(raw[KEY_PLATFORM])
            except ValueError:
                log.warning("ignoring stored platform %r", raw[KEY_PLATFORM])

        return Preferences(
            rest_period_sec=rest_sec,
            auto_start_timer=_parse_bool(raw.get(KEY_AUTO_START), defaults.auto_start_timer),
            start_on_scroll=_parse_bool(raw.get(KEY_START_ON_SCROLL), defaults.start_on_scroll),
            platform=platform,
        )

    @staticmethod
    def _dump(prefs: Preferences) -> Dict[str, str]:
        return {
            KEY_REST_PERIOD: str(prefs.rest_period_sec),
            KEY_AUTO_START: _dump_bool(prefs.auto_start_timer),
            KEY_START_ON_SCROLL: _dump_bool(prefs.start_on_scroll),
            KEY_PLATFORM: prefs.platform.value,
        }
