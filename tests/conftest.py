import pytest

from setbreaker.core.scheduler import ManualScheduler
from setbreaker.services.feedback import Feedback
from setbreaker.services.preferences_service import PreferencesService
from setbreaker.services.timer_service import TimerService
from setbreaker.storage.db import Database
from setbreaker.storage.repos import AppStateRepo


class RecordingFeedback(Feedback):
    def __init__(self):
        self.pulses = []
        self.warnings = 0

    def pulse(self, style):
        self.pulses.append(style)

    def warning(self):
        self.warnings += 1


@pytest.fixture
def db(tmp_path):
    database = Database(db_path=str(tmp_path / "prefs.db"))
    database.init_schema()
    yield database
    database.close()


@pytest.fixture
def state_repo(db):
    return AppStateRepo(db)


@pytest.fixture
def prefs(state_repo):
    return PreferencesService(state_repo)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def feedback():
    return RecordingFeedback()


@pytest.fixture
def make_service(prefs, scheduler, feedback):
    def _make(**pref_changes):
        if pref_changes:
            prefs.update(**pref_changes)
        return TimerService(prefs, scheduler=scheduler, feedback=feedback)

    return _make
