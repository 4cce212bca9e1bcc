"""TimerService flows driven by ManualScheduler, with no Tk and no real clock."""

import pytest

from setbreaker.domain.models import ExpiryChoice, FeedbackStyle, TimerState


def expire(service, scheduler):
    scheduler.step(service.get_snapshot().remaining_sec)


class TestBootAndToggle:
    def test_boot_auto_starts(self, make_service, scheduler):
        service = make_service(rest_period_sec=30)
        snap = service.boot()
        assert snap.state is TimerState.RUNNING
        assert snap.remaining_sec == 30
        assert scheduler.active_count == 1

    def test_boot_without_auto_start_stays_idle(self, make_service, scheduler):
        service = make_service(auto_start_timer=False)
        snap = service.boot()
        assert snap.state is TimerState.IDLE
        assert scheduler.active_count == 0

    def test_start_toggles_without_double_schedule(self, make_service, scheduler):
        service = make_service(auto_start_timer=False, rest_period_sec=30)
        service.start()
        assert scheduler.active_count == 1
        snap = service.start()
        assert snap.state is TimerState.IDLE
        assert scheduler.active_count == 0

    def test_pause_resume_no_drift(self, make_service, scheduler):
        service = make_service(auto_start_timer=False, rest_period_sec=30)
        service.start()
        scheduler.step(5)
        assert service.pause().remaining_sec == 25
        scheduler.step(10)
        service.start()
        scheduler.step(5)
        assert service.get_snapshot().remaining_sec == 20

    def test_pause_when_idle_is_noop(self, make_service, scheduler):
        service = make_service(auto_start_timer=False)
        assert service.pause().state is TimerState.IDLE

    def test_start_pulses_medium(self, make_service, feedback):
        service = make_service(auto_start_timer=False)
        service.start()
        assert feedback.pulses == [FeedbackStyle.MEDIUM]


class TestExpiry:
    def test_expiry_blocks_and_warns(self, make_service, scheduler, feedback):
        service = make_service(auto_start_timer=False, rest_period_sec=15)
        expired = []
        service.set_on_expired(expired.append)

        service.start()
        scheduler.step(14)
        assert service.blocked is False
        scheduler.step(1)

        assert service.blocked is True
        assert service.get_snapshot().state is TimerState.EXPIRED
        assert feedback.warnings == 1
        assert len(expired) == 1
        assert scheduler.active_count == 0

        scheduler.step(10)
        assert service.get_snapshot().remaining_sec == 0
        assert feedback.warnings == 1

    def test_final_seconds_pulse(self, make_service, scheduler, feedback):
        service = make_service(auto_start_timer=False, rest_period_sec=15)
        service.start()
        feedback.pulses.clear()
        scheduler.step(15)
        # ticks leaving 10..1 seconds
        assert feedback.pulses == [FeedbackStyle.RIGID] * 10

    def test_start_ignored_while_expired(self, make_service, scheduler):
        service = make_service(auto_start_timer=False, rest_period_sec=15)
        service.start()
        expire(service, scheduler)
        assert service.start().state is TimerState.EXPIRED
        assert scheduler.active_count == 0

    def test_gate_follows_state(self, make_service, scheduler):
        service = make_service(auto_start_timer=False, rest_period_sec=15)
        assert service.blocked is False
        service.start()
        scheduler.step(3)
        assert service.blocked is False
        expire(service, scheduler)
        assert service.blocked is True
        service.acknowledge_expiry(ExpiryChoice.START_NEXT_SET)
        assert service.blocked is False


class TestAcknowledge:
    def test_start_next_set_with_auto_start(self, make_service, scheduler):
        service = make_service(rest_period_sec=15)
        service.boot()
        expire(service, scheduler)
        snap = service.acknowledge_expiry(ExpiryChoice.START_NEXT_SET)
        assert snap.state is TimerState.RUNNING
        assert snap.remaining_sec == 15
        assert snap.blocked is False

    def test_start_next_set_without_auto_start(self, make_service, scheduler):
        service = make_service(auto_start_timer=False, rest_period_sec=15)
        service.start()
        expire(service, scheduler)
        snap = service.acknowledge_expiry(ExpiryChoice.START_NEXT_SET)
        assert snap.state is TimerState.IDLE
        assert snap.remaining_sec == 15

    def test_extend_rest_unblocks_and_runs(self, make_service, scheduler):
        service = make_service(auto_start_timer=False, rest_period_sec=15)
        service.start()
        expire(service, scheduler)
        snap = service.acknowledge_expiry(ExpiryChoice.EXTEND_REST)
        assert snap.state is TimerState.RUNNING
        assert snap.remaining_sec == 15
        assert service.blocked is False
        assert scheduler.active_count == 1

    def test_unknown_choice(self, make_service, scheduler):
        service = make_service(auto_start_timer=False, rest_period_sec=15)
        service.start()
        expire(service, scheduler)
        with pytest.raises(ValueError):
            service.acknowledge_expiry("later")

    def test_extend_rest_ignored_on_paused_clock(self, make_service, scheduler):
        service = make_service(auto_start_timer=False, rest_period_sec=60)
        service.start()
        scheduler.step(20)
        service.pause()
        snap = service.acknowledge_expiry(ExpiryChoice.EXTEND_REST)
        assert snap.state is TimerState.IDLE
        assert snap.remaining_sec == 40
        assert scheduler.active_count == 0

    def test_start_next_set_ignored_while_running(self, make_service, scheduler):
        service = make_service(rest_period_sec=60)
        service.boot()
        scheduler.step(5)
        snap = service.acknowledge_expiry(ExpiryChoice.START_NEXT_SET)
        assert snap.state is TimerState.RUNNING
        assert snap.remaining_sec == 55
        assert scheduler.active_count == 1


class TestReset:
    def test_reset_restores_period_and_is_idempotent(self, make_service, scheduler):
        service = make_service(auto_start_timer=False, rest_period_sec=45)
        service.start()
        scheduler.step(12)
        once = service.reset()
        twice = service.reset()
        assert once == twice
        assert once.remaining_sec == 45
        assert scheduler.active_count == 0

    def test_reset_pulses_light_then_medium_on_auto_start(self, make_service, feedback):
        service = make_service(rest_period_sec=30)
        feedback.pulses.clear()
        service.reset()
        assert feedback.pulses == [FeedbackStyle.LIGHT, FeedbackStyle.MEDIUM]

    def test_reset_with_auto_start_schedules_once(self, make_service, scheduler):
        service = make_service(rest_period_sec=30)
        service.boot()
        service.reset()
        service.reset()
        assert scheduler.active_count == 1


class TestScroll:
    def test_scroll_starts_when_enabled(self, make_service, scheduler, feedback):
        service = make_service(auto_start_timer=False, start_on_scroll=True, rest_period_sec=30)
        snap = service.handle_scroll()
        assert snap.state is TimerState.RUNNING
        assert snap.remaining_sec == 30
        assert feedback.pulses == [FeedbackStyle.SOFT, FeedbackStyle.MEDIUM]

    def test_scroll_resets_paused_clock(self, make_service, scheduler):
        service = make_service(auto_start_timer=False, start_on_scroll=True, rest_period_sec=30)
        service.start()
        scheduler.step(10)
        service.pause()
        assert service.handle_scroll().remaining_sec == 30

    def test_scroll_ignored_when_disabled(self, make_service):
        service = make_service(auto_start_timer=False, start_on_scroll=False)
        assert service.handle_scroll().state is TimerState.IDLE

    def test_scroll_does_not_pause_running_timer(self, make_service, scheduler):
        service = make_service(start_on_scroll=True, rest_period_sec=30)
        service.boot()
        scheduler.step(4)
        snap = service.handle_scroll()
        assert snap.state is TimerState.RUNNING
        assert snap.remaining_sec == 26

    def test_scroll_ignored_while_blocked(self, make_service, scheduler):
        service = make_service(auto_start_timer=False, start_on_scroll=True, rest_period_sec=15)
        service.start()
        expire(service, scheduler)
        assert service.handle_scroll().state is TimerState.EXPIRED


class TestPreferenceChanges:
    def test_rest_period_change_updates_idle_clock(self, make_service, prefs):
        service = make_service(auto_start_timer=False)
        ticks = []
        service.set_on_tick(ticks.append)
        prefs.update(rest_period_sec=120)
        assert service.get_snapshot().remaining_sec == 120
        assert len(ticks) == 1

    def test_rest_period_change_clamps_running_clock(self, make_service, prefs, scheduler):
        service = make_service(rest_period_sec=120)
        service.boot()
        scheduler.step(10)
        prefs.update(rest_period_sec=30)
        assert service.get_snapshot().remaining_sec == 30
        assert service.get_snapshot().is_running

    def test_auto_start_read_live(self, make_service, prefs):
        service = make_service(auto_start_timer=False)
        prefs.update(auto_start_timer=True)
        assert service.reset().state is TimerState.RUNNING
