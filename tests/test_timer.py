import logging

from pomodoro.core.constants import BREAK_DURATION_SEC, WORK_DURATION_SEC
from pomodoro.core.timer import Phase, PomodoroTimer, WakePolicy


def _finish_phase(timer: PomodoroTimer, now: float) -> float:
    timer.start(now=now)
    end = now + timer.remaining
    timer.tick(end)
    return end


def test_initial_state_is_idle_work() -> None:
    timer = PomodoroTimer()

    assert timer.phase == Phase.WORK
    assert timer.is_running is False
    assert timer.remaining == WORK_DURATION_SEC
    assert timer.completed_count == 0
    assert timer.display_text == "25:00"
    assert timer.tick(50.0) == WakePolicy.IDLE


def test_work_expiry_switches_to_idle_break() -> None:
    timer = PomodoroTimer()
    timer.start(now=100.0)

    policy = timer.tick(100.0 + 1500)

    assert policy == WakePolicy.IDLE
    assert timer.is_break is True
    assert timer.remaining == BREAK_DURATION_SEC
    assert timer.completed_count == 1
    assert timer.is_running is False


def test_tick_while_running_counts_down_and_requests_repaint() -> None:
    timer = PomodoroTimer()
    timer.start(now=100.0)

    policy = timer.tick(110.0)

    assert policy == WakePolicy.REPAINT_NOW
    assert timer.remaining == 1490
    assert timer.is_running is True
    assert timer.phase == Phase.WORK


def test_pause_freezes_and_reset_restores_full_phase() -> None:
    timer = PomodoroTimer()
    timer.start(now=0.0)
    timer.tick(10.0)

    timer.pause(now=10.0)
    assert timer.is_running is False
    assert timer.remaining == 1490
    assert timer.tick(500.0) == WakePolicy.IDLE
    assert timer.remaining == 1490

    timer.reset()
    assert timer.remaining == 1500
    assert timer.is_running is False


def test_pause_catches_up_without_prior_tick() -> None:
    timer = PomodoroTimer()
    timer.start(now=0.0)

    timer.pause(now=60.0)

    assert timer.remaining == 1440


def test_resume_continues_from_paused_value() -> None:
    timer = PomodoroTimer()
    timer.start(now=0.0)
    timer.pause(now=100.0)

    timer.start(now=1000.0)
    timer.tick(1050.0)

    assert timer.remaining == 1350
    timer.tick(1000.0 + 1400)
    assert timer.is_break is True
    assert timer.completed_count == 1


def test_start_then_tick_at_same_instant_keeps_remaining() -> None:
    timer = PomodoroTimer()
    timer.start(now=5.0)
    timer.tick(20.0)
    timer.pause(now=20.0)
    before = timer.remaining

    timer.start(now=42.0)
    timer.tick(42.0)

    assert timer.remaining == before


def test_start_while_running_is_ignored() -> None:
    timer = PomodoroTimer()
    timer.start(now=0.0)
    timer.start(now=100.0)

    timer.tick(100.0)

    assert timer.remaining == 1400


def test_repeated_ticks_after_expiry_do_not_flip_again() -> None:
    timer = PomodoroTimer()
    end = _finish_phase(timer, 0.0)

    for offset in (0.0, 1.0, 10_000.0):
        assert timer.tick(end + offset) == WakePolicy.IDLE

    assert timer.is_break is True
    assert timer.completed_count == 1
    assert timer.remaining == BREAK_DURATION_SEC


def test_break_expiry_returns_to_work_without_counting() -> None:
    timer = PomodoroTimer()
    now = _finish_phase(timer, 0.0)

    _finish_phase(timer, now)

    assert timer.is_break is False
    assert timer.remaining == WORK_DURATION_SEC
    assert timer.completed_count == 1


def test_reset_during_break_stays_in_break() -> None:
    timer = PomodoroTimer()
    now = _finish_phase(timer, 0.0)
    timer.start(now=now)
    timer.tick(now + 120)

    timer.reset()

    assert timer.is_break is True
    assert timer.remaining == BREAK_DURATION_SEC
    assert timer.completed_count == 1


def test_pause_and_reset_mid_phase_do_not_count() -> None:
    timer = PomodoroTimer()
    timer.start(now=0.0)
    timer.pause(now=1499.0)
    timer.reset()
    timer.start(now=2000.0)
    timer.tick(2000.0 + 1499.5)

    assert timer.completed_count == 0
    assert timer.is_break is False


def test_four_cycles_wrap_indicator() -> None:
    timer = PomodoroTimer()
    now = 0.0
    seen = []
    for _ in range(4):
        now = _finish_phase(timer, now)
        seen.append(timer.indicator_count)
        now = _finish_phase(timer, now)

    assert timer.completed_count == 4
    assert timer.indicator_count == 0
    assert seen == [1, 2, 3, 0]


def test_remaining_stays_within_phase_bounds() -> None:
    timer = PomodoroTimer()
    timer.start(now=0.0)
    for now in (0.0, 0.5, 700.0, 1499.99, 1500.0, 1500.0, 9999.0):
        timer.tick(now)
        assert 0 <= timer.remaining <= timer.phase.total_seconds
        assert 0.0 <= timer.progress_fraction <= 1.0


def test_clock_running_backwards_does_not_grow_remaining() -> None:
    timer = PomodoroTimer()
    timer.start(now=100.0)

    timer.tick(90.0)

    assert timer.remaining == WORK_DURATION_SEC


def test_snapshot_reflects_state() -> None:
    timer = PomodoroTimer()
    timer.start(now=0.0)
    timer.tick(750.5)

    snapshot = timer.snapshot()

    assert snapshot.phase == Phase.WORK
    assert snapshot.is_running is True
    assert snapshot.total_seconds == 1500
    assert snapshot.display_text == "12:29"
    assert snapshot.progress_fraction == 749.5 / 1500
    assert snapshot.indicator_count == 0


def test_pause_after_expiry_keeps_the_phase_flip() -> None:
    timer = PomodoroTimer()
    timer.start(now=0.0)

    timer.pause(now=2000.0)

    assert timer.is_break is True
    assert timer.completed_count == 1
    assert timer.remaining == BREAK_DURATION_SEC
    assert timer.is_running is False

    timer.pause(now=3000.0)

    assert timer.is_break is True
    assert timer.completed_count == 1
    assert timer.remaining == BREAK_DURATION_SEC
    assert timer.is_running is False


def test_pause_logs_only_when_the_phase_did_not_flip(caplog) -> None:
    timer = PomodoroTimer()
    caplog.set_level(logging.DEBUG, logger="pomodoro.core.timer")

    timer.start(now=0.0)
    timer.pause(now=10.0)
    assert any(r.getMessage() == "Paused work at 24:50" for r in caplog.records)

    caplog.clear()
    timer.start(now=20.0)
    timer.pause(now=5000.0)
    messages = [r.getMessage() for r in caplog.records]
    assert not any(m.startswith("Paused") for m in messages)
    assert any(m.startswith("Phase expired") for m in messages)
