from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum

from pomodoro.core.constants import BREAK_DURATION_SEC, WORK_DURATION_SEC
from pomodoro.core.progress import format_clock, indicator_count

log = logging.getLogger(__name__)


class Phase(str, Enum):
    WORK = "work"
    BREAK = "break"

    @property
    def total_seconds(self) -> int:
        return BREAK_DURATION_SEC if self is Phase.BREAK else WORK_DURATION_SEC

    @property
    def label(self) -> str:
        return "Break Time" if self is Phase.BREAK else "Focus Time"


class WakePolicy(str, Enum):
    IDLE = "idle"
    REPAINT_NOW = "repaint_now"


@dataclass(frozen=True)
class TimerSnapshot:
    phase: Phase
    is_break: bool
    is_running: bool
    remaining_seconds: float
    total_seconds: int
    progress_fraction: float
    display_text: str
    completed_count: int
    indicator_count: int


class PomodoroTimer:
    """Monotonic work/break countdown driven by the host's frame loop."""

    def __init__(self) -> None:
        self._is_break = False
        self._remaining = float(WORK_DURATION_SEC)
        self._running_since: float | None = None
        self._segment_duration = self._remaining
        self._completed_count = 0

    @property
    def phase(self) -> Phase:
        return Phase.BREAK if self._is_break else Phase.WORK

    @property
    def is_break(self) -> bool:
        return self._is_break

    @property
    def is_running(self) -> bool:
        return self._running_since is not None

    @property
    def remaining(self) -> float:
        return self._remaining

    @property
    def completed_count(self) -> int:
        return self._completed_count

    @property
    def progress_fraction(self) -> float:
        return max(0.0, min(1.0, self._remaining / self.phase.total_seconds))

    @property
    def display_text(self) -> str:
        return format_clock(self._remaining)

    @property
    def indicator_count(self) -> int:
        return indicator_count(self._completed_count)

    def start(self, now: float | None = None) -> None:
        if self._running_since is not None:
            return
        if now is None:
            now = time.monotonic()
        self._running_since = now
        self._segment_duration = self._remaining
        log.debug("Started %s segment with %.1fs left", self.phase.value, self._remaining)

    def pause(self, now: float | None = None) -> None:
        if self._running_since is None:
            return
        if now is None:
            now = time.monotonic()
        was_break = self._is_break
        self.tick(now)
        self._running_since = None
        if self._is_break == was_break:
            log.debug("Paused %s at %s", self.phase.value, self.display_text)

    def reset(self) -> None:
        self._running_since = None
        self._remaining = float(self.phase.total_seconds)
        self._segment_duration = self._remaining
        log.debug("Reset %s to %s", self.phase.value, self.display_text)

    def tick(self, now: float | None = None) -> WakePolicy:
        """Advances the countdown and tells the host whether to keep repainting."""
        if self._running_since is None:
            return WakePolicy.IDLE
        if now is None:
            now = time.monotonic()

        elapsed = max(0.0, now - self._running_since)
        if elapsed >= self._segment_duration:
            self._expire()
            return WakePolicy.IDLE

        self._remaining = max(0.0, self._segment_duration - elapsed)
        return WakePolicy.REPAINT_NOW

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self.phase,
            is_break=self._is_break,
            is_running=self.is_running,
            remaining_seconds=self._remaining,
            total_seconds=self.phase.total_seconds,
            progress_fraction=self.progress_fraction,
            display_text=self.display_text,
            completed_count=self._completed_count,
            indicator_count=self.indicator_count,
        )

    def _expire(self) -> None:
        if not self._is_break:
            self._completed_count += 1
        self._is_break = not self._is_break
        self._running_since = None
        self._remaining = float(self.phase.total_seconds)
        self._segment_duration = self._remaining
        log.info(
            "Phase expired; now %s (%d completed)",
            self.phase.value,
            self._completed_count,
        )
