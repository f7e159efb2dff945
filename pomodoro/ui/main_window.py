from __future__ import annotations

import logging
import time

from PyQt6.QtCore import QTimer, Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QHBoxLayout, QMainWindow, QPushButton, QVBoxLayout, QWidget

from pomodoro.core.constants import FRAME_INTERVAL_MS, WINDOW_SIZE, WINDOW_TITLE
from pomodoro.core.timer import PomodoroTimer, WakePolicy
from pomodoro.ui.styles import apply_phase_background
from pomodoro.ui.timer_widget import DialWidget, IndicatorDots

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, timer: PomodoroTimer | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)

        self.timer = timer if timer is not None else PomodoroTimer()
        self._shown_break: bool | None = None
        self._shown_running: bool | None = None

        self._build_ui()
        self._connect_signals()

        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(FRAME_INTERVAL_MS)
        self.frame_timer.timeout.connect(self._on_frame)

        self._render()

    def _build_ui(self) -> None:
        central = QWidget(self)
        central.setObjectName("Central")
        central.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 24)

        self.dial = DialWidget()
        layout.addWidget(self.dial, 1)

        controls = QHBoxLayout()
        controls.setSpacing(10)
        self.toggle_btn = QPushButton()
        self.reset_btn = QPushButton("↺ Reset")
        self.reset_btn.setObjectName("ResetButton")
        # Space is handled by the window shortcut, not by the focused button
        for button in (self.toggle_btn, self.reset_btn):
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        controls.addStretch()
        controls.addWidget(self.toggle_btn)
        controls.addWidget(self.reset_btn)
        controls.addStretch()
        layout.addLayout(controls)

        self.dots = IndicatorDots()
        layout.addSpacing(16)
        layout.addWidget(self.dots, 0, Qt.AlignmentFlag.AlignHCenter)

        space_action = QAction(self)
        space_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space_action.triggered.connect(self.toggle_running)
        self.addAction(space_action)

    def _connect_signals(self) -> None:
        self.toggle_btn.clicked.connect(self.toggle_running)
        self.reset_btn.clicked.connect(self.reset_timer)

    def toggle_running(self) -> None:
        if self.timer.is_running:
            self.pause_timer()
        else:
            self.start_timer()

    def start_timer(self) -> None:
        self.timer.start(time.monotonic())
        self.frame_timer.start()
        self._render()

    def pause_timer(self) -> None:
        self.timer.pause(time.monotonic())
        self.frame_timer.stop()
        self._render()

    def reset_timer(self) -> None:
        self.timer.reset()
        self.frame_timer.stop()
        self._render()

    def _on_frame(self) -> None:
        policy = self.timer.tick(time.monotonic())
        if policy == WakePolicy.IDLE:
            self.frame_timer.stop()
        self._render()

    def _render(self) -> None:
        snapshot = self.timer.snapshot()
        if snapshot.is_break != self._shown_break:
            apply_phase_background(self.centralWidget(), snapshot.is_break)
            self._shown_break = snapshot.is_break
        self.dial.set_snapshot(snapshot)
        self.dots.set_completed(snapshot.completed_count)
        self._update_buttons(snapshot.is_running)

    def _update_buttons(self, running: bool) -> None:
        if running == self._shown_running:
            return
        self._shown_running = running
        if running:
            self.toggle_btn.setText("⏸ Pause")
            self.toggle_btn.setObjectName("PauseButton")
        else:
            self.toggle_btn.setText("▶ Start")
            self.toggle_btn.setObjectName("StartButton")
        # object name selectors are only re-evaluated on repolish
        self.toggle_btn.style().unpolish(self.toggle_btn)
        self.toggle_btn.style().polish(self.toggle_btn)

    def closeEvent(self, event) -> None:  # noqa: N802
        self.frame_timer.stop()
        log.debug("Closing with %d completed pomodoros", self.timer.completed_count)
        event.accept()
