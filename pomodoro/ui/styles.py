from __future__ import annotations

from PyQt6.QtWidgets import QApplication, QWidget

from pomodoro.core.constants import (
    BREAK_BACKGROUND,
    BREAK_COLOR,
    PAUSE_COLOR,
    TEXT_GRAY,
    WORK_BACKGROUND,
    WORK_COLOR,
)


def _rgb(color: tuple[int, int, int]) -> str:
    return "rgb({}, {}, {})".format(*color)


THEME_QSS = f"""
QWidget {{
    color: rgb({TEXT_GRAY}, {TEXT_GRAY}, {TEXT_GRAY});
    font-size: 13px;
}}

QLabel {{
    background: transparent;
}}

QPushButton {{
    border: none;
    background: #f7eee6;
    border-radius: 16px;
    padding: 6px 14px;
    min-width: 120px;
    min-height: 36px;
    font-size: 20px;
    font-weight: 600;
}}

QPushButton:hover {{
    background: #f2e6dc;
}}

QPushButton:pressed {{
    background: #e8d8cc;
}}

QPushButton#StartButton {{
    color: {_rgb(BREAK_COLOR)};
}}

QPushButton#PauseButton {{
    color: {_rgb(PAUSE_COLOR)};
}}

QPushButton#ResetButton {{
    color: {_rgb(WORK_COLOR)};
}}
"""


def phase_background_qss(is_break: bool) -> str:
    color = BREAK_BACKGROUND if is_break else WORK_BACKGROUND
    return f"QWidget#Central {{ background: {_rgb(color)}; }}"


def apply_theme(app: QApplication) -> None:
    app.setStyleSheet(THEME_QSS)


def apply_phase_background(widget: QWidget, is_break: bool) -> None:
    widget.setStyleSheet(phase_background_qss(is_break))
