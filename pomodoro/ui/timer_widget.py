from __future__ import annotations

"""Виджеты отрисовки: циферблат с дугой прогресса и точки завершённых помидоров."""

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPainter, QPen
from PyQt6.QtWidgets import QWidget

from pomodoro.core.constants import (
    BREAK_COLOR,
    CIRCLE_RADIUS,
    EMPTY_DOT_GRAY,
    FACE_GRAY,
    INDICATOR_SLOTS,
    TEXT_GRAY,
    TRACK_GRAY,
    WORK_COLOR,
)
from pomodoro.core.progress import arc_points, indicator_states, status_box
from pomodoro.core.timer import TimerSnapshot


class DialWidget(QWidget):
    """Circular countdown: status line, progress arc and the `MM:SS` clock."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        side = int(CIRCLE_RADIUS * 2 + 100)
        self.setMinimumSize(side, side)
        self._snapshot: TimerSnapshot | None = None

    def set_snapshot(self, snapshot: TimerSnapshot) -> None:
        self._snapshot = snapshot
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        if self._snapshot is None:
            return
        snap = self._snapshot
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        rect = QRectF(self.rect())
        center = rect.center()
        radius = CIRCLE_RADIUS
        # keep the status line inside the widget
        center.setY(max(center.y(), radius + 50))

        painter.setPen(QPen(QColor(TRACK_GRAY, TRACK_GRAY, TRACK_GRAY), 2))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(center, radius + 5, radius + 5)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(QColor(FACE_GRAY, FACE_GRAY, FACE_GRAY)))
        painter.drawEllipse(center, radius, radius)

        arc_color = QColor(*(BREAK_COLOR if snap.is_break else WORK_COLOR))
        painter.setPen(QPen(arc_color, 4, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap))
        points = arc_points((center.x(), center.y()), radius, snap.progress_fraction)
        for (x0, y0), (x1, y1) in zip(points, points[1:]):
            painter.drawLine(QPointF(x0, y0), QPointF(x1, y1))

        text_color = QColor(TEXT_GRAY, TEXT_GRAY, TEXT_GRAY)
        painter.setPen(text_color)

        clock_font = QFont(self.font())
        clock_font.setPixelSize(32)
        painter.setFont(clock_font)
        clock_rect = QRectF(center.x() - radius, center.y() - 24, radius * 2, 48)
        painter.drawText(clock_rect, Qt.AlignmentFlag.AlignCenter, snap.display_text)

        status_font = QFont(self.font())
        status_font.setPixelSize(24)
        painter.setFont(status_font)
        status_rect = QRectF(*status_box((center.x(), center.y()), radius))
        painter.drawText(
            status_rect,
            Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
            snap.phase.label,
        )
        painter.end()


class IndicatorDots(QWidget):
    DOT_RADIUS = 10
    DOT_SPACING = 35

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(INDICATOR_SLOTS * self.DOT_SPACING + 20, 30)
        self._completed = 0

    def set_completed(self, completed: int) -> None:
        if completed == self._completed:
            return
        self._completed = completed
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)

        states = indicator_states(self._completed)
        row_width = self.DOT_SPACING * (len(states) - 1)
        x = self.rect().center().x() - row_width / 2
        y = self.rect().center().y()
        for filled in states:
            color = QColor(*WORK_COLOR) if filled else QColor(EMPTY_DOT_GRAY, EMPTY_DOT_GRAY, EMPTY_DOT_GRAY)
            painter.setBrush(QBrush(color))
            painter.drawEllipse(QPointF(x, y), self.DOT_RADIUS, self.DOT_RADIUS)
            x += self.DOT_SPACING
        painter.end()
