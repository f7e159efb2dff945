from __future__ import annotations

"""Geometry and text helpers for the progress dial, detached from Qt."""

from math import cos, pi, sin

from pomodoro.core.constants import ARC_POINTS, INDICATOR_SLOTS


def format_clock(seconds: float) -> str:
    """Formats a duration as `MM:SS`, truncated to whole seconds."""
    whole = max(0, int(seconds))
    return f"{whole // 60:02d}:{whole % 60:02d}"


def indicator_count(completed: int, slots: int = INDICATOR_SLOTS) -> int:
    return completed % slots


def indicator_states(completed: int, slots: int = INDICATOR_SLOTS) -> list[bool]:
    """Returns one flag per dot; the first `completed % slots` are filled."""
    filled = indicator_count(completed, slots)
    return [i < filled for i in range(slots)]


def arc_points(
    center: tuple[float, float],
    radius: float,
    progress: float,
    points_count: int = ARC_POINTS,
) -> list[tuple[float, float]]:
    """Samples the elapsed-time arc in screen coordinates (y grows downward).

    The arc starts at 12 o'clock and sweeps clockwise over `1 - progress`
    of the full circle, so it is empty at progress 1 and closed at 0.
    """
    progress = max(0.0, min(1.0, progress))
    cx, cy = center
    start_angle = -pi / 2
    sweep = 2 * pi * (1.0 - progress)
    points: list[tuple[float, float]] = []
    for i in range(points_count + 1):
        angle = start_angle + sweep * i / points_count
        points.append((cx + radius * cos(angle), cy + radius * sin(angle)))
    return points


def status_box(center: tuple[float, float], radius: float) -> tuple[float, float, float, float]:
    """Returns `(x, y, width, height)` of the phase label; its top edge sits 40 px above the dial."""
    cx, cy = center
    return (cx - radius, cy - radius - 40, radius * 2, 32)
