"""Shared trigonometry helpers for share and radar charts.

Screen coordinates: x grows right, y grows down. An angle of -90 degrees
(-pi/2) therefore points to 12 o'clock and positive angles turn clockwise.
"""

from __future__ import annotations

import math
from typing import Sequence

Point = tuple[float, float]

# Fixed ordered palettes, accessed by modulo index. Tuples: read-only.
SHARE_PALETTE: tuple[str, ...] = (
    "#60a5fa", "#f472b6", "#facc15", "#34d399", "#f87171", "#a78bfa",
    "#38bdf8", "#fbbf24", "#f472b6", "#818cf8", "#4ade80", "#f87171",
)
RADAR_PALETTE: tuple[str, ...] = (
    "#60a5fa", "#f472b6", "#34d399", "#f87171", "#a78bfa",
    "#facc15", "#38bdf8", "#818cf8", "#4ade80", "#fbbf24",
)

# Share charts start at 12 o'clock.
SHARE_ROTATION_DEG = -90.0


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def rad_to_deg(rad: float) -> float:
    return rad * 180.0 / math.pi


def polar_to_cartesian(center: Point, radius: float, theta: float) -> Point:
    """Project (radius, theta) around center. theta in radians."""
    return (center[0] + radius * math.cos(theta), center[1] + radius * math.sin(theta))


def share_angle_rad(angle_deg: float) -> float:
    """Cumulative share angle (degrees, 0 = top) -> screen radians."""
    return deg_to_rad(angle_deg + SHARE_ROTATION_DEG)


def radar_angle(i: int, n: int) -> float:
    """Angle of axis i out of n; axis 0 points up."""
    return 2.0 * math.pi * i / n - math.pi / 2.0


def palette_color(i: int, palette: Sequence[str] = SHARE_PALETTE) -> str:
    return palette[i % len(palette)]


def resolve_color(explicit: str | None, i: int, palette: Sequence[str]) -> str:
    """Explicit color when given, else the palette entry for index i."""
    return explicit if explicit else palette_color(i, palette)


def is_finite_number(v: object) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
