"""Tests for rcg/geom/trig.py shared helpers."""
import math

import pytest

from rcg.geom.trig import (
    RADAR_PALETTE,
    SHARE_PALETTE,
    deg_to_rad,
    is_finite_number,
    palette_color,
    polar_to_cartesian,
    rad_to_deg,
    radar_angle,
    resolve_color,
    share_angle_rad,
)


def test_deg_rad_roundtrip():
    assert deg_to_rad(180) == pytest.approx(math.pi)
    assert rad_to_deg(math.pi / 2) == pytest.approx(90.0)


def test_polar_to_cartesian_screen_axes():
    # y crece hacia abajo: -pi/2 apunta arriba.
    x, y = polar_to_cartesian((10, 10), 5, -math.pi / 2)
    assert x == pytest.approx(10.0)
    assert y == pytest.approx(5.0)


def test_share_angle_starts_at_twelve_oclock():
    assert share_angle_rad(0) == pytest.approx(-math.pi / 2)
    assert share_angle_rad(90) == pytest.approx(0.0)


def test_radar_angle_axis_zero_points_up():
    assert radar_angle(0, 5) == pytest.approx(-math.pi / 2)
    assert radar_angle(2, 4) == pytest.approx(math.pi / 2)


def test_palettes_have_at_least_ten_colors():
    assert len(SHARE_PALETTE) >= 10
    assert len(RADAR_PALETTE) >= 10


def test_palette_color_cycles():
    n = len(SHARE_PALETTE)
    for i in range(3 * n):
        assert palette_color(i) == palette_color(i % n)


def test_resolve_color_prefers_explicit():
    assert resolve_color("#123456", 3, RADAR_PALETTE) == "#123456"
    assert resolve_color(None, 3, RADAR_PALETTE) == RADAR_PALETTE[3]


@pytest.mark.parametrize("v, ok", [(1, True), (0.5, True), (float("nan"), False), (float("inf"), False), (True, False), ("3", False)])
def test_is_finite_number(v, ok):
    assert is_finite_number(v) is ok
