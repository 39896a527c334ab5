"""Tests for rcg/geom/radar.py (spider chart geometry)."""
import math

import pytest

from rcg.core.models import Axis, RadarConfig, Series
from rcg.geom.radar import (
    LABEL_LINE_HEIGHT,
    LABEL_OFFSET,
    compute_radar_chart,
    radius_fraction,
    wrap_label,
)
from rcg.geom.trig import RADAR_PALETTE
from rcg.utils.errors import InvalidSeriesLength, NonPositiveAxisMax, RcgValidationError


def _dist(p, c):
    return math.hypot(p[0] - c[0], p[1] - c[1])


def test_layout_center_and_radius(radar_cfg):
    g = compute_radar_chart([Axis("A"), Axis("B"), Axis("C")], [], radar_cfg)
    assert g.center == (pytest.approx(144.0), pytest.approx(144.0))
    assert g.radius == pytest.approx(96.0)


def test_counts_match_axis_count(five_axes, two_series, radar_cfg):
    g = compute_radar_chart(five_axes, two_series, radar_cfg)
    n = len(five_axes)
    assert g.axis_count == n
    assert len(g.spokes) == n
    assert len(g.labels) == n
    assert len(g.grid) == radar_cfg.levels
    for poly in g.grid:
        assert len(poly.points) == n
    for s in g.series:
        assert len(s.polygon) == n
        assert len(s.points) == n


def test_per_axis_normalization():
    axes = [Axis("A", max=100), Axis("B", max=50)]
    g = compute_radar_chart(axes, [Series("s", [50, 50])])
    assert g.series[0].fractions == (0.5, 1.0)


def test_fallback_max_value():
    g = compute_radar_chart([Axis("A"), Axis("B", max=4)], [Series("s", [5, 1])], RadarConfig(max_value=10))
    assert g.axis_max == (10.0, 4.0)
    assert g.series[0].fractions == (0.5, 0.25)


def test_full_series_coincides_with_outer_grid():
    axes = [Axis("A", 100), Axis("B", 100), Axis("C", 100)]
    g = compute_radar_chart(axes, [Series("full", [100, 100, 100])])
    outer = g.grid[-1]
    assert outer.level == 1.0
    for p, q in zip(g.series[0].polygon, outer.points):
        assert p == pytest.approx(q)


def test_grid_levels_inner_to_outer():
    axes = [Axis("A"), Axis("B"), Axis("C"), Axis("D")]
    g = compute_radar_chart(axes, [], RadarConfig(levels=4))
    assert [poly.level for poly in g.grid] == [0.25, 0.5, 0.75, 1.0]
    for poly in g.grid:
        for p in poly.points:
            assert _dist(p, g.center) == pytest.approx(poly.level * g.radius)


def test_spokes_reach_outer_radius(five_axes, radar_cfg):
    g = compute_radar_chart(five_axes, [], radar_cfg)
    for sp in g.spokes:
        assert sp.start == g.center
        assert _dist(sp.end, g.center) == pytest.approx(g.radius)
    # Eje 0 apunta arriba.
    assert g.spokes[0].end[0] == pytest.approx(g.center[0])
    assert g.spokes[0].end[1] < g.center[1]


def test_over_threshold_values_are_not_clamped():
    axes = [Axis("A", 100), Axis("B", 100), Axis("C", 100)]
    g = compute_radar_chart(axes, [Series("hot", [150, 100, 50])])
    pts = g.series[0].points
    assert pts[0].fraction == 1.5
    assert _dist((pts[0].x, pts[0].y), g.center) == pytest.approx(1.5 * g.radius)
    assert _dist((pts[0].x, pts[0].y), g.center) > g.radius


def test_label_anchor_and_wrapping(radar_cfg):
    g = compute_radar_chart([Axis("Market Size Score"), Axis("B"), Axis("C")], [], radar_cfg)
    lab = g.labels[0]
    assert _dist((lab.x, lab.y), g.center) == pytest.approx(g.radius + LABEL_OFFSET)
    assert [ln.text for ln in lab.lines] == ["Market", "Size", "Score"]
    for k, ln in enumerate(lab.lines):
        assert ln.x == lab.x
        assert ln.y == pytest.approx(lab.y + k * LABEL_LINE_HEIGHT)
    assert lab.text_anchor == "middle"


def test_wrap_label_whitespace():
    assert wrap_label("Unit  Economics\tv2") == ["Unit", "Economics", "v2"]
    assert wrap_label("") == [""]


def test_series_colors_cycle():
    axes = [Axis("A"), Axis("B")]
    n = len(RADAR_PALETTE)
    series = [Series(f"s{i}", [1, 1]) for i in range(n + 2)]
    series[0] = Series("mine", [1, 1], color="#abcdef")
    g = compute_radar_chart(axes, series)
    assert g.series[0].color == "#abcdef"
    for i in range(1, n + 2):
        assert g.series[i].color == RADAR_PALETTE[i % n]
    assert [e.label for e in g.legend] == [s.label for s in series]


def test_invalid_series_length():
    with pytest.raises(InvalidSeriesLength, match="2 valores para 3 ejes"):
        compute_radar_chart([Axis("A"), Axis("B"), Axis("C")], [Series("short", [1, 2])])


@pytest.mark.parametrize("axes, cfg", [
    ([Axis("A", max=0)], RadarConfig()),
    ([Axis("A", max=-5)], RadarConfig()),
    ([Axis("A")], RadarConfig(max_value=0)),
])
def test_non_positive_axis_max(axes, cfg):
    with pytest.raises(NonPositiveAxisMax):
        compute_radar_chart(axes, [Series("s", [1])], cfg)


def test_radius_fraction_guards_zero_max():
    assert radius_fraction(5, 0) == 0.0
    assert radius_fraction(5, 10) == 0.5


@pytest.mark.parametrize("cfg", [RadarConfig(size=100), RadarConfig(levels=0)])
def test_invalid_config(cfg):
    with pytest.raises(RcgValidationError):
        compute_radar_chart([Axis("A")], [], cfg)


def test_no_axes_rejected():
    with pytest.raises(RcgValidationError, match="al menos 1 eje"):
        compute_radar_chart([], [])


@pytest.mark.parametrize("bad", [-1, float("nan")])
def test_invalid_series_values(bad):
    with pytest.raises(RcgValidationError):
        compute_radar_chart([Axis("A"), Axis("B")], [Series("s", [1, bad])])
