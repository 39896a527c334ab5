"""Tests for rcg/render/svg_target.py and rcg/render/legend.py."""
import xml.etree.ElementTree as ET

import pytest

from rcg.core.models import Axis, RadarConfig, Series, ShareChartConfig, Slice
from rcg.geom.radar import compute_radar_chart
from rcg.geom.share import compute_share_chart
from rcg.render.legend import chart_summary, fmt_value, legend_rows, slice_description
from rcg.render.svg_target import SVG_NS, SvgRenderTarget, render_chart_svg
from rcg.render.target import ChartStyle, replay_path
from rcg.utils.errors import RcgIOError, RcgValidationError


def _find(root, tag):
    return list(root.iter(f"{{{SVG_NS}}}{tag}"))


def _parse(target):
    return ET.fromstring(target.to_string())


def test_fmt_value():
    assert fmt_value(25) == "25"
    assert fmt_value(2.5) == "2.5"
    assert fmt_value(0.1 + 0.2) == "0.30000000000000004"


def test_pie_svg_paths_and_titles(quarter_slices, pie100):
    g = compute_share_chart(quarter_slices, pie100)
    root = _parse(render_chart_svg(g, style=ChartStyle(), title="Mix"))
    paths = _find(root, "path")
    assert len(paths) == 2
    assert paths[0].get("d") == g.slices[0].d
    assert paths[0].get("fill") == g.slices[0].color
    titles = [p.find(f"{{{SVG_NS}}}title").text for p in paths]
    assert titles == ["A: 25 (25.0%)", "B: 75 (75.0%)"]
    desc = _find(root, "desc")[0].text
    assert desc.splitlines()[0] == "Gráfico de torta: Mix"


def test_donut_svg_has_hole_circle():
    g = compute_share_chart([Slice("a", 1), Slice("b", 1)], ShareChartConfig(diameter=100, inner_radius=30, show_legend=False))
    root = _parse(render_chart_svg(g, style=ChartStyle(background="#111111")))
    circles = _find(root, "circle")
    assert len(circles) == 1
    assert (circles[0].get("cx"), circles[0].get("cy"), circles[0].get("r")) == ("50", "50", "29")
    assert circles[0].get("fill") == "#111111"
    assert root.get("viewBox") == "0 0 100 100"


def test_legend_rows_and_extra_height(quarter_slices, pie100):
    g = compute_share_chart(quarter_slices, pie100)
    rows = legend_rows(g)
    assert [(r.label, r.text) for r in rows] == [("A", "25 (25.0%)"), ("B", "75 (75.0%)")]
    root = _parse(render_chart_svg(g))
    # 2 filas de leyenda debajo del gráfico.
    assert float(root.get("height")) > 100
    texts = ["".join(t.itertext()) for t in _find(root, "text")]
    assert "A  25 (25.0%)" in texts


def test_radar_svg_elements(five_axes, two_series, radar_cfg):
    g = compute_radar_chart(five_axes, two_series, RadarConfig(size=360, levels=5, show_legend=False))
    root = _parse(render_chart_svg(g))
    polys = _find(root, "polygon")
    grid = [p for p in polys if p.get("fill") == "none"]
    assert len(grid) == 5
    assert len(polys) == 5 + len(two_series)
    assert len(_find(root, "line")) == len(five_axes)
    assert len(_find(root, "circle")) == len(five_axes) * len(two_series)
    labels = _find(root, "text")
    assert len(labels) == len(five_axes)
    # "Unit Economics" -> dos tspan apilados.
    spans = labels[4].findall(f"{{{SVG_NS}}}tspan")
    assert [s.text for s in spans] == ["Unit", "Economics"]
    assert float(spans[1].get("y")) - float(spans[0].get("y")) == pytest.approx(14)
    series_titles = [p.find(f"{{{SVG_NS}}}title").text for p in polys if p.find(f"{{{SVG_NS}}}title") is not None]
    assert series_titles == ["Acme: 80, 40, 25, 60, 5", "Globex: 20, 100, 50, 90, 12"]


def test_radar_summary(five_axes, two_series, radar_cfg):
    g = compute_radar_chart(five_axes, two_series, radar_cfg)
    lines = chart_summary(g).splitlines()
    assert lines[0] == "Gráfico de radar"
    assert lines[1] == "Acme: 80, 40, 25, 60, 5"


def test_slice_description_uses_same_percentage():
    g = compute_share_chart([Slice("x", 1), Slice("y", 2)])
    assert slice_description(g.slices[0]) == "x: 1 (33.3%)"


def test_path_commands_require_begin():
    t = SvgRenderTarget(10, 10)
    with pytest.raises(RcgValidationError):
        t.move_to(0, 0)
    t.begin_path(fill="#000")
    with pytest.raises(RcgValidationError):
        t.begin_path(fill="#000")


def test_replay_path_roundtrip_d(quarter_slices, pie100):
    g = compute_share_chart(quarter_slices, pie100)
    t = SvgRenderTarget(100, 100)
    t.begin_path(fill="#f00")
    replay_path(g.slices[1].path, t)
    t.end_path()
    assert _find(_parse(t), "path")[0].get("d") == g.slices[1].d


def test_write_forces_svg_suffix(tmp_path, quarter_slices):
    g = compute_share_chart(quarter_slices)
    out = render_chart_svg(g).write(tmp_path / "nested" / "chart.out")
    assert out.suffix == ".svg"
    assert out.read_text(encoding="utf-8").startswith("<svg")


def test_write_io_error(tmp_path, quarter_slices):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    target = render_chart_svg(compute_share_chart(quarter_slices))
    with pytest.raises(RcgIOError):
        target.write(blocker / "chart.svg")
