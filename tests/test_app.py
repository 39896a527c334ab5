"""Tests for rcg/app.py (CLI entry point)."""
import json
import xml.etree.ElementTree as ET

import pytest

from rcg.app import compute_request_geometry, main
from rcg.core.chart_kind import ChartKind
from rcg.core.models import ChartRequest, Slice
from rcg.geom.share import ShareChartGeometry


@pytest.fixture
def cli_env(tmp_path, monkeypatch, isolated_settings):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def _run(cli_env, *args):
    return main([*map(str, args), "--log-dir", str(cli_env / "logs")])


def test_compute_request_geometry_dispatches_on_kind():
    req = ChartRequest(kind=ChartKind.PIE, slices=(Slice("a", 1),))
    assert isinstance(compute_request_geometry(req), ShareChartGeometry)


def test_pie_request_to_svg(cli_env):
    src = _write(cli_env / "pie.json", {"kind": "pie", "title": "Mix", "slices": [{"label": "A", "value": 25}, {"label": "B", "value": 75}]})
    assert _run(cli_env, src) == 0
    out = cli_env / "pie.svg"
    root = ET.fromstring(out.read_text(encoding="utf-8"))
    assert root.tag.endswith("svg")
    assert len([e for e in root.iter() if e.tag.endswith("}path")]) == 2


def test_radar_request_with_output_and_summary(cli_env, capsys):
    src = _write(cli_env / "radar.json", {
        "kind": "radar",
        "axes": ["A", "B", {"label": "C", "max": 10}],
        "series": [{"label": "s", "values": [50, 100, 5]}],
    })
    out = cli_env / "out" / "r.svg"
    assert _run(cli_env, src, "-o", out, "--summary", "--precision", "2") == 0
    assert out.exists()
    assert "s: 50, 100, 5" in capsys.readouterr().out


def test_degenerate_input_exit_code(cli_env):
    src = _write(cli_env / "zero.json", {"kind": "pie", "slices": [{"value": 0}]})
    assert _run(cli_env, src) == 2
    assert not (cli_env / "zero.svg").exists()


def test_invalid_series_length_exit_code(cli_env):
    src = _write(cli_env / "bad.json", {"kind": "radar", "axes": ["A", "B"], "series": [{"values": [1]}]})
    assert _run(cli_env, src) == 2


def test_missing_input_exit_code(cli_env):
    assert _run(cli_env, cli_env / "nope.json") == 1


def test_settings_defaults_apply(cli_env, monkeypatch):
    # apply_project_settings escribe os.environ: registrar la var para que se restaure.
    monkeypatch.setenv("RCG_PIE_DIAMETER", "")
    (cli_env / "rcg_settings.json").write_text(json.dumps({"defaults": {"pie": {"diameter": 60}}}), encoding="utf-8")
    src = _write(cli_env / "pie.json", {"kind": "pie", "slices": [{"value": 1}], "config": {"show_legend": False}})
    assert _run(cli_env, src) == 0
    root = ET.fromstring((cli_env / "pie.svg").read_text(encoding="utf-8"))
    assert root.get("viewBox") == "0 0 60 60"
