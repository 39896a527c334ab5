"""Shared test fixtures for RCG geometry tests."""
import os

import pytest

# Qt sin display (CI / headless). Tiene que estar antes de crear cualquier QGuiApplication.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from rcg.core.models import Axis, RadarConfig, Series, ShareChartConfig, Slice


@pytest.fixture
def quarter_slices():
    """25 / 75: sweeps de 90 y 270 grados."""
    return (Slice("A", 25), Slice("B", 75))


@pytest.fixture
def pie100():
    return ShareChartConfig(diameter=100)


@pytest.fixture
def five_axes():
    return (
        Axis("Team"),
        Axis("Market Size"),
        Axis("Traction", max=50),
        Axis("Product"),
        Axis("Unit Economics", max=10),
    )


@pytest.fixture
def two_series():
    return (
        Series("Acme", (80, 40, 25, 60, 5)),
        Series("Globex", [20, 100, 50, 90, 12]),
    )


@pytest.fixture
def radar_cfg():
    return RadarConfig(size=360, max_value=100, levels=5)


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Settings de usuario en tmp + sin env vars RCG_* heredadas."""
    for k in list(os.environ):
        if k.startswith("RCG_"):
            monkeypatch.delenv(k)
    d = tmp_path / ".rcg"
    monkeypatch.setattr("rcg.core.settings.settings_dir", lambda: d)
    return d


@pytest.fixture(scope="session")
def qapp():
    """QGuiApplication (offscreen) para pintar con fuentes/QPainter."""
    qtgui = pytest.importorskip("PySide6.QtGui")
    app = qtgui.QGuiApplication.instance() or qtgui.QGuiApplication([])
    return app
