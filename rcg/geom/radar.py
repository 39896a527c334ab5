"""Radar (spider) chart geometry.

Axes are spread evenly around the center, axis 0 pointing up. Each axis has
its own ceiling (`Axis.max`, falling back to `RadarConfig.max_value`), so one
chart can compare metrics on unrelated scales. Values above the ceiling are
placed outside the outer grid ring on purpose: no clamping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from rcg.core.models import Axis, RadarConfig, Series
from rcg.geom.trig import (
    RADAR_PALETTE,
    Point,
    is_finite_number,
    polar_to_cartesian,
    radar_angle,
    resolve_color,
)
from rcg.utils.errors import InvalidSeriesLength, NonPositiveAxisMax, RcgValidationError

log = logging.getLogger(__name__)

# Layout constants (px). Center sits at size/2.5; the space left below/right
# of the plot is where the host puts its legend.
CENTER_DIVISOR = 2.5
LABEL_PADDING = 48.0
LABEL_OFFSET = 18.0
LABEL_LINE_HEIGHT = 14.0


@dataclass(frozen=True)
class GridPolygon:
    level: float  # fracción del radio (1/levels .. 1.0)
    points: tuple[Point, ...]


@dataclass(frozen=True)
class Spoke:
    axis_index: int
    start: Point
    end: Point


@dataclass(frozen=True)
class LabelLine:
    text: str
    x: float
    y: float


@dataclass(frozen=True)
class LabelAnchor:
    axis_index: int
    label: str
    x: float
    y: float
    lines: tuple[LabelLine, ...]
    text_anchor: str = "middle"


@dataclass(frozen=True)
class SeriesPoint:
    x: float
    y: float
    value: float
    fraction: float


@dataclass(frozen=True)
class SeriesGeometry:
    label: str
    color: str
    values: tuple[float, ...]
    points: tuple[SeriesPoint, ...]

    @property
    def polygon(self) -> tuple[Point, ...]:
        return tuple((p.x, p.y) for p in self.points)

    @property
    def fractions(self) -> tuple[float, ...]:
        return tuple(p.fraction for p in self.points)


@dataclass(frozen=True)
class SeriesLegendEntry:
    label: str
    color: str


@dataclass(frozen=True)
class RadarGeometry:
    center: Point
    radius: float
    size: float
    axis_max: tuple[float, ...]
    grid: tuple[GridPolygon, ...]
    spokes: tuple[Spoke, ...]
    labels: tuple[LabelAnchor, ...]
    series: tuple[SeriesGeometry, ...]
    legend: tuple[SeriesLegendEntry, ...]
    show_legend: bool

    @property
    def axis_count(self) -> int:
        return len(self.spokes)


def radius_fraction(value: float, axis_max: float) -> float:
    """value / axis_max; a zero ceiling yields 0.0 instead of NaN/inf."""
    if axis_max == 0:
        return 0.0
    return value / axis_max


def resolve_axis_max(axes: Sequence[Axis], config: RadarConfig) -> tuple[float, ...]:
    """Per-axis ceiling: axis.max when set, else config.max_value. Must be > 0."""
    out: list[float] = []
    for i, a in enumerate(axes):
        mx = a.max if a.max is not None else config.max_value
        if not is_finite_number(mx):
            raise RcgValidationError(f"axes[{i}] ({a.label!r}): max no numérico/finito: {mx!r}")
        if mx <= 0:
            source = "axis.max" if a.max is not None else "config.max_value"
            raise NonPositiveAxisMax(f"axes[{i}] ({a.label!r}): max efectivo = {mx} ({source}); debe ser > 0")
        out.append(float(mx))
    return tuple(out)


def outer_radius(size: float) -> float:
    return size / CENTER_DIVISOR - LABEL_PADDING


def validate_radar_input(axes: Sequence[Axis], series: Sequence[Series], config: RadarConfig) -> tuple[float, ...]:
    """Validate everything up front and return the per-axis ceilings."""
    if not is_finite_number(config.size) or outer_radius(config.size) <= 0:
        min_size = LABEL_PADDING * CENTER_DIVISOR
        raise RcgValidationError(f"size inválido: {config.size!r} (debe ser > {min_size:g})")
    if isinstance(config.levels, bool) or not isinstance(config.levels, int) or config.levels < 1:
        raise RcgValidationError(f"levels inválido: {config.levels!r} (entero >= 1)")
    if not axes:
        raise RcgValidationError("Radar sin ejes: se necesita al menos 1 eje")

    axis_max = resolve_axis_max(axes, config)

    n = len(axes)
    for k, s in enumerate(series):
        if len(s.values) != n:
            raise InvalidSeriesLength(
                f"series[{k}] ({s.label!r}): {len(s.values)} valores para {n} ejes"
            )
        for j, v in enumerate(s.values):
            if not is_finite_number(v):
                raise RcgValidationError(f"series[{k}] ({s.label!r}).values[{j}]: no numérico/finito: {v!r}")
            if v < 0:
                raise RcgValidationError(f"series[{k}] ({s.label!r}).values[{j}]: valor negativo: {v}")
    return axis_max


def wrap_label(label: str) -> list[str]:
    """Split an axis label on whitespace into stacked lines."""
    return label.split() or [""]


def compute_radar_chart(
    axes: Iterable[Axis],
    series: Iterable[Series],
    config: RadarConfig = RadarConfig(),
) -> RadarGeometry:
    """Compute grid polygons, spokes, label anchors and series polygons."""
    axes = tuple(axes)
    series = tuple(series)
    axis_max = validate_radar_input(axes, series, config)

    n = len(axes)
    c = config.size / CENTER_DIVISOR
    center = (c, c)
    r = outer_radius(config.size)
    angles = [radar_angle(i, n) for i in range(n)]

    grid = tuple(
        GridPolygon(
            level=level,
            points=tuple(polar_to_cartesian(center, level * r, a) for a in angles),
        )
        for level in ((k + 1) / config.levels for k in range(config.levels))
    )

    spokes = tuple(Spoke(i, center, polar_to_cartesian(center, r, a)) for i, a in enumerate(angles))

    labels: list[LabelAnchor] = []
    for i, (axis, a) in enumerate(zip(axes, angles)):
        x, y = polar_to_cartesian(center, r + LABEL_OFFSET, a)
        lines = tuple(
            LabelLine(text, x, y + idx * LABEL_LINE_HEIGHT) for idx, text in enumerate(wrap_label(axis.label))
        )
        labels.append(LabelAnchor(axis_index=i, label=axis.label, x=x, y=y, lines=lines))

    out_series: list[SeriesGeometry] = []
    legend: list[SeriesLegendEntry] = []
    for k, s in enumerate(series):
        color = resolve_color(s.color, k, RADAR_PALETTE)
        points = []
        for v, mx, a in zip(s.values, axis_max, angles):
            frac = radius_fraction(float(v), mx)
            x, y = polar_to_cartesian(center, frac * r, a)
            points.append(SeriesPoint(x=x, y=y, value=float(v), fraction=frac))
        out_series.append(SeriesGeometry(label=s.label, color=color, values=tuple(float(v) for v in s.values), points=tuple(points)))
        legend.append(SeriesLegendEntry(label=s.label, color=color))

    over = sum(1 for sg in out_series for p in sg.points if p.fraction > 1.0)
    if over:
        log.debug("radar chart: %d puntos por encima del máximo de su eje (sin clamp)", over)
    log.debug("radar chart: %d ejes, %d series, %d niveles", n, len(out_series), config.levels)

    return RadarGeometry(
        center=center,
        radius=r,
        size=float(config.size),
        axis_max=axis_max,
        grid=grid,
        spokes=spokes,
        labels=tuple(labels),
        series=tuple(out_series),
        legend=tuple(legend),
        show_legend=bool(config.show_legend),
    )
