# File: rcg/render/target.py
# Project: RusticChartGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Interfaz VectorRenderTarget + recorrido de la geometría hacia cualquier target.
# Notes:
#   - La geometría (rcg.geom) no sabe nada de SVG ni de Qt.
#   - Un target por tecnología de render (svg_target, qpath_target).
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from rcg.geom.path import ArcTo, ClosePath, LineTo, MoveTo, PathDescriptor
from rcg.geom.radar import RadarGeometry
from rcg.geom.share import ShareChartGeometry
from rcg.render.legend import legend_rows, series_description, slice_description

if TYPE_CHECKING:
    from rcg.core.settings import AppSettings

Point = tuple[float, float]
TextLine = tuple[str, float, float]  # (texto, x, y)


class VectorRenderTarget(Protocol):
    """Primitivas mínimas que un backend de dibujo tiene que implementar."""

    def begin_path(
        self,
        *,
        fill: Optional[str],
        stroke: Optional[str] = None,
        stroke_width: float = 0.0,
        title: Optional[str] = None,
    ) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc_to(self, rx: float, ry: float, rotation: float, large_arc: int, sweep: int, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def end_path(self) -> None: ...

    def polygon(
        self,
        points: Sequence[Point],
        *,
        fill: Optional[str],
        stroke: Optional[str] = None,
        stroke_width: float = 0.0,
        fill_opacity: float = 1.0,
        opacity: float = 1.0,
        title: Optional[str] = None,
    ) -> None: ...

    def line(self, x1: float, y1: float, x2: float, y2: float, *, stroke: str, stroke_width: float = 1.0, opacity: float = 1.0) -> None: ...

    def circle(self, cx: float, cy: float, r: float, *, fill: Optional[str], stroke: Optional[str] = None, stroke_width: float = 0.0) -> None: ...

    def text(self, lines: Sequence[TextLine], *, anchor: str = "middle", font_size: float = 12.0, fill: str = "#000000") -> None: ...


@dataclass(frozen=True)
class ChartStyle:
    """Estilo visual (no afecta la geometría)."""

    background: str = "#18181b"
    slice_stroke: str = "#23232a"
    slice_stroke_width: float = 1.5
    grid_stroke: str = "#444"
    grid_stroke_width: float = 0.7
    grid_opacity: float = 0.6
    spoke_stroke: str = "#666"
    spoke_stroke_width: float = 1.0
    spoke_opacity: float = 0.7
    label_color: str = "#e5e7eb"
    legend_color: str = "#d1d5db"
    font_size: float = 12.0
    series_fill_opacity: float = 0.18
    series_stroke_width: float = 2.0
    point_radius: float = 3.5
    point_stroke_width: float = 1.0
    hole_inset: float = 1.0  # el círculo del agujero tapa la costura de los arcos internos
    legend_row_height: float = 18.0
    legend_swatch: float = 12.0

    @staticmethod
    def from_settings(settings: "AppSettings") -> "ChartStyle":
        return ChartStyle(
            background=settings.svg_background,
            slice_stroke=settings.svg_stroke,
            label_color=settings.svg_text_color,
        )


def replay_path(path: PathDescriptor, target: VectorRenderTarget) -> None:
    """Emite cada comando del path en el target (sin begin/end)."""
    for cmd in path:
        if isinstance(cmd, MoveTo):
            target.move_to(cmd.x, cmd.y)
        elif isinstance(cmd, LineTo):
            target.line_to(cmd.x, cmd.y)
        elif isinstance(cmd, ArcTo):
            target.arc_to(cmd.rx, cmd.ry, cmd.rotation, cmd.large_arc, cmd.sweep, cmd.x, cmd.y)
        elif isinstance(cmd, ClosePath):
            target.close_path()
        else:
            raise TypeError(f"Comando de path desconocido: {cmd!r}")


def draw_share_chart(geom: ShareChartGeometry, target: VectorRenderTarget, style: ChartStyle = ChartStyle()) -> None:
    for s in geom.slices:
        target.begin_path(
            fill=s.color,
            stroke=style.slice_stroke,
            stroke_width=style.slice_stroke_width,
            title=slice_description(s),
        )
        replay_path(s.path, target)
        target.end_path()

    if geom.hole is not None:
        h = geom.hole
        target.circle(h.cx, h.cy, max(h.r - style.hole_inset, 0.0), fill=style.background)


def draw_radar_chart(geom: RadarGeometry, target: VectorRenderTarget, style: ChartStyle = ChartStyle()) -> None:
    for g in geom.grid:
        target.polygon(
            g.points,
            fill=None,
            stroke=style.grid_stroke,
            stroke_width=style.grid_stroke_width,
            opacity=style.grid_opacity,
        )

    for sp in geom.spokes:
        target.line(
            sp.start[0], sp.start[1], sp.end[0], sp.end[1],
            stroke=style.spoke_stroke,
            stroke_width=style.spoke_stroke_width,
            opacity=style.spoke_opacity,
        )

    for lab in geom.labels:
        target.text(
            [(ln.text, ln.x, ln.y) for ln in lab.lines],
            anchor=lab.text_anchor,
            font_size=style.font_size,
            fill=style.label_color,
        )

    for s in geom.series:
        target.polygon(
            s.polygon,
            fill=s.color,
            stroke=s.color,
            stroke_width=style.series_stroke_width,
            fill_opacity=style.series_fill_opacity,
            title=series_description(s),
        )

    # Puntos arriba de todos los polígonos.
    for s in geom.series:
        for p in s.points:
            target.circle(
                p.x, p.y, style.point_radius,
                fill=s.color,
                stroke=style.slice_stroke,
                stroke_width=style.point_stroke_width,
            )


def draw_legend(
    geom: ShareChartGeometry | RadarGeometry,
    target: VectorRenderTarget,
    *,
    top: float,
    left: float = 8.0,
    style: ChartStyle = ChartStyle(),
) -> float:
    """Dibuja la leyenda (cuadro de color + label + valor). Devuelve la altura usada."""
    rows = legend_rows(geom)
    sw = style.legend_swatch
    for i, row in enumerate(rows):
        y = top + i * style.legend_row_height
        target.polygon(
            [(left, y), (left + sw, y), (left + sw, y + sw), (left, y + sw)],
            fill=row.color,
        )
        text = f"{row.label}  {row.text}" if row.text else row.label
        target.text([(text, left + sw + 6.0, y + sw - 2.0)], anchor="start", font_size=style.font_size, fill=style.legend_color)
    return len(rows) * style.legend_row_height
