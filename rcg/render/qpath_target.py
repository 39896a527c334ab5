# File: rcg/render/qpath_target.py
# Project: RusticChartGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: VectorRenderTarget -> QPainterPath (PySide6), para hosts Qt.
# Notes:
#   - Sin QtSvg: la geometría se dibuja directo como QPainterPath.
#   - QPainterPath.arcTo usa rect + ángulos; los arcos SVG (endpoints + flags) se
#     convierten a cúbicas con svgelements.
#   - Texto: solo se guarda como QtText; dibujarlo (paint) requiere QGuiApplication (fuentes).
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QImage, QPainter, QPainterPath, QPen, QPolygonF
from svgelements import CubicBezier, Line, Move
from svgelements import Path as SvgPath

from rcg.geom.path import fmt_num
from rcg.geom.radar import RadarGeometry
from rcg.geom.share import ShareChartGeometry
from rcg.render.target import ChartStyle, Point, TextLine, draw_radar_chart, draw_share_chart
from rcg.utils.errors import RcgValidationError

log = logging.getLogger(__name__)


@dataclass
class QtShape:
    path: QPainterPath
    fill: Optional[QColor]
    stroke: Optional[QColor]
    stroke_width: float = 0.0
    opacity: float = 1.0
    title: Optional[str] = None


@dataclass(frozen=True)
class QtText:
    text: str
    x: float
    y: float
    anchor: str
    font_size: float
    color: str


def _qcolor(color: Optional[str], alpha: float = 1.0) -> Optional[QColor]:
    if not color:
        return None
    c = QColor(color)
    if alpha != 1.0:
        c.setAlphaF(max(0.0, min(1.0, alpha)))
    return c


class QPainterPathTarget:
    """Acumula shapes (QPainterPath + estilo) y textos para un QPainter."""

    def __init__(self) -> None:
        self.shapes: list[QtShape] = []
        self.texts: list[QtText] = []
        self._path: Optional[QPainterPath] = None
        self._pending: Optional[QtShape] = None
        self._cur: Optional[Point] = None
        self._start: Optional[Point] = None

    # ---------------------------- Paths ----------------------------

    def begin_path(self, *, fill: Optional[str], stroke: Optional[str] = None, stroke_width: float = 0.0, title: Optional[str] = None) -> None:
        if self._path is not None:
            raise RcgValidationError("begin_path sin end_path previo")
        self._path = QPainterPath()
        self._pending = QtShape(self._path, _qcolor(fill), _qcolor(stroke), stroke_width, 1.0, title)
        self._cur = self._start = None

    def _require_path(self) -> QPainterPath:
        if self._path is None:
            raise RcgValidationError("Comando de path fuera de begin_path/end_path")
        return self._path

    def move_to(self, x: float, y: float) -> None:
        self._require_path().moveTo(x, y)
        self._cur = self._start = (x, y)

    def line_to(self, x: float, y: float) -> None:
        self._require_path().lineTo(x, y)
        self._cur = (x, y)

    def arc_to(self, rx: float, ry: float, rotation: float, large_arc: int, sweep: int, x: float, y: float) -> None:
        q = self._require_path()
        if self._cur is None:
            raise RcgValidationError("arc_to sin punto actual (falta move_to)")
        if (x, y) == self._cur:
            # Mismo inicio y fin: SVG omite el arco (slice de valor 0).
            return
        cx, cy = self._cur
        d = "M {} {} A {} {} {} {} {} {} {}".format(
            fmt_num(cx, 9), fmt_num(cy, 9),
            fmt_num(rx, 9), fmt_num(ry, 9), fmt_num(rotation, 9),
            int(large_arc), int(sweep),
            fmt_num(x, 9), fmt_num(y, 9),
        )
        sp = SvgPath(d)
        sp.approximate_arcs_with_cubics()
        for seg in sp:
            if isinstance(seg, Move):
                continue
            if isinstance(seg, CubicBezier):
                q.cubicTo(
                    float(seg.control1.x), float(seg.control1.y),
                    float(seg.control2.x), float(seg.control2.y),
                    float(seg.end.x), float(seg.end.y),
                )
            elif isinstance(seg, Line):
                q.lineTo(float(seg.end.x), float(seg.end.y))
        self._cur = (x, y)

    def close_path(self) -> None:
        self._require_path().closeSubpath()
        self._cur = self._start

    def end_path(self) -> None:
        self._require_path()
        self.shapes.append(self._pending)  # type: ignore[arg-type]
        self._path = None
        self._pending = None
        self._cur = self._start = None

    # ---------------------------- Shapes ----------------------------

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
    ) -> None:
        q = QPainterPath()
        if points:
            q.addPolygon(QPolygonF([QPointF(x, y) for x, y in points]))
            q.closeSubpath()
        self.shapes.append(QtShape(q, _qcolor(fill, fill_opacity), _qcolor(stroke), stroke_width, opacity, title))

    def line(self, x1: float, y1: float, x2: float, y2: float, *, stroke: str, stroke_width: float = 1.0, opacity: float = 1.0) -> None:
        q = QPainterPath()
        q.moveTo(x1, y1)
        q.lineTo(x2, y2)
        self.shapes.append(QtShape(q, None, _qcolor(stroke), stroke_width, opacity))

    def circle(self, cx: float, cy: float, r: float, *, fill: Optional[str], stroke: Optional[str] = None, stroke_width: float = 0.0) -> None:
        q = QPainterPath()
        q.addEllipse(QPointF(cx, cy), r, r)
        self.shapes.append(QtShape(q, _qcolor(fill), _qcolor(stroke), stroke_width))

    def text(self, lines: Sequence[TextLine], *, anchor: str = "middle", font_size: float = 12.0, fill: str = "#000000") -> None:
        for txt, x, y in lines:
            self.texts.append(QtText(txt, x, y, anchor, font_size, fill))

    # ---------------------------- Output ----------------------------

    def bounding_rect(self) -> QRectF:
        """Unión de los boundingRect de todas las shapes (sin textos)."""
        out = QRectF()
        for s in self.shapes:
            br = s.path.boundingRect()
            out = br if out.isNull() else out.united(br)
        return out

    def paint(self, painter: QPainter) -> None:
        painter.save()
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            for s in self.shapes:
                painter.setOpacity(s.opacity)
                if s.stroke is not None and s.stroke_width > 0:
                    pen = QPen(s.stroke)
                    pen.setWidthF(s.stroke_width)
                    painter.setPen(pen)
                else:
                    painter.setPen(Qt.NoPen)
                painter.setBrush(QBrush(s.fill) if s.fill is not None else Qt.NoBrush)
                painter.drawPath(s.path)

            painter.setOpacity(1.0)
            for t in self.texts:
                font = QFont()
                font.setPointSizeF(t.font_size)
                painter.setFont(font)
                painter.setPen(QColor(t.color))
                w = QFontMetricsF(font).horizontalAdvance(t.text)
                x = t.x - w / 2.0 if t.anchor == "middle" else (t.x - w if t.anchor == "end" else t.x)
                painter.drawText(QPointF(x, t.y), t.text)
        finally:
            painter.restore()

    def render_image(self, width: int, height: int, background: Optional[str] = None) -> QImage:
        img = QImage(int(width), int(height), QImage.Format_ARGB32_Premultiplied)
        img.fill(QColor(background) if background else Qt.transparent)
        painter = QPainter(img)
        try:
            self.paint(painter)
        finally:
            painter.end()
        return img


def build_qpaths(
    geom: Union[ShareChartGeometry, RadarGeometry],
    style: ChartStyle = ChartStyle(),
) -> QPainterPathTarget:
    """Geometría -> QPainterPathTarget listo para pintar."""
    target = QPainterPathTarget()
    if isinstance(geom, ShareChartGeometry):
        draw_share_chart(geom, target, style)
    else:
        draw_radar_chart(geom, target, style)
    log.debug("qpaths: %d shapes, %d textos", len(target.shapes), len(target.texts))
    return target
