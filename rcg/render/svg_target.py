# File: rcg/render/svg_target.py
# Project: RusticChartGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: VectorRenderTarget -> SVG (ElementTree) + export a archivo.
# Notes: Números con precisión fija (default 4 decimales) para SVGs estables/diffables.
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union
from xml.etree.ElementTree import Element, SubElement, tostring

from rcg.geom.path import ArcTo, ClosePath, LineTo, MoveTo, PathCommand, PathDescriptor, fmt_num
from rcg.geom.radar import RadarGeometry
from rcg.geom.share import ShareChartGeometry
from rcg.render.legend import chart_summary
from rcg.render.target import ChartStyle, Point, TextLine, draw_legend, draw_radar_chart, draw_share_chart
from rcg.utils.errors import RcgIOError, RcgValidationError

log = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


class SvgRenderTarget:
    """Acumula primitivas como elementos SVG."""

    def __init__(self, width: float, height: float, *, precision: int = 4, background: Optional[str] = None) -> None:
        self.precision = int(precision)
        self.width = float(width)
        self.height = float(height)
        self.root = Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "version": "1.1",
                "width": self._n(width),
                "height": self._n(height),
                "viewBox": f"0 0 {self._n(width)} {self._n(height)}",
            },
        )
        if background:
            SubElement(self.root, "rect", {"x": "0", "y": "0", "width": "100%", "height": "100%", "fill": background})
        self._cmds: list[PathCommand] | None = None
        self._path_attrs: dict[str, str] = {}
        self._path_title: Optional[str] = None

    def _n(self, v: float) -> str:
        return fmt_num(v, self.precision)

    # ---------------------------- Paths ----------------------------

    def begin_path(self, *, fill: Optional[str], stroke: Optional[str] = None, stroke_width: float = 0.0, title: Optional[str] = None) -> None:
        if self._cmds is not None:
            raise RcgValidationError("begin_path sin end_path previo")
        self._cmds = []
        self._path_attrs = _paint_attrs(fill, stroke, stroke_width, self._n)
        self._path_title = title

    def _require_path(self) -> list[PathCommand]:
        if self._cmds is None:
            raise RcgValidationError("Comando de path fuera de begin_path/end_path")
        return self._cmds

    def move_to(self, x: float, y: float) -> None:
        self._require_path().append(MoveTo(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._require_path().append(LineTo(x, y))

    def arc_to(self, rx: float, ry: float, rotation: float, large_arc: int, sweep: int, x: float, y: float) -> None:
        self._require_path().append(ArcTo(rx, ry, rotation, large_arc, sweep, x, y))

    def close_path(self) -> None:
        self._require_path().append(ClosePath())

    def end_path(self) -> None:
        cmds = self._require_path()
        d = PathDescriptor(tuple(cmds)).to_svg(self.precision)
        el = SubElement(self.root, "path", {"d": d, **self._path_attrs})
        _add_title(el, self._path_title)
        self._cmds = None

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
        attrs = {"points": " ".join(f"{self._n(x)},{self._n(y)}" for x, y in points)}
        attrs.update(_paint_attrs(fill, stroke, stroke_width, self._n))
        if fill_opacity != 1.0:
            attrs["fill-opacity"] = self._n(fill_opacity)
        if opacity != 1.0:
            attrs["opacity"] = self._n(opacity)
        el = SubElement(self.root, "polygon", attrs)
        _add_title(el, title)

    def line(self, x1: float, y1: float, x2: float, y2: float, *, stroke: str, stroke_width: float = 1.0, opacity: float = 1.0) -> None:
        attrs = {
            "x1": self._n(x1), "y1": self._n(y1), "x2": self._n(x2), "y2": self._n(y2),
            "stroke": stroke, "stroke-width": self._n(stroke_width),
        }
        if opacity != 1.0:
            attrs["opacity"] = self._n(opacity)
        SubElement(self.root, "line", attrs)

    def circle(self, cx: float, cy: float, r: float, *, fill: Optional[str], stroke: Optional[str] = None, stroke_width: float = 0.0) -> None:
        attrs = {"cx": self._n(cx), "cy": self._n(cy), "r": self._n(r)}
        attrs.update(_paint_attrs(fill, stroke, stroke_width, self._n))
        SubElement(self.root, "circle", attrs)

    def text(self, lines: Sequence[TextLine], *, anchor: str = "middle", font_size: float = 12.0, fill: str = "#000000") -> None:
        if not lines:
            return
        _, x0, y0 = lines[0]
        el = SubElement(
            self.root,
            "text",
            {"x": self._n(x0), "y": self._n(y0), "text-anchor": anchor, "font-size": self._n(font_size), "fill": fill},
        )
        for txt, x, y in lines:
            # tspan con posición absoluta: mismo resultado que dy relativo, más fácil de testear.
            span = SubElement(el, "tspan", {"x": self._n(x), "y": self._n(y)})
            span.text = txt

    # ---------------------------- Output ----------------------------

    def set_description(self, text: str) -> None:
        """<desc> del documento (descripción textual plana del gráfico)."""
        if text:
            desc = Element("desc")
            desc.text = text
            self.root.insert(0, desc)

    def to_string(self) -> str:
        return tostring(self.root, encoding="unicode")

    def write(self, out_path: str | Path) -> Path:
        p = Path(out_path)
        if p.suffix.lower() != ".svg":
            p = p.with_suffix(".svg")
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(self.to_string(), encoding="utf-8")
        except OSError as e:
            raise RcgIOError(f"No se pudo exportar SVG: {p}") from e
        log.info("SVG exportado: %s", p)
        return p


def _paint_attrs(fill: Optional[str], stroke: Optional[str], stroke_width: float, n) -> dict[str, str]:
    attrs = {"fill": fill or "none"}
    if stroke:
        attrs["stroke"] = stroke
        attrs["stroke-width"] = n(stroke_width)
    return attrs


def _add_title(el: Element, title: Optional[str]) -> None:
    if title:
        t = SubElement(el, "title")
        t.text = title


def render_chart_svg(
    geom: Union[ShareChartGeometry, RadarGeometry],
    *,
    style: ChartStyle = ChartStyle(),
    precision: int = 4,
    title: str = "",
) -> SvgRenderTarget:
    """Arma un documento SVG completo: gráfico + (opcional) leyenda debajo."""
    if isinstance(geom, ShareChartGeometry):
        width = height = geom.diameter
    else:
        # Alto = 2 * centro: entran los labels de abajo; a la derecha queda lugar libre.
        width = geom.size
        height = 2.0 * geom.center[1]

    legend_h = len(geom.legend) * style.legend_row_height + 8.0 if geom.show_legend and geom.legend else 0.0
    # La leyenda necesita ancho mínimo aunque el gráfico sea chico.
    target = SvgRenderTarget(max(width, 160.0) if legend_h else width, height + legend_h, precision=precision, background=style.background)
    target.set_description(chart_summary(geom, title))

    if isinstance(geom, ShareChartGeometry):
        draw_share_chart(geom, target, style)
    else:
        draw_radar_chart(geom, target, style)

    if legend_h:
        draw_legend(geom, target, top=height + 8.0, style=style)
    return target
