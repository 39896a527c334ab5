# File: rcg/render/legend.py
# Project: RusticChartGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Textos de leyenda y descripciones planas (tooltip/<title>) de los gráficos.
# Notes: No calcula geometría: consume LegendEntry/SliceGeometry/SeriesGeometry tal cual.
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from rcg.geom.radar import RadarGeometry, SeriesGeometry
from rcg.geom.share import ShareChartGeometry, SliceGeometry


@dataclass(frozen=True)
class LegendRow:
    label: str
    color: str
    text: str  # "" para series de radar (solo color + label)


def fmt_value(v: float) -> str:
    """Número como lo escribiría un humano: 25 en vez de 25.0."""
    s = repr(float(v))
    if s.endswith(".0"):
        s = s[:-2]
    return s


def fmt_percentage(pct: float) -> str:
    return f"{pct:.1f}%"


def slice_description(s: SliceGeometry) -> str:
    """`label: value (pct%)` con el mismo porcentaje que define el ángulo del slice."""
    return f"{s.label}: {fmt_value(s.value)} ({fmt_percentage(s.percentage)})"


def series_description(s: SeriesGeometry) -> str:
    return f"{s.label}: " + ", ".join(fmt_value(v) for v in s.values)


def legend_rows(geom: Union[ShareChartGeometry, RadarGeometry]) -> list[LegendRow]:
    """Filas de leyenda en el orden de entrada."""
    if isinstance(geom, ShareChartGeometry):
        return [
            LegendRow(e.label, e.color, f"{fmt_value(e.value)} ({fmt_percentage(e.percentage)})")
            for e in geom.legend
        ]
    return [LegendRow(e.label, e.color, "") for e in geom.legend]


def chart_summary(geom: Union[ShareChartGeometry, RadarGeometry], title: str = "") -> str:
    """Descripción textual completa (accesibilidad): una línea por slice/serie."""
    head = title.strip()
    if isinstance(geom, ShareChartGeometry):
        kind = "Gráfico de dona" if geom.hole is not None else "Gráfico de torta"
        body = [slice_description(s) for s in geom.slices]
    else:
        kind = "Gráfico de radar"
        body = [series_description(s) for s in geom.series]
    first = f"{kind}: {head}" if head else kind
    return "\n".join([first, *body])
