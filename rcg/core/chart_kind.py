# File: rcg/core/chart_kind.py
# Project: RusticChartGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Familias de gráfico soportadas (torta/dona/radar).
# Notes: Se persiste como string en el JSON de request.

from __future__ import annotations

from enum import Enum


class ChartKind(str, Enum):
    """Familia de gráfico.

    - pie: torta maciza (inner_radius = 0)
    - donut: torta con agujero (inner_radius > 0)
    - radar: ejes + series (spider chart)
    """

    PIE = "pie"
    DONUT = "donut"
    RADAR = "radar"

    @property
    def is_share(self) -> bool:
        return self in (ChartKind.PIE, ChartKind.DONUT)


# Alias aceptados en requests escritos a mano.
_ALIASES = {
    "torta": ChartKind.PIE,
    "doughnut": ChartKind.DONUT,
    "dona": ChartKind.DONUT,
    "spider": ChartKind.RADAR,
}


def coerce_chart_kind(v: object, default: ChartKind | None = None) -> ChartKind | None:
    """Convierte un valor libre a ChartKind. Devuelve `default` si no se reconoce."""
    if isinstance(v, ChartKind):
        return v
    s = str(v or "").strip().lower()
    for k in ChartKind:
        if k.value == s:
            return k
    return _ALIASES.get(s, default)
