# File: rcg/core/models.py
# Project: RusticChartGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Modelos de datos de entrada (slices, ejes, series, configs, request).
# Notes:
#   - Todos son dataclasses frozen con tuplas: inmutables y hasheables (sirven de clave de cache).
#   - from_dict valida tipos; las reglas de dominio (total > 0, largo de series, max > 0)
#     se validan en rcg.geom al calcular.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from rcg.core.chart_kind import ChartKind, coerce_chart_kind
from rcg.core.version import (
    DEFAULT_PIE_DIAMETER,
    DEFAULT_RADAR_LEVELS,
    DEFAULT_RADAR_MAX_VALUE,
    DEFAULT_RADAR_SIZE,
    SCHEMA_VERSION,
)
from rcg.utils.errors import RcgSchemaError


@dataclass(frozen=True)
class Slice:
    label: str
    value: float
    color: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {"label": str(self.label), "value": float(self.value), "color": self.color}

    @staticmethod
    def from_dict(d: dict[str, Any], idx: int = 0) -> "Slice":
        if not isinstance(d, dict):
            raise RcgSchemaError(f"slices[{idx}] inválido: se esperaba objeto")
        if "value" not in d:
            raise RcgSchemaError(f"slices[{idx}] inválido: falta 'value'")
        return Slice(
            label=str(d.get("label", "")),
            value=_as_float(d.get("value"), f"slices[{idx}].value"),
            color=_opt_str(d.get("color")),
        )


@dataclass(frozen=True)
class ShareChartConfig:
    diameter: float = DEFAULT_PIE_DIAMETER
    inner_radius: float = 0.0  # 0 = torta maciza
    show_legend: bool = True

    @property
    def is_donut(self) -> bool:
        return self.inner_radius > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "diameter": float(self.diameter),
            "inner_radius": float(self.inner_radius),
            "show_legend": bool(self.show_legend),
        }

    @staticmethod
    def from_dict(d: dict[str, Any], *, default_diameter: float = DEFAULT_PIE_DIAMETER) -> "ShareChartConfig":
        # Compat: props camelCase del componente web (size/innerRadius/legend).
        diameter = _first(d, ("diameter", "size"), default_diameter)
        inner = _first(d, ("inner_radius", "innerRadius"), 0.0)
        legend = _first(d, ("show_legend", "showLegend", "legend"), True)
        return ShareChartConfig(
            diameter=_as_float(diameter, "config.diameter"),
            inner_radius=_as_float(inner, "config.inner_radius"),
            show_legend=bool(legend),
        )


@dataclass(frozen=True)
class Axis:
    label: str
    max: Optional[float] = None  # None = usa RadarConfig.max_value

    def to_dict(self) -> dict[str, Any]:
        return {"label": str(self.label), "max": float(self.max) if self.max is not None else None}

    @staticmethod
    def from_dict(d: dict[str, Any], idx: int = 0) -> "Axis":
        if isinstance(d, str):
            # Forma corta: "Label" == {"label": "Label"}
            return Axis(label=d)
        if not isinstance(d, dict):
            raise RcgSchemaError(f"axes[{idx}] inválido: se esperaba objeto o string")
        mx = d.get("max")
        return Axis(
            label=str(d.get("label", "")),
            max=_as_float(mx, f"axes[{idx}].max") if mx is not None else None,
        )


@dataclass(frozen=True)
class Series:
    label: str
    values: tuple[float, ...] = ()
    color: Optional[str] = None

    def __post_init__(self) -> None:
        # Se aceptan listas al construir; internamente siempre tupla (hasheable).
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": str(self.label),
            "values": [float(v) for v in self.values],
            "color": self.color,
        }

    @staticmethod
    def from_dict(d: dict[str, Any], idx: int = 0) -> "Series":
        if not isinstance(d, dict):
            raise RcgSchemaError(f"series[{idx}] inválido: se esperaba objeto")
        raw = d.get("values")
        if not isinstance(raw, (list, tuple)):
            raise RcgSchemaError(f"series[{idx}].values inválido: se espera lista")
        return Series(
            label=str(d.get("label", "")),
            values=tuple(_as_float(v, f"series[{idx}].values[{j}]") for j, v in enumerate(raw)),
            color=_opt_str(d.get("color")),
        )


@dataclass(frozen=True)
class RadarConfig:
    size: float = DEFAULT_RADAR_SIZE
    max_value: float = DEFAULT_RADAR_MAX_VALUE  # fallback para ejes sin max propio
    levels: int = DEFAULT_RADAR_LEVELS
    show_legend: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": float(self.size),
            "max_value": float(self.max_value),
            "levels": int(self.levels),
            "show_legend": bool(self.show_legend),
        }

    @staticmethod
    def from_dict(
        d: dict[str, Any],
        *,
        default_size: float = DEFAULT_RADAR_SIZE,
        default_levels: int = DEFAULT_RADAR_LEVELS,
    ) -> "RadarConfig":
        return RadarConfig(
            size=_as_float(d.get("size", default_size), "config.size"),
            max_value=_as_float(_first(d, ("max_value", "maxValue"), DEFAULT_RADAR_MAX_VALUE), "config.max_value"),
            levels=_as_int(d.get("levels", default_levels), "config.levels"),
            show_legend=bool(_first(d, ("show_legend", "showLegend"), True)),
        )


@dataclass(frozen=True)
class ChartRequest:
    """Documento de entrada del CLI: un gráfico + su configuración."""

    kind: ChartKind
    title: str = ""
    slices: tuple[Slice, ...] = ()
    share_config: ShareChartConfig = field(default_factory=ShareChartConfig)
    axes: tuple[Axis, ...] = ()
    series: tuple[Series, ...] = ()
    radar_config: RadarConfig = field(default_factory=RadarConfig)
    schema_version: int = SCHEMA_VERSION

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "schema_version": int(self.schema_version),
            "kind": self.kind.value,
            "title": str(self.title),
        }
        if self.kind.is_share:
            d["slices"] = [s.to_dict() for s in self.slices]
            d["config"] = self.share_config.to_dict()
        else:
            d["axes"] = [a.to_dict() for a in self.axes]
            d["series"] = [s.to_dict() for s in self.series]
            d["config"] = self.radar_config.to_dict()
        return d

    @staticmethod
    def from_dict(
        d: dict[str, Any],
        *,
        default_diameter: float = DEFAULT_PIE_DIAMETER,
        default_size: float = DEFAULT_RADAR_SIZE,
        default_levels: int = DEFAULT_RADAR_LEVELS,
    ) -> "ChartRequest":
        if not isinstance(d, dict):
            raise RcgSchemaError("Request inválido: raíz no es objeto JSON")

        schema_version = _as_int(d.get("schema_version", SCHEMA_VERSION), "schema_version")
        if schema_version != SCHEMA_VERSION:
            raise RcgSchemaError(
                f"Request incompatible: schema_version={schema_version} (se espera {SCHEMA_VERSION})"
            )

        kind = coerce_chart_kind(d.get("kind"))
        if kind is None:
            raise RcgSchemaError(f"kind inválido: {d.get('kind')!r} (pie | donut | radar)")

        cfg = d.get("config") or {}
        if not isinstance(cfg, dict):
            raise RcgSchemaError("config inválido: se espera objeto")
        title = str(d.get("title", "") or "")

        if kind.is_share:
            slices_raw = d.get("slices")
            if not isinstance(slices_raw, list):
                raise RcgSchemaError("slices inválido: se espera lista")
            share_config = ShareChartConfig.from_dict(cfg, default_diameter=default_diameter)
            if kind is ChartKind.DONUT and not share_config.is_donut:
                raise RcgSchemaError("kind=donut requiere config.inner_radius > 0")
            return ChartRequest(
                kind=kind,
                title=title,
                slices=tuple(Slice.from_dict(x, i) for i, x in enumerate(slices_raw)),
                share_config=share_config,
                schema_version=schema_version,
            )

        axes_raw = d.get("axes")
        series_raw = d.get("series")
        if not isinstance(axes_raw, list):
            raise RcgSchemaError("axes inválido: se espera lista")
        if not isinstance(series_raw, list):
            raise RcgSchemaError("series inválido: se espera lista")
        return ChartRequest(
            kind=kind,
            title=title,
            axes=tuple(Axis.from_dict(x, i) for i, x in enumerate(axes_raw)),
            series=tuple(Series.from_dict(x, i) for i, x in enumerate(series_raw)),
            radar_config=RadarConfig.from_dict(cfg, default_size=default_size, default_levels=default_levels),
            schema_version=schema_version,
        )


def _first(d: dict[str, Any], keys: Iterable[str], default: Any) -> Any:
    for k in keys:
        if k in d and d[k] is not None:
            return d[k]
    return default


def _opt_str(value: Any) -> Optional[str]:
    if value in (None, ""):
        return None
    return str(value)


def _as_float(value: Any, field: str) -> float:
    # bool es subclase de int: no lo aceptamos como número.
    if isinstance(value, bool):
        raise RcgSchemaError(f"Campo {field} inválido (float): {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise RcgSchemaError(f"Campo {field} inválido (float): {value!r}") from e


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise RcgSchemaError(f"Campo {field} inválido (int): {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise RcgSchemaError(f"Campo {field} inválido (int): {value!r}") from e
