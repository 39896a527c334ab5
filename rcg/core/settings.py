# File: rcg/core/settings.py
# Project: RusticChartGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Preferencias de usuario (JSON) + overrides por proyecto (rcg_settings.json).
# Notes: No depende de Qt; guarda en ~/.rcg/settings.json (Windows/Linux/mac).
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from rcg.core.version import DEFAULT_PIE_DIAMETER, DEFAULT_RADAR_LEVELS, DEFAULT_RADAR_SIZE

log = logging.getLogger(__name__)


def settings_dir() -> Path:
    """Carpeta de settings del usuario."""
    return Path.home() / ".rcg"


def settings_path() -> Path:
    return settings_dir() / "settings.json"


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Permite defaults reproducibles por proyecto (no por usuario) sin tocar el código.
# Archivo esperado: rcg_settings.json en la raíz del repo/proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "rcg_settings.json"

# clave JSON (dotted) -> (env var, tipo, min, max)
_PROJECT_KEYS: Dict[str, tuple[str, type, float, float]] = {
    "defaults.pie.diameter": ("RCG_PIE_DIAMETER", float, 8.0, 10000.0),
    "defaults.radar.size": ("RCG_RADAR_SIZE", float, 130.0, 10000.0),
    "defaults.radar.levels": ("RCG_RADAR_LEVELS", int, 1, 50),
    "svg.precision": ("RCG_SVG_PRECISION", int, 0, 10),
}
_PROJECT_COLOR_KEYS: Dict[str, str] = {
    "svg.background": "RCG_SVG_BACKGROUND",
    "svg.stroke": "RCG_SVG_STROKE",
    "svg.text_color": "RCG_SVG_TEXT_COLOR",
}


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca rcg_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga rcg_settings.json (si existe) y aplica overrides vía variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa (ganan los overrides manuales).
    - Si `prefer_env=False`, el JSON pisa la env var.

    Devuelve un dict con los valores *aplicados desde JSON* (útil para logging/debug).
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        _log.warning("Ignorando %s: la raíz no es objeto JSON", p)
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    for key, (env, kind, lo, hi) in _PROJECT_KEYS.items():
        v = _deep_get(data, key)
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            continue
        if kind is int and not float(v).is_integer():
            continue
        v = kind(v)
        if lo <= v <= hi:
            applied[key] = v
            _set_env(env, v)

    for key, env in _PROJECT_COLOR_KEYS.items():
        v = _deep_get(data, key)
        if isinstance(v, str) and v.strip():
            applied[key] = v.strip()
            _set_env(env, v.strip())

    if applied:
        _log.info("Project settings aplicados desde %s: %s", p, applied)
    return applied


@dataclass
class AppSettings:
    """Preferencias persistentes del usuario."""

    # Defaults de gráficos (se usan cuando el request no trae config).
    pie_diameter: float = DEFAULT_PIE_DIAMETER
    radar_size: float = DEFAULT_RADAR_SIZE
    radar_levels: int = DEFAULT_RADAR_LEVELS

    # Export SVG (solo visual).
    svg_background: str = "#18181b"
    svg_stroke: str = "#23232a"
    svg_text_color: str = "#e5e7eb"
    svg_precision: int = 4

    @classmethod
    def load(cls) -> "AppSettings":
        """Carga settings: JSON de usuario > env var (RCG_*) > default. Tolerante a errores."""
        out = cls()
        data: Dict[str, Any] = {}
        p = settings_path()
        try:
            if p.exists():
                raw = json.loads(p.read_text(encoding="utf-8"))
                if isinstance(raw, dict):
                    data = raw
        except (OSError, ValueError):
            log.debug("No se pudieron cargar settings: %s", p, exc_info=True)

        out.pie_diameter = _coerce_float(_pick(data, "pie_diameter", "RCG_PIE_DIAMETER"), 8.0, 10000.0, out.pie_diameter)
        out.radar_size = _coerce_float(_pick(data, "radar_size", "RCG_RADAR_SIZE"), 130.0, 10000.0, out.radar_size)
        out.radar_levels = _coerce_int(_pick(data, "radar_levels", "RCG_RADAR_LEVELS"), 1, 50, out.radar_levels)
        out.svg_background = _coerce_color(_pick(data, "svg_background", "RCG_SVG_BACKGROUND"), out.svg_background)
        out.svg_stroke = _coerce_color(_pick(data, "svg_stroke", "RCG_SVG_STROKE"), out.svg_stroke)
        out.svg_text_color = _coerce_color(_pick(data, "svg_text_color", "RCG_SVG_TEXT_COLOR"), out.svg_text_color)
        out.svg_precision = _coerce_int(_pick(data, "svg_precision", "RCG_SVG_PRECISION"), 0, 10, out.svg_precision)
        return out

    def save(self) -> Path | None:
        """Guarda settings en disco. Devuelve el Path o None si falla (no debe romper el CLI)."""
        try:
            d = settings_dir()
            d.mkdir(parents=True, exist_ok=True)
            payload: Dict[str, Any] = {
                "schema_version": 1,
                "pie_diameter": float(self.pie_diameter),
                "radar_size": float(self.radar_size),
                "radar_levels": int(self.radar_levels),
                "svg_background": str(self.svg_background),
                "svg_stroke": str(self.svg_stroke),
                "svg_text_color": str(self.svg_text_color),
                "svg_precision": int(self.svg_precision),
            }
            p = settings_path()
            p.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
            return p
        except OSError:
            log.debug("No se pudieron guardar settings", exc_info=True)
            return None


def _pick(data: Dict[str, Any], key: str, env: str) -> Any:
    if key in data:
        return data[key]
    return os.environ.get(env)


def _coerce_float(v: Any, min_v: float, max_v: float, default: float) -> float:
    if v is None or isinstance(v, bool):
        return float(default)
    try:
        n = float(v)
    except (TypeError, ValueError):
        return float(default)
    if n != n:  # NaN
        return float(default)
    return min(max(n, min_v), max_v)


def _coerce_int(v: Any, min_v: int, max_v: int, default: int) -> int:
    if v is None or isinstance(v, bool):
        return int(default)
    try:
        n = int(float(v))
    except (TypeError, ValueError, OverflowError):
        return int(default)
    return min(max(n, min_v), max_v)


def _coerce_color(v: Any, default: str) -> str:
    s = str(v or "").strip()
    return s if s else default
