# File: rcg/core/serialization.py
# Project: RusticChartGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Carga/guardado de requests de gráfico (.rcg.json, JSON legible).
# Notes: Cambios incrementales, no romper funcionalidades probadas.
from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from rcg.core.models import ChartRequest
from rcg.utils.errors import RcgIOError, RcgValidationError

if TYPE_CHECKING:
    from rcg.core.settings import AppSettings


def save_request(request: ChartRequest, path: str | Path) -> Path:
    """Guarda un ChartRequest como JSON.

    - Escribe de forma atómica (tmp + replace) para evitar archivos corruptos.
    """
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        txt = json.dumps(request.to_dict(), ensure_ascii=False, indent=2)
        tmp = p.with_suffix(p.suffix + ".tmp")
        tmp.write_text(txt, encoding="utf-8")
        tmp.replace(p)
        return p
    except OSError as e:
        raise RcgIOError("No se pudo guardar request: {}".format(p)) from e


def load_request(path: str | Path, settings: "AppSettings | None" = None) -> ChartRequest:
    """Lee un request JSON. Los defaults faltantes salen de `settings` (si se pasa)."""
    p = Path(path)
    try:
        # utf-8-sig: tolera el BOM que agregan algunos editores en Windows.
        raw = p.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise RcgValidationError("Request inválido (no es UTF-8): {}".format(p)) from e
    except OSError as e:
        raise RcgIOError("No se pudo leer request: {}".format(p)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RcgValidationError(
            "Request inválido (JSON malformado): {} (línea {}, columna {})".format(p, e.lineno, e.colno)
        ) from e

    if settings is None:
        return ChartRequest.from_dict(data)
    return ChartRequest.from_dict(
        data,
        default_diameter=settings.pie_diameter,
        default_size=settings.radar_size,
        default_levels=settings.radar_levels,
    )
