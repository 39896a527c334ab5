# File: rcg/utils/errors.py
# Project: RusticChartGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Errores tipados del proyecto.
# Notes: Todos los errores de input se detectan antes de calcular geometría.
from __future__ import annotations


class RcgError(Exception):
    """Error base del proyecto."""


class RcgValidationError(RcgError):
    """Error de validación (input/archivo/estructura)."""


class RcgIOError(RcgError):
    """Error de E/S (lectura/escritura)."""


class RcgSchemaError(RcgValidationError):
    """Error de esquema (JSON de request) o campo con tipo inválido."""


class DegenerateInput(RcgValidationError):
    """Gráfico de torta/dona con total <= 0 (no hay proporciones definidas)."""


class InvalidSeriesLength(RcgValidationError):
    """Serie de radar cuya cantidad de valores no coincide con la de ejes."""


class NonPositiveAxisMax(RcgValidationError):
    """Eje de radar cuyo máximo efectivo es <= 0."""
