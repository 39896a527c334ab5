"""Share chart geometry (pie / donut).

Turns an ordered list of slices into wedge or annulus boundary paths.
Each slice covers `value / total * 360` degrees, starting at 12 o'clock and
advancing clockwise. The legend is derived from the same total, so the drawn
sweep and the displayed percentage always agree.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional

from rcg.core.models import ShareChartConfig, Slice
from rcg.geom.path import PathBuilder, PathDescriptor, fmt_num
from rcg.geom.trig import (
    SHARE_PALETTE,
    Point,
    is_finite_number,
    polar_to_cartesian,
    resolve_color,
    share_angle_rad,
)
from rcg.utils.errors import DegenerateInput, RcgValidationError

log = logging.getLogger(__name__)

# A sweep this close to 360 degrees is drawn as a full circle: the two-point
# arc formula collapses when start == end.
FULL_CIRCLE_EPS = 1e-9

# Decimals the paths are written with (SVG output default).
DEFAULT_PRECISION = 4


@dataclass(frozen=True)
class SliceGeometry:
    label: str
    value: float
    color: str
    percentage: float  # sin redondear: value / total * 100
    start_angle: float  # grados, 0 = 12 en punto, horario
    end_angle: float
    sweep_angle: float
    path: PathDescriptor
    full_circle: bool = False

    @property
    def large_arc(self) -> int:
        return 1 if self.sweep_angle > 180.0 else 0

    @property
    def is_full_circle(self) -> bool:
        return self.full_circle

    @property
    def d(self) -> str:
        return self.path.to_svg()


@dataclass(frozen=True)
class HoleGeometry:
    cx: float
    cy: float
    r: float


@dataclass(frozen=True)
class LegendEntry:
    label: str
    color: str
    value: float
    percentage: float  # redondeado a 1 decimal


@dataclass(frozen=True)
class ShareChartGeometry:
    slices: tuple[SliceGeometry, ...]
    legend: tuple[LegendEntry, ...]
    hole: Optional[HoleGeometry]
    total: float
    diameter: float
    inner_radius: float
    show_legend: bool

    @property
    def radius(self) -> float:
        return self.diameter / 2.0

    @property
    def center(self) -> Point:
        return (self.radius, self.radius)


def validate_share_input(slices: Iterable[Slice], config: ShareChartConfig) -> float:
    """Validate slices + config and return the total. Raises before any geometry."""
    if not is_finite_number(config.diameter) or config.diameter <= 0:
        raise RcgValidationError(f"diameter inválido: {config.diameter!r} (debe ser > 0)")
    if not is_finite_number(config.inner_radius) or config.inner_radius < 0:
        raise RcgValidationError(f"inner_radius inválido: {config.inner_radius!r} (debe ser >= 0)")
    if config.inner_radius >= config.diameter / 2.0:
        raise RcgValidationError(
            f"inner_radius={config.inner_radius} debe ser menor al radio exterior ({config.diameter / 2.0})"
        )

    values: list[float] = []
    for i, s in enumerate(slices):
        if not is_finite_number(s.value):
            raise RcgValidationError(f"slices[{i}] ({s.label!r}): valor no numérico/finito: {s.value!r}")
        if s.value < 0:
            raise RcgValidationError(f"slices[{i}] ({s.label!r}): valor negativo: {s.value}")
        values.append(float(s.value))

    total = math.fsum(values)
    if total <= 0:
        raise DegenerateInput(
            f"Total de slices = {total} ({len(values)} slices): se necesita total > 0 para calcular proporciones"
        )
    return total


def compute_share_chart(
    slices: Iterable[Slice],
    config: ShareChartConfig = ShareChartConfig(),
    *,
    precision: int = DEFAULT_PRECISION,
) -> ShareChartGeometry:
    """Compute pie/donut slice paths, hole descriptor and legend entries.

    `precision` is the number of decimals the paths will be written with. A
    slice whose arc endpoints collapse to the same point at that precision is
    emitted as a full ring, so it never serializes as an empty arc.
    """
    slices = tuple(slices)
    total = validate_share_input(slices, config)

    r = config.diameter / 2.0
    ir = float(config.inner_radius)
    center = (r, r)

    out: list[SliceGeometry] = []
    legend: list[LegendEntry] = []
    cumulative = 0.0
    for i, s in enumerate(slices):
        value = float(s.value)
        sweep = value / total * 360.0
        start = cumulative
        cumulative += sweep
        pct = value / total * 100.0
        color = resolve_color(s.color, i, SHARE_PALETTE)
        full = is_full_sweep(center, r, ir, start, sweep, precision)
        if full:
            path = full_ring_path(center, r, ir, share_angle_rad(start))
        else:
            path = slice_path(center, r, ir, start, sweep)

        out.append(
            SliceGeometry(
                label=s.label,
                value=value,
                color=color,
                percentage=pct,
                start_angle=start,
                end_angle=start + sweep,
                sweep_angle=sweep,
                path=path,
                full_circle=full,
            )
        )
        legend.append(LegendEntry(label=s.label, color=color, value=value, percentage=round(pct, 1)))

    hole = HoleGeometry(center[0], center[1], ir) if ir > 0 else None
    log.debug("share chart: %d slices, total=%s, donut=%s", len(out), total, hole is not None)
    return ShareChartGeometry(
        slices=tuple(out),
        legend=tuple(legend),
        hole=hole,
        total=total,
        diameter=float(config.diameter),
        inner_radius=ir,
        show_legend=bool(config.show_legend),
    )


def slice_path(center: Point, r: float, ir: float, start_deg: float, sweep_deg: float) -> PathDescriptor:
    """Boundary path of one wedge (ir == 0) or annulus sector (ir > 0)."""
    a0 = share_angle_rad(start_deg)
    if sweep_deg >= 360.0 - FULL_CIRCLE_EPS:
        return full_ring_path(center, r, ir, a0)

    a1 = share_angle_rad(start_deg + sweep_deg)
    large = 1 if sweep_deg > 180.0 else 0
    p0 = polar_to_cartesian(center, r, a0)
    p1 = polar_to_cartesian(center, r, a1)

    b = PathBuilder()
    if ir > 0:
        # Arco interior en sentido inverso (sweep 0): el anillo queda bien rellenado.
        b.move_to(p0).arc_to(r, p1, large_arc=large, sweep=1)
        b.line_to(polar_to_cartesian(center, ir, a1))
        b.arc_to(ir, polar_to_cartesian(center, ir, a0), large_arc=large, sweep=0)
    else:
        b.move_to(center).line_to(p0).arc_to(r, p1, large_arc=large, sweep=1)
    return b.close().build()


def full_ring_path(center: Point, r: float, ir: float, a0: float) -> PathDescriptor:
    """Closed full circle as two half arcs; donuts add the inner ring reversed."""
    b = PathBuilder()
    top = polar_to_cartesian(center, r, a0)
    opp = polar_to_cartesian(center, r, a0 + math.pi)
    b.move_to(top).arc_to(r, opp, large_arc=0, sweep=1).arc_to(r, top, large_arc=0, sweep=1).close()
    if ir > 0:
        itop = polar_to_cartesian(center, ir, a0)
        iopp = polar_to_cartesian(center, ir, a0 + math.pi)
        b.move_to(itop).arc_to(ir, iopp, large_arc=0, sweep=0).arc_to(ir, itop, large_arc=0, sweep=0).close()
    return b.build()


def _same_point(p: Point, q: Point, precision: int) -> bool:
    return all(fmt_num(a, precision) == fmt_num(b, precision) for a, b in zip(p, q))


def is_full_sweep(
    center: Point, r: float, ir: float, start_deg: float, sweep_deg: float, precision: int = DEFAULT_PRECISION
) -> bool:
    """True when the slice must be drawn as a full ring.

    Either the sweep is 360 degrees, or it is a large arc whose start and end
    points serialize to the same coordinates (on the outer ring or, for
    donuts, the inner one).
    """
    if sweep_deg >= 360.0 - FULL_CIRCLE_EPS:
        return True
    if sweep_deg <= 180.0:
        return False
    a0 = share_angle_rad(start_deg)
    a1 = share_angle_rad(start_deg + sweep_deg)
    for radius in (r, ir):
        if radius > 0 and _same_point(
            polar_to_cartesian(center, radius, a0), polar_to_cartesian(center, radius, a1), precision
        ):
            return True
    return False
