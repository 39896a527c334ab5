"""Bounding boxes of computed chart geometry.

Path bboxes go through `svgelements`, an independent parser of the same `d`
strings the SVG renderer writes: if the emitted vector data is broken, the
bbox shows it. Polygon bboxes are plain min/max.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from svgelements import Path as SvgPath

from rcg.geom.path import ArcTo, ClosePath, MoveTo, PathDescriptor
from rcg.geom.radar import RadarGeometry
from rcg.geom.share import ShareChartGeometry
from rcg.geom.trig import Point


@dataclass(frozen=True)
class BBoxXYXY:
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def w(self) -> float:
        return float(self.x1 - self.x0)

    @property
    def h(self) -> float:
        return float(self.y1 - self.y0)

    def union(self, other: Optional["BBoxXYXY"]) -> "BBoxXYXY":
        if other is None:
            return self
        return BBoxXYXY(
            min(self.x0, other.x0), min(self.y0, other.y0),
            max(self.x1, other.x1), max(self.y1, other.y1),
        )

    def as_list(self) -> list[float]:
        return [float(self.x0), float(self.y0), float(self.x1), float(self.y1)]


def drop_degenerate_arcs(path: PathDescriptor) -> PathDescriptor:
    """Remove arcs whose endpoint equals the current point (SVG omits them)."""
    kept = []
    cur: Optional[Point] = None
    start: Optional[Point] = None
    for c in path:
        if isinstance(c, ClosePath):
            kept.append(c)
            cur = start
            continue
        if isinstance(c, ArcTo) and cur is not None and (c.x, c.y) == cur:
            continue
        if isinstance(c, MoveTo):
            start = (c.x, c.y)
        kept.append(c)
        cur = (c.x, c.y)
    return PathDescriptor(tuple(kept))


def path_bbox(path: PathDescriptor) -> Optional[BBoxXYXY]:
    """Exact bbox (arcs included) of a path descriptor, None when empty."""
    clean = drop_degenerate_arcs(path)
    if not clean.endpoints():
        return None
    b = SvgPath(clean.to_svg(precision=9)).bbox()
    if b is None:
        return None
    return BBoxXYXY(float(b[0]), float(b[1]), float(b[2]), float(b[3]))


def points_bbox(points: Iterable[Point]) -> Optional[BBoxXYXY]:
    pts = list(points)
    if not pts:
        return None
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return BBoxXYXY(min(xs), min(ys), max(xs), max(ys))


def share_chart_bbox(geom: ShareChartGeometry) -> Optional[BBoxXYXY]:
    out: Optional[BBoxXYXY] = None
    for s in geom.slices:
        b = path_bbox(s.path)
        if b is not None:
            out = b.union(out)
    return out


def radar_chart_bbox(geom: RadarGeometry) -> Optional[BBoxXYXY]:
    """Grid + spokes + series vertices (labels excluded: text has no geometry here)."""
    pts: list[Point] = [geom.center]
    for g in geom.grid:
        pts.extend(g.points)
    for sp in geom.spokes:
        pts.append(sp.end)
    for s in geom.series:
        pts.extend(s.polygon)
    return points_bbox(pts)
