"""Chart geometry engine.

Pure functions: numeric data + config in, immutable geometry out. No Qt, no I/O.
Renderers (rcg.render) consume the results.
"""

from __future__ import annotations

from rcg.geom.path import ArcTo, ClosePath, LineTo, MoveTo, PathDescriptor
from rcg.geom.radar import RadarGeometry, compute_radar_chart
from rcg.geom.share import ShareChartGeometry, compute_share_chart

__all__ = [
    "ArcTo",
    "ClosePath",
    "LineTo",
    "MoveTo",
    "PathDescriptor",
    "RadarGeometry",
    "ShareChartGeometry",
    "compute_radar_chart",
    "compute_share_chart",
]
