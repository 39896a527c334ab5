"""Pure memoization of chart geometry.

Inputs are frozen dataclasses holding tuples, so their structural hash is a
valid cache key. Cached results are the very same immutable objects the
uncached functions return.

Structural equality treats `True == 1`, so inputs are validated before the
lookup: an input the uncached functions reject never hits a cached entry.
"""

from __future__ import annotations

from functools import lru_cache

from rcg.core.models import Axis, RadarConfig, Series, ShareChartConfig, Slice
from rcg.geom.radar import RadarGeometry, compute_radar_chart, validate_radar_input
from rcg.geom.share import DEFAULT_PRECISION, ShareChartGeometry, compute_share_chart, validate_share_input

CACHE_SIZE = 128


@lru_cache(maxsize=CACHE_SIZE)
def _share(slices: tuple[Slice, ...], config: ShareChartConfig, precision: int) -> ShareChartGeometry:
    return compute_share_chart(slices, config, precision=precision)


@lru_cache(maxsize=CACHE_SIZE)
def _radar(axes: tuple[Axis, ...], series: tuple[Series, ...], config: RadarConfig) -> RadarGeometry:
    return compute_radar_chart(axes, series, config)


def cached_share_chart(
    slices, config: ShareChartConfig = ShareChartConfig(), *, precision: int = DEFAULT_PRECISION
) -> ShareChartGeometry:
    slices = tuple(slices)
    validate_share_input(slices, config)
    return _share(slices, config, int(precision))


def cached_radar_chart(axes, series, config: RadarConfig = RadarConfig()) -> RadarGeometry:
    axes, series = tuple(axes), tuple(series)
    validate_radar_input(axes, series, config)
    return _radar(axes, series, config)


def clear_geometry_cache() -> None:
    _share.cache_clear()
    _radar.cache_clear()


def cache_info() -> dict[str, object]:
    return {"share": _share.cache_info(), "radar": _radar.cache_info()}
