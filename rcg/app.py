# File: rcg/app.py
# Project: RusticChartGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Entry-point CLI: request JSON -> geometría -> SVG.
# Notes: Códigos de salida: 0 ok, 1 error de E/S, 2 input inválido.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from rcg.core.models import ChartRequest
from rcg.core.serialization import load_request
from rcg.core.settings import AppSettings, apply_project_settings
from rcg.core.version import APP_NAME, APP_VERSION
from rcg.geom.radar import RadarGeometry, compute_radar_chart
from rcg.geom.share import DEFAULT_PRECISION, ShareChartGeometry, compute_share_chart
from rcg.render.legend import chart_summary
from rcg.render.svg_target import render_chart_svg
from rcg.render.target import ChartStyle
from rcg.utils.errors import RcgIOError, RcgValidationError
from rcg.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def compute_request_geometry(
    req: ChartRequest, precision: int = DEFAULT_PRECISION
) -> Union[ShareChartGeometry, RadarGeometry]:
    if req.kind.is_share:
        return compute_share_chart(req.slices, req.share_config, precision=precision)
    return compute_radar_chart(req.axes, req.series, req.radar_config)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="rcg",
        description=f"{APP_NAME} v{APP_VERSION}: genera SVG de gráficos de torta/dona/radar desde JSON.",
    )
    ap.add_argument("input", help="request JSON (kind + slices | axes/series + config)")
    ap.add_argument("-o", "--output", help="SVG de salida (default: input con extensión .svg)")
    ap.add_argument("--precision", type=int, default=None, help="decimales en coordenadas SVG")
    ap.add_argument("--summary", action="store_true", help="imprime la descripción textual por stdout")
    ap.add_argument("--log-dir", default="logs", help="carpeta del rcg.log")
    ap.add_argument("-v", "--verbose", action="store_true", help="logging DEBUG")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_dir, logging.DEBUG if args.verbose else logging.INFO)
    # Project-level defaults (repo-local): rcg_settings.json
    apply_project_settings(logger=log, prefer_env=True)
    settings = AppSettings.load()

    src = Path(args.input)
    out = Path(args.output) if args.output else src.with_suffix(".svg")
    precision = args.precision if args.precision is not None else settings.svg_precision

    try:
        req = load_request(src, settings)
        geom = compute_request_geometry(req, precision)
        target = render_chart_svg(
            geom,
            style=ChartStyle.from_settings(settings),
            precision=precision,
            title=req.title,
        )
        written = target.write(out)
    except RcgValidationError as e:
        log.error("Input inválido (%s): %s", type(e).__name__, e)
        return 2
    except RcgIOError as e:
        log.error("%s (%s)", e, e.__cause__)
        return 1

    if args.summary:
        print(chart_summary(geom, req.title))
    log.info("%s v%s: %s -> %s", APP_NAME, APP_VERSION, src, written)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
