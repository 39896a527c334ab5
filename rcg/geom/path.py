"""Vector path mini-language (move/line/arc/close) with SVG `d` serialization.

Commands are absolute. `ArcTo` follows the SVG elliptical-arc parameterization:
radii, x-axis rotation, large-arc flag, sweep flag (1 = clockwise on screen)
and endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from rcg.geom.trig import Point


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    def to_svg(self, precision: int = 4) -> str:
        return f"M {fmt_num(self.x, precision)} {fmt_num(self.y, precision)}"


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    def to_svg(self, precision: int = 4) -> str:
        return f"L {fmt_num(self.x, precision)} {fmt_num(self.y, precision)}"


@dataclass(frozen=True)
class ArcTo:
    rx: float
    ry: float
    rotation: float
    large_arc: int
    sweep: int
    x: float
    y: float

    def to_svg(self, precision: int = 4) -> str:
        return "A {} {} {} {} {} {} {}".format(
            fmt_num(self.rx, precision),
            fmt_num(self.ry, precision),
            fmt_num(self.rotation, precision),
            int(self.large_arc),
            int(self.sweep),
            fmt_num(self.x, precision),
            fmt_num(self.y, precision),
        )


@dataclass(frozen=True)
class ClosePath:
    def to_svg(self, precision: int = 4) -> str:
        return "Z"


PathCommand = Union[MoveTo, LineTo, ArcTo, ClosePath]


@dataclass(frozen=True)
class PathDescriptor:
    commands: tuple[PathCommand, ...] = ()

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    @property
    def arcs(self) -> tuple[ArcTo, ...]:
        return tuple(c for c in self.commands if isinstance(c, ArcTo))

    @property
    def is_closed(self) -> bool:
        return bool(self.commands) and isinstance(self.commands[-1], ClosePath)

    def endpoints(self) -> list[Point]:
        """Every explicit point of the path (move/line/arc endpoints), in order."""
        return [(c.x, c.y) for c in self.commands if not isinstance(c, ClosePath)]

    def to_svg(self, precision: int = 4) -> str:
        return " ".join(c.to_svg(precision) for c in self.commands)


class PathBuilder:
    """Accumulates commands and freezes them into a PathDescriptor."""

    def __init__(self) -> None:
        self._cmds: list[PathCommand] = []

    def move_to(self, p: Point) -> "PathBuilder":
        self._cmds.append(MoveTo(p[0], p[1]))
        return self

    def line_to(self, p: Point) -> "PathBuilder":
        self._cmds.append(LineTo(p[0], p[1]))
        return self

    def arc_to(self, r: float, p: Point, *, large_arc: int, sweep: int) -> "PathBuilder":
        self._cmds.append(ArcTo(r, r, 0.0, int(large_arc), int(sweep), p[0], p[1]))
        return self

    def close(self) -> "PathBuilder":
        self._cmds.append(ClosePath())
        return self

    def build(self) -> PathDescriptor:
        return PathDescriptor(tuple(self._cmds))


def fmt_num(v: float, precision: int = 4) -> str:
    """Compact decimal: rounded, trailing zeros trimmed, never '-0'."""
    s = f"{round(float(v), precision):.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s in ("-0", ""):
        s = "0"
    return s
