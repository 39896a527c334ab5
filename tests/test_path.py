"""Tests for rcg/geom/path.py (path mini-language)."""
from rcg.geom.path import ArcTo, ClosePath, LineTo, MoveTo, PathBuilder, PathDescriptor, fmt_num


def test_fmt_num_trims_zeros():
    assert fmt_num(2.0) == "2"
    assert fmt_num(1.50) == "1.5"
    assert fmt_num(1.23456789) == "1.2346"


def test_fmt_num_never_negative_zero():
    assert fmt_num(-0.00001) == "0"
    assert fmt_num(-0.0) == "0"


def test_arc_to_svg_syntax():
    arc = ArcTo(50, 50, 0, 1, 0, 10.5, 20)
    assert arc.to_svg() == "A 50 50 0 1 0 10.5 20"


def test_builder_produces_descriptor():
    p = PathBuilder().move_to((0, 0)).line_to((10, 0)).arc_to(10, (0, 10), large_arc=0, sweep=1).close().build()
    assert isinstance(p, PathDescriptor)
    assert [type(c) for c in p] == [MoveTo, LineTo, ArcTo, ClosePath]
    assert p.is_closed
    assert p.to_svg() == "M 0 0 L 10 0 A 10 10 0 0 1 0 10 Z"
    assert p.endpoints() == [(0, 0), (10, 0), (0, 10)]
    assert len(p.arcs) == 1


def test_empty_descriptor():
    p = PathDescriptor()
    assert p.to_svg() == ""
    assert not p.is_closed
