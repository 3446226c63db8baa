import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

import random

import pytest

from pathgeom.Mat22 import Mat22
from pathgeom.Path import Path
from pathgeom.Rect import Rect
from pathgeom.Vec2 import Vec2


def as_xy(points):
    return [(p.x, p.y) for p in points]


def test_default_is_empty():
    p = Path()
    assert len(p) == 0
    assert as_xy(p) == []


def test_from_point():
    assert as_xy(Path.from_point(Vec2(3, 4))) == [(3, 4)]


def test_from_points_copies_first_n():
    src = [Vec2(0, 0), Vec2(1, 1), Vec2(2, 2)]
    assert as_xy(Path.from_points(src)) == [(0, 0), (1, 1), (2, 2)]
    assert as_xy(Path.from_points(src, 2)) == [(0, 0), (1, 1)]

    p = Path.from_points(src)
    p.append(Vec2(9, 9))
    assert len(src) == 3


def test_first_last_and_indexing():
    p = Path.from_points([Vec2(0, 0), Vec2(1, 2), Vec2(3, 4)])
    assert p.first() == Vec2(0, 0)
    assert p.last() == Vec2(3, 4)
    assert p[1] == Vec2(1, 2)
    with pytest.raises(IndexError):
        Path().first()


def test_segments_and_length():
    p = Path.from_points([Vec2(0, 0), Vec2(3, 4), Vec2(3, 0)])
    segs = list(p.segments())
    assert len(segs) == 2
    assert segs[1].p1 == Vec2(3, 4)
    assert p.length() == pytest.approx(9)
    assert list(Path.from_point(Vec2(1, 1)).segments()) == []


def test_as_array():
    assert Path().as_array().shape == (0, 2)
    a = Path.from_points([Vec2(1, 2), Vec2(3, 4)]).as_array()
    assert a.tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_bbox_empty_is_origin():
    assert Path().bbox() == Rect(Vec2(0, 0), Vec2(0, 0))


def test_bbox_single_point():
    assert Path.from_point(Vec2(5, -2)).bbox() == Rect(Vec2(5, -2), Vec2(5, -2))


def test_bbox_does_not_include_origin():
    p = Path.from_points([Vec2(10, 10), Vec2(20, 15), Vec2(12, 30)])
    assert p.bbox() == Rect(Vec2(10, 10), Vec2(20, 30))


def test_bbox_permutation_invariant():
    rnd = random.Random(99)
    pts = [Vec2(rnd.uniform(-50, 50), rnd.uniform(-50, 50)) for _ in range(40)]
    expected = Path.from_points(pts).bbox()
    for _ in range(5):
        rnd.shuffle(pts)
        assert Path.from_points(pts).bbox() == expected


def test_make_relative_uses_original_anchor():
    p = Path.from_points([Vec2(2, 3), Vec2(5, 7), Vec2(1, 1)]).make_relative()
    assert as_xy(p) == [(0, 0), (3, 4), (-1, -2)]
    assert len(Path().make_relative()) == 0


def test_translate_round_trip():
    pts = [Vec2(0, 0), Vec2(1.5, -2), Vec2(10, 10)]
    v = Vec2(0.25, -3.5)
    p = Path.from_points(pts).translate(v)
    assert as_xy(p) == [(0.25, -3.5), (1.75, -5.5), (10.25, 6.5)]
    p.translate(-v)
    assert p.points == pts


def test_transforms_return_same_path():
    p = Path.from_points([Vec2(1, 1)])
    assert p.translate(Vec2(1, 0)) is p
    assert p.rotate(Mat22.identity()) is p
    assert p.scale(2.0) is p
    assert p.simplify(1.0) is p
    assert p.make_relative() is p


def test_scale():
    p = Path.from_points([Vec2(1, 2), Vec2(-3, 4)])
    assert as_xy(p.scale(2.5)) == [(2.5, 5), (-7.5, 10)]
    assert as_xy(Path.from_points([Vec2(1, 2)]).scale(1.0)) == [(1, 2)]


def test_rotate_identity_and_quarter_turn():
    pts = [Vec2(1, 2), Vec2(-3, 4)]
    assert Path.from_points(pts).rotate(Mat22.identity()).points == pts

    p = Path.from_points([Vec2(1, 0), Vec2(0, 2)]).rotate(Mat22.rotation_deg(90))
    assert p[0].x == pytest.approx(0, abs=1e-12)
    assert p[0].y == pytest.approx(1)
    assert p[1].x == pytest.approx(-2)
    assert p[1].y == pytest.approx(0, abs=1e-12)


def test_chained_transforms():
    p = Path.from_points([Vec2(1, 1), Vec2(2, 3)]).scale(2).translate(Vec2(1, 1))
    assert as_xy(p) == [(3, 3), (5, 7)]


def test_transforms_keep_length_and_order():
    pts = [Vec2(i, i * i) for i in range(10)]
    p = Path.from_points(pts).rotate(Mat22.rotation(0.7)).scale(3).translate(Vec2(5, 5))
    assert len(p) == len(pts)


def test_copy_is_independent():
    p = Path.from_points([Vec2(1, 1)])
    q = p.copy()
    q.translate(Vec2(1, 1))
    assert p.points == [Vec2(1, 1)]
    assert p != q
