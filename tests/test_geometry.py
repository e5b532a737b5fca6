import pytest

from game.geometry import Rect, Vector, intersects


RECT_PAIRS = [
    (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)),
    (Rect(0, 0, 10, 10), Rect(10, 0, 10, 10)),
    (Rect(0, 0, 10, 10), Rect(11, 0, 10, 10)),
    (Rect(0, 0, 10, 10), Rect(0, 20, 10, 10)),
    (Rect(-5, -5, 3, 3), Rect(100, 100, 1, 1)),
    (Rect(0, 0, 50, 50), Rect(10, 10, 5, 5)),
]


def test_max_bounds():
    r = Rect(3, 4, 10, 20)
    assert r.max_x == 13
    assert r.max_y == 24


@pytest.mark.parametrize('a,b', RECT_PAIRS)
def test_intersects_is_symmetric(a, b):
    assert intersects(a, b) == intersects(b, a)


@pytest.mark.parametrize('a,_', RECT_PAIRS)
def test_rect_intersects_itself(a, _):
    assert a.intersects(a)


def test_overlapping_rects_intersect():
    assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))


def test_contained_rect_intersects():
    assert Rect(0, 0, 50, 50).intersects(Rect(10, 10, 5, 5))


def test_shared_edge_counts_as_intersection():
    assert Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))
    assert Rect(0, 0, 10, 10).intersects(Rect(0, 10, 10, 10))


def test_shared_corner_counts_as_intersection():
    assert Rect(0, 0, 10, 10).intersects(Rect(10, 10, 5, 5))


def test_separated_rects_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(11, 0, 10, 10))
    assert not Rect(0, 0, 10, 10).intersects(Rect(0, 20, 10, 10))
    # Overlap on one axis only
    assert not Rect(0, 0, 10, 10).intersects(Rect(5, 30, 10, 10))


def test_vector_defaults_to_origin():
    v = Vector()
    assert (v.x, v.y) == (0.0, 0.0)
