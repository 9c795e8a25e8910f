"""
Tests for rectangles.
"""

import pytest

from pygfxmath import DimensionError, Point, Rectangle, Size, ValidationError


@pytest.fixture
def rect():
    return Rectangle(100, 100, 200, 200)


class TestProperties:

    def test_extent(self, rect):
        assert rect.width == 100
        assert rect.height == 100
        assert rect.size == Size(100, 100)
        assert rect.valid

    def test_corners(self, rect):
        assert rect.top_left == Point(100, 100)
        assert rect.top_right == Point(200, 100)
        assert rect.bottom_left == Point(100, 200)
        assert rect.bottom_right == Point(200, 200)

    def test_corners_follow_x_y_order(self):
        r = Rectangle(top=10, left=20, bottom=30, right=40)
        assert r.top_left.x == 20
        assert r.top_left.y == 10

    def test_default_is_invalid(self):
        assert not Rectangle().valid

    def test_inverted_is_invalid(self):
        assert not Rectangle(200, 100, 100, 200).valid

    def test_from_point_size(self, rect):
        assert Rectangle.from_point_size(Point(100, 100), Size(100, 100)) == rect

    def test_from_point_size_rejects_3d(self):
        with pytest.raises(DimensionError):
            Rectangle.from_point_size(Point(1, 2, 3), Size(1, 1))

    def test_immutable(self, rect):
        with pytest.raises(AttributeError):
            rect.top = 0


class TestOperations:

    def test_offset(self, rect):
        assert rect.offset(Size(10, 20)) == Rectangle(120, 110, 220, 210)

    def test_pad_with_size(self, rect):
        assert rect.pad(Size(20, 40)) == Rectangle(60, 80, 240, 220)

    def test_inset_with_size(self, rect):
        assert rect.inset(Size(20, 40)) == Rectangle(140, 120, 160, 180)

    def test_inset_with_edges(self, rect):
        assert rect.inset(1, 2, 3, 4) == Rectangle(101, 102, 197, 196)

    def test_pad_undoes_inset(self, rect):
        assert rect.inset(5, 6, 7, 8).pad(5, 6, 7, 8) == rect

    def test_inset_past_centre_is_invalid(self, rect):
        assert not rect.inset(Size(60, 60)).valid

    def test_bad_arguments(self, rect):
        with pytest.raises(ValidationError):
            rect.inset(1, 2, 3)
        with pytest.raises(DimensionError):
            rect.pad(Size(1, 2, 3))


class TestIntersection:

    def test_overlap(self, rect):
        other = Rectangle(150, 150, 250, 250)
        assert rect.intersection(other) == Rectangle(150, 150, 200, 200)
        assert rect.intersects(other)
        assert other.intersects(rect)

    def test_contained(self, rect):
        inner = Rectangle(120, 120, 180, 180)
        assert rect.intersection(inner) == inner

    def test_disjoint(self, rect):
        other = Rectangle(300, 300, 400, 400)
        assert not rect.intersection(other).valid
        assert not rect.intersects(other)

    def test_touching_edges_do_not_intersect(self, rect):
        assert not rect.intersects(Rectangle(200, 100, 300, 200))
