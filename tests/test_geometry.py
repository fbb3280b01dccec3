"""Tests for the leaf shapes and the canvas."""

import numpy as np
import pytest

from shapes import Canvas, Circle, ENGLISH, OutOfCanvasError, Point, Position, Rectangle, SPANISH, get_catalog


class TestCanvas:
    def test_default_size(self):
        canvas = Canvas()
        assert (canvas.width, canvas.height) == (800, 600)

    def test_fits_edges_inclusive(self):
        canvas = Canvas()
        assert canvas.fits(np.array([0, 0, 800, 600]))
        assert not canvas.fits(np.array([-1, 0, 10, 10]))
        assert not canvas.fits(np.array([0, 0, 801, 10]))
        assert not canvas.fits(np.array([0, 0, 10, 601]))

    def test_fits_returns_plain_bool(self):
        assert type(Canvas().fits([1, 1, 2, 2])) is bool

    @pytest.mark.parametrize("width,height", [(0, 600), (800, -1)])
    def test_rejects_empty_canvas(self, width, height):
        with pytest.raises(ValueError):
            Canvas(width, height)


class TestPoint:
    @pytest.mark.parametrize("x,y", [(0, 0), (800, 600), (0, 600), (800, 0), (400, 300), (1, 599)])
    def test_create_inside(self, x, y):
        p = Point(x, y)
        assert p.position == Position(x, y)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (801, 0), (0, 601), (1000, 1000)])
    def test_create_outside_fails(self, x, y):
        with pytest.raises(OutOfCanvasError):
            Point(x, y)

    def test_out_of_canvas_error_is_value_error(self):
        with pytest.raises(ValueError, match="point is outside"):
            Point(-5, 5)

    def test_move(self):
        p = Point(100, 100)
        assert p.move(800, 600)
        assert (p.x, p.y) == (800, 600)

    def test_refused_move_keeps_position(self):
        p = Point(100, 100)
        assert not p.move(801, 100)
        assert (p.x, p.y) == (100, 100)

    def test_render(self):
        assert Point(100, 100).render() == "Drawing a Point at (100, 100)"
        assert str(Point(3, 4)) == "Drawing a Point at (3, 4)"

    def test_render_spanish(self):
        assert Point(1, 2, catalog=SPANISH).render() == "Dibujando un Punto en (1, 2)"

    def test_rejects_non_integers(self):
        with pytest.raises(TypeError):
            Point(1.5, 2)
        with pytest.raises(TypeError):
            Point(True, 2)

    def test_accepts_numpy_integers(self):
        p = Point(np.int64(10), np.int32(20))
        assert p.position.as_tuple() == (10, 20)
        assert type(p.x) is int

    def test_custom_canvas(self):
        wide = Canvas(1000, 600)
        p = Point(900, 10, canvas=wide)
        assert p.move(1000, 600)
        with pytest.raises(OutOfCanvasError):
            Point(900, 10)


class TestCircle:
    def test_create_and_render(self):
        c = Circle(400, 300, 50)
        assert c.render() == "Drawing a Circle at (400, 300) with radius 50"

    @pytest.mark.parametrize("x,y,r", [(49, 300, 50), (751, 300, 50), (400, 49, 50), (400, 551, 50)])
    def test_create_outside_fails(self, x, y, r):
        with pytest.raises(OutOfCanvasError, match="circle"):
            Circle(x, y, r)

    @pytest.mark.parametrize("x,y,r", [(50, 50, 50), (750, 550, 50), (400, 300, 0), (300, 300, 300)])
    def test_move_to_same_position_is_noop(self, x, y, r):
        c = Circle(x, y, r)
        assert c.move(x, y)
        assert (c.x, c.y, c.radius) == (x, y, r)

    def test_move_near_origin_fails(self):
        c = Circle(400, 300, 50)
        assert not c.move(10, 10)
        assert (c.x, c.y, c.radius) == (400, 300, 50)

    def test_move_keeps_radius(self):
        c = Circle(400, 300, 50)
        assert c.move(50, 550)
        assert (c.x, c.y, c.radius) == (50, 550, 50)

    def test_negative_radius(self):
        with pytest.raises(ValueError, match="radius"):
            Circle(400, 300, -1)

    def test_render_spanish(self):
        c = Circle(400, 300, 50, catalog=SPANISH)
        assert c.render() == "Dibujando un Círculo en (400, 300) con radio 50"


class TestRectangle:
    def test_create_and_render(self):
        r = Rectangle(600, 500, 150, 50)
        assert r.render() == "Drawing a Rectangle at (600, 500) with width 150 and height 50"

    @pytest.mark.parametrize("x,y,w,h", [(651, 0, 150, 10), (0, 551, 10, 50), (-1, 0, 1, 1), (0, -1, 1, 1)])
    def test_create_outside_fails(self, x, y, w, h):
        with pytest.raises(OutOfCanvasError, match="rectangle"):
            Rectangle(x, y, w, h)

    def test_fills_canvas(self):
        r = Rectangle(0, 0, 800, 600)
        assert r.move(0, 0)
        assert not r.move(1, 0)
        assert (r.x, r.y, r.width, r.height) == (0, 0, 800, 600)

    def test_can_move_to_has_no_side_effect(self):
        r = Rectangle(10, 10, 100, 100)
        assert r.can_move_to(700, 500)
        assert not r.can_move_to(701, 500)
        assert (r.x, r.y) == (10, 10)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            Rectangle(0, 0, -1, 10)
        with pytest.raises(ValueError):
            Rectangle(0, 0, 10, -1)

    def test_repr(self):
        assert repr(Rectangle(1, 2, 3, 4)) == "Rectangle(x=1, y=2, width=3, height=4)"


class TestCatalogs:
    def test_lookup(self):
        assert get_catalog("en") is ENGLISH
        assert get_catalog("es") is SPANISH

    def test_unknown_code(self):
        with pytest.raises(ValueError):
            get_catalog("fr")

    def test_catalogs_cover_same_templates(self):
        for name in ("point", "circle", "rectangle"):
            fields = {"x": 1, "y": 2, "radius": 3, "width": 4, "height": 5}
            assert getattr(ENGLISH, name).format(**fields) != getattr(SPANISH, name).format(**fields)


class TestHugeCoordinates:
    def test_point_move_beyond_int64(self):
        p = Point(1, 1)
        assert p.move(2**63, 0) is False
        assert p.move(0, -(2**70)) is False
        assert (p.x, p.y) == (1, 1)

    def test_rectangle_move_overflowing_far_edge(self):
        r = Rectangle(0, 0, 10, 10)
        assert r.move(2**63 - 5, 0) is False
        assert (r.x, r.y) == (0, 0)

    def test_circle_can_move_to_beyond_int64(self):
        assert not Circle(400, 300, 50).can_move_to(10**30, 300)

    def test_construction_beyond_int64(self):
        with pytest.raises(OutOfCanvasError):
            Point(10**20, 0)

    def test_fits_accepts_python_ints_beyond_int64(self):
        assert not Canvas().fits([0, 0, 2**64, 10])

    def test_canvas_must_fit_int64(self):
        with pytest.raises(ValueError):
            Canvas(2**63, 600)


class TestRepr:
    def test_repr_of_rejected_shape(self):
        shape = Point.__new__(Point)
        with pytest.raises(OutOfCanvasError):
            shape.__init__(-1, 5)
        assert repr(shape) == "Point(x=-1, y=5)"
