"""Tests for the Rectangle model."""

import pytest

from objkit.model import Rectangle


class TestRectangleFields:
    def test_fields_stored_verbatim(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_no_validation_on_sign(self):
        r = Rectangle(-3, 0)
        assert r.width == -3
        assert r.height == 0

    def test_keyword_construction(self):
        r = Rectangle(height=2, width=5)
        assert (r.width, r.height) == (5, 2)


class TestGetArea:
    @pytest.mark.parametrize(
        "width, height",
        [(10, 20), (0, 5), (1.5, 4), (-2, 3), (7, 7)],
    )
    def test_area_is_product(self, width, height):
        assert Rectangle(width, height).get_area() == width * height

    def test_area_example(self):
        assert Rectangle(10, 20).get_area() == 200

    def test_area_tracks_field_changes(self):
        r = Rectangle(2, 3)
        r.width = 4
        assert r.get_area() == 12
