"""Tests for geometry models."""

import pytest
from pydantic import ValidationError

from osmtile.geometry import BoundingBox, Point, Tile, TileIndex, TileRange


class TestTile:
    def test_from_point(self, greenwich):
        tile = Tile.from_point(greenwich, 10)
        assert (tile.x, tile.y, tile.zoom) == (511, 340, 10)

    def test_reference_position_is_north_west_corner(self, greenwich):
        """The stored position is the tile corner, not the input point."""
        tile = Tile.from_point(greenwich, 10)
        assert tile.latitude > greenwich.latitude
        assert tile.longitude < greenwich.longitude

    def test_from_xy(self):
        tile = Tile.from_xy(0, 0, 0)
        assert tile.latitude == pytest.approx(85.0511, abs=1e-4)
        assert tile.longitude == -180.0

    def test_urls(self):
        tile = Tile.from_xy(16895, 11768, 15)
        assert tile.path == "15/16895/11768"
        assert tile.view_url == "https://tile.openstreetmap.org/15/16895/11768.png"
        assert tile.status_url == "https://tile.openstreetmap.org/15/16895/11768.png/status"

    def test_rejects_index_outside_grid(self):
        with pytest.raises(ValidationError):
            Tile(x=2, y=0, zoom=1, latitude=0.0, longitude=0.0)

    def test_rejects_unsupported_zoom(self):
        with pytest.raises(ValidationError):
            Tile.from_xy(0, 0, 20)

    def test_is_immutable(self):
        tile = Tile.from_xy(0, 0, 0)
        with pytest.raises(ValidationError):
            tile.x = 1

    def test_dump_includes_urls(self):
        data = Tile.from_xy(1, 2, 3).model_dump()
        assert data["view_url"].endswith("/3/1/2.png")
        assert data["status_url"].endswith("/3/1/2.png/status")


class TestBoundingBox:
    def test_corners(self, kyoto_bbox):
        assert kyoto_bbox.min_corner == Point(latitude=35.03259, longitude=135.71654)
        assert kyoto_bbox.max_corner == Point(latitude=35.03504, longitude=135.71988)


class TestTileRange:
    def test_counts(self):
        tile_range = TileRange(zoom=13, min_x=4223, max_x=4225, min_y=2942, max_y=2944)
        assert tile_range.width == 3
        assert tile_range.height == 3
        assert tile_range.count == 9
        assert tile_range.pixel_width == 768
        assert tile_range.pixel_height == 768


def test_tile_index_equality():
    assert TileIndex(x=1, y=2) == TileIndex(x=1, y=2)
    assert TileIndex(x=1, y=2) != TileIndex(x=2, y=1)
