"""Tests for tile enumeration over bounding boxes and zoom levels."""

import pytest

from osmtile.enumeration import (
    ALL_ZOOMS,
    all_tiles_for_zoom,
    tile_range_for_bbox,
    tiles_covering_bbox,
    tiles_covering_bbox_all_zooms,
)
from osmtile.geometry import BoundingBox, TileRange


class TestTileRangeForBBox:
    def test_equator_square(self, equator_bbox):
        tile_range = tile_range_for_bbox(equator_bbox, 2)
        assert tile_range == TileRange(zoom=2, min_x=1, max_x=2, min_y=1, max_y=2)
        assert tile_range.width == 2
        assert tile_range.height == 2
        assert tile_range.count == 4

    def test_north_corner_has_smaller_y(self):
        bbox = BoundingBox(min_lat=-60.0, min_lon=0.0, max_lat=60.0, max_lon=1.0)
        tile_range = tile_range_for_bbox(bbox, 3)
        assert tile_range.min_y < tile_range.max_y

    def test_pixel_size(self, equator_bbox):
        tile_range = tile_range_for_bbox(equator_bbox, 2)
        assert tile_range.pixel_width == 512
        assert tile_range.pixel_height == 512

    def test_small_box_is_one_tile_at_low_zoom(self, kyoto_bbox):
        assert tile_range_for_bbox(kyoto_bbox, 5).count == 1

    def test_range_grows_with_zoom(self, kyoto_bbox):
        counts = [tile_range_for_bbox(kyoto_bbox, z).count for z in (10, 15, 19)]
        assert counts == sorted(counts)
        assert counts[-1] > 1


class TestTilesCoveringBBox:
    def test_enumerates_whole_range(self, equator_bbox):
        tiles = tiles_covering_bbox(equator_bbox, 2)
        assert [(t.x, t.y) for t in tiles] == [(1, 1), (1, 2), (2, 1), (2, 2)]
        assert {t.zoom for t in tiles} == {2}

    def test_size_matches_range(self, kyoto_bbox):
        for zoom in (12, 17, 19):
            tile_range = tile_range_for_bbox(kyoto_bbox, zoom)
            tiles = tiles_covering_bbox(kyoto_bbox, zoom)
            assert len(tiles) == tile_range.width * tile_range.height

    def test_tiles_carry_their_north_west_corner(self, equator_bbox):
        tile = tiles_covering_bbox(equator_bbox, 2)[0]
        assert tile.longitude == pytest.approx(-90.0)
        assert tile.latitude > 0

    def test_whole_world(self):
        bbox = BoundingBox(min_lat=-90.0, min_lon=-180.0, max_lat=90.0, max_lon=180.0)
        assert len(tiles_covering_bbox(bbox, 3)) == 64


class TestTilesCoveringBBoxAllZooms:
    def test_concatenates_in_zoom_order(self, equator_bbox):
        tiles = tiles_covering_bbox_all_zooms(equator_bbox, [3, 1])
        zooms = [t.zoom for t in tiles]
        first_one = zooms.index(1)
        assert set(zooms[:first_one]) == {3}
        assert set(zooms[first_one:]) == {1}
        assert len(tiles) == len(tiles_covering_bbox(equator_bbox, 3)) + len(
            tiles_covering_bbox(equator_bbox, 1)
        )

    def test_defaults_to_every_zoom(self, kyoto_bbox):
        tiles = tiles_covering_bbox_all_zooms(kyoto_bbox)
        assert {t.zoom for t in tiles} == set(ALL_ZOOMS)
        assert ALL_ZOOMS == tuple(range(20))

    def test_no_deduplication_across_levels(self, equator_bbox):
        tiles = tiles_covering_bbox_all_zooms(equator_bbox, [0, 0])
        assert len(tiles) == 2
        assert tiles[0] == tiles[1]


class TestAllTilesForZoom:
    def test_zoom_zero(self):
        tiles = all_tiles_for_zoom(0)
        assert [(t.x, t.y, t.zoom) for t in tiles] == [(0, 0, 0)]

    def test_grid_is_complete(self):
        tiles = all_tiles_for_zoom(2)
        assert len(tiles) == 16
        assert {(t.x, t.y) for t in tiles} == {(x, y) for x in range(4) for y in range(4)}
