"""Enumerate the tiles covering a bounding box or a whole zoom level."""

import logging
from collections.abc import Iterable

from osmtile.geometry import BoundingBox, Tile, TileRange
from osmtile.tile_math import point_to_tile
from osmtile.validation import MAX_ZOOM, MIN_ZOOM, max_tile_index

logger = logging.getLogger(__name__)

ALL_ZOOMS: tuple[int, ...] = tuple(range(MIN_ZOOM, MAX_ZOOM + 1))


def tile_range_for_bbox(bbox: BoundingBox, zoom: int) -> TileRange:
    """Compute the inclusive tile number range covering ``bbox``.

    Y grows southward, so the north-east corner (max_lat) gives the smallest Y
    and the south-west corner (min_lat) the largest.
    """
    min_x, max_y = point_to_tile(bbox.min_lat, bbox.min_lon, zoom)
    max_x, min_y = point_to_tile(bbox.max_lat, bbox.max_lon, zoom)
    return TileRange(zoom=zoom, min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)


def tiles_in_range(tile_range: TileRange) -> list[Tile]:
    """Materialize every tile of a range, column by column."""
    return [
        Tile.from_xy(x, y, tile_range.zoom)
        for x in range(tile_range.min_x, tile_range.max_x + 1)
        for y in range(tile_range.min_y, tile_range.max_y + 1)
    ]


def tiles_covering_bbox(bbox: BoundingBox, zoom: int) -> list[Tile]:
    """All tiles intersecting ``bbox`` at one zoom level."""
    tile_range = tile_range_for_bbox(bbox, zoom)
    logger.debug(
        "Zoom %d: x=%d..%d y=%d..%d (%d tiles)",
        zoom, tile_range.min_x, tile_range.max_x,
        tile_range.min_y, tile_range.max_y, tile_range.count,
    )
    return tiles_in_range(tile_range)


def tiles_covering_bbox_all_zooms(
    bbox: BoundingBox,
    zooms: Iterable[int] = ALL_ZOOMS,
) -> list[Tile]:
    """Concatenate the covering tiles of each zoom level, in the given order.

    Levels are independent; a tile is never merged with its parent or children.
    """
    tiles: list[Tile] = []
    for zoom in zooms:
        tiles.extend(tiles_covering_bbox(bbox, zoom))
    return tiles


def all_tiles_for_zoom(zoom: int) -> list[Tile]:
    """Every tile of the grid at ``zoom``."""
    upper = max_tile_index(zoom)
    return tiles_in_range(TileRange(zoom=zoom, min_x=0, max_x=upper, min_y=0, max_y=upper))
