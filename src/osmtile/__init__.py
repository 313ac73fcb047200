"""OpenStreetMap tile calculator.

Converts between WGS84 coordinates, bounding boxes and slippy-map tile numbers.
"""

from osmtile.enumeration import (
    all_tiles_for_zoom,
    tile_range_for_bbox,
    tiles_covering_bbox,
    tiles_covering_bbox_all_zooms,
)
from osmtile.exceptions import ConfigError, OsmTileError, ParseError, RangeError
from osmtile.geometry import BoundingBox, Point, Tile, TileIndex, TileRange
from osmtile.parsing import (
    InputMode,
    classify_argument,
    parse_bounding_box,
    parse_point,
    parse_tile_index,
    select_mode,
)
from osmtile.tile_math import point_to_tile, tile_bounding_box, tile_to_point

__version__ = "0.1.0"
__all__ = [
    "BoundingBox",
    "ConfigError",
    "InputMode",
    "OsmTileError",
    "ParseError",
    "Point",
    "RangeError",
    "Tile",
    "TileIndex",
    "TileRange",
    "all_tiles_for_zoom",
    "classify_argument",
    "parse_bounding_box",
    "parse_point",
    "parse_tile_index",
    "point_to_tile",
    "select_mode",
    "tile_bounding_box",
    "tile_range_for_bbox",
    "tile_to_point",
    "tiles_covering_bbox",
    "tiles_covering_bbox_all_zooms",
]
