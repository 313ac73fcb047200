"""Web Mercator slippy-map tile math.

Tile numbering follows the OpenStreetMap scheme: a zoom level ``z`` splits the
world into a ``2**z`` by ``2**z`` grid, x growing eastward from -180 degrees and
y growing southward from the northern Mercator limit.
"""

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from osmtile.geometry import Tile

# Latitude of the top edge of tile row 0, about 85.0511 degrees
WEB_MERCATOR_MAX_LAT = math.degrees(math.atan(math.sinh(math.pi)))

# Tolerance, as a fraction of the world width (about 4 micrometres), applied
# before flooring so that a tile corner computed by tile_to_point maps back
# onto the same tile.
_SNAP_TOLERANCE = 1e-13


def clamp_lat(lat: float) -> float:
    """Clamp a latitude to the range the projection can represent."""
    return max(-WEB_MERCATOR_MAX_LAT, min(WEB_MERCATOR_MAX_LAT, lat))


def _snap(value: float, n: int) -> int:
    index = math.floor(value + _SNAP_TOLERANCE * n)
    return max(0, min(n - 1, index))


def point_to_tile(lat: float, lon: float, zoom: int) -> tuple[int, int]:
    """Return the (x, y) number of the tile containing a point.

    The formula is undefined at the poles, so latitudes are clamped to the Web
    Mercator limit and longitude 180 lands in the last column.
    """
    n = 2**zoom
    lat_rad = math.radians(clamp_lat(lat))
    x = (lon + 180.0) / 360.0 * n
    y = (1.0 - math.log(math.tan(lat_rad) + 1.0 / math.cos(lat_rad)) / math.pi) / 2.0 * n
    return _snap(x, n), _snap(y, n)


def tile_to_point(x: int, y: int, zoom: int) -> tuple[float, float]:
    """Return the (lat, lon) of a tile's north-west corner."""
    n = 2**zoom
    lon = x / n * 360.0 - 180.0
    lat = math.degrees(math.atan(math.sinh(math.pi - 2.0 * math.pi * y / n)))
    return lat, lon


def tile_bounding_box(tile: "Tile") -> tuple[float, float, float, float]:
    """Return ``(nw_lon, nw_lat, se_lon, se_lat)`` for a tile.

    The south-east corner is the north-west corner of tile (x+1, y+1).
    """
    nw_lat, nw_lon = tile_to_point(tile.x, tile.y, tile.zoom)
    se_lat, se_lon = tile_to_point(tile.x + 1, tile.y + 1, tile.zoom)
    return nw_lon, nw_lat, se_lon, se_lat
