"""Argument classification: points, bounding boxes and tile numbers.

Fields are comma separated. Blanks may precede a field, so ``"45.1, 5.6"`` is
accepted, but the comma must follow a number directly, so ``"45.1 ,5.6"`` is
not.
"""

import logging
import re
from enum import Enum

from osmtile.exceptions import ConfigError, ParseError
from osmtile.geometry import BoundingBox, Point, TileIndex
from osmtile.validation import validate_latitude, validate_longitude, validate_tile_index

logger = logging.getLogger(__name__)

_DECIMAL = r"[ \t]*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)"
# Tile numbers have at most 6 digits up to zoom 19; longer fields are rejected.
_INTEGER = r"[ \t]*([-+]?\d{1,10})"

POINT_PATTERN = re.compile(rf"{_DECIMAL},{_DECIMAL}", re.ASCII)
BBOX_PATTERN = re.compile(rf"{_DECIMAL},{_DECIMAL},{_DECIMAL},{_DECIMAL}", re.ASCII)
TILE_PATTERN = re.compile(rf"{_INTEGER},{_INTEGER}", re.ASCII)


class InputMode(str, Enum):
    """How positional arguments are interpreted."""

    LAT_LON = "lat-lon"
    LON_LAT = "lon-lat"
    XY = "x-y"

    @property
    def is_coordinate(self) -> bool:
        """True for the two coordinate orders, False for tile numbers."""
        return self is not InputMode.XY


def select_mode(lat_lon: bool, lon_lat: bool, x_y: bool) -> InputMode:
    """Pick the input mode from the three mutually exclusive flags."""
    selected = [
        mode
        for mode, flag in (
            (InputMode.LAT_LON, lat_lon),
            (InputMode.LON_LAT, lon_lat),
            (InputMode.XY, x_y),
        )
        if flag
    ]
    if len(selected) > 1:
        raise ConfigError("indicate only one option --lat-lon, --lon-lat, --x-y")
    if not selected:
        raise ConfigError("indicate an option --lat-lon, --lon-lat, --x-y")
    return selected[0]


def _require_coordinate_mode(mode: InputMode) -> None:
    if not mode.is_coordinate:
        raise ConfigError(f"coordinates cannot be parsed in {mode.value} mode")


def parse_point(text: str, mode: InputMode) -> Point:
    """Parse ``"a,b"`` into a validated point.

    Args:
        text: Two comma-separated decimal numbers.
        mode: ``LAT_LON`` reads (lat, lon), ``LON_LAT`` reads (lon, lat).

    Raises:
        ParseError: The text is not exactly two numbers.
        RangeError: Latitude or longitude is outside WGS84 bounds.
    """
    _require_coordinate_mode(mode)
    match = POINT_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(f"invalid coordinates : {text}")

    first, second = (float(v) for v in match.groups())
    if mode is InputMode.LAT_LON:
        lat, lon = first, second
    else:
        lat, lon = second, first

    validate_latitude(lat)
    validate_longitude(lon)
    logger.debug("Parsed point %r as lat=%s lon=%s", text, lat, lon)
    return Point(latitude=lat, longitude=lon)


def parse_bounding_box(text: str, mode: InputMode) -> BoundingBox:
    """Parse ``"a,b,c,d"`` into a normalized, validated bounding box.

    The corners may be given in any order; each axis is sorted on its own.

    Raises:
        ParseError: The text is not exactly four numbers.
        RangeError: A latitude or longitude is outside WGS84 bounds.
    """
    _require_coordinate_mode(mode)
    match = BBOX_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(f"invalid bounding box : {text}")

    a1, b1, a2, b2 = (float(v) for v in match.groups())
    if mode is InputMode.LAT_LON:
        lats, lons = (a1, a2), (b1, b2)
    else:
        lons, lats = (a1, a2), (b1, b2)

    min_lat, max_lat = sorted(lats)
    min_lon, max_lon = sorted(lons)

    validate_latitude(min_lat)
    validate_longitude(min_lon)
    validate_latitude(max_lat)
    validate_longitude(max_lon)

    logger.debug(
        "Parsed bounding box %r as lat=[%s, %s] lon=[%s, %s]",
        text, min_lat, max_lat, min_lon, max_lon,
    )
    return BoundingBox(min_lat=min_lat, min_lon=min_lon, max_lat=max_lat, max_lon=max_lon)


def parse_tile_index(text: str, zoom: int) -> TileIndex:
    """Parse ``"x,y"`` into a tile number valid at ``zoom``.

    Raises:
        ParseError: The text is not exactly two integers.
        RangeError: x or y is outside ``[0, 2**zoom - 1]``.
    """
    match = TILE_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(f"invalid tile number : {text}")

    x, y = (int(v) for v in match.groups())
    validate_tile_index(x, y, zoom)
    logger.debug("Parsed tile number %r as x=%d y=%d at zoom %d", text, x, y, zoom)
    return TileIndex(x=x, y=y)


def classify_argument(text: str, mode: InputMode, zoom: int) -> Point | BoundingBox | TileIndex:
    """Interpret one positional argument according to ``mode``.

    In a coordinate mode the bounding box form is tried first, then the point
    form. Range errors are raised as soon as a form matches.
    """
    if not mode.is_coordinate:
        if TILE_PATTERN.fullmatch(text):
            return parse_tile_index(text, zoom)
    elif BBOX_PATTERN.fullmatch(text):
        return parse_bounding_box(text, mode)
    elif POINT_PATTERN.fullmatch(text):
        return parse_point(text, mode)
    raise ParseError(f"invalid argument : {text}")
