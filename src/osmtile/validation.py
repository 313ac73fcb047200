"""WGS84 coordinate, zoom level and tile number validation."""

from osmtile.exceptions import ConfigError, RangeError

MIN_ZOOM = 0
MAX_ZOOM = 19

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


def validate_latitude(lat: float) -> float:
    """Validate a latitude in the WGS84 system (bounds inclusive)."""
    if lat < MIN_LATITUDE or lat > MAX_LATITUDE:
        raise RangeError(f"invalid latitude {lat} (WGS84 [-90,+90])")
    return lat


def validate_longitude(lon: float) -> float:
    """Validate a longitude in the WGS84 system (bounds inclusive)."""
    if lon < MIN_LONGITUDE or lon > MAX_LONGITUDE:
        raise RangeError(f"invalid longitude {lon} (WGS84 [-180,+180])")
    return lon


def validate_zoom(zoom: int) -> int:
    if zoom < MIN_ZOOM or zoom > MAX_ZOOM:
        raise ConfigError(f"invalid zoom value {zoom} ({MIN_ZOOM}..{MAX_ZOOM})")
    return zoom


def max_tile_index(zoom: int) -> int:
    """Largest tile number on either axis at ``zoom``."""
    return 2**zoom - 1


def validate_tile_index(x: int, y: int, zoom: int) -> tuple[int, int]:
    """Check that both tile numbers fit the grid at ``zoom``.

    Each axis is checked on its own, so a bad x is reported even when y is fine.
    """
    upper = max_tile_index(zoom)
    for axis, value in (("x", x), ("y", y)):
        if not 0 <= value <= upper:
            raise RangeError(
                f"tile number {axis}={value} incompatible with zoom level {zoom} (0..{upper})"
            )
    return x, y
