"""Core geometry models: points, bounding boxes and slippy-map tiles."""

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from osmtile.config import settings
from osmtile.tile_math import point_to_tile, tile_bounding_box, tile_to_point
from osmtile.validation import MAX_ZOOM, MIN_ZOOM, max_tile_index


class Point(BaseModel):
    """A WGS84 position in degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class TileIndex(BaseModel):
    """A tile number as given on the command line, without a zoom level."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class BoundingBox(BaseModel):
    """An axis-aligned lat/lon rectangle, normalized so that min <= max."""

    model_config = ConfigDict(frozen=True)

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @property
    def min_corner(self) -> Point:
        """South-west corner."""
        return Point(latitude=self.min_lat, longitude=self.min_lon)

    @property
    def max_corner(self) -> Point:
        """North-east corner."""
        return Point(latitude=self.max_lat, longitude=self.max_lon)


class Tile(BaseModel):
    """A slippy-map tile.

    ``latitude`` and ``longitude`` hold the tile's north-west corner, not the
    point the tile was computed from.
    """

    model_config = ConfigDict(frozen=True)

    x: int = Field(ge=0)
    y: int = Field(ge=0)
    zoom: int = Field(ge=MIN_ZOOM, le=MAX_ZOOM)
    latitude: float
    longitude: float

    @model_validator(mode="after")
    def check_grid_bounds(self) -> "Tile":
        upper = max_tile_index(self.zoom)
        if self.x > upper or self.y > upper:
            raise ValueError(f"tile {self.x},{self.y} is outside the zoom {self.zoom} grid")
        return self

    @classmethod
    def from_point(cls, point: Point, zoom: int) -> "Tile":
        """Build the tile containing ``point`` at ``zoom``."""
        x, y = point_to_tile(point.latitude, point.longitude, zoom)
        return cls.from_xy(x, y, zoom)

    @classmethod
    def from_xy(cls, x: int, y: int, zoom: int) -> "Tile":
        """Build a tile from its number, resolving its north-west corner."""
        lat, lon = tile_to_point(x, y, zoom)
        return cls(x=x, y=y, zoom=zoom, latitude=lat, longitude=lon)

    def bounds(self) -> tuple[float, float, float, float]:
        """Return ``(nw_lon, nw_lat, se_lon, se_lat)``."""
        return tile_bounding_box(self)

    @property
    def path(self) -> str:
        """Tile path in the {z}/{x}/{y} scheme."""
        return f"{self.zoom}/{self.x}/{self.y}"

    @computed_field
    @property
    def view_url(self) -> str:
        return f"{settings.tile_server_url}/{self.path}.png"

    @computed_field
    @property
    def status_url(self) -> str:
        return f"{self.view_url}/status"


class TileRange(BaseModel):
    """Inclusive rectangle of tile numbers at one zoom level."""

    model_config = ConfigDict(frozen=True)

    zoom: int
    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @computed_field
    @property
    def width(self) -> int:
        """Number of tiles along X."""
        return self.max_x - self.min_x + 1

    @computed_field
    @property
    def height(self) -> int:
        """Number of tiles along Y."""
        return self.max_y - self.min_y + 1

    @computed_field
    @property
    def count(self) -> int:
        return self.width * self.height

    @computed_field
    @property
    def pixel_width(self) -> int:
        return self.width * settings.tile_size

    @computed_field
    @property
    def pixel_height(self) -> int:
        return self.height * settings.tile_size
