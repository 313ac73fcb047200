"""Text and JSON rendering of computed tiles and tile ranges."""

import json
from typing import Any

from pydantic import BaseModel, Field

from osmtile.geometry import BoundingBox, Tile, TileRange


class BBoxReport(BaseModel):
    """Everything printed for one bounding box argument."""

    bbox: BoundingBox
    ranges: list[TileRange]
    # Corner tiles at the requested zoom: (min_lat, min_lon) then (max_lat, max_lon)
    corners: list[Tile]
    tiles: list[Tile] = Field(default_factory=list)


def format_tile(tile: Tile) -> str:
    """Render one tile with its north-west corner and server links."""
    return (
        f"Tile X={tile.x} Y={tile.y} Z={tile.zoom} "
        f"Latitude={tile.latitude:.6f} Longitude={tile.longitude:.6f}\n"
        f"URL:\n"
        f"- View   : {tile.view_url}\n"
        f"- Status : {tile.status_url}\n"
    )


def format_tile_range(tile_range: TileRange) -> str:
    return (
        f"X: {tile_range.min_x}..{tile_range.max_x} ({tile_range.width}) "
        f"Y: {tile_range.min_y}..{tile_range.max_y} ({tile_range.height})\n"
        f"Map size : width={tile_range.pixel_width} height={tile_range.pixel_height}\n"
    )


def format_tile_list(tiles: list[Tile]) -> str:
    """One ``z/x/y`` path per line."""
    return "".join(f"{tile.path}\n" for tile in tiles)


def format_bbox_report(report: BBoxReport) -> str:
    parts = [format_tile_range(r) for r in report.ranges]
    parts.extend(format_tile(corner) for corner in report.corners)
    if report.tiles:
        parts.append(f"Tiles ({len(report.tiles)}):\n")
        parts.append(format_tile_list(report.tiles))
    return "".join(parts)


def format_text(results: list[Tile | BBoxReport]) -> str:
    """Concatenate the text rendering of every result, in argument order."""
    return "".join(
        format_bbox_report(r) if isinstance(r, BBoxReport) else format_tile(r) for r in results
    )


def format_json(results: list[Tile | BBoxReport]) -> str:
    payload: list[dict[str, Any]] = [r.model_dump(mode="json") for r in results]
    return json.dumps(payload, indent=2) + "\n"
