"""Command line entry point: ``osmtile``."""

import argparse
import logging
import re
import sys
from collections.abc import Sequence
from typing import TextIO

from osmtile import __version__
from osmtile.config import settings
from osmtile.enumeration import ALL_ZOOMS, tile_range_for_bbox, tiles_covering_bbox
from osmtile.exceptions import ConfigError, OsmTileError
from osmtile.formatters import BBoxReport, format_json, format_text
from osmtile.geometry import BoundingBox, Point, Tile, TileIndex
from osmtile.parsing import classify_argument, select_mode
from osmtile.validation import MAX_ZOOM, MIN_ZOOM, validate_zoom

logger = logging.getLogger(__name__)

# argparse reads "-0.0014,51.4778" as an unknown option; a leading blank
# makes it positional and the parsers accept blanks before a field.
_NEGATIVE_ARGUMENT = re.compile(r"-\.?\d", re.ASCII)

EPILOG = """\
examples:
  # get tile number for Greenwich Royal Observatory
  osmtile --lon-lat --zoom 10 -0.0014,51.4778

  # get tiles list for a bounding box
  osmtile --lat-lon --zoom 13 45.088666,5.618289,45.148789,5.700169

  # get coordinates for a tile number
  osmtile --x-y --zoom 15 16895,11768
"""


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI. Logs go to stderr, results to stdout."""
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osmtile",
        description="OpenStreetMap Tile Calculator. Converts between coordinates and tile numbers.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--lat-lon", action="store_true", help="argument is latitude,longitude")
    parser.add_argument("--lon-lat", action="store_true", help="argument is longitude,latitude")
    parser.add_argument("--x-y", action="store_true", help="argument is a tile number x,y")
    parser.add_argument(
        "-z", "--zoom", type=int, default=0, help=f"zoom level ({MIN_ZOOM}..{MAX_ZOOM})"
    )
    parser.add_argument(
        "--list", action="store_true", help="list every tile covering a bounding box"
    )
    parser.add_argument(
        "--all-zooms",
        action="store_true",
        help=f"list covering tiles for every zoom level {MIN_ZOOM}..{MAX_ZOOM} (implies --list)",
    )
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="lat,lon | lon,lat | minA,minB,maxA,maxB | x,y depending on the selected option",
    )
    return parser


def _shield_negative_arguments(argv: Sequence[str]) -> list[str]:
    return [f" {arg}" if _NEGATIVE_ARGUMENT.match(arg) else arg for arg in argv]


def _unshield(arg: str) -> str:
    return arg[1:] if arg.startswith(" -") else arg


def build_bbox_report(
    bbox: BoundingBox,
    zoom: int,
    list_tiles: bool = False,
    all_zooms: bool = False,
) -> BBoxReport:
    """Collect the tile range, corner tiles and optional tile list for a bbox."""
    zooms = ALL_ZOOMS if all_zooms else (zoom,)
    ranges = [tile_range_for_bbox(bbox, z) for z in zooms]
    corners = [Tile.from_point(bbox.min_corner, zoom), Tile.from_point(bbox.max_corner, zoom)]

    tiles: list[Tile] = []
    if list_tiles or all_zooms:
        for z in zooms:
            tiles.extend(tiles_covering_bbox(bbox, z))

    return BBoxReport(bbox=bbox, ranges=ranges, corners=corners, tiles=tiles)


def compute(
    arguments: Sequence[str],
    mode_flags: tuple[bool, bool, bool],
    zoom: int,
    list_tiles: bool = False,
    all_zooms: bool = False,
) -> list[Tile | BBoxReport]:
    """Validate every argument, then compute one result per argument.

    Nothing is computed until all arguments have been parsed, so the first bad
    argument aborts the whole invocation.

    Raises:
        OsmTileError: Invalid flags, zoom level or argument.
    """
    validate_zoom(zoom)
    mode = select_mode(*mode_flags)
    if not arguments:
        raise ConfigError("no argument given")

    parsed = [classify_argument(arg, mode, zoom) for arg in arguments]
    logger.debug("Parsed %d argument(s) in %s mode at zoom %d", len(parsed), mode.value, zoom)

    results: list[Tile | BBoxReport] = []
    for item in parsed:
        if isinstance(item, BoundingBox):
            results.append(build_bbox_report(item, zoom, list_tiles, all_zooms))
        elif isinstance(item, Point):
            results.append(Tile.from_point(item, zoom))
        elif isinstance(item, TileIndex):
            results.append(Tile.from_xy(item.x, item.y, zoom))
    return results


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Run the CLI and return the process exit status."""
    parser = build_parser()
    raw = sys.argv[1:] if argv is None else argv
    opts = parser.parse_args(_shield_negative_arguments(raw))
    setup_logging(opts.verbose)
    if out is None:
        out = sys.stdout

    try:
        results = compute(
            [_unshield(arg) for arg in opts.args],
            (opts.lat_lon, opts.lon_lat, opts.x_y),
            opts.zoom,
            list_tiles=opts.list,
            all_zooms=opts.all_zooms,
        )
    except OsmTileError as exc:
        logger.debug("Invocation rejected", exc_info=True)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 1

    out.write(format_json(results) if opts.json else format_text(results))
    return 0


def run() -> None:
    """Entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
