"""Error kinds raised while validating and parsing tile calculator input."""


class OsmTileError(ValueError):
    """Base class for all osmtile input errors."""


class ConfigError(OsmTileError):
    """Invalid invocation: input mode flags, zoom level or missing arguments."""


class ParseError(OsmTileError):
    """An argument does not have the shape expected by the active input mode."""


class RangeError(OsmTileError):
    """A coordinate or tile number is outside its valid range."""
