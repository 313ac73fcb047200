"""Pytest configuration and fixtures for osmtile tests."""

import pytest

from osmtile.geometry import BoundingBox, Point


@pytest.fixture
def greenwich():
    """Greenwich Royal Observatory."""
    return Point(latitude=51.4778, longitude=-0.0014)


@pytest.fixture
def equator_bbox():
    """A 20 degree square centred on null island."""
    return BoundingBox(min_lat=-10.0, min_lon=-10.0, max_lat=10.0, max_lon=10.0)


@pytest.fixture
def kyoto_bbox():
    """A few blocks around Nijo castle, Kyoto."""
    return BoundingBox(
        min_lat=35.03259, min_lon=135.71654, max_lat=35.03504, max_lon=135.71988
    )
