"""WGS84 coordinate value type with geodesic math and WKT/WKB codecs.

gpscoords models a single geographic position as an immutable value that is
always either valid or a recognisable invalid marker. Data arriving from
databases, network payloads or files can be decoded without error handling
around every call: bad input yields ``Coordinate.NONE`` and callers test
``is_finite``.

Package Components:
    Geographic Values (gpscoords.geo):
        • Coordinate: validated latitude/longitude in degrees
        • SingleCoordinate / ExtendedCoordinate: other float widths
        • Haversine distance and initial bearing
        • WGS84 ellipsoid distance and forward solution
        • Display string, Well-Known-Text and Well-Known-Binary codecs
        • parse / try_parse entry points

    Measurement Framework (gpscoords.unit):
        • Meter / Kilometer results for distances
        • Radian / Degree results for bearings and azimuths
        • Family checks preventing distance/angle mixing

    Configuration (gpscoords.config):
        • Earth diameter, SRID and WKB constants
        • Default float width

Usage Patterns:
    Validation:
        >>> from gpscoords import Coordinate
        >>> Coordinate(91, 0).is_finite
        False

    Distance and bearing:
        >>> london = Coordinate(51.5074, -0.1278)
        >>> paris = Coordinate(48.8566, 2.3522)
        >>> print(f"{float(london.distance_to(paris)) / 1000:.0f} km")
        344 km

    Codecs:
        >>> Coordinate.from_wkt("POINT EMPTY") == Coordinate.NONE
        True
        >>> len(paris.to_wkb())
        21

Logging:
    Modules log through ``logging.getLogger(__name__)``. The package logger
    carries a NullHandler; applications configure output themselves.
"""

import logging

from gpscoords.geo import (
    Coordinate,
    CoordinateFormatError,
    ExtendedCoordinate,
    SingleCoordinate,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "SingleCoordinate",
    "ExtendedCoordinate",
    "CoordinateFormatError",
]
