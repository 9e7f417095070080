"""Geographic coordinate value type and its codecs.

This package provides an immutable WGS84 coordinate with validation,
spherical distance and bearing, ellipsoidal geodesy, and encodings to the
simple display string, Well-Known-Text and Well-Known-Binary.

Components:
    Coordinate: Double precision latitude/longitude value
    SingleCoordinate: Same value type in single precision
    ExtendedCoordinate: Same value type in extended precision
    CoordinateFormatError: Raised by ``Coordinate.parse`` on unknown text
    wkt: Well-Known-Text point codec
    wkb: Well-Known-Binary point codec

Key Features:
    • Total construction: invalid input collapses to ``Coordinate.NONE``
    • Haversine distance and initial bearing on a fixed-diameter sphere
    • WGS84 ellipsoid distance and forward solution via pyproj
    • WKB decoding in either byte order

Typical Usage:
    >>> from gpscoords.geo import Coordinate
    >>> london = Coordinate(51.5074, -0.1278)
    >>> london.to_wkt()
    'POINT (-0.127800 51.507400)'
    >>> Coordinate.from_wkb(london.to_wkb()) == london
    True
    >>> Coordinate.parse("")
    Coordinate(latitude=nan, longitude=nan)
"""

from .coordinate import Coordinate, ExtendedCoordinate, SingleCoordinate
from .parse import CoordinateFormatError

__all__ = ["Coordinate", "SingleCoordinate", "ExtendedCoordinate", "CoordinateFormatError"]
