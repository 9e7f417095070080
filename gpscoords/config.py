"""Global constants and type definitions for the coordinate package.

This module centralises the numeric types and the fixed reference values used
by every coordinate operation. The package works in a single coordinate
reference system (WGS84, SRID 4326) so none of these values are configurable
at runtime; they are plain module constants shared by the codecs and the
geodesic math.

Type Definitions:
    BASE_TYPE: Numeric values accepted as coordinate components. Python
               numbers and NumPy floating scalars both qualify.
    FLOAT_TYPE: Floating point width of the reference ``Coordinate``.

Constants:
    EARTH_DIAMETER: Sphere diameter in meters used by the haversine distance.
                    Twice the WGS84 equatorial radius, as used by cloud map
                    SDKs, rather than the IUGG mean radius.
    SRID: Spatial reference identifier of WGS84 geographic coordinates.
    WKB_POINT_TYPE: Well-Known-Binary geometry type code of a point.
    WKB_POINT_SIZE: Length in bytes of a 2-D WKB point.
    WKT_EMPTY: Well-Known-Text of an empty point.
    LATITUDE_RANGE, LONGITUDE_RANGE: Inclusive valid ranges in degrees.

Example:
    >>> from gpscoords.config import EARTH_DIAMETER, SRID
    >>> EARTH_DIAMETER
    12756274.0
    >>> SRID
    4326
"""

import numpy as np

BASE_TYPE = int | float | np.floating

FLOAT_TYPE: type[np.floating] = np.float64

EARTH_DIAMETER = 6378137 * 2.0

SRID = 4326

WKB_POINT_TYPE = 1
WKB_POINT_SIZE = 21

WKT_EMPTY = "POINT EMPTY"

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
