"""Immutable WGS84 coordinate value type.

A Coordinate is either valid (latitude in [-90, 90], longitude in
[-180, 180], both finite) or the canonical invalid value whose two fields
are NaN. Construction never fails on numeric input: anything out of range
collapses to the invalid value, so callers holding coordinates decoded from
external data test ``is_finite`` instead of catching errors.

Floating point width is a class-level choice. ``Coordinate`` works in double
precision; ``SingleCoordinate`` and ``ExtendedCoordinate`` run the same
validation, math and codecs in ``numpy.float32`` and ``numpy.longdouble``.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np
from pyproj import Geod

from .. import config
from ..unit import Angle, Length, Meter, Radian
from . import parse as _parse
from . import wkb, wkt

# WGS84 geodesic calculator for ellipsoidal distances and forward solutions
_WGS84 = Geod(ellps="WGS84")

_LAT_MIN, _LAT_MAX = config.LATITUDE_RANGE
_LON_MIN, _LON_MAX = config.LONGITUDE_RANGE


def _same(a, b) -> bool:
    # NaN matches NaN, unlike ==
    return bool(a == b) or (math.isnan(a) and math.isnan(b))


def _hash_key(value):
    return None if math.isnan(value) else value


def _to_width(ftype: type[np.floating], value):
    """Convert a component into ``ftype``, saturating instead of raising."""
    if isinstance(value, (str, bytes, bytearray)):
        msg = f"coordinate components must be numbers, not {type(value).__name__}"
        raise TypeError(msg)
    try:
        return ftype(value)
    except OverflowError:
        # Python ints wider than any float
        return ftype(math.inf if value > 0 else -math.inf)


@dataclass(frozen=True, eq=False, repr=False)
class Coordinate:
    """A latitude/longitude pair in WGS84 degrees.

    Instances are immutable and compare by value. Two invalid coordinates are
    equal to each other (and hash alike) even though their NaN fields are not
    equal under float comparison.

    Attributes:
        latitude (float): Degrees north, in [-90, 90], or NaN when invalid.
        longitude (float): Degrees east, in [-180, 180], or NaN when invalid.
        FLOAT_TYPE (ClassVar[type[np.floating]]): Width the fields are stored in.
        NONE (ClassVar[Coordinate]): Canonical invalid coordinate of this class.
        SRID (ClassVar[int]): Spatial reference identifier, always 4326.

    Example:
        >>> london = Coordinate(51.5074, -0.1278)
        >>> paris = Coordinate.from_wkt("POINT (2.3522 48.8566)")
        >>> round(float(london.distance_to(paris)) / 1000)
        344
        >>> Coordinate(91, 0).is_finite
        False
        >>> Coordinate(91, 0) == Coordinate.NONE
        True
    """

    latitude: float
    longitude: float

    FLOAT_TYPE: ClassVar[type[np.floating]] = config.FLOAT_TYPE
    NONE: ClassVar[Coordinate]
    SRID: ClassVar[int] = config.SRID

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.NONE = cls(math.nan, math.nan)

    def __post_init__(self):
        with np.errstate(over="ignore", invalid="ignore"):
            latitude = _to_width(self.FLOAT_TYPE, self.latitude)
            longitude = _to_width(self.FLOAT_TYPE, self.longitude)

        valid = _LAT_MIN <= latitude <= _LAT_MAX and _LON_MIN <= longitude <= _LON_MAX
        if not valid:
            latitude = longitude = self.FLOAT_TYPE(math.nan)

        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)

    @classmethod
    def from_pair(cls, point: tuple[config.BASE_TYPE, config.BASE_TYPE]) -> Coordinate:
        """Create a coordinate from a ``(latitude, longitude)`` pair.

        Example:
            >>> Coordinate.from_pair((40.0, -74.0)) == Coordinate(40.0, -74.0)
            True
        """
        latitude, longitude = point
        return cls(latitude, longitude)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Coordinate:
        """Create a coordinate from its serialized ``latitude``/``longitude`` fields."""
        return cls(data["latitude"], data["longitude"])

    def to_dict(self) -> dict[str, float]:
        """Serializable fields; validity is derived and not included."""
        return {"latitude": float(self.latitude), "longitude": float(self.longitude)}

    @property
    def is_finite(self) -> bool:
        """True for a valid coordinate, False for the invalid value."""
        return bool(np.isfinite(self.latitude) and np.isfinite(self.longitude))

    def __iter__(self) -> Iterator[float]:
        yield self.latitude
        yield self.longitude

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return (
            self.FLOAT_TYPE is other.FLOAT_TYPE
            and _same(self.latitude, other.latitude)
            and _same(self.longitude, other.longitude)
        )

    def __hash__(self) -> int:
        return hash((self.FLOAT_TYPE, _hash_key(self.latitude), _hash_key(self.longitude)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(latitude={float(self.latitude)!r}, longitude={float(self.longitude)!r})"

    def __str__(self) -> str:
        """Display form ``"lat,lon"`` with six decimals, ``"NaN,NaN"`` when invalid."""
        if not self.is_finite:
            return "NaN,NaN"
        return f"{self.latitude:.6f},{self.longitude:.6f}"

    # -------------------------------- Geodesic Math --------------------------------
    def distance_to(self, other: Coordinate | None) -> Meter:
        """Great-circle distance to another coordinate.

        Uses the haversine formula on a sphere of diameter
        ``config.EARTH_DIAMETER``, computed in this coordinate's float width.

        Args:
            other (Coordinate): Target coordinate.

        Returns:
            Meter: Surface distance, NaN when either coordinate is invalid or
            missing.

        Example:
            >>> a = Coordinate(40.0, -74.0)
            >>> float(a.distance_to(a))
            0.0
            >>> math.isnan(a.distance_to(Coordinate.NONE))
            True
        """
        if other is None or not (self.is_finite and other.is_finite):
            return Meter(math.nan)

        ftype = self.FLOAT_TYPE
        lat_a, lon_a = self.latitude, self.longitude
        lat_b, lon_b = ftype(other.latitude), ftype(other.longitude)
        pi = ftype(np.pi)
        one = ftype(1)

        fi1 = lat_a * pi / ftype(180)
        fi2 = lat_b * pi / ftype(180)
        # abs() makes a->b and b->a bit-identical
        delta_fi = np.sin(abs(lat_b - lat_a) * pi / ftype(360))
        delta_lambda = np.sin(abs(lon_b - lon_a) * pi / ftype(360))

        a = delta_fi * delta_fi + np.cos(fi1) * np.cos(fi2) * delta_lambda * delta_lambda
        # rounding can push a past 1 for antipodal points
        a = min(a, one)

        return Meter(float(ftype(config.EARTH_DIAMETER) * np.arctan2(np.sqrt(a), np.sqrt(one - a))))

    def bearing_to(self, other: Coordinate | None) -> Radian:
        """Initial great-circle bearing towards another coordinate.

        Measured clockwise from true north, in (-pi, pi]. Due east is pi/2,
        due west -pi/2.

        Args:
            other (Coordinate): Target coordinate.

        Returns:
            Radian: Initial bearing, NaN when either coordinate is invalid or
            missing.
        """
        if other is None or not (self.is_finite and other.is_finite):
            return Radian(math.nan)

        ftype = self.FLOAT_TYPE
        to_rad = ftype(np.pi) / ftype(180)

        fi_a = self.latitude * to_rad
        fi_b = ftype(other.latitude) * to_rad
        delta_lambda = (ftype(other.longitude) - self.longitude) * to_rad

        y = np.sin(delta_lambda) * np.cos(fi_b)
        x = np.cos(fi_a) * np.sin(fi_b) - np.sin(fi_a) * np.cos(fi_b) * np.cos(delta_lambda)
        return Radian(float(np.arctan2(y, x)))

    def geodesic_distance_to(self, other: Coordinate | None) -> Meter:
        """Distance along the WGS84 ellipsoid to another coordinate.

        More accurate than ``distance_to`` over long baselines; NaN when
        either coordinate is invalid or missing.
        """
        if other is None or not (self.is_finite and other.is_finite):
            return Meter(math.nan)

        _, _, dist = _WGS84.inv(
            float(self.longitude),
            float(self.latitude),
            float(other.longitude),
            float(other.latitude),
        )
        return Meter(dist)

    def forward(self, azimuth: Angle, distance: Length) -> Coordinate:
        """Destination reached by travelling along a WGS84 geodesic.

        Args:
            azimuth (Angle): Initial bearing from north (Degree(90) is east).
                Plain numbers are taken as radians.
            distance (Length): Distance to travel. Plain numbers are meters.

        Returns:
            Coordinate: New coordinate of the same class; the invalid value
            when this coordinate is invalid.

        Example:
            >>> from gpscoords.unit import Degree, Kilometer
            >>> start = Coordinate(0.0, 0.0)
            >>> north = start.forward(Degree(0), Kilometer(10))
            >>> round(float(north.latitude), 3)
            0.09
        """
        if not self.is_finite:
            return type(self).NONE

        lon, lat, _ = _WGS84.fwd(
            float(self.longitude),
            float(self.latitude),
            math.degrees(float(azimuth)),
            float(distance),
        )
        return type(self)(lat, lon)

    # -------------------------------- Text Codec --------------------------------
    def to_wkt(self) -> str:
        """Well-Known-Text, ``POINT (lon lat)`` or ``POINT EMPTY``."""
        return wkt.format_point(self.latitude, self.longitude)

    @classmethod
    def from_wkt(cls, text: str | None) -> Coordinate:
        """Decode Well-Known-Text.

        Never raises: text that is not a WKT point, ``POINT EMPTY`` and points
        outside the valid range all give ``cls.NONE``.

        Example:
            >>> Coordinate.from_wkt("point ( 2.3522   48.8566 )")
            Coordinate(latitude=48.8566, longitude=2.3522)
        """
        point = wkt.read_point(text)
        if point is None:
            return cls.NONE
        return cls(*point)

    @classmethod
    def try_parse(cls, text: str | None) -> tuple[bool, Coordinate]:
        """Parse any supported text form without raising.

        See ``gpscoords.geo.parse.try_parse``.
        """
        return _parse.try_parse(cls, text)

    @classmethod
    def parse(cls, text: str | None) -> Coordinate:
        """Parse any supported text form.

        Raises:
            CoordinateFormatError: If the text is in no supported format.
        """
        return _parse.parse(cls, text)

    # -------------------------------- Binary Codec --------------------------------
    def to_wkb(self) -> bytes:
        """21-byte Well-Known-Binary point in the host byte order."""
        return wkb.encode_point(self.latitude, self.longitude)

    @classmethod
    def from_wkb(cls, data: bytes | bytearray | memoryview | None) -> Coordinate:
        """Decode a Well-Known-Binary point.

        Either byte order is accepted. Buffers that are not 21-byte points and
        decoded values outside the valid range give ``cls.NONE``.
        """
        point = wkb.decode_point(data)
        if point is None:
            return cls.NONE
        return cls(*point)


Coordinate.NONE = Coordinate(math.nan, math.nan)


class SingleCoordinate(Coordinate):
    """Coordinate stored and computed in single precision."""

    FLOAT_TYPE = np.float32


class ExtendedCoordinate(Coordinate):
    """Coordinate stored and computed in the platform's extended precision."""

    FLOAT_TYPE = np.longdouble
