"""Length units for surface distances.

Distances are stored in meters, the SI unit. ``Coordinate.distance_to`` and
``Coordinate.geodesic_distance_to`` return a Meter; ``Coordinate.forward``
accepts any length unit.

Classes:
    Meter: Base distance unit (SI).
    Kilometer: 1000 meters.

Type Aliases:
    Length: Union type for all distance units (Meter | Kilometer).

Example:
    >>> Kilometer(343.5).to(Meter)
    343500.0
    >>> str(Meter(1500).as_unit(Kilometer))
    '1.5 km'
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: Meter (SI base unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Distance unit: Kilometer (1000 meters)."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


Length = Meter | Kilometer
