"""Angular units for bearings and azimuths.

Angles are stored in radians, the SI unit. ``Coordinate.bearing_to`` returns
a Radian; ``Coordinate.forward`` accepts any angle unit as its azimuth.

Classes:
    Radian: Base angular unit (SI).
    Degree: Angular unit in degrees, stored as radians.

Type Aliases:
    Angle: Union type for all angular units (Radian | Degree).

Example:
    >>> heading = Degree(90)  # due east
    >>> round(float(heading), 4)
    1.5708
    >>> Radian(0).to(Degree)
    0.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root angular unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "rad".
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: Degree (1/360 of a full rotation).

    Compass headings are usually written in degrees clockwise from north;
    the value is kept in radians so that it can be fed to trigonometric
    functions without conversion.

    Example:
        >>> bearing = Degree(45)
        >>> bearing.to(Degree)
        45.0
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
