"""Type-safe units for the results of coordinate math.

Architecture:
    - unit_base: Unit class with family management
    - unit_float: float-based units with automatic SI conversion
    - unit_angle: Radian and Degree, for bearings and azimuths
    - unit_distance: Meter and Kilometer, for surface distances

Unit Families:
    - Angle Family: Radian (root), Degree
    - Distance Family: Meter (root), Kilometer

Example:
    >>> from gpscoords.unit import Degree, Kilometer, Meter, Radian
    >>> Kilometer(1.5) + Meter(500)
    2 km (= 2000 SI)
    >>> Meter(250).to(Kilometer)
    0.25
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "Length",
]
