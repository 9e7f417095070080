"""Float-based units with automatic SI conversion.

UnitFloat is a ``float`` subclass that stores its value in SI units (meters,
radians) while remembering the unit it was created in. Because it is a real
float, results of coordinate math drop straight into ``math`` functions and
formatting, and NaN results (distance to an invalid coordinate) stay NaN.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SCALE_TO_SI = 1.0
    ...     SYMBOL = "m"
    ...
    >>> class Kilometer(Meter):
    ...     SCALE_TO_SI = 1000.0
    ...     SYMBOL = "km"
    ...
    >>> distance = Kilometer(343.5)
    >>> float(distance)
    343500.0
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Base class for float units stored in SI scale.

    Operations are allowed between units of the same family and with plain
    numbers, which are taken to be SI values.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Conversion factor to SI units.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a new instance from a value in the unit's native scale.

        Args:
            value: Numeric value in the unit's native scale.

        Returns:
            UnitFloat: New instance with value stored in SI units.
        """
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create instance directly from SI unit value."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Value in the target unit's scale.

        Raises:
            TypeError: If the target belongs to another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Convert to another unit while preserving type information."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat | Number) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat | Number) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat | Number) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat | Number) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Scale by a plain number.

        Raises:
            TypeError: If k is not a numeric type.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        raise TypeError

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        """Divide by a plain number.

        Raises:
            TypeError: If k is not a numeric type.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __abs__(self) -> UnitFloat:
        return type(self).from_si(abs(float(self)))

    # -------------------------------- Comparisons --------------------------------
    def __lt__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        """Compare SI values.

        Raises:
            TypeError: If other is a unit of a different family.
        """
        if not isinstance(other, Number):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) != float(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Value and symbol in the unit's native scale (e.g. "343.5 km")."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Native value with the SI equivalent (e.g. "90 ° (= 1.5708 SI)")."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
