"""Unit family foundation for the quantities returned by coordinate math.

Coordinate operations hand back plain numbers tagged with their physical
meaning: great-circle distances are lengths, bearings are angles. The Unit
base class groups such types into families so that a distance cannot be
added to a bearing by accident, while values of the same family (Meter and
Kilometer, Radian and Degree) interoperate freely.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base unit of each family
- Automatic Assignment: ROOT classes are determined via the MRO
- Plain numbers: int and float are accepted as family-less operands

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Meter(Length):
    ...     pass  # ROOT = Length
    >>> Meter.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units derive from UnitFloat rather than from this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Set the ROOT class of a new unit type.

        The first ancestor flagged IS_FAMILY_ROOT becomes the ROOT; a class
        flagged itself is its own ROOT.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Check that an operand type may be combined with this unit.

        Plain numbers carry no family and always pass.

        Args:
            unit_type: Type of the other operand.

        Raises:
            TypeError: If the operand is a unit of a different family, or is
                neither a unit nor a number.
        """
        if issubclass(unit_type, Unit):
            if cls.ROOT is not unit_type.ROOT:
                msg = f"cannot combine {cls.ROOT.__name__} with {unit_type.ROOT.__name__}"
                raise TypeError(msg)
            return
        if not issubclass(unit_type, Number):
            msg = f"cannot combine {cls.ROOT.__name__} with {unit_type.__name__}"
            raise TypeError(msg)
