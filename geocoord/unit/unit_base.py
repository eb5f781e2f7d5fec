"""Base unit class for type-safe physical quantities.

Every quantity the geo core consumes (bearings, distances, elevations) is an
instance of a unit class. Unit classes are grouped into families; each family
has a ROOT class, assigned automatically from the first ancestor that sets
``IS_FAMILY_ROOT``. Units of the same family can be combined and converted,
units of different families cannot.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Foot(Length):
    ...     pass  # ROOT = Length
    >>> Foot.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units inherit from UnitFloat rather than directly from this class.

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
        """Set ROOT to the nearest ancestor flagged IS_FAMILY_ROOT, or to cls."""
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
    def is_same_family(cls, unit_type: type) -> bool:
        """Return True if ``unit_type`` is a unit of the same family as cls."""
        return isinstance(unit_type, type) and issubclass(unit_type, Unit) and cls.ROOT is unit_type.ROOT

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Check that two unit types measure the same physical quantity.

        Args:
            unit_type: The other unit type to check compatibility with.

        Raises:
            TypeError: If the units belong to different families.
        """
        if not cls.is_same_family(unit_type):
            other = getattr(unit_type, "__name__", repr(unit_type))
            msg = f"incompatible units: {cls.__name__} ({cls.ROOT.__name__} family) and {other}"
            raise TypeError(msg)
