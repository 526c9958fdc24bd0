"""Base of the unit family system.

Every unit class belongs to a family (time, distance, ...) identified by its
``ROOT`` class. The root is assigned automatically when a class is defined:
the first ancestor flagged with ``IS_FAMILY_ROOT`` becomes the family root.
Operations are only allowed between units sharing the same root, so a
duration can never be added to a distance by accident.

Example:
    >>> class Second(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    >>> class Minute(Second):
    ...     SCALE_TO_SI = 60.0   # ROOT is Second
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Family bookkeeping shared by every unit type.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the unit family.
        SYMBOL (ClassVar[str]): Display symbol.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the root unit of a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return
        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return
        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Raise ``TypeError`` unless ``unit_type`` is in the same family.

        Args:
            unit_type: Type of the other operand.

        Raises:
            TypeError: If the operand is not a unit or belongs to another family.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            msg = f"Incompatible units: {cls.ROOT.__name__} and {unit_type.__name__}"
            raise TypeError(msg)
