"""Float-backed units stored in SI.

``UnitFloat`` subclasses ``float`` so values flow straight into ``math`` and
numpy, while arithmetic and comparisons are checked against the unit family.
Values are converted to SI on construction using the class ``SCALE_TO_SI``.
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Type-safe float quantity with automatic SI conversion.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor from the native scale to SI.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance from a value that is already in SI."""
        return float.__new__(cls, si_value)

    # -------------------------------- Arithmetic Operations --------------------------------

    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        if isinstance(k, UnitFloat) or not isinstance(k, Number):
            return NotImplemented
        return type(self).from_si(float(self) * float(k))

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number | UnitFloat) -> UnitFloat | float:
        """Divide by a scalar, or by a same-family unit to get a plain ratio."""
        if isinstance(k, UnitFloat):
            self._check_same_root(type(k))
            return float(self) / float(k)
        if isinstance(k, Number):
            return type(self).from_si(float(self) / float(k))
        return NotImplemented

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    # -------------------------------- Comparisons --------------------------------

    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitFloat):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = float.__hash__

    def __str__(self) -> str:
        return f"{float(self) / self.SCALE_TO_SI:g} {self.SYMBOL}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self) / self.SCALE_TO_SI:g})"
