"""Positions held as a whole number of steps plus a fraction of a step."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Absorel:
    """Signed position made of an absolute step count and a relative offset.

    ``absolute`` counts whole steps from the origin; ``relative`` is the
    offset from that step, normally the fraction between two steps.
    """

    absolute: int = 0
    relative: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "absolute", int(self.absolute))
        object.__setattr__(self, "relative", float(self.relative))

    @classmethod
    def from_number(cls, number: Real) -> Absorel:
        """Split a number into its floor and the non-negative remainder."""
        absolute = math.floor(number)
        return cls(absolute, float(number - absolute))

    @staticmethod
    def _coerce(value: object) -> Absorel | None:
        if isinstance(value, Absorel):
            return value
        if isinstance(value, Real):
            return Absorel.from_number(value)
        return None

    def __add__(self, offset: Absorel | Real) -> Absorel:
        other = self._coerce(offset)
        if other is None:
            return NotImplemented
        absolute = (
            math.floor(self.relative + other.relative)
            + self.absolute
            + other.absolute
        )
        relative = (
            self.relative + other.relative + self.absolute + other.absolute
        ) - absolute
        return Absorel(absolute, relative)

    __radd__ = __add__

    def __sub__(self, offset: Absorel | Real) -> Absorel:
        other = self._coerce(offset)
        if other is None:
            return NotImplemented
        difference = (self.relative + self.absolute) - (
            other.relative + other.absolute
        )
        absolute = math.floor(difference)
        return Absorel(absolute, difference - absolute)

    def __rsub__(self, other: Real) -> Absorel:
        left = self._coerce(other)
        if left is None:
            return NotImplemented
        return left - self

    def __mul__(self, scale: Real) -> Absorel:
        if not isinstance(scale, Real):
            return NotImplemented
        return Absorel.from_number((self.relative + self.absolute) * scale)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Real) -> Absorel:
        if not isinstance(divisor, Real):
            return NotImplemented
        return Absorel.from_number((self.relative + self.absolute) / divisor)

    def __lt__(self, other: Absorel | Real) -> bool:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return float(self) < float(right)

    def __gt__(self, other: Absorel | Real) -> bool:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return float(self) > float(right)

    def __le__(self, other: Absorel | Real) -> bool:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return float(self) <= float(right)

    def __ge__(self, other: Absorel | Real) -> bool:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return float(self) >= float(right)

    def __float__(self) -> float:
        return self.absolute + self.relative

    def __str__(self) -> str:
        return format(float(self), "g")