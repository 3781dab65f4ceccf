"""Time spans stored as a whole number of nanoseconds."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

_NS_PER_MICROSECOND = 1_000
_NS_PER_MILLISECOND = 1_000_000
_NS_PER_SECOND = 1_000_000_000.0
_NS_PER_MINUTE = 60_000_000_000.0
_NS_PER_HOUR = 3_600_000_000_000.0


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True, order=True)
class Duration:
    """An immutable span of time measured in nanoseconds."""

    nano: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "nano", int(self.nano))

    @classmethod
    def from_hours(cls, hours: float) -> Duration:
        return cls(int(hours * _NS_PER_HOUR))

    @classmethod
    def from_minutes(cls, minutes: float) -> Duration:
        return cls(int(minutes * _NS_PER_MINUTE))

    @classmethod
    def from_seconds(cls, seconds: float) -> Duration:
        return cls(int(seconds * _NS_PER_SECOND))

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Duration:
        return cls(int(milliseconds) * _NS_PER_MILLISECOND)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Duration:
        return cls(int(microseconds) * _NS_PER_MICROSECOND)

    def as_nanoseconds(self) -> int:
        return self.nano

    def as_microseconds(self) -> int:
        return _truncating_div(self.nano, _NS_PER_MICROSECOND)

    def as_milliseconds(self) -> int:
        return _truncating_div(self.nano, _NS_PER_MILLISECOND)

    def as_seconds(self) -> float:
        return self.nano / _NS_PER_SECOND

    def as_minutes(self) -> float:
        return self.as_seconds() / 60.0

    def as_hours(self) -> float:
        return self.as_minutes() / 24.0

    def __add__(self, offset: Duration) -> Duration:
        if not isinstance(offset, Duration):
            return NotImplemented
        return Duration(self.nano + offset.nano)

    def __sub__(self, offset: Duration) -> Duration:
        if not isinstance(offset, Duration):
            return NotImplemented
        return Duration(self.nano - offset.nano)

    def __mul__(self, scale: Real) -> Duration:
        if not isinstance(scale, Real):
            return NotImplemented
        return Duration(int(self.nano * scale))

    __rmul__ = __mul__

    def __truediv__(self, divisor: Real) -> Duration:
        if not isinstance(divisor, Real):
            return NotImplemented
        if isinstance(divisor, int):
            return Duration(_truncating_div(self.nano, divisor))
        return Duration(int(self.nano / divisor))

    def __str__(self) -> str:
        return f"{format(self.nano / _NS_PER_SECOND, 'g')} seconds"