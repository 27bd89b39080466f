"""Scalar evaluation into normalized quantities in each category's base unit.

``evaluate()`` is a pure function of ``(literal, unit, category)``. It runs
after validation, never during it, so a host can validate a whole document
before computing any derived quantity.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

from toscatypes.domain.errors import UnresolvedUnitError
from toscatypes.domain.units import MICROSECOND, UnitCategory, conversion_factor


@dataclass(frozen=True)
class Size:
    """A size in bytes."""

    category: ClassVar[UnitCategory] = UnitCategory.SIZE

    bytes: float

    @property
    def value(self) -> float:
        return self.bytes


@dataclass(frozen=True)
class Frequency:
    """A frequency in Hertz."""

    category: ClassVar[UnitCategory] = UnitCategory.FREQUENCY

    hertz: float

    @property
    def value(self) -> float:
        return self.hertz


@dataclass(frozen=True)
class Duration:
    """A duration as an integer count of nanosecond ticks."""

    category: ClassVar[UnitCategory] = UnitCategory.DURATION

    ticks: int

    @property
    def value(self) -> int:
        return self.ticks

    def to_timedelta(self) -> timedelta:
        """Convert to :class:`datetime.timedelta`.

        ``timedelta`` resolves microseconds, so the sub-microsecond
        remainder is truncated toward zero.

        Raises:
            OverflowError: Beyond ``timedelta``'s range of 999999999 days.
        """
        whole_us = abs(self.ticks) // MICROSECOND
        return timedelta(microseconds=whole_us if self.ticks >= 0 else -whole_us)


NormalizedValue = Size | Frequency | Duration


def evaluate(literal: float, unit: str, category: UnitCategory) -> NormalizedValue:
    """Normalize ``literal unit`` into the base unit of *category*.

    Inputs from :func:`~toscatypes.domain.scalar.validate_scalar` always
    produce finite values.

    Raises:
        UnresolvedUnitError: If *unit* has no factor in *category*'s table.
    """
    factor = conversion_factor(unit, category)
    if factor is None:
        msg = f"No {category} conversion factor for unit {unit!r}"
        raise UnresolvedUnitError(msg, value=unit)

    if category == UnitCategory.SIZE:
        return Size(bytes=literal * factor)
    if category == UnitCategory.FREQUENCY:
        return Frequency(hertz=literal * factor)
    return Duration(ticks=round(literal * factor))
