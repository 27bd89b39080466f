"""Unit vocabulary and classification for TOSCA scalar-unit values.

Three disjoint unit families, each with conversion factors to its base unit:

- size: bytes, decimal (1000^n) and binary (1024^n) multiples.
- frequency: Hertz, decimal multiples.
- duration: integer nanosecond ticks.

Units are case-sensitive. Classification is an exact lookup in a single
token -> category map, never a pattern search: ``"B"`` is a substring of
``"kB"`` and a regex alternation would happily match both.

INVARIANT: every unit token belongs to exactly one category.
"""

from __future__ import annotations

from enum import StrEnum


class UnitCategory(StrEnum):
    """The unit families a scalar-unit value can belong to."""

    SIZE = "size"
    FREQUENCY = "frequency"
    DURATION = "duration"


# --- Conversion tables (factor to the category's base unit) ---

KB = 1000
KIB = 1024

SIZE_FACTORS: dict[str, float] = {
    "B": 1.0,
    "kB": float(KB),
    "KiB": float(KIB),
    "MB": float(KB**2),
    "MiB": float(KIB**2),
    "GB": float(KB**3),
    "GiB": float(KIB**3),
    "TB": float(KB**4),
    "TiB": float(KIB**4),
}

FREQUENCY_FACTORS: dict[str, float] = {
    "Hz": 1.0,
    "kHz": 1e3,
    "MHz": 1e6,
    "GHz": 1e9,
}

# Nanosecond ticks; each unit is a fixed integer ratio of the next one down.
NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

DURATION_FACTORS: dict[str, int] = {
    "d": DAY,
    "h": HOUR,
    "m": MINUTE,
    "s": SECOND,
    "ms": MILLISECOND,
    "us": MICROSECOND,
    "ns": NANOSECOND,
}

UNIT_FACTORS: dict[UnitCategory, dict[str, float] | dict[str, int]] = {
    UnitCategory.SIZE: SIZE_FACTORS,
    UnitCategory.FREQUENCY: FREQUENCY_FACTORS,
    UnitCategory.DURATION: DURATION_FACTORS,
}

BASE_UNITS: dict[UnitCategory, str] = {
    UnitCategory.SIZE: "B",
    UnitCategory.FREQUENCY: "Hz",
    UnitCategory.DURATION: "ns",
}


def _build_unit_index(
    tables: dict[UnitCategory, dict[str, float] | dict[str, int]],
) -> dict[str, UnitCategory]:
    """Invert the per-category tables into a token -> category map.

    Raises:
        ValueError: If a token is claimed by more than one category.
    """
    index: dict[str, UnitCategory] = {}
    for category, factors in tables.items():
        for unit in factors:
            existing = index.get(unit)
            if existing is not None:
                msg = f"Unit {unit!r} is claimed by both {existing} and {category}"
                raise ValueError(msg)
            index[unit] = category
    return index


UNIT_CATEGORIES: dict[str, UnitCategory] = _build_unit_index(UNIT_FACTORS)


def classify(unit: str) -> UnitCategory | None:
    """Return the category that owns *unit*, or None if it is unrecognized.

    Examples:
        >>> classify("kB")
        <UnitCategory.SIZE: 'size'>
        >>> classify("GHz")
        <UnitCategory.FREQUENCY: 'frequency'>
        >>> classify("MS") is None
        True
    """
    return UNIT_CATEGORIES.get(unit)


def units_for(category: UnitCategory) -> tuple[str, ...]:
    """Unit tokens of *category*, in table order."""
    return tuple(UNIT_FACTORS[category])


def base_unit(category: UnitCategory) -> str:
    """Base unit token of *category* (``B``, ``Hz`` or ``ns``)."""
    return BASE_UNITS[category]


def conversion_factor(unit: str, category: UnitCategory) -> float | int | None:
    """Factor converting one *unit* into the base unit of *category*.

    The lookup is scoped to *category*'s own table. Returns None when the
    unit is not part of it.
    """
    return UNIT_FACTORS.get(category, {}).get(unit)
