"""Scalar-unit parsing and validation (TOSCA ``scalar-unit`` types).

A scalar-unit is written ``<number> <unit>``, e.g. ``10 GB``, ``500 ms``,
``2.5 GHz``. Validation and evaluation are separate steps:

- ``validate_scalar()`` splits and checks the text and classifies the unit.
- ``ParsedScalar.evaluate()`` (see :mod:`toscatypes.domain.quantities`)
  computes the normalized quantity on demand.

``ScalarUnit`` and its category-restricted subclasses are the host-facing
field types. They plug into pydantic models, so a document model declaring
``disk_size: SizeScalar`` validates the field while loading and reports
failures at the field's location.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, ClassVar, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from toscatypes.domain.errors import InvalidNumberError, MalformedScalarError, UnknownUnitError
from toscatypes.domain.quantities import NormalizedValue, evaluate
from toscatypes.domain.units import UnitCategory, base_unit, classify, conversion_factor

# One field, one whitespace run, one field. Nothing before or after.
_SCALAR_PATTERN = re.compile(r"(\S+)\s+(\S+)")

# Decimal or scientific notation: 10, -1.5, 1., .5, 2.5e3
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class ParsedScalar:
    """A validated scalar-unit: magnitude, unit token and its category."""

    literal: float
    unit: str
    category: UnitCategory

    def evaluate(self) -> NormalizedValue:
        return evaluate(self.literal, self.unit, self.category)


def split_scalar(raw: Any) -> tuple[str, str]:
    """Split *raw* into its ``(number, unit)`` fields.

    Raises:
        MalformedScalarError: Unless *raw* is a string of exactly two
            fields separated by a single whitespace run.
    """
    if not isinstance(raw, str):
        msg = f"Scalar-unit must be a string, got {type(raw).__name__}"
        raise MalformedScalarError(msg, value=raw)
    match = _SCALAR_PATTERN.fullmatch(raw)
    if match is None:
        msg = f"Not a scalar-unit (expected '<number> <unit>'): {raw!r}"
        raise MalformedScalarError(msg, value=raw)
    return match.group(1), match.group(2)


def parse_literal(text: str) -> float:
    """Parse the magnitude field as a finite real number.

    Raises:
        InvalidNumberError: For anything that is not decimal or scientific
            notation, and for values that overflow to infinity.
    """
    if NUMBER_PATTERN.fullmatch(text) is None:
        msg = f"Invalid scalar magnitude: {text!r}"
        raise InvalidNumberError(msg, value=text)
    value = float(text)
    if not math.isfinite(value):
        msg = f"Scalar magnitude is not finite: {text!r}"
        raise InvalidNumberError(msg, value=text)
    return value


def validate_scalar(raw: Any) -> ParsedScalar:
    """Validate a scalar-unit string without evaluating it.

    Raises:
        MalformedScalarError: Wrong shape.
        InvalidNumberError: Magnitude is not a finite real, or its value in
            the base unit is not finite.
        UnknownUnitError: Unit is in no category.
    """
    number, unit = split_scalar(raw)
    literal = parse_literal(number)
    category = classify(unit)
    if category is None:
        msg = f"Unknown unit {unit!r} in scalar-unit {raw!r}"
        raise UnknownUnitError(msg, value=unit)
    factor = conversion_factor(unit, category)
    if factor is not None and not math.isfinite(literal * factor):
        msg = f"Scalar magnitude {number!r} overflows when converted to {base_unit(category)}"
        raise InvalidNumberError(msg, value=number)
    return ParsedScalar(literal=literal, unit=unit, category=category)


class ScalarUnit:
    """A validated scalar-unit value as it appears in a document.

    Construction validates; :meth:`evaluate` normalizes. Subclasses set
    ``accepts`` to restrict the value to a single unit category.
    """

    __slots__ = ("_parsed", "_raw")

    accepts: ClassVar[UnitCategory | None] = None

    def __init__(self, raw: str) -> None:
        parsed = validate_scalar(raw)
        if self.accepts is not None and parsed.category != self.accepts:
            msg = f"Unit {parsed.unit!r} is not a {self.accepts} unit"
            raise UnknownUnitError(msg, value=parsed.unit)
        self._raw = raw
        self._parsed = parsed

    @classmethod
    def parse(cls, raw: str) -> Self:
        return cls(raw)

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def parsed(self) -> ParsedScalar:
        return self._parsed

    @property
    def literal(self) -> float:
        return self._parsed.literal

    @property
    def unit(self) -> str:
        return self._parsed.unit

    @property
    def category(self) -> UnitCategory:
        return self._parsed.category

    def evaluate(self) -> NormalizedValue:
        """Normalize into the category's base unit (bytes, Hz, ns ticks)."""
        return self._parsed.evaluate()

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarUnit):
            return NotImplemented
        return self._parsed == other._parsed

    def __hash__(self) -> int:
        return hash(self._parsed)

    # --- pydantic integration ---

    @classmethod
    def _coerce(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        if isinstance(value, ScalarUnit):
            value = value.raw
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return handler(core_schema.str_schema(pattern=r"^\S+\s+\S+$"))


class SizeScalar(ScalarUnit):
    """TOSCA ``scalar-unit.size``."""

    __slots__ = ()
    accepts = UnitCategory.SIZE


class FrequencyScalar(ScalarUnit):
    """TOSCA ``scalar-unit.frequency``."""

    __slots__ = ()
    accepts = UnitCategory.FREQUENCY


class DurationScalar(ScalarUnit):
    """TOSCA ``scalar-unit.time``."""

    __slots__ = ()
    accepts = UnitCategory.DURATION
