"""TOSCA ``range`` type, a numeric lower/upper boundary pair.

Used e.g. for port ranges to open in a firewall. The upper bound may be the
``UNBOUNDED`` sentinel (written ``UNBOUNDED`` in a document) meaning there
is no upper limit. The sentinel is never a valid lower bound.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

UNBOUNDED: int = 9223372036854775807  # 2**63 - 1
UNBOUNDED_KEYWORD = "UNBOUNDED"


def _check_bound(value: Any, name: str, *, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Range {name} bound must be an integer, got {value!r}"
        raise ValueError(msg)
    if not 0 <= value <= maximum:
        msg = f"Range {name} bound must be in [0, {maximum}], got {value}"
        raise ValueError(msg)
    return value


@dataclass(frozen=True)
class ToscaRange:
    """Immutable ``(lower, upper)`` pair of non-negative integers.

    ``lower > upper`` is allowed and denotes an empty range.

    Raises:
        ValueError: On construction, for a bound that is not an integer,
            is negative, or is ``UNBOUNDED`` in the lower position.
    """

    lower: int
    upper: int

    def __post_init__(self) -> None:
        _check_bound(self.lower, "lower", maximum=UNBOUNDED - 1)
        _check_bound(self.upper, "upper", maximum=UNBOUNDED)

    @property
    def is_unbounded(self) -> bool:
        return self.upper == UNBOUNDED

    @property
    def is_empty(self) -> bool:
        return self.lower > self.upper

    def __iter__(self) -> Iterator[int]:
        yield self.lower
        yield self.upper

    def __contains__(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return self.lower <= value <= self.upper

    def __str__(self) -> str:
        upper = UNBOUNDED_KEYWORD if self.is_unbounded else str(self.upper)
        return f"[{self.lower}, {upper}]"

    @classmethod
    def from_literal(cls, value: Any) -> ToscaRange:
        """Build a range from its document form, ``[lower, upper]``.

        The upper bound may be the ``UNBOUNDED`` keyword.

        Raises:
            ValueError: Wrong shape, or a bound rejected by the constructor.
        """
        if isinstance(value, ToscaRange):
            return value
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 2:
            msg = f"Range must be a two-item list [lower, upper], got {value!r}"
            raise ValueError(msg)
        lower, upper = value
        if upper == UNBOUNDED_KEYWORD:
            upper = UNBOUNDED
        return cls(lower, upper)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_literal,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda r: [r.lower, UNBOUNDED_KEYWORD if r.is_unbounded else r.upper]
            ),
        )
