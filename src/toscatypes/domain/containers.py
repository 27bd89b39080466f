"""TOSCA ``list`` and ``map`` types: untyped containers.

Entries are dynamically typed values (number, string, boolean, nested list,
nested map). TOSCA requires all entries of one list or map to share the
type named by the property's ``entry_schema``; that is a contract for the
caller to enforce, not something checked here. :func:`entry_kinds` gives
callers what they need to enforce it.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, TypeAliasType

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr, TypeAdapter

ToscaValue = TypeAliasType(
    "ToscaValue",
    "StrictBool | StrictInt | StrictFloat | StrictStr"
    " | list[ToscaValue] | dict[StrictStr, ToscaValue]",
)

ToscaList = list[ToscaValue]
ToscaMap = dict[StrictStr, ToscaValue]

_LIST_ADAPTER: TypeAdapter[list[Any]] = TypeAdapter(ToscaList)
_MAP_ADAPTER: TypeAdapter[dict[str, Any]] = TypeAdapter(ToscaMap)


class ValueKind(StrEnum):
    """Tag of a dynamically typed container entry."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    LIST = "list"
    MAP = "map"


def value_kind(value: Any) -> ValueKind:
    """Return the tag of *value*.

    Raises:
        TypeError: If *value* is not a valid container entry.
    """
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.LIST
    if isinstance(value, Mapping):
        return ValueKind.MAP
    msg = f"Unsupported container entry type: {type(value).__name__}"
    raise TypeError(msg)


def validate_list(data: Any) -> list[Any]:
    """Check that *data* is a list of valid entries (no coercion)."""
    return _LIST_ADAPTER.validate_python(data)


def validate_map(data: Any) -> dict[str, Any]:
    """Check that *data* is a string-keyed map of valid entries (no coercion)."""
    return _MAP_ADAPTER.validate_python(data)


def entry_kinds(container: list[Any] | Mapping[str, Any]) -> set[ValueKind]:
    """Kinds of the top-level entries of a list or map.

    A container honoring a single ``entry_schema`` yields at most one kind.
    """
    values = container.values() if isinstance(container, Mapping) else container
    return {value_kind(v) for v in values}
