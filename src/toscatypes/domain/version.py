"""TOSCA ``version`` type.

Grammar::

    major_version.minor_version[.fix_version[.qualifier[-build_version]]]

- major, minor: required non-negative integers.
- fix: optional non-negative integer (defaults to 0).
- qualifier: optional named pre-release (e.g. ``alpha``, ``RC1``).
- build: optional non-negative integer, only allowed after a qualifier.

Examples: ``2.0``, ``1.0.1``, ``18.0.3.beta-1``.
"""

from __future__ import annotations

import functools
import re
from typing import Any, Self

from pydantic import BaseModel, Field, GetCoreSchemaHandler, model_validator
from pydantic_core import core_schema

from toscatypes.domain.errors import InvalidVersionError

_VERSION_PATTERN = re.compile(
    r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)"
    r"(?:\.(?P<fix>[0-9]+)"
    r"(?:\.(?P<qualifier>[A-Za-z0-9_]+)"
    r"(?:-(?P<build>[0-9]+))?)?)?"
)


@functools.total_ordering
class ToscaVersion(BaseModel):
    """A parsed TOSCA version.

    A qualified version is a pre-release, so ``1.0.0.beta`` sorts before
    ``1.0.0``.
    """

    model_config = {"frozen": True}

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    fix: int = Field(default=0, ge=0)
    qualifier: str | None = None
    build: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _build_needs_qualifier(self) -> Self:
        if self.build and self.qualifier is None:
            msg = "build_version requires a qualifier"
            raise ValueError(msg)
        return self

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse *text* according to the TOSCA version grammar.

        Raises:
            InvalidVersionError: If *text* does not match the grammar.
        """
        if not isinstance(text, str):
            msg = f"Version must be a string, got {type(text).__name__}"
            raise InvalidVersionError(msg, value=text)
        match = _VERSION_PATTERN.fullmatch(text.strip())
        if match is None:
            msg = f"Invalid TOSCA version: {text!r}"
            raise InvalidVersionError(msg, value=text)
        return cls(
            major=int(match["major"]),
            minor=int(match["minor"]),
            fix=int(match["fix"] or 0),
            qualifier=match["qualifier"],
            build=int(match["build"] or 0),
        )

    def sort_key(self) -> tuple[int, int, int, int, str, int]:
        release = 1 if self.qualifier is None else 0
        return (self.major, self.minor, self.fix, release, self.qualifier or "", self.build)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ToscaVersion):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.fix}"
        if self.qualifier is not None:
            text += f".{self.qualifier}"
            if self.build:
                text += f"-{self.build}"
        return text


class VersionField:
    """Pydantic field type accepting the textual form of :class:`ToscaVersion`.

    Usage::

        class NodeType(BaseModel):
            version: Annotated[ToscaVersion, VersionField()]
    """

    @staticmethod
    def _coerce(value: Any) -> ToscaVersion:
        if isinstance(value, ToscaVersion):
            return value
        return ToscaVersion.parse(value)

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self._coerce,
            serialization=core_schema.to_string_ser_schema(),
        )
