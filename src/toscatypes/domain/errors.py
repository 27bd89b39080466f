"""Error taxonomy for value-type parsing and evaluation.

Every error is local and recoverable: it is raised to the immediate caller
(usually a host deserializer) and never retried. All errors subclass
``ValueError`` so pydantic turns them into field-level validation errors
carrying the field location.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar


class ErrorKind(StrEnum):
    """Machine-readable error codes."""

    MALFORMED_SCALAR = "MALFORMED_SCALAR"
    INVALID_NUMBER = "INVALID_NUMBER"
    UNKNOWN_UNIT = "UNKNOWN_UNIT"
    UNRESOLVED_UNIT = "UNRESOLVED_UNIT"
    INVALID_VERSION = "INVALID_VERSION"


class ToscaValueError(ValueError):
    """Base class for value-type errors.

    Attributes:
        kind: The error code of the concrete subclass.
        value: The offending input (whole token, field, or unit).
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value


class ScalarError(ToscaValueError):
    """Base class for scalar-unit errors."""


class MalformedScalarError(ScalarError):
    """Input does not split into exactly two whitespace-separated fields."""

    kind = ErrorKind.MALFORMED_SCALAR


class InvalidNumberError(ScalarError):
    """The magnitude field is not a finite real number."""

    kind = ErrorKind.INVALID_NUMBER


class UnknownUnitError(ScalarError):
    """The unit field is not in the accepted vocabulary."""

    kind = ErrorKind.UNKNOWN_UNIT


class UnresolvedUnitError(ScalarError):
    """A classified unit has no conversion factor.

    Indicates the vocabulary and the factor tables disagree. This is a
    defect, so callers should let it propagate.
    """

    kind = ErrorKind.UNRESOLVED_UNIT


class InvalidVersionError(ToscaValueError):
    """The text does not follow the TOSCA version grammar."""

    kind = ErrorKind.INVALID_VERSION
