"""ServiceResult — what every service operation returns.

Services never raise for expected failures (bad input, missing file); they
return ``ok=False`` with a ServiceError. The CLI decides how to render and
which exit status to use.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is machine-readable: an ErrorKind value such as
    ``UNKNOWN_UNIT``, or an operational code such as ``FILE_NOT_FOUND``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"evaluate"``, ``"check"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal notes for the caller.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Shorthand for a failed result carrying a ServiceError."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
