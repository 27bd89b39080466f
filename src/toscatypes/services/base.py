"""Common constructor and error mapping for services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from toscatypes.services.result import ServiceResult

if TYPE_CHECKING:
    from toscatypes.config.settings import ToscaSettings
    from toscatypes.domain.errors import ToscaValueError


class BaseService:
    """Base for service classes; holds the resolved settings.

    Usage::

        class ScalarService(BaseService):
            def evaluate(self, raws: list[str]) -> ServiceResult:
                ...
    """

    def __init__(self, settings: ToscaSettings) -> None:
        self._settings = settings

    @staticmethod
    def _value_error(op: str, exc: ToscaValueError, **detail: object) -> ServiceResult:
        """Failed result for a domain error; ``detail.value`` is the offending input."""
        return ServiceResult.failure(op, str(exc.kind), exc.message, value=exc.value, **detail)
