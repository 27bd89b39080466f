"""ScalarService — validate and evaluate scalar-unit values.

Two phases, as a document host would run them: every value is validated
first, and only if all of them pass is anything evaluated.
"""

from __future__ import annotations

import logging
from typing import Any

from toscatypes.domain.errors import ScalarError
from toscatypes.domain.quantities import Duration, NormalizedValue
from toscatypes.domain.scalar import ParsedScalar, validate_scalar
from toscatypes.domain.units import base_unit
from toscatypes.services.base import BaseService
from toscatypes.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ScalarService(BaseService):
    """Validates and normalizes standalone scalar-unit values."""

    def evaluate(self, raws: list[str]) -> ServiceResult:
        """Validate every value in *raws*, then evaluate them all.

        Fails on the first invalid value; nothing is evaluated in that case.
        """
        op = "evaluate"
        parsed: list[tuple[str, ParsedScalar]] = []
        for index, raw in enumerate(raws):
            try:
                parsed.append((raw, validate_scalar(raw)))
            except ScalarError as exc:
                logger.debug("Rejected scalar %r: %s", raw, exc.kind)
                return self._value_error(op, exc, raw=raw, index=index)

        warnings: list[str] = []
        items = [
            self.describe(raw, scalar, scalar.evaluate(), warnings) for raw, scalar in parsed
        ]
        logger.debug("Evaluated %d scalar(s)", len(items))
        return ServiceResult(
            ok=True, op=op, data={"items": items, "count": len(items)}, warnings=warnings
        )

    def describe(
        self,
        raw: str,
        scalar: ParsedScalar,
        quantity: NormalizedValue,
        warnings: list[str] | None = None,
    ) -> dict[str, Any]:
        """Render one evaluated scalar as a result item.

        A duration too large for ``timedelta`` keeps only its tick value;
        the reason is appended to *warnings* when given.
        """
        item: dict[str, Any] = {
            "raw": raw,
            "category": str(scalar.category),
            "literal": scalar.literal,
            "unit": scalar.unit,
            "value": quantity.value,
            "base_unit": base_unit(scalar.category),
        }
        if isinstance(quantity, Duration) and self._settings.output.duration_format == "timedelta":
            try:
                item["timedelta"] = str(quantity.to_timedelta())
            except OverflowError:
                logger.debug("Duration %r overflows timedelta", raw)
                if warnings is not None:
                    warnings.append(f"{raw!r} is outside the timedelta range; shown in ns ticks")
        return item
