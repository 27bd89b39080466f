"""CheckService — lint the scalar-unit values of a YAML document.

The document has no schema here, so candidates are found by shape: any
string leaf that looks like a scalar-unit is validated and reported with
its location. A leaf is a candidate when it is

- two whitespace-separated fields whose first field is a number or whose
  second field is a known unit (``10 GB``, ``ten GB``, ``3 replicas``), or
- a number glued to a known unit (``10GB``), which is always malformed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from toscatypes.domain.errors import ErrorKind, MalformedScalarError, ScalarError
from toscatypes.domain.scalar import NUMBER_PATTERN, ParsedScalar, validate_scalar
from toscatypes.domain.units import classify
from toscatypes.services.base import BaseService
from toscatypes.services.result import ServiceResult
from toscatypes.services.scalar import ScalarService

if TYPE_CHECKING:
    from toscatypes.config.models import Severity

logger = logging.getLogger(__name__)

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

_SEVERITY_RANK = {SEVERITY_WARNING: 0, SEVERITY_ERROR: 1}

_GLUED_PATTERN = re.compile(rf"({NUMBER_PATTERN.pattern})([A-Za-z]+)")


def is_candidate(text: str) -> bool:
    """Whether *text* looks enough like a scalar-unit to be validated."""
    fields = text.split()
    if len(fields) == 2:
        number, unit = fields
        return NUMBER_PATTERN.fullmatch(number) is not None or classify(unit) is not None
    if len(fields) == 1:
        glued = _GLUED_PATTERN.fullmatch(fields[0])
        return glued is not None and classify(glued.group(2)) is not None
    return False


def _line_of(node: Any, key: Any) -> int | None:
    """1-based source line of ``node[key]`` if ruamel recorded it."""
    lc = getattr(node, "lc", None)
    if lc is None:
        return None
    try:
        position = lc.value(key) if isinstance(node, Mapping) else lc.item(key)
    except (KeyError, IndexError, TypeError):
        return None
    return position[0] + 1


def iter_string_leaves(node: Any, path: str = "") -> Iterator[tuple[str, int | None, str]]:
    """Yield ``(path, line, text)`` for every string leaf under *node*.

    Paths use dotted keys and bracketed indices: ``nodes.db[0].disk``.
    """
    if isinstance(node, Mapping):
        for key, value in node.items():
            child = f"{path}.{key}" if path else str(key)
            if isinstance(value, str):
                yield child, _line_of(node, key), value
            else:
                yield from iter_string_leaves(value, child)
    elif isinstance(node, list):
        for index, value in enumerate(node):
            child = f"{path}[{index}]"
            if isinstance(value, str):
                yield child, _line_of(node, index), value
            else:
                yield from iter_string_leaves(value, child)


class CheckService(BaseService):
    """Validates every scalar-unit candidate in a YAML document."""

    def check(
        self,
        path: Path,
        *,
        min_severity: Severity | None = None,
        evaluate: bool = False,
    ) -> ServiceResult:
        """Report scalar-unit issues in the document at *path*.

        With *evaluate*, a document without errors also gets every valid
        scalar normalized (``data.values``).
        """
        op = "check"
        if not path.is_file():
            return ServiceResult.failure(
                op, "FILE_NOT_FOUND", f"No such file: {path}", path=str(path)
            )
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            return ServiceResult.failure(
                op, "UNREADABLE_FILE", f"Cannot read {path}: {exc}", path=str(path)
            )
        try:
            document = YAML().load(source)
        except YAMLError as exc:
            return ServiceResult.failure(
                op, "INVALID_YAML", f"Invalid YAML in {path}: {exc}", path=str(path)
            )

        issues: list[dict[str, Any]] = []
        valid: list[tuple[str, str, ParsedScalar]] = []
        for location, line, text in iter_string_leaves(document):
            if not is_candidate(text):
                continue
            try:
                valid.append((location, text, validate_scalar(text)))
            except ScalarError as exc:
                issues.append(self._issue(location, line, text, exc))

        error_count = sum(1 for i in issues if i["severity"] == SEVERITY_ERROR)
        threshold = _SEVERITY_RANK[min_severity or self._settings.check.min_severity]
        shown = [i for i in issues if _SEVERITY_RANK[i["severity"]] >= threshold]
        logger.debug(
            "Checked %s: %d valid scalar(s), %d issue(s)", path, len(valid), len(issues)
        )

        data: dict[str, Any] = {
            "path": str(path),
            "scalars": len(valid),
            "issues": shown,
            "count": len(shown),
            "error_count": sum(1 for i in shown if i["severity"] == SEVERITY_ERROR),
            "warning_count": sum(1 for i in shown if i["severity"] == SEVERITY_WARNING),
            "healthy": error_count == 0,
        }
        warnings: list[str] = []
        if evaluate:
            if error_count:
                warnings.append("Document has errors; skipped evaluation")
            else:
                describer = ScalarService(self._settings)
                data["values"] = [
                    {
                        "path": location,
                        **describer.describe(text, scalar, scalar.evaluate(), warnings),
                    }
                    for location, text, scalar in valid
                ]

        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def _issue(
        self, location: str, line: int | None, text: str, exc: ScalarError
    ) -> dict[str, Any]:
        if exc.kind is ErrorKind.UNKNOWN_UNIT:
            severity = self._settings.check.unknown_unit_severity
        else:
            severity = SEVERITY_ERROR
        if isinstance(exc, MalformedScalarError) and " " not in text.strip():
            message = f"{exc.message} (missing space between number and unit?)"
        else:
            message = exc.message
        return {
            "path": location,
            "line": line,
            "value": text,
            "kind": str(exc.kind),
            "severity": severity,
            "message": message,
        }
