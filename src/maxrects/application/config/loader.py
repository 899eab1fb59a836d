"""Loading of packing job files.

Reads a JSON job file, validates it against ``PackingJobConfig`` and turns
every failure (missing file, unreadable file, bad JSON, schema violation)
into a ``ConfigError`` carrying a category and per-field details.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from maxrects.application.config.schema import PackingJobConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a job file cannot be loaded or validated.

    Attributes:
        message: Human-readable description.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: The job file, when loading from disk.
        details: Per-problem dictionaries (JSON path and message for
            validation errors, line and column for JSON errors).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a JSON path.

    Examples:
        >>> _format_json_path(("bins", 0, "width"))
        'bins[0].width'
        >>> _format_json_path(("heuristic",))
        'heuristic'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _json_safe(value: Any) -> Any:
    """Replace NaN and infinity, which JSON cannot carry, with their repr."""
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    return value


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": _json_safe(err.get("input")),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Job validation failed:"]
    for detail in details:
        path = detail["path"] or "(root)"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> PackingJobConfig:
    try:
        return PackingJobConfig.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> PackingJobConfig:
    """Load and validate a packing job from a JSON file.

    Args:
        path: Path to the job file.

    Returns:
        The validated job.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON or
            does not match the job schema. ``error_type`` tells which.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(
            message=f"Job file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading job file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading job file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in job file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    config = _validate(data, path)
    logger.debug(
        "Loaded job %s: %d box entries, %d bins",
        path,
        len(config.boxes),
        len(config.bins),
    )
    return config


def load_config_from_dict(data: dict[str, Any]) -> PackingJobConfig:
    """Validate a packing job given as a dictionary.

    Raises:
        ConfigError: If the data does not match the job schema.
    """
    return _validate(data)
