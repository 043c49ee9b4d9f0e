"""
Grading Scheme Validation

Structural validation of stored grading schemes, consulted by the
editor at commit time and by the CLI.

Two layers:
- Basic checks (always): title, tier names, ordered bounds, scaling factor.
  Every problem is collected so the editor's alert can list them all.
- Strict mode: the bundled JSON Schema, checked with jsonschema.
"""

from __future__ import annotations

import json
import math
from numbers import Real
from pathlib import Path
from typing import Any, Union

import jsonschema

from ..models.scheme import GradingSchemeData


GRADING_SCHEME_SCHEMA_NAME = "grading_scheme"

SchemeInput = Union[GradingSchemeData, dict]

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when grading scheme data fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or [message]


def _as_dict(data: SchemeInput) -> dict[str, Any]:
    if isinstance(data, GradingSchemeData):
        return data.to_dict()
    return data


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def collect_validation_errors(data: SchemeInput) -> list[str]:
    """
    Run the basic checks and return every problem found.

    Args:
        data: Stored scheme, as a model or a wire-format dict

    Returns:
        Human-readable error messages, empty when the scheme is valid
    """
    payload = _as_dict(data)
    errors: list[str] = []

    title = payload.get("title")
    if not isinstance(title, str) or not title.strip():
        errors.append("A grading scheme must have a title")

    scaling_factor = payload.get("scalingFactor")
    if not _is_number(scaling_factor) or not math.isfinite(scaling_factor):
        errors.append("The maximum range value must be a number")
    elif scaling_factor <= 0:
        errors.append("The maximum range value must be greater than zero")

    rows = payload.get("data")
    if not isinstance(rows, list) or not rows:
        errors.append("A grading scheme must have at least one row")
        return errors

    names = [str(row.get("name", "")).strip() if isinstance(row, dict) else "" for row in rows]
    if any(not name for name in names):
        errors.append("Every row must have a letter grade")
    seen: set[str] = set()
    duplicates: list[str] = []
    for name in names:
        if name and name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        errors.append(f"Letter grades must be unique: {', '.join(duplicates)}")

    values = [row.get("value") if isinstance(row, dict) else None for row in rows]
    if not all(_is_number(v) and math.isfinite(v) for v in values):
        errors.append("Every range value must be a number")
        return errors

    if any(v < 0 or v > 1 for v in values):
        errors.append("Range values must be between zero and the maximum")
    if any(upper <= lower for upper, lower in zip(values, values[1:])):
        errors.append("Ranges must decrease from the top row to the bottom row without overlapping")
    if values[-1] != 0:
        errors.append("The last row must have a lower range of zero")

    return errors


def validate_grading_scheme(data: SchemeInput, *, strict: bool = False) -> None:
    """
    Validate a stored grading scheme.

    Args:
        data: Stored scheme, as a model or a wire-format dict
        strict: If True, also validate against the JSON Schema

    Raises:
        ValidationError: If data is invalid. `errors` lists every problem.
    """
    payload = _as_dict(data)

    if strict:
        schema = _load_schema(GRADING_SCHEME_SCHEMA_NAME)
        try:
            jsonschema.validate(payload, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            )

    errors = collect_validation_errors(payload)
    if errors:
        raise ValidationError(
            f"Invalid grading scheme: {errors[0]}",
            errors=errors
        )


def grading_scheme_is_valid(data: SchemeInput) -> bool:
    """Boolean form of the basic checks."""
    return not collect_validation_errors(data)
