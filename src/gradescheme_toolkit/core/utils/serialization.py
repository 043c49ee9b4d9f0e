"""
Serialization Utilities

JSON file helpers for stored grading schemes and for the two-variant
initial form data an editor is mounted with.

- `load_*` functions validate structure before building models
- `save_*` functions write through a temp file and rename it into place
"""

from __future__ import annotations

import json
import logging
from numbers import Real
from pathlib import Path
from typing import Any

from ..models.scheme import GradingSchemeData, InitialFormData
from ..schemas.validator import ValidationError

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Invalid JSON in {path}: {e}",
            path=str(path)
        )


def _scheme_from_payload(payload: Any, where: str) -> GradingSchemeData:
    if not isinstance(payload, dict):
        raise ValidationError(f"{where} must be an object", path=where)
    missing = [f for f in ("title", "data") if f not in payload]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=where,
            errors=[f"Missing field: {f}" for f in missing]
        )
    if not isinstance(payload["data"], list):
        raise ValidationError("data must be a list", path=f"{where}.data")
    if not isinstance(payload["title"], str):
        raise ValidationError("title must be a string", path=f"{where}.title")
    if "scalingFactor" in payload and not _is_number(payload["scalingFactor"]):
        raise ValidationError("scalingFactor must be a number", path=f"{where}.scalingFactor")
    if "pointsBased" in payload and not isinstance(payload["pointsBased"], bool):
        raise ValidationError("pointsBased must be a boolean", path=f"{where}.pointsBased")
    for i, row in enumerate(payload["data"]):
        if not isinstance(row, dict) or "name" not in row or "value" not in row:
            raise ValidationError(
                "rows must have name and value",
                path=f"{where}.data[{i}]"
            )
        if not isinstance(row["name"], str):
            raise ValidationError("name must be a string", path=f"{where}.data[{i}].name")
        if not _is_number(row["value"]):
            raise ValidationError("value must be a number", path=f"{where}.data[{i}].value")
    return GradingSchemeData.from_dict(payload)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(".tmp")
    try:
        temp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        temp_path.replace(path)
    except OSError:
        if temp_path.exists():
            temp_path.unlink()
        raise


# ─────────────────────────────────────────────────────────────────────────────
# Stored Schemes
# ─────────────────────────────────────────────────────────────────────────────

def load_grading_scheme(path: Path) -> GradingSchemeData:
    """
    Load a stored grading scheme from a JSON file.

    Only the shape needed to build the model is checked here; use
    `validate_grading_scheme` for the structural rules.

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If the file is not valid JSON or lacks required fields
    """
    return _scheme_from_payload(_read_json(path), "scheme")


def save_grading_scheme(path: Path, scheme: GradingSchemeData) -> None:
    """
    Write a stored grading scheme to a JSON file.

    Uses a temp file so an interrupted write never leaves a truncated file.
    """
    _write_json(path, scheme.to_dict())
    logger.info(f"Saved grading scheme {scheme.title!r} to {path}")


# ─────────────────────────────────────────────────────────────────────────────
# Initial Form Data
# ─────────────────────────────────────────────────────────────────────────────

def load_initial_form_data(path: Path) -> InitialFormData:
    """
    Load the percentage and points snapshots from one JSON file.

    Expected layout: {"percentage": {...scheme...}, "points": {...scheme...}}

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If either variant is missing or malformed
    """
    payload = _read_json(path)
    if not isinstance(payload, dict):
        raise ValidationError("initial form data must be an object", path=str(path))
    missing = [k for k in ("percentage", "points") if k not in payload]
    if missing:
        raise ValidationError(
            f"Missing representations: {missing}",
            path=str(path),
            errors=[f"Missing field: {k}" for k in missing]
        )
    return InitialFormData(
        percentage=_scheme_from_payload(payload["percentage"], "percentage"),
        points=_scheme_from_payload(payload["points"], "points"),
    )


def save_initial_form_data(path: Path, form_data: InitialFormData) -> None:
    """Write both snapshots to one JSON file, through a temp file."""
    _write_json(path, form_data.to_dict())
    logger.info(f"Saved initial form data to {path}")
