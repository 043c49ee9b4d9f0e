"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_grading_scheme,
    grading_scheme_is_valid,
    collect_validation_errors,
    ValidationError,
)

__all__ = [
    "validate_grading_scheme",
    "grading_scheme_is_valid",
    "collect_validation_errors",
    "ValidationError",
]
