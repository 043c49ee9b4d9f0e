"""
Unit Tests for Grading Scheme Validation

Tests for the validator module.
"""

import math

import pytest

from gradescheme_toolkit.core.schemas.validator import (
    ValidationError,
    collect_validation_errors,
    grading_scheme_is_valid,
    validate_grading_scheme,
)


class TestValidateGradingScheme:
    """Tests for validate_grading_scheme."""

    @pytest.fixture
    def valid_data(self) -> dict:
        """Valid wire-format scheme."""
        return {
            "title": "Default Scheme",
            "data": [
                {"name": "A", "value": 0.9},
                {"name": "B", "value": 0.8},
                {"name": "F", "value": 0},
            ],
            "scalingFactor": 1.0,
            "pointsBased": False,
        }

    def test_validate_when_valid_dict_then_passes(self, valid_data):
        validate_grading_scheme(valid_data)
        validate_grading_scheme(valid_data, strict=True)

    def test_validate_when_model_given_then_passes(self, points_scheme):
        validate_grading_scheme(points_scheme)
        assert grading_scheme_is_valid(points_scheme)

    def test_validate_when_single_row_at_zero_then_passes(self, valid_data):
        valid_data["data"] = [{"name": "Pass", "value": 0}]
        validate_grading_scheme(valid_data)

    def test_validate_when_blank_title_then_raises_error(self, valid_data):
        valid_data["title"] = "   "
        with pytest.raises(ValidationError, match="title"):
            validate_grading_scheme(valid_data)

    def test_validate_when_no_rows_then_raises_error(self, valid_data):
        valid_data["data"] = []
        with pytest.raises(ValidationError, match="at least one row"):
            validate_grading_scheme(valid_data)

    def test_validate_when_blank_name_then_raises_error(self, valid_data):
        valid_data["data"][1]["name"] = ""
        with pytest.raises(ValidationError) as exc_info:
            validate_grading_scheme(valid_data)
        assert "Every row must have a letter grade" in exc_info.value.errors

    def test_validate_when_duplicate_names_then_lists_them(self, valid_data):
        valid_data["data"][1]["name"] = "A"
        errors = collect_validation_errors(valid_data)
        assert errors == ["Letter grades must be unique: A"]

    def test_validate_when_value_nan_then_raises_error(self, valid_data):
        valid_data["data"][0]["value"] = math.nan
        with pytest.raises(ValidationError, match="must be a number"):
            validate_grading_scheme(valid_data)

    def test_validate_when_values_not_decreasing_then_raises_error(self, valid_data):
        valid_data["data"][1]["value"] = 0.9
        errors = collect_validation_errors(valid_data)
        assert any("decrease" in e for e in errors)

    def test_validate_when_last_value_not_zero_then_raises_error(self, valid_data):
        valid_data["data"][2]["value"] = 0.1
        errors = collect_validation_errors(valid_data)
        assert errors == ["The last row must have a lower range of zero"]

    def test_validate_when_value_above_one_then_raises_error(self, valid_data):
        valid_data["data"][0]["value"] = 1.2
        errors = collect_validation_errors(valid_data)
        assert "Range values must be between zero and the maximum" in errors

    def test_validate_when_scaling_factor_nan_then_raises_error(self, valid_data):
        valid_data["scalingFactor"] = math.nan
        with pytest.raises(ValidationError, match="maximum range value must be a number"):
            validate_grading_scheme(valid_data)

    def test_validate_when_scaling_factor_zero_then_raises_error(self, valid_data):
        valid_data["scalingFactor"] = 0
        assert not grading_scheme_is_valid(valid_data)

    def test_validate_when_several_problems_then_collects_all(self, valid_data):
        valid_data["title"] = ""
        valid_data["data"][2]["value"] = 0.85
        with pytest.raises(ValidationError) as exc_info:
            validate_grading_scheme(valid_data)
        assert len(exc_info.value.errors) == 3

    # ─────────────────────────────────────────────────────────────────────────
    # Strict Mode Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_validate_when_strict_and_extra_field_then_raises_error(self, valid_data):
        valid_data["unexpected"] = True
        validate_grading_scheme(valid_data)
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_grading_scheme(valid_data, strict=True)

    def test_validate_when_strict_and_wrong_type_then_reports_path(self, valid_data):
        valid_data["data"][1]["value"] = "80"
        with pytest.raises(ValidationError) as exc_info:
            validate_grading_scheme(valid_data, strict=True)
        assert exc_info.value.path == "data.1.value"
