"""
Unit Tests for Stored Scheme Models

Tests for GradingSchemeData, GradingSchemeDataRow and InitialFormData.
"""

import pytest

from gradescheme_toolkit.core.models.scheme import (
    GradingSchemeData,
    GradingSchemeDataRow,
    InitialFormData,
)


class TestGradingSchemeData:
    """Tests for GradingSchemeData."""

    def test_init_when_rows_given_as_list_then_stores_tuple(self):
        scheme = GradingSchemeData(
            title="T",
            data=[GradingSchemeDataRow("A", 0.0)],
            scaling_factor=1.0,
            points_based=False,
        )
        assert isinstance(scheme.data, tuple)

    def test_kind_when_points_based_then_returns_points(self, points_scheme, percentage_scheme):
        assert points_scheme.kind == "points"
        assert percentage_scheme.kind == "percentage"

    def test_with_title_when_called_then_copies_everything_else(self, percentage_scheme):
        renamed = percentage_scheme.with_title("Renamed")
        assert renamed.title == "Renamed"
        assert renamed.data == percentage_scheme.data
        assert renamed.scaling_factor == percentage_scheme.scaling_factor
        assert percentage_scheme.title == "Default Scheme"

    # ─────────────────────────────────────────────────────────────────────────
    # Grade Lookup Tests
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("fraction, expected", [
        (1.0, "A"),
        (0.9, "A"),
        (0.8999, "B"),
        (0.8, "B"),
        (0.5, "F"),
        (0.0, "F"),
    ])
    def test_grade_for_when_score_given_then_returns_tier(self, percentage_scheme, fraction, expected):
        assert percentage_scheme.grade_for(fraction) == expected

    def test_grade_for_when_below_every_bound_then_returns_last_tier(self):
        scheme = GradingSchemeData(
            title="T",
            data=(GradingSchemeDataRow("Pass", 0.5), GradingSchemeDataRow("Fail", 0.2)),
            scaling_factor=1.0,
            points_based=False,
        )
        assert scheme.grade_for(0.1) == "Fail"

    def test_grade_for_when_float_noise_then_rounds_first(self, percentage_scheme):
        """0.89999999 is 0.9 after rounding to four places."""
        assert percentage_scheme.grade_for(0.89999999) == "A"

    def test_grade_for_when_no_rows_then_raises_error(self):
        scheme = GradingSchemeData(title="T", data=(), scaling_factor=1.0, points_based=False)
        with pytest.raises(ValueError, match="no rows"):
            scheme.grade_for(0.5)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_to_dict_when_called_then_uses_wire_keys(self, points_scheme):
        d = points_scheme.to_dict()
        assert d == {
            "title": "Points Scheme",
            "data": [
                {"name": "A", "value": 0.75},
                {"name": "B", "value": 0.5},
                {"name": "C", "value": 0.25},
                {"name": "F", "value": 0.0},
            ],
            "scalingFactor": 4.0,
            "pointsBased": True,
        }

    def test_from_dict_when_legacy_payload_then_defaults_scaling(self):
        scheme = GradingSchemeData.from_dict({
            "title": "Legacy",
            "data": [{"name": "Pass", "value": 0.5}, {"name": "Fail", "value": 0}],
        })
        assert scheme.scaling_factor == 1.0
        assert scheme.points_based is False
        assert scheme.names == ["Pass", "Fail"]


class TestInitialFormData:
    """Tests for InitialFormData."""

    def test_for_kind_when_valid_kind_then_returns_snapshot(self, initial_form_data, points_scheme):
        assert initial_form_data.for_kind("points") is points_scheme

    def test_for_kind_when_unknown_kind_then_raises_error(self, initial_form_data):
        with pytest.raises(ValueError, match="Invalid representation kind"):
            initial_form_data.for_kind("letters")

    def test_from_dict_when_both_variants_then_builds_models(self, initial_form_data):
        restored = InitialFormData.from_dict(initial_form_data.to_dict())
        assert restored == initial_form_data
