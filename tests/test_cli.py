"""Tests for the gradescheme command line."""

import json
from pathlib import Path

import pytest

import gradescheme_toolkit
from gradescheme_toolkit.__main__ import main


@pytest.fixture
def scheme_file(tmp_path: Path, percentage_scheme) -> Path:
    path = tmp_path / "scheme.json"
    path.write_text(json.dumps(percentage_scheme.to_dict()), encoding="utf-8")
    return path


@pytest.fixture
def form_data_file(tmp_path: Path, initial_form_data) -> Path:
    path = tmp_path / "form.json"
    path.write_text(json.dumps(initial_form_data.to_dict()), encoding="utf-8")
    return path


class TestValidateCommand:
    """Tests for `validate`."""

    def test_validate_when_valid_then_exit_zero(self, scheme_file, capsys):
        assert main(["validate", str(scheme_file), "--strict"]) == 0
        assert "OK (3 rows, percentage)" in capsys.readouterr().out

    def test_validate_when_invalid_then_prints_each_error(self, tmp_path: Path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({
            "title": "",
            "data": [{"name": "A", "value": 0.5}],
            "scalingFactor": 1,
            "pointsBased": False,
        }), encoding="utf-8")

        assert main(["validate", str(path)]) == 1
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 2
        assert out[0].endswith("A grading scheme must have a title")


class TestShowCommand:
    """Tests for `show`."""

    def test_show_when_percentage_then_prints_display_table(self, form_data_file, capsys):
        assert main(["show", str(form_data_file)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Default Scheme"
        assert lines[1].split() == ["A", "90", "-", "100"]
        assert lines[3].split() == ["F", "0", "-", "80"]

    def test_show_when_points_then_prints_points(self, form_data_file, capsys):
        assert main(["show", str(form_data_file), "--points"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Points Scheme"
        assert lines[1].split() == ["A", "3", "-", "4"]

    def test_show_when_field_wrong_type_then_reports_error(self, tmp_path: Path, initial_form_data, capsys):
        payload = initial_form_data.to_dict()
        payload["points"]["scalingFactor"] = "4"
        path = tmp_path / "form.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        assert main(["show", str(path), "--points"]) == 1
        assert "scalingFactor must be a number" in capsys.readouterr().out


class TestPackageMetadata:
    """Tests for the package-level dunders."""

    def test_version_when_imported_then_matches_version_flag(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert gradescheme_toolkit.__version__ in capsys.readouterr().out

    def test_copyright_when_imported_then_declared(self):
        assert gradescheme_toolkit.__copyright__.startswith("Copyright")
