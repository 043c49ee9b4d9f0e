import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import gradescheme_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Qt tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from gradescheme_toolkit.core.models.scheme import (
    GradingSchemeData,
    GradingSchemeDataRow,
    InitialFormData,
)


# Common test fixtures
@pytest.fixture
def percentage_scheme() -> GradingSchemeData:
    """A/B/F percentage scheme (90 / 80 / 0)."""
    return GradingSchemeData(
        title="Default Scheme",
        data=(
            GradingSchemeDataRow("A", 0.9),
            GradingSchemeDataRow("B", 0.8),
            GradingSchemeDataRow("F", 0.0),
        ),
        scaling_factor=1.0,
        points_based=False,
    )


@pytest.fixture
def points_scheme() -> GradingSchemeData:
    """Four-point scheme (4.0 max)."""
    return GradingSchemeData(
        title="Points Scheme",
        data=(
            GradingSchemeDataRow("A", 0.75),
            GradingSchemeDataRow("B", 0.5),
            GradingSchemeDataRow("C", 0.25),
            GradingSchemeDataRow("F", 0.0),
        ),
        scaling_factor=4.0,
        points_based=True,
    )


@pytest.fixture
def initial_form_data(percentage_scheme, points_scheme) -> InitialFormData:
    """Both representations, as a host would mount the editor."""
    return InitialFormData(percentage=percentage_scheme, points=points_scheme)
