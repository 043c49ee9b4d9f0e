"""
Editor Package

The in-memory grading scheme editor and its configuration.
"""

from .config import EditorConfig
from .editor import GradingSchemeEditor, ContractViolationError, initialize_form_state
from .state import EditorRow, FormState, RowView

__all__ = [
    "EditorConfig",
    "GradingSchemeEditor",
    "ContractViolationError",
    "initialize_form_state",
    "EditorRow",
    "FormState",
    "RowView",
]
