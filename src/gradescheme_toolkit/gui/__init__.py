"""Qt integration for the grading scheme editor."""

from .editor_model import GradingSchemeEditorModel

__all__ = ["GradingSchemeEditorModel"]
