"""
Module: editor.config

Purpose:
    Configuration dataclass for the grading scheme editor. Immutable
    configuration with validation on construction.

Key Classes:
    - EditorConfig: Options a host passes when mounting an editor

Dependencies:
    - dataclasses (std)
    - core.utils.numbers

Used By:
    - editor.editor: GradingSchemeEditor
    - gui.editor_model: GradingSchemeEditorModel
"""

from __future__ import annotations

from dataclasses import dataclass

from gradescheme_toolkit.core.utils.numbers import DEFAULT_NUMBER_FORMAT, NumberFormat


@dataclass(frozen=True)
class EditorConfig:
    """
    Configuration for a grading scheme editor (immutable).

    Attributes:
        points_based_enabled: Whether the host offers the percentage/points
            choice. When False, switching representation is a programming error.
        number_format: Separators used to parse user-typed bounds
        strict_validation: Also check the JSON Schema when committing

    Example:
        >>> config = EditorConfig(points_based_enabled=False)
        >>> config.number_format.decimal_separator
        '.'
    """

    points_based_enabled: bool = True
    number_format: NumberFormat = DEFAULT_NUMBER_FORMAT
    strict_validation: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.number_format, NumberFormat):
            raise ValueError(f"number_format must be a NumberFormat: {self.number_format!r}")
