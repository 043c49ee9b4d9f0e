"""
Module: editor.state

Purpose:
    Mutable form state behind the grading scheme editor. Unlike the
    frozen stored models, this state changes on every keystroke.

Key Classes:
    - EditorRow: One editable tier (label + raw lower bound text)
    - FormState: Title, rows, display scaling factor, top bound text

Design:
    Each boundary between two tiers is held exactly once, as the lower
    bound text of the row below it. A row's upper bound is derived:
    the previous row's lower bound text, or `top_bound_display` for the
    first row. Edits to one side of a boundary therefore show up on the
    other side with nothing to keep in sync.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Iterator


def new_row_id() -> str:
    """Opaque identity token for list reconciliation in a UI."""
    return uuid.uuid4().hex[:10]


@dataclass
class EditorRow:
    """
    One editable tier.

    Attributes:
        letter_grade: Tier label, may be empty while editing
        min_range_display: Raw lower bound text in display units
        unique_id: Synthetic identity, never stored
    """

    letter_grade: str
    min_range_display: str
    unique_id: str = field(default_factory=new_row_id)


@dataclass(frozen=True, slots=True)
class RowView:
    """Read-only view of a row with its derived upper bound."""

    unique_id: str
    letter_grade: str
    min_range_display: str
    max_range_display: str
    is_first_row: bool
    is_last_row: bool


@dataclass
class FormState:
    """
    Editable state of one representation (percentage or points).

    Attributes:
        title: Scheme title as currently edited
        rows: Tiers top to bottom
        scaling_factor: Display scaling factor (100 for plain percentages,
            max points for points-based). NaN while the top bound text is
            not a number.
        points_based: Which representation this state belongs to
        top_bound_display: Text shown as the first row's upper bound
    """

    title: str
    rows: list[EditorRow]
    scaling_factor: float
    points_based: bool
    top_bound_display: str

    def max_range_display(self, index: int) -> str:
        """Derived upper bound text of the row at `index`."""
        if index == 0:
            return self.top_bound_display
        return self.rows[index - 1].min_range_display

    def row_view(self, index: int) -> RowView:
        row = self.rows[index]
        return RowView(
            unique_id=row.unique_id,
            letter_grade=row.letter_grade,
            min_range_display=row.min_range_display,
            max_range_display=self.max_range_display(index),
            is_first_row=index == 0,
            is_last_row=index == len(self.rows) - 1,
        )

    def iter_views(self) -> Iterator[RowView]:
        for index in range(len(self.rows)):
            yield self.row_view(index)
