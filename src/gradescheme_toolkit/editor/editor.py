"""
Module: editor.editor

Purpose:
    The grading scheme editor: an in-memory form over an ordered list of
    (letter grade, lower bound) rows. Keeps the ranges contiguous while
    rows are added, removed and edited, and converts between stored
    fractions and display values.

Key Classes:
    - GradingSchemeEditor: All editing operations plus commit()
    - ContractViolationError: Raised when a caller breaks the editor's API contract

Dependencies:
    - core.models.scheme: Stored snapshots in and out
    - core.schemas.validator: Default commit-time validation
    - core.utils.numbers: Unit conversion and rounding
    - editor.state: Mutable form state

Used By:
    - gui.editor_model.GradingSchemeEditorModel
    - __main__ (show command)

Error Kinds:
    - Invalid text while typing is stored verbatim and never reported here
    - Structural problems surface only at commit(), as ValidationError
    - API misuse (upper bound on a non-first row, bad row index)
      raises ContractViolationError
"""

from __future__ import annotations

import functools
import logging
import math
from typing import Callable, Optional

from gradescheme_toolkit.core.models.scheme import (
    GradingSchemeData,
    GradingSchemeDataRow,
    InitialFormData,
    RepresentationKind,
    REPRESENTATION_KINDS,
)
from gradescheme_toolkit.core.schemas.validator import ValidationError, validate_grading_scheme
from gradescheme_toolkit.core.utils.numbers import (
    display_scaling_factor,
    format_number,
    parse_number,
    round_to_two_decimal_places,
    stored_scaling_factor,
    to_display,
    to_stored,
)

from .config import EditorConfig
from .state import EditorRow, FormState, RowView

logger = logging.getLogger(__name__)


SaveCallback = Callable[[GradingSchemeData], object]
Validator = Callable[[GradingSchemeData], None]


class ContractViolationError(RuntimeError):
    """Programming error: the editor was called in a way its API forbids."""
    pass


def initialize_form_state(snapshot: GradingSchemeData) -> FormState:
    """
    Build editable form state from a stored snapshot.

    Rows are copied, never aliased. Each upper bound is the previous
    row's stored lower bound converted the same way, which is exactly
    what the derived view in FormState computes.

    Args:
        snapshot: Stored scheme (fractional bounds)

    Returns:
        Fresh FormState in display units
    """
    scaling = display_scaling_factor(snapshot.scaling_factor, snapshot.points_based)
    rows = [
        EditorRow(
            letter_grade=row.name,
            min_range_display=to_display(row.value, scaling),
        )
        for row in snapshot.data
    ]
    return FormState(
        title=snapshot.title,
        rows=rows,
        scaling_factor=scaling,
        points_based=snapshot.points_based,
        top_bound_display=to_display(1, scaling),
    )


class GradingSchemeEditor:
    """
    Editor over a grading scheme's tiers.

    The editor is mounted with two independent snapshots (percentage and
    points) and edits one of them at a time. Switching representation
    discards in-progress edits except the title.

    Saving is imperative: the host calls commit() from wherever its save
    control lives. commit() validates, then hands the stored snapshot to
    `on_save`. A failed commit raises ValidationError and shows the alert;
    editing can always continue afterwards.

    Example:
        >>> editor = GradingSchemeEditor(initial_form_data, "percentage", on_save=store)
        >>> editor.insert_row_after(0)
        >>> editor.edit_label(1, "A-")
        >>> editor.commit()
    """

    def __init__(
        self,
        initial_form_data: InitialFormData,
        scheme_input_type: RepresentationKind = "percentage",
        *,
        on_save: Optional[SaveCallback] = None,
        config: Optional[EditorConfig] = None,
        validator: Optional[Validator] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self._initial = initial_form_data
        self._on_save = on_save
        self._validator = validator or functools.partial(
            validate_grading_scheme, strict=self.config.strict_validation
        )
        self._state = initialize_form_state(initial_form_data.for_kind(scheme_input_type))
        self._show_alert = False
        self._validation_errors: list[str] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> FormState:
        """Current form state. Mutate only through editor methods."""
        return self._state

    @property
    def title(self) -> str:
        return self._state.title

    @property
    def scaling_factor(self) -> float:
        """Display scaling factor (NaN while the top bound is not a number)."""
        return self._state.scaling_factor

    @property
    def points_based(self) -> bool:
        return self._state.points_based

    @property
    def kind(self) -> RepresentationKind:
        return "points" if self._state.points_based else "percentage"

    @property
    def rows(self) -> list[RowView]:
        """Rows with their derived upper bounds, top to bottom."""
        return list(self._state.iter_views())

    @property
    def show_alert(self) -> bool:
        """Whether the validation alert is visible."""
        return self._show_alert

    @property
    def validation_errors(self) -> list[str]:
        """Messages from the last failed commit."""
        return list(self._validation_errors)

    def _check_index(self, row_index: int) -> None:
        if not 0 <= row_index < len(self._state.rows):
            raise ContractViolationError(
                f"row index {row_index} out of range for {len(self._state.rows)} rows"
            )

    def _to_stored(self, text: str) -> float:
        return to_stored(text, self._state.scaling_factor, self.config.number_format)

    # ─────────────────────────────────────────────────────────────────────────
    # Representation
    # ─────────────────────────────────────────────────────────────────────────

    def switch_representation(self, new_kind: RepresentationKind) -> None:
        """
        Switch between percentage and points.

        Reloads the other representation's initial snapshot, keeping only
        the title currently being edited. A no-op when `new_kind` is
        already active.

        Raises:
            ValueError: If new_kind is not "percentage" or "points"
            ContractViolationError: If points-based schemes are disabled and
                new_kind is not the active kind
        """
        if new_kind not in REPRESENTATION_KINDS:
            raise ValueError(f"Invalid representation kind: {new_kind!r}")
        if new_kind == self.kind:
            return
        if not self.config.points_based_enabled:
            raise ContractViolationError("points-based grading schemes are not enabled")
        snapshot = self._initial.for_kind(new_kind).with_title(self._state.title)
        self._state = initialize_form_state(snapshot)
        logger.debug(f"Switched grading scheme representation to {new_kind}")

    # ─────────────────────────────────────────────────────────────────────────
    # Field Edits
    # ─────────────────────────────────────────────────────────────────────────

    def edit_title(self, new_title: str) -> None:
        """Set the title, trimmed of surrounding whitespace."""
        self._state.title = new_title.strip()

    def edit_label(self, row_index: int, new_label: str) -> None:
        """Replace a row's letter grade. Bounds are untouched."""
        self._check_index(row_index)
        self._state.rows[row_index].letter_grade = new_label

    def edit_lower_bound(self, row_index: int, raw_text: str, committed: bool = False) -> None:
        """
        Set a row's lower bound text.

        The text is stored verbatim while typing. Because the row above
        reads its upper bound from this value, it changes too.

        Args:
            row_index: Row to edit
            raw_text: Text from the input field
            committed: True on blur. Numeric text is then replaced by its
                2-decimal canonical form; other text is kept as typed.
        """
        self._check_index(row_index)
        text = raw_text
        if committed:
            value = parse_number(raw_text, self.config.number_format)
            if not math.isnan(value):
                text = format_number(round_to_two_decimal_places(value))
        self._state.rows[row_index].min_range_display = text

    def edit_upper_bound(self, row_index: int, raw_text: str, committed: bool = False) -> None:
        """
        Set the first row's upper bound, which is the scaling factor.

        Unparsable text sets the scaling factor to NaN; commit() will then
        fail validation.

        Args:
            row_index: Must be 0
            raw_text: Text from the input field
            committed: True on blur. Numeric text is then replaced by the
                rounded scaling factor.

        Raises:
            ContractViolationError: If row_index is not 0
        """
        if row_index != 0:
            raise ContractViolationError("scaling factor may only be changed on the first row")
        self._check_index(row_index)
        value = parse_number(raw_text, self.config.number_format)
        if math.isnan(value):
            self._state.scaling_factor = math.nan
            self._state.top_bound_display = raw_text
            return
        self._state.scaling_factor = round_to_two_decimal_places(value)
        self._state.top_bound_display = (
            format_number(self._state.scaling_factor) if committed else raw_text
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Row Structure
    # ─────────────────────────────────────────────────────────────────────────

    def insert_row_after(self, row_index: int) -> RowView:
        """
        Insert an empty-labelled row directly below `row_index`.

        The new lower bound is the midpoint, in stored units, between this
        row's lower bound and the next row's (or 0 below the last row), so
        the new tier splits the gap. Its upper bound is this row's lower
        bound.

        Returns:
            View of the inserted row
        """
        self._check_index(row_index)
        rows = self._state.rows
        before = self._to_stored(rows[row_index].min_range_display)
        after = self._to_stored(rows[row_index + 1].min_range_display) if row_index + 1 < len(rows) else 0
        midpoint = (before - after) / 2 + after
        new_row = EditorRow(
            letter_grade="",
            min_range_display=to_display(midpoint, self._state.scaling_factor),
        )
        rows.insert(row_index + 1, new_row)
        logger.debug(f"Inserted row at {row_index + 1} with lower bound {new_row.min_range_display}")
        return self._state.row_view(row_index + 1)

    def remove_row(self, row_index: int) -> None:
        """
        Delete a row.

        Afterwards the last row always has a lower bound of "0"; a single
        remaining row therefore spans the whole range.
        """
        self._check_index(row_index)
        rows = self._state.rows
        removed = rows.pop(row_index)
        if rows:
            rows[-1].min_range_display = "0"
        if len(rows) == 1:
            rows[0].min_range_display = "0"
        logger.debug(f"Removed row {row_index} ({removed.letter_grade!r}), {len(rows)} left")

    # ─────────────────────────────────────────────────────────────────────────
    # Saving
    # ─────────────────────────────────────────────────────────────────────────

    def to_stored_data(self) -> GradingSchemeData:
        """
        Convert the current form state to a stored snapshot.

        Unparsable bounds become NaN for the validator to reject. Row
        identities are not part of the result.
        """
        return GradingSchemeData(
            title=self._state.title,
            data=tuple(
                GradingSchemeDataRow(name=row.letter_grade, value=self._to_stored(row.min_range_display))
                for row in self._state.rows
            ),
            scaling_factor=stored_scaling_factor(self._state.scaling_factor, self._state.points_based),
            points_based=self._state.points_based,
        )

    def alert_form_data(self) -> GradingSchemeData:
        """Data the validation alert describes (scaling factor in display units)."""
        stored = self.to_stored_data()
        return GradingSchemeData(
            title=stored.title,
            data=stored.data,
            scaling_factor=self._state.scaling_factor,
            points_based=stored.points_based,
        )

    def commit(self) -> GradingSchemeData:
        """
        Validate the current state and hand it to the save callback.

        Safe to call repeatedly: each call rebuilds the snapshot from the
        current state.

        Returns:
            The stored snapshot passed to on_save

        Raises:
            ValidationError: If the scheme is invalid. The alert is shown,
                on_save is not called, and no state is rolled back.
        """
        data = self.to_stored_data()
        try:
            self._validator(data)
        except ValidationError as e:
            self._show_alert = True
            self._validation_errors = list(e.errors)
            logger.warning(f"Grading scheme {data.title!r} failed validation: {e.errors}")
            raise
        self._show_alert = False
        self._validation_errors = []
        if self._on_save is not None:
            self._on_save(data)
        logger.info(f"Saved grading scheme {data.title!r} ({len(data.data)} rows, {data.kind})")
        return data

    def dismiss_alert(self) -> None:
        """Hide the validation alert."""
        self._show_alert = False
