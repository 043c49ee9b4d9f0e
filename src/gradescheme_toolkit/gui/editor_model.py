"""
Qt model for the grading scheme editor.

Wraps GradingSchemeEditor in a QObject so widgets can drive it with
plain method calls and react to signals instead of polling state. The
"Save" button usually lives outside the form (a dialog's button row),
so saving goes through the save_pressed() slot.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal, Slot

from gradescheme_toolkit.core.models.scheme import GradingSchemeData, InitialFormData
from gradescheme_toolkit.core.schemas.validator import ValidationError
from gradescheme_toolkit.editor import EditorConfig, GradingSchemeEditor, RowView

logger = logging.getLogger(__name__)


class GradingSchemeEditorModel(QObject):
    """Signal-emitting front end for a GradingSchemeEditor."""

    formStateChanged = Signal()
    saved = Signal(object)  # stored scheme dict, wire format
    validationFailed = Signal(object)  # list of error messages
    alertVisibilityChanged = Signal(bool)

    def __init__(
        self,
        initial_form_data: InitialFormData,
        scheme_input_type: str = "percentage",
        on_save: Optional[Callable[[GradingSchemeData], object]] = None,
        config: Optional[EditorConfig] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._external_on_save = on_save
        self.editor = GradingSchemeEditor(
            initial_form_data,
            scheme_input_type,  # type: ignore[arg-type]
            on_save=self._handle_save,
            config=config,
        )

    # Read access for views

    def rows(self) -> List[RowView]:
        return self.editor.rows

    def title(self) -> str:
        return self.editor.title

    def is_points_based(self) -> bool:
        return self.editor.points_based

    def is_alert_visible(self) -> bool:
        return self.editor.show_alert

    # Edits

    @Slot(str)
    def set_title(self, title: str) -> None:
        self.editor.edit_title(title)
        self.formStateChanged.emit()

    @Slot(str)
    def set_scheme_input_type(self, kind: str) -> None:
        previous = self.editor.kind
        self.editor.switch_representation(kind)  # type: ignore[arg-type]
        if self.editor.kind != previous:
            self.formStateChanged.emit()

    @Slot(int, str)
    def set_letter_grade(self, row_index: int, letter_grade: str) -> None:
        self.editor.edit_label(row_index, letter_grade)
        self.formStateChanged.emit()

    @Slot(int, str)
    def low_range_changed(self, row_index: int, text: str) -> None:
        self.editor.edit_lower_bound(row_index, text)
        self.formStateChanged.emit()

    @Slot(int, str)
    def low_range_blurred(self, row_index: int, text: str) -> None:
        self.editor.edit_lower_bound(row_index, text, committed=True)
        self.formStateChanged.emit()

    @Slot(int, str)
    def high_range_changed(self, row_index: int, text: str) -> None:
        self.editor.edit_upper_bound(row_index, text)
        self.formStateChanged.emit()

    @Slot(int, str)
    def high_range_blurred(self, row_index: int, text: str) -> None:
        self.editor.edit_upper_bound(row_index, text, committed=True)
        self.formStateChanged.emit()

    @Slot(int)
    def add_row_after(self, row_index: int) -> None:
        self.editor.insert_row_after(row_index)
        self.formStateChanged.emit()

    @Slot(int)
    def remove_row(self, row_index: int) -> None:
        self.editor.remove_row(row_index)
        self.formStateChanged.emit()

    # Saving

    @Slot(result=bool)
    def save_pressed(self) -> bool:
        """
        Validate and save. Returns True when the scheme was saved.

        Validation failures are reported through validationFailed and the
        alert; the caller does not need to catch anything.
        """
        was_visible = self.editor.show_alert
        try:
            self.editor.commit()
        except ValidationError as e:
            logger.debug(f"Save blocked by {len(e.errors)} validation error(s)")
            if not was_visible:
                self.alertVisibilityChanged.emit(True)
            self.validationFailed.emit(list(e.errors))
            return False
        if was_visible:
            self.alertVisibilityChanged.emit(False)
        return True

    @Slot()
    def dismiss_alert(self) -> None:
        if self.editor.show_alert:
            self.editor.dismiss_alert()
            self.alertVisibilityChanged.emit(False)

    def _handle_save(self, data: GradingSchemeData) -> None:
        if self._external_on_save is not None:
            self._external_on_save(data)
        self.saved.emit(data.to_dict())
