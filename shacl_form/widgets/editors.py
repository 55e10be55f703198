"""Concrete property editors, one per :class:`EditorKind`."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from PySide6.QtCore import QDate, QDateTime, QRegularExpression, Qt, QTime, QTimeZone
from PySide6.QtGui import QRegularExpressionValidator, QTextCursor
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDateEdit,
    QDateTimeEdit,
    QLineEdit,
    QPlainTextEdit,
    QWidget,
)
from rdflib import Literal, URIRef

from ..constants import LANGUAGE_TAG_MAX_LENGTH, PREFIX_XSD, TEXTAREA_ROWS
from ..models.property_spec import PropertySpec
from ..models.terms import ABSENT, Absent, InputListEntry, Term
from ..timefmt import truncate_iso
from .base import EditorBase, EditorKind
from .validators import TextConstraintValidator, number_validator

logger = logging.getLogger(__name__)

DATE_FORMAT = "yyyy-MM-dd"
DATE_TIME_FORMAT = "yyyy-MM-dd'T'HH:mm:ss"
# earliest date QDateTimeEdit can show
MINIMUM_DATE = QDate(100, 1, 1)

# Exclusive bounds become the neighbouring inclusive bound.  Only exact for
# integer-valued datatypes: decimal/float ranges get the same +/- 1 shift.
EXCLUSIVE_BOUND_OFFSET = 1


def format_number(value: float) -> str:
    """Shortest lexical form, without a trailing ``.0`` for integral values."""

    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _local_datatype(spec: PropertySpec) -> str:
    if spec.datatype is None:
        return ""
    return str(spec.datatype).replace(PREFIX_XSD, "")


# ---------------------------------------------------------------------- text
class TextEditor(EditorBase):
    kind = EditorKind.TEXT

    def _create_editor(self) -> QWidget:
        if self.spec.single_line is False:
            editor = QPlainTextEdit(self)
            editor.setTabChangesFocus(True)
            margins = int(editor.document().documentMargin() * 2) + editor.frameWidth() * 2
            editor.setFixedHeight(editor.fontMetrics().lineSpacing() * TEXTAREA_ROWS + margins)
            return editor
        return QLineEdit(self)

    @property
    def multiline(self) -> bool:
        return isinstance(self.editor, QPlainTextEdit)

    def _configure(self) -> None:
        spec = self.spec
        self.validator = TextConstraintValidator(
            spec.min_length, spec.max_length, spec.pattern, parent=self
        )
        if self.multiline:
            return
        # the validator blocks typing past max_length; loaded values stay intact
        self.editor.setValidator(self.validator)

    def _connect_changes(self) -> None:
        if self.multiline:
            self.editor.textChanged.connect(self._on_plain_text_changed)
        else:
            self.editor.textChanged.connect(self._emit_changed)

    def _on_plain_text_changed(self) -> None:
        widget: QPlainTextEdit = self.editor  # type: ignore[assignment]
        max_length = self.spec.max_length
        text = widget.toPlainText()
        if max_length and len(text) > max_length:
            widget.blockSignals(True)
            widget.setPlainText(text[:max_length])
            widget.moveCursor(QTextCursor.MoveOperation.End)
            widget.blockSignals(False)
        self._emit_changed()

    def _write_text(self, text: str) -> None:
        self.editor.blockSignals(True)
        if self.multiline:
            self.editor.setPlainText(text)
        else:
            self.editor.setText(text)
        self.editor.blockSignals(False)

    def value_text(self) -> str:
        if self.multiline:
            return self.editor.toPlainText()
        return self.editor.text()

    def has_acceptable_input(self) -> bool:
        return self.validator.check(self.value_text()) == self.validator.State.Acceptable

    def to_term(self) -> Union[Term, Absent]:
        return self._term_from_text(self.value_text())


class LangStringEditor(TextEditor):
    """Text editor with a language chooser next to it."""

    kind = EditorKind.LANG_STRING

    def _configure(self) -> None:
        super()._configure()
        self.lang_chooser = self._create_lang_chooser()
        self.row.addWidget(self.lang_chooser)

    def _create_lang_chooser(self) -> QWidget:
        chooser: Union[QComboBox, QLineEdit]
        if self.spec.language_in:
            chooser = QComboBox(self)
            chooser.addItems(list(self.spec.language_in))
        else:
            chooser = QLineEdit(self)
            chooser.setMaxLength(LANGUAGE_TAG_MAX_LENGTH)
            chooser.setValidator(
                QRegularExpressionValidator(QRegularExpression(r"[A-Za-z]{1,8}(-[A-Za-z0-9]{0,8})*"), chooser)
            )
            chooser.setMaximumWidth(chooser.fontMetrics().horizontalAdvance("M") * 4)
        chooser.setToolTip("Language of the text")
        chooser.setPlaceholderText("lang?")
        chooser.setProperty("langChooser", True)
        return chooser

    def _connect_changes(self) -> None:
        super()._connect_changes()
        # chooser edits surface as a change of the text editor itself
        if isinstance(self.lang_chooser, QComboBox):
            self.lang_chooser.currentIndexChanged.connect(self._emit_changed)
        else:
            self.lang_chooser.textChanged.connect(self._emit_changed)

    def language(self) -> str:
        if isinstance(self.lang_chooser, QComboBox):
            return self.lang_chooser.currentText()
        return self.lang_chooser.text().strip().rstrip("-")

    def set_language(self, language: str) -> None:
        self.lang_chooser.blockSignals(True)
        if isinstance(self.lang_chooser, QComboBox):
            index = self.lang_chooser.findText(language, Qt.MatchFlag.MatchFixedString)
            if index < 0 and language:
                logger.debug("Language %r is not in sh:languageIn for %s", language, self.spec.path)
                self.lang_chooser.addItem(language)
                index = self.lang_chooser.count() - 1
            self.lang_chooser.setCurrentIndex(index)
        else:
            # the typing limit must not cut longer tags of existing values
            self.lang_chooser.setMaxLength(max(LANGUAGE_TAG_MAX_LENGTH, len(language)))
            self.lang_chooser.setText(language)
        self.lang_chooser.blockSignals(False)

    def set_value(self, value: Term) -> None:
        super().set_value(value)
        if isinstance(value, Literal):
            self.set_language(value.language or "")

    def to_term(self) -> Union[Term, Absent]:
        text = self.value_text()
        if not text:
            return ABSENT
        language = self.language()
        if language:
            return Literal(text, lang=language)
        return Literal(text, datatype=self.spec.datatype)


# -------------------------------------------------------------------- number
class NumberLineEdit(QLineEdit):
    """Line edit that steps its value with the Up/Down keys."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.step = 1.0
        self.minimum: Optional[float] = None
        self.maximum: Optional[float] = None

    def keyPressEvent(self, event):  # type: ignore[override]
        if event.key() in (Qt.Key.Key_Up, Qt.Key.Key_Down):
            self.step_by(1 if event.key() == Qt.Key.Key_Up else -1)
            event.accept()
            return
        super().keyPressEvent(event)

    def step_by(self, steps: int) -> None:
        try:
            current = float(self.text()) if self.text() else 0.0
        except ValueError:
            return
        value = round(current + steps * self.step, 10)
        if self.minimum is not None:
            value = max(value, float(self.minimum))
        if self.maximum is not None:
            value = min(value, float(self.maximum))
        self.setText(format_number(value))


class NumberEditor(EditorBase):
    kind = EditorKind.NUMBER

    def _create_editor(self) -> QWidget:
        return NumberLineEdit(self)

    def _configure(self) -> None:
        spec = self.spec
        self.minimum = self._bound(spec.min_inclusive, spec.min_exclusive, EXCLUSIVE_BOUND_OFFSET)
        self.maximum = self._bound(spec.max_inclusive, spec.max_exclusive, -EXCLUSIVE_BOUND_OFFSET)
        self.is_integer = _local_datatype(spec) == "integer"
        self.step = 1 if self.is_integer else 0.1

        editor: NumberLineEdit = self.editor  # type: ignore[assignment]
        editor.minimum = self.minimum
        editor.maximum = self.maximum
        editor.step = self.step
        editor.setValidator(
            number_validator(self.minimum, self.maximum, 0 if self.is_integer else 15, parent=editor)
        )
        for name, value in (("min", self.minimum), ("max", self.maximum), ("step", self.step)):
            if value is not None:
                editor.setProperty(name, format_number(float(value)))

    @staticmethod
    def _bound(inclusive, exclusive, offset):
        if inclusive is not None:
            return inclusive
        if exclusive is not None:
            return exclusive + offset
        return None

    def _connect_changes(self) -> None:
        self.editor.textChanged.connect(self._emit_changed)

    def _write_text(self, text: str) -> None:
        self.editor.blockSignals(True)
        self.editor.setText(text)
        self.editor.blockSignals(False)

    def value_text(self) -> str:
        return self.editor.text().strip()

    def has_acceptable_input(self) -> bool:
        return not self.value_text() or self.editor.hasAcceptableInput()

    def to_term(self) -> Union[Literal, Absent]:
        text = self.value_text()
        if not text:
            return ABSENT
        try:
            lexical = format_number(float(text))
        except ValueError:
            # the validator normally prevents this
            logger.warning("Non-numeric input %r for %s", text, self.spec.path)
            lexical = text
        return Literal(lexical, datatype=self.spec.datatype)


# ---------------------------------------------------------------------- date
class DateEditor(EditorBase):
    """Date or date-time editor.

    Qt date widgets cannot be blank, so emptiness is tracked in ``_empty`` and
    the widget shows a blank special value at its minimum while empty.
    Date-times are edited in UTC, the zone ``set_value`` normalises to.
    Values before :data:`MINIMUM_DATE` cannot be displayed and are kept
    verbatim until the user picks another date.
    """

    kind = EditorKind.DATE

    @property
    def is_date_time(self) -> bool:
        return _local_datatype(self.spec) == "dateTime"

    def _create_editor(self) -> QWidget:
        self._empty = True
        self._raw: Optional[str] = None
        editor: QDateTimeEdit
        if self.is_date_time:
            editor = QDateTimeEdit(self)
            editor.setDisplayFormat("yyyy-MM-dd HH:mm:ss")
        else:
            editor = QDateEdit(self)
            editor.setDisplayFormat(DATE_FORMAT)
        editor.setTimeZone(QTimeZone.utc())
        editor.setMinimumDateTime(QDateTime(MINIMUM_DATE, QTime(0, 0), QTimeZone.utc()))
        editor.setCalendarPopup(True)
        editor.setSpecialValueText(" ")
        editor.setDateTime(editor.minimumDateTime())
        editor.setProperty("inputType", "datetime-local" if self.is_date_time else "date")
        return editor

    def _connect_changes(self) -> None:
        self.editor.dateTimeChanged.connect(self._on_date_time_changed)

    def _on_date_time_changed(self, *_args) -> None:
        # stepping back to the blank minimum clears the value
        self._raw = None
        self._empty = self.editor.dateTime() == self.editor.minimumDateTime()
        self._emit_changed()

    def _parse(self, text: str) -> Optional[QDateTime]:
        date = QDate.fromString(text[:10], DATE_FORMAT)
        time = QTime.fromString(text[11:19], "HH:mm:ss") if self.is_date_time else QTime(0, 0)
        if not (date.isValid() and time.isValid()):
            return None
        return QDateTime(date, time, QTimeZone.utc())

    def _write_text(self, text: str) -> None:
        editor: QDateTimeEdit = self.editor  # type: ignore[assignment]
        editor.blockSignals(True)
        try:
            self._raw = None
            self._empty = True
            editor.setDateTime(editor.minimumDateTime())
            if not text:
                return
            value = self._parse(text)
            if value is None:
                logger.warning("Unable to display %r for %s", text, self.spec.path)
                return
            self._empty = False
            if value < editor.minimumDateTime():
                logger.warning("%r for %s is before %s; kept unchanged", text, self.spec.path,
                               MINIMUM_DATE.toString(DATE_FORMAT))
                self._raw = text
                return
            editor.setDateTime(value)
        finally:
            editor.blockSignals(False)

    def value_text(self) -> str:
        if self._raw is not None:
            return self._raw
        if self._empty:
            return ""
        value = self.editor.dateTime().toUTC()
        if self.is_date_time:
            return value.toString(DATE_TIME_FORMAT)
        return value.date().toString(DATE_FORMAT)

    def set_value(self, value: Term) -> None:
        # sub-second (dateTime) or sub-day (date) precision is dropped
        truncated = truncate_iso(str(value), date_time=self.is_date_time)
        if truncated is None:
            logger.warning("Ignoring unparseable date value %r for %s", str(value), self.spec.path)
            self._write_text("")
            return
        super().set_value(Literal(truncated, datatype=self.spec.datatype))

    def to_term(self) -> Union[Literal, Absent]:
        text = self.value_text()
        if not text:
            return ABSENT
        return Literal(text, datatype=self.spec.datatype)


# ------------------------------------------------------------------- boolean
class BooleanEditor(EditorBase):
    kind = EditorKind.BOOLEAN

    def _create_editor(self) -> QWidget:
        return QCheckBox(self)

    def _mark_required(self) -> None:
        # a required checkbox would force the user to tick it; "off" is a value
        return

    def _connect_changes(self) -> None:
        self.editor.toggled.connect(self._emit_changed)

    def _write_text(self, text: str) -> None:
        self.editor.blockSignals(True)
        self.editor.setChecked(text.strip().lower() in ("true", "1"))
        self.editor.blockSignals(False)

    def value_text(self) -> str:
        return "true" if self.editor.isChecked() else "false"

    def set_value(self, value: Term) -> None:
        if isinstance(value, Literal):
            super().set_value(value)

    def to_term(self) -> Union[Literal, Absent]:
        # 'false' is only emitted for required properties
        if self.editor.isChecked() or self.required:
            return Literal(self.value_text(), datatype=self.spec.datatype)
        return ABSENT


# ---------------------------------------------------------------------- list
class ListEditor(EditorBase):
    """Single choice from a materialized ``sh:in`` list."""

    kind = EditorKind.LIST

    def __init__(
        self,
        spec: PropertySpec,
        entries: Optional[Iterable[InputListEntry]] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(spec, parent)
        self.entries: List[InputListEntry] = []
        self.set_list_entries(entries or ())
        # the default could not be selected before the entries existed
        if spec.default_value is not None:
            self.set_value(spec.default_value)

    def _create_editor(self) -> QWidget:
        return QComboBox(self)

    def _connect_changes(self) -> None:
        self.editor.currentIndexChanged.connect(self._emit_changed)

    def set_list_entries(self, entries: Iterable[InputListEntry]) -> None:
        combo: QComboBox = self.editor  # type: ignore[assignment]
        self.entries = list(entries)
        combo.blockSignals(True)
        combo.clear()
        combo.addItem("", None)
        for entry in self.entries:
            combo.addItem(entry.text, str(entry.value))
        combo.setCurrentIndex(0)
        combo.blockSignals(False)

    def choices(self) -> List[str]:
        combo: QComboBox = self.editor  # type: ignore[assignment]
        return [combo.itemText(index) for index in range(combo.count())]

    def _write_text(self, text: str) -> None:
        combo: QComboBox = self.editor  # type: ignore[assignment]
        index = combo.findData(text) if text else 0
        if index < 0:
            logger.debug("Value %r is not in the list for %s", text, self.spec.path)
            index = 0
        combo.blockSignals(True)
        combo.setCurrentIndex(index)
        combo.blockSignals(False)

    def value_text(self) -> str:
        data = self.editor.currentData()
        return "" if data is None else str(data)

    def to_term(self) -> Union[Term, Absent]:
        return self._term_from_text(self.value_text())


__all__ = [
    "TextEditor",
    "LangStringEditor",
    "NumberEditor",
    "NumberLineEdit",
    "DateEditor",
    "BooleanEditor",
    "ListEditor",
    "format_number",
    "EXCLUSIVE_BOUND_OFFSET",
]
