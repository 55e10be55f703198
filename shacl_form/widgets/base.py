from __future__ import annotations

import itertools
from enum import Enum
from typing import Optional, Set, Union

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget
from rdflib import Literal, URIRef

from ..constants import REQUIRED_MARKER
from ..models.property_spec import PropertySpec
from ..models.terms import ABSENT, Absent, Term


class _StrEnum(str, Enum):
    """Enum subclass that compares/serialises as its value."""

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.value)

    @classmethod
    def values(cls) -> Set[str]:
        return {member.value for member in cls}


class EditorKind(_StrEnum):
    TEXT = "text"
    LANG_STRING = "langstring"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    LIST = "list"


_editor_ids = itertools.count()


class EditorBase(QWidget):
    """Label plus one primary input widget bound to a single property.

    Subclasses create the primary widget in :meth:`_create_editor` and map it
    to and from the lexical form of a term via :meth:`value_text` and
    :meth:`_write_text`.  ``changed`` fires once per user edit; programmatic
    updates through :meth:`set_value` stay silent.
    """

    kind: EditorKind
    changed = Signal(str)  # property path

    def __init__(self, spec: PropertySpec, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.spec = spec
        self.required = spec.required

        self.editor = self._create_editor()
        self.editor.setObjectName(f"e{next(_editor_ids)}")
        # hook for external apps, e.g. validation wiring
        self.editor.setProperty("path", spec.path)
        self.editor.setProperty("editor", True)

        self.label = QLabel(spec.display_label, self)
        self.label.setBuddy(self.editor)
        if spec.description:
            self.label.setToolTip(spec.description)

        placeholder = spec.description or spec.pattern
        if placeholder:
            self._set_placeholder(placeholder)
        if self.required:
            self._mark_required()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.label)
        self.row = QHBoxLayout()
        self.row.setContentsMargins(0, 0, 0, 0)
        self.row.addWidget(self.editor, 1)
        layout.addLayout(self.row)
        self.setProperty("prop", True)

        self._configure()
        self._connect_changes()
        if spec.default_value is not None:
            self.set_value(spec.default_value)

    # ------------------------------------------------------------------ hooks
    def _create_editor(self) -> QWidget:
        raise NotImplementedError

    def _configure(self) -> None:
        """Apply type specific constraints once the widget exists."""

    def _connect_changes(self) -> None:
        raise NotImplementedError

    def _write_text(self, text: str) -> None:
        raise NotImplementedError

    def value_text(self) -> str:
        """Current lexical value of the primary widget (``""`` when empty)."""
        raise NotImplementedError

    def to_term(self) -> Union[Term, Absent]:
        raise NotImplementedError

    # --------------------------------------------------------------- behaviour
    def set_value(self, value: Term) -> None:
        """Populate the widget from an existing term, replacing prior state."""
        self._write_text(str(value))

    def has_acceptable_input(self) -> bool:
        return True

    def _emit_changed(self, *_args) -> None:
        self.changed.emit(self.spec.path)

    def _set_placeholder(self, text: str) -> None:
        setter = getattr(self.editor, "setPlaceholderText", None)
        if setter is not None:
            setter(text)

    def _mark_required(self) -> None:
        self.editor.setProperty("required", True)
        self.label.setProperty("required", True)
        self.label.setText(spec_label_required(self.spec))

    def _term_from_text(self, text: str) -> Union[Term, Absent]:
        """IRI when the property expects resources, literal otherwise."""
        if not text:
            return ABSENT
        if self.spec.wants_iri:
            return URIRef(text)
        return Literal(text, datatype=self.spec.datatype)


def spec_label_required(spec: PropertySpec) -> str:
    return f"{spec.display_label}{REQUIRED_MARKER}"


__all__ = ["EditorBase", "EditorKind", "spec_label_required"]
