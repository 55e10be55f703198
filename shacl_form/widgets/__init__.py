"""Property editors and their resolution."""

from .base import EditorBase, EditorKind
from .editors import (
    BooleanEditor,
    DateEditor,
    LangStringEditor,
    ListEditor,
    NumberEditor,
    TextEditor,
)
from .registry import DEFAULT_REGISTRY, EditorRegistry, create_editor, resolve

__all__ = [
    "EditorBase",
    "EditorKind",
    "BooleanEditor",
    "DateEditor",
    "LangStringEditor",
    "ListEditor",
    "NumberEditor",
    "TextEditor",
    "DEFAULT_REGISTRY",
    "EditorRegistry",
    "create_editor",
    "resolve",
]
