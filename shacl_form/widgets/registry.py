"""Editor resolution: which widget edits which property.

:func:`resolve` is the decision procedure; :class:`EditorRegistry` maps every
:class:`EditorKind` to the class that builds it.  Hosts that want custom
widgets pass their own registry to :func:`create_editor` instead of patching
module state.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, Optional

from PySide6.QtWidgets import QWidget
from rdflib.namespace import RDF

from ..config import Config
from ..constants import DATE_DATATYPES, NUMBER_DATATYPES, PREFIX_XSD
from ..models.property_spec import PropertySpec
from .base import EditorBase, EditorKind
from .editors import (
    BooleanEditor,
    DateEditor,
    LangStringEditor,
    ListEditor,
    NumberEditor,
    TextEditor,
)

logger = logging.getLogger(__name__)

EditorConstructor = Callable[..., EditorBase]

_XSD_KINDS: Dict[str, EditorKind] = {
    "string": EditorKind.TEXT,
    "boolean": EditorKind.BOOLEAN,
    **{name: EditorKind.NUMBER for name in NUMBER_DATATYPES},
    **{name: EditorKind.DATE for name in DATE_DATATYPES},
}


def resolve(spec: PropertySpec, config: Config) -> EditorKind:
    """Pick the editor kind for ``spec``; never fails, falls back to TEXT."""

    if spec.shacl_in:
        if config.lists.get(spec.shacl_in):
            return EditorKind.LIST
        logger.error(
            "list not found: %s existing lists: %s", spec.shacl_in, sorted(config.lists)
        )

    if spec.datatype == RDF.langString or spec.language_in:
        return EditorKind.LANG_STRING

    if spec.datatype is not None:
        kind = _XSD_KINDS.get(str(spec.datatype).replace(PREFIX_XSD, ""))
        if kind is not None:
            return kind
    return EditorKind.TEXT


class EditorRegistry:
    """Exhaustive mapping of editor kinds to editor constructors."""

    def __init__(self, constructors: Mapping[EditorKind, EditorConstructor]) -> None:
        missing = [kind.value for kind in EditorKind if kind not in constructors]
        if missing:
            raise ValueError(f"No editor registered for: {', '.join(missing)}")
        self._constructors: Dict[EditorKind, EditorConstructor] = dict(constructors)

    def __getitem__(self, kind: EditorKind) -> EditorConstructor:
        return self._constructors[kind]

    def __contains__(self, kind: object) -> bool:
        return kind in self._constructors

    def kinds(self):
        return list(self._constructors)

    def replace(self, kind: EditorKind, constructor: EditorConstructor) -> "EditorRegistry":
        constructors = dict(self._constructors)
        constructors[kind] = constructor
        return EditorRegistry(constructors)


DEFAULT_REGISTRY = EditorRegistry(
    {
        EditorKind.TEXT: TextEditor,
        EditorKind.LANG_STRING: LangStringEditor,
        EditorKind.NUMBER: NumberEditor,
        EditorKind.DATE: DateEditor,
        EditorKind.BOOLEAN: BooleanEditor,
        EditorKind.LIST: ListEditor,
    }
)


def create_editor(
    spec: PropertySpec,
    config: Config,
    registry: EditorRegistry = DEFAULT_REGISTRY,
    parent: Optional[QWidget] = None,
) -> EditorBase:
    """Resolve and build the editor for ``spec``."""

    kind = resolve(spec, config)
    constructor = registry[kind]
    if kind is EditorKind.LIST:
        return constructor(spec, config.list_entries(spec.shacl_in), parent=parent)
    return constructor(spec, parent=parent)


__all__ = ["DEFAULT_REGISTRY", "EditorRegistry", "create_editor", "resolve"]
