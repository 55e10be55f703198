"""Assembles the editors of one node shape into a form section."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QGroupBox, QVBoxLayout, QWidget
from rdflib import Graph, Literal, URIRef
from rdflib.namespace import RDFS, SH

from .config import Config
from .exceptions import ShapeError
from .models.property_spec import PropertySpec
from .models.terms import Term, is_absent, pick_literal
from .widgets.base import EditorBase
from .widgets.registry import DEFAULT_REGISTRY, EditorRegistry, create_editor

logger = logging.getLogger(__name__)

Triple = Tuple[URIRef, URIRef, Term]


def _sort_key(spec: PropertySpec):
    return (spec.order is None, spec.order or 0.0, spec.path)


def collect_property_specs(config: Config, shape: URIRef) -> List[PropertySpec]:
    """``PropertySpec`` of every ``sh:property`` of ``shape``, in ``sh:order``."""

    graph = config.shapes_graph
    specs: List[PropertySpec] = []
    for node in graph.objects(shape, SH.property):
        try:
            specs.append(PropertySpec.from_shape(graph, node, config.language))
        except ShapeError as exc:
            logger.warning("Skipping property shape: %s", exc)
    specs.sort(key=_sort_key)
    return specs


class PropertyForm(QWidget):
    """Editors for every property of a node shape, grouped by ``sh:group``."""

    changed = Signal(str)  # property path

    def __init__(
        self,
        config: Config,
        shape: Optional[Union[URIRef, str]] = None,
        subject: Optional[Union[URIRef, str]] = None,
        registry: EditorRegistry = DEFAULT_REGISTRY,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.config = config
        self.registry = registry
        shape = shape or config.shape_subject
        if shape is None:
            raise ValueError("No node shape given")
        self.shape = URIRef(shape)
        value_subject = subject or config.value_subject
        self.subject: Optional[URIRef] = URIRef(value_subject) if value_subject else None

        self._specs = collect_property_specs(config, self.shape)
        self._editors: Dict[str, List[EditorBase]] = {}
        self._groups: Dict[str, QGroupBox] = {}

        self._layout = QVBoxLayout(self)
        for spec in self._specs:
            self._add_property(spec)
        self._layout.addStretch(1)

    # ---------------------------------------------------------------- building
    def _container_for(self, group: Optional[str]) -> QWidget:
        if not group or group not in self.config.groups:
            return self
        box = self._groups.get(group)
        if box is None:
            label = pick_literal(
                self.config.shapes_graph, URIRef(group), (RDFS.label,), self.config.language,
                any_language=True,
            )
            box = QGroupBox(str(label) if label is not None else group, self)
            box.setProperty("group", group)
            QVBoxLayout(box)
            self._layout.addWidget(box)
            self._groups[group] = box
        return box

    def _existing_values(self, spec: PropertySpec) -> List[Term]:
        if self.subject is None:
            return []
        objects = self.config.data_graph.objects(self.subject, URIRef(spec.path))
        values = [obj for obj in objects if isinstance(obj, (URIRef, Literal))]
        return sorted(values, key=lambda term: (isinstance(term, Literal), str(term)))

    def _add_property(self, spec: PropertySpec) -> None:
        container = self._container_for(spec.group)
        values: Iterable[Optional[Term]] = self._existing_values(spec) or [None]
        for value in values:
            editor = create_editor(spec, self.config, self.registry, parent=container)
            if value is not None:
                editor.set_value(value)
            editor.changed.connect(self.changed.emit)
            container.layout().addWidget(editor)
            self._editors.setdefault(spec.path, []).append(editor)

    # ---------------------------------------------------------------- querying
    def specs(self) -> List[PropertySpec]:
        return list(self._specs)

    def editors(self, path: Optional[str] = None) -> List[EditorBase]:
        if path is not None:
            return list(self._editors.get(str(path), []))
        return [editor for editors in self._editors.values() for editor in editors]

    def group_titles(self) -> List[str]:
        return [box.title() for box in self._groups.values()]

    def has_acceptable_input(self) -> bool:
        return all(editor.has_acceptable_input() for editor in self.editors())

    def to_triples(self, subject: Optional[Union[URIRef, str]] = None) -> List[Triple]:
        """Triples for every editor that holds a value."""

        target = URIRef(subject) if subject else self.subject
        if target is None:
            raise ValueError("No subject to attach values to")
        triples: List[Triple] = []
        for path, editors in self._editors.items():
            for editor in editors:
                term = editor.to_term()
                if is_absent(term):
                    continue
                triples.append((target, URIRef(path), term))
        return triples

    def to_graph(self, subject: Optional[Union[URIRef, str]] = None) -> Graph:
        graph = Graph()
        for prefix, namespace in self.config.prefixes.items():
            graph.bind(prefix, namespace)
        for triple in self.to_triples(subject):
            graph.add(triple)
        return graph


__all__ = ["PropertyForm", "collect_property_specs"]
