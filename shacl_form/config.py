"""Form configuration and the shape-graph derived caches.

A :class:`Config` carries the attributes a host sets on the form (usually as
``data-*`` attributes or an INI ``[form]`` section) plus the graphs the form
works on.  Assigning a new shapes graph rebuilds the RDF list and property
group caches wholesale; editors only ever read from them.
"""

from __future__ import annotations

import configparser
import logging
import os
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from PySide6.QtCore import QLocale
from rdflib import Graph
from rdflib.collection import Collection
from rdflib.namespace import RDF, SH
from rdflib.term import Node

from .models.terms import InputListEntry
from .services import create_input_list_entries

logger = logging.getLogger(__name__)

LANGUAGE_ENV = "SHACL_FORM_LANGUAGE"
INI_SECTION = "form"


def _snake_case(key: str) -> str:
    if key.startswith("data-"):
        key = key[len("data-"):]
    key = key.replace("-", "_")
    return re.sub(r"(?<!^)([A-Z])", r"_\1", key).lower()


def _kebab_case(key: str) -> str:
    return key.replace("_", "-")


def _system_language() -> str:
    env = os.environ.get(LANGUAGE_ENV, "").strip()
    if env:
        return env
    return QLocale.system().bcp47Name() or "en"


def extract_lists(graph: Graph) -> Dict[str, List[Node]]:
    """Return every well-formed RDF list of ``graph`` keyed by its head node."""

    lists: Dict[str, List[Node]] = {}
    for head in set(graph.subjects(RDF.first, None)):
        # Only list heads; tails are reachable from their head
        if (None, RDF.rest, head) in graph:
            continue
        lists[str(head)] = list(Collection(graph, head))
    return lists


@dataclass(eq=False)
class Config:
    shapes: Optional[str] = None
    shapes_url: Optional[str] = None
    shape_subject: Optional[str] = None
    values: Optional[str] = None
    values_url: Optional[str] = None
    value_subject: Optional[str] = None
    language: Optional[str] = None
    load_owl_imports: str = "true"
    submit_button: Optional[str] = None

    _lists: Dict[str, List[Node]] = field(default_factory=dict, repr=False)
    _groups: List[str] = field(default_factory=list, repr=False)
    _shapes_graph: Graph = field(default_factory=Graph, repr=False)
    _data_graph: Graph = field(default_factory=Graph, repr=False)
    _prefixes: Dict[str, str] = field(default_factory=dict, repr=False)
    _entries: Dict[Tuple[str, Optional[str]], List[InputListEntry]] = field(
        default_factory=dict, repr=False
    )

    # ---------------------------------------------------------------- equality
    @classmethod
    def attribute_keys(cls) -> List[str]:
        return [f.name for f in fields(cls) if not f.name.startswith("_")]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return False
        return all(getattr(self, key) == getattr(other, key) for key in self.attribute_keys())

    # ------------------------------------------------------------------ graphs
    @property
    def shapes_graph(self) -> Graph:
        return self._shapes_graph

    @shapes_graph.setter
    def shapes_graph(self, graph: Graph) -> None:
        self._shapes_graph = graph
        self._lists = extract_lists(graph)
        self._groups = [str(group) for group in graph.subjects(RDF.type, SH.PropertyGroup)]
        self._entries = {}
        logger.debug(
            "Shapes graph assigned: %d triples, %d lists, %d groups",
            len(graph),
            len(self._lists),
            len(self._groups),
        )

    @property
    def data_graph(self) -> Graph:
        return self._data_graph

    @data_graph.setter
    def data_graph(self, graph: Graph) -> None:
        self._data_graph = graph

    @property
    def lists(self) -> Dict[str, List[Node]]:
        return self._lists

    @property
    def groups(self) -> List[str]:
        return self._groups

    @property
    def prefixes(self) -> Dict[str, str]:
        return self._prefixes

    def register_prefixes(self, prefixes: Mapping[str, str]) -> None:
        for key, namespace in prefixes.items():
            self._prefixes[key] = str(namespace)

    def list_entries(self, list_id: str) -> List[InputListEntry]:
        """Materialized entries for ``list_id`` in the active language (cached)."""

        key = (list_id, self.language)
        cached = self._entries.get(key)
        if cached is None:
            cached = create_input_list_entries(
                self._lists.get(list_id, []), self._shapes_graph, self.language
            )
            self._entries[key] = cached
        return cached

    # ----------------------------------------------------------------- loading
    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Optional[str]]) -> "Config":
        """Create a config from host attributes.

        Keys may be given as ``data-shape-subject``, ``shapeSubject`` or
        ``shape_subject``; unknown keys are ignored.
        """

        config = cls()
        known = set(cls.attribute_keys())
        for raw_key, value in attributes.items():
            key = _snake_case(raw_key)
            if key not in known:
                logger.debug("Ignoring unknown form attribute %s", raw_key)
                continue
            if value is not None:
                setattr(config, key, value)
        if not config.language:
            config.language = _system_language()
        return config

    @classmethod
    def from_ini(cls, path: Path | str) -> "Config":
        """Read attributes from the ``[form]`` section of an INI file."""

        parser = configparser.ConfigParser()
        read = parser.read(Path(path), encoding="utf-8")
        if not read:
            logger.warning("Form config %s not found; using defaults", path)
            return cls.from_attributes({})
        if not parser.has_section(INI_SECTION):
            logger.warning("Form config %s has no [%s] section", path, INI_SECTION)
            return cls.from_attributes({})
        return cls.from_attributes(dict(parser.items(INI_SECTION)))

    @classmethod
    def keys_as_data_attributes(cls) -> List[str]:
        return [f"data-{_kebab_case(key)}" for key in cls.attribute_keys()]


__all__ = ["Config", "extract_lists", "LANGUAGE_ENV"]
