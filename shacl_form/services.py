"""Materialization of enumerated (``sh:in``) value lists."""

from __future__ import annotations

from typing import Iterable, List, Optional

from rdflib import Graph, Literal, URIRef
from rdflib.term import Node

from .constants import LABEL_PREDICATES
from .models.terms import InputListEntry, pick_literal


def find_label(graph: Graph, subject: Node, language: Optional[str] = None) -> Optional[str]:
    """Return the label of ``subject`` in ``language`` if the graph has one."""

    literal = pick_literal(graph, subject, LABEL_PREDICATES, language)
    return None if literal is None else str(literal)


def create_input_list_entries(
    terms: Iterable[Node],
    graph: Graph,
    language: Optional[str] = None,
) -> List[InputListEntry]:
    """Turn the members of an RDF list into ordered, labelled entries.

    Blank nodes cannot be entered through a widget and are skipped.
    """

    entries: List[InputListEntry] = []
    for term in terms:
        if not isinstance(term, (URIRef, Literal)):
            continue
        label = find_label(graph, term, language) if isinstance(term, URIRef) else None
        entries.append(InputListEntry(value=term, label=label or str(term)))
    return entries


__all__ = ["create_input_list_entries", "find_label"]
