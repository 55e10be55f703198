"""RDF term helpers shared by the editors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from rdflib import Graph, Literal, URIRef
from rdflib.term import Node

Term = Union[URIRef, Literal]


class _Absent(Enum):
    """Result of an editor that currently holds no value.

    Kept distinct from ``None`` and from the empty literal so callers never
    confuse "nothing entered" with ``Literal("")``.
    """

    ABSENT = "absent"

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return False

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "ABSENT"


ABSENT = _Absent.ABSENT
Absent = _Absent


@dataclass(frozen=True, slots=True)
class InputListEntry:
    """One selectable value of an enumerated (``sh:in``) list."""

    value: Term
    label: Optional[str] = None

    @property
    def text(self) -> str:
        return self.label if self.label else str(self.value)


def is_absent(value: object) -> bool:
    return value is ABSENT


def _primary_subtag(tag: str) -> str:
    return tag.lower().split("-", 1)[0]


def pick_literal(
    graph: Graph,
    subject: Node,
    predicates: Iterable[URIRef],
    language: Optional[str] = None,
    *,
    any_language: bool = False,
) -> Optional[Literal]:
    """Return the literal of ``subject`` best matching ``language``.

    Preference: exact tag, same primary subtag (``en`` for ``en-US``), then an
    untagged literal. With ``any_language`` a literal in some other language
    is accepted as a last resort.
    """

    candidates = [
        obj
        for predicate in predicates
        for obj in graph.objects(subject, predicate)
        if isinstance(obj, Literal)
    ]
    if not candidates:
        return None
    if language:
        wanted = language.lower()
        for literal in candidates:
            if literal.language and literal.language.lower() == wanted:
                return literal
        for literal in candidates:
            if literal.language and _primary_subtag(literal.language) == _primary_subtag(wanted):
                return literal
    for literal in candidates:
        if not literal.language:
            return literal
    if any_language:
        return candidates[0]
    return None


__all__ = ["ABSENT", "Absent", "InputListEntry", "Term", "is_absent", "pick_literal"]
