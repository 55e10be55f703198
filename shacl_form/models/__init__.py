"""Shape and term models for the SHACL form editors."""

from .terms import ABSENT, Absent, InputListEntry, Term, is_absent, pick_literal
from .property_spec import PropertySpec

__all__ = [
    "ABSENT",
    "Absent",
    "InputListEntry",
    "Term",
    "is_absent",
    "pick_literal",
    "PropertySpec",
]
