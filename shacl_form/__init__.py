"""Qt editors for RDF property values described by SHACL shapes."""

from .config import Config
from .exceptions import ShaclFormError, ShapeError
from .form import PropertyForm
from .models import ABSENT, InputListEntry, PropertySpec
from .widgets.registry import DEFAULT_REGISTRY, EditorRegistry, create_editor

__all__ = [
    "ABSENT",
    "Config",
    "DEFAULT_REGISTRY",
    "EditorRegistry",
    "InputListEntry",
    "PropertyForm",
    "PropertySpec",
    "ShaclFormError",
    "ShapeError",
    "create_editor",
]
