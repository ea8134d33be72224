"""
Core module containing models, enums, exceptions and interfaces.
"""

from .enums import AtomFormat, AtomType, DocumentType, Severity
from .exceptions import (
    DocumentAtomError,
    ConfigurationError,
    ValidationError,
    ResponseDeserializationError,
)
from .models import (
    Atom,
    AtomList,
    BinaryAtom,
    BoundingBox,
    OrderedListAtom,
    SerializableColumn,
    SerializableDataTable,
    TableAtom,
    TextAtom,
    TypeResult,
    UnknownAtom,
    UnorderedListAtom,
)
from .extraction import ExtractionResult, ListStructure, Rectangle, TableStructure, TextElement
from .interfaces import AtomMethodsInterface, TypeDetectionInterface, HealthInterface

__all__ = [
    "AtomFormat",
    "AtomType",
    "DocumentType",
    "Severity",
    "DocumentAtomError",
    "ConfigurationError",
    "ValidationError",
    "ResponseDeserializationError",
    "Atom",
    "AtomList",
    "BinaryAtom",
    "BoundingBox",
    "OrderedListAtom",
    "SerializableColumn",
    "SerializableDataTable",
    "TableAtom",
    "TextAtom",
    "TypeResult",
    "UnknownAtom",
    "UnorderedListAtom",
    "ExtractionResult",
    "ListStructure",
    "Rectangle",
    "TableStructure",
    "TextElement",
    "AtomMethodsInterface",
    "TypeDetectionInterface",
    "HealthInterface",
]
