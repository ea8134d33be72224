"""
DocumentAtom: Python SDK for the DocumentAtom document atomization server.
"""

from .sdk import DocumentAtomSdk, RawResponse
from .config import DocumentAtomSettings
from .core.enums import AtomFormat, AtomType, DocumentType, Severity
from .core.models import (
    Atom,
    AtomList,
    BinaryAtom,
    BoundingBox,
    OrderedListAtom,
    TableAtom,
    TextAtom,
    TypeResult,
    UnknownAtom,
    UnorderedListAtom,
)
from .core.extraction import ExtractionResult
from .core.exceptions import (
    DocumentAtomError,
    ConfigurationError,
    ValidationError,
    ResponseDeserializationError,
)
from .core.logging import get_logger, severity_sink, setup_logfire

__version__ = "0.1.0"
__all__ = [
    "DocumentAtomSdk",
    "RawResponse",
    "DocumentAtomSettings",
    "AtomFormat",
    "AtomType",
    "DocumentType",
    "Severity",
    "Atom",
    "AtomList",
    "BinaryAtom",
    "BoundingBox",
    "OrderedListAtom",
    "TableAtom",
    "TextAtom",
    "TypeResult",
    "UnknownAtom",
    "UnorderedListAtom",
    "ExtractionResult",
    "DocumentAtomError",
    "ConfigurationError",
    "ValidationError",
    "ResponseDeserializationError",
    "get_logger",
    "severity_sink",
    "setup_logfire",
]
