"""
Typed method groups exposed by ``DocumentAtomSdk``.
"""

from .atom import AtomMethods
from .type_detection import TypeDetectionMethods
from .health import HealthMethods

__all__ = [
    "AtomMethods",
    "TypeDetectionMethods",
    "HealthMethods",
]
