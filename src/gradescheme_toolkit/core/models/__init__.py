"""
Core Models Package

Immutable stored-scheme models exchanged with the host application.
The editor works on its own mutable form state and converts to and
from these snapshots at its boundaries.
"""

from .scheme import (
    GradingSchemeData,
    GradingSchemeDataRow,
    InitialFormData,
    RepresentationKind,
    REPRESENTATION_KINDS,
)

__all__ = [
    "GradingSchemeData",
    "GradingSchemeDataRow",
    "InitialFormData",
    "RepresentationKind",
    "REPRESENTATION_KINDS",
]
