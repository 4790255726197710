"""
Core package providing record type synthesis and the record contract.

Architecture:
- schema: ordered field names and slot resolution
- record: value storage and the instance contract
- synthesizer: runtime type creation and extension merge
- registry: name-to-type bindings
- factory: argument handling and registration
"""

# Import order matters to avoid circular dependencies
from .errors import ArgumentError, ArityError, FactoryError, UnknownFieldError, UnknownTypeError
from .schema import FieldSchema
from .record import FieldAccessor, Record
from .synthesizer import synthesize
from .registry import TypeRegistry
from .factory import RecordFactory, is_type_name

__all__ = [
    # Errors
    "FactoryError",
    "ArityError",
    "UnknownFieldError",
    "UnknownTypeError",
    "ArgumentError",
    # Types
    "FieldSchema",
    "FieldAccessor",
    "Record",
    "TypeRegistry",
    # Construction
    "synthesize",
    "RecordFactory",
    "is_type_name",
]
