"""recfactory: runtime factory for Struct-like record types

This package builds value types from a list of field names. Each generated
type takes its values positionally and gives its instances a fixed contract:
lookup by position or name, iteration, projection and equality.

Responsibilities:
    - Record type synthesis from field lists
    - Merging caller-supplied members into generated types
    - Registration of named types

Interactions:
    - Client code through the ``Factory`` callable
    - Python class machinery for runtime type creation
    - Logging system for diagnostics

Cross-cutting Concerns:
    Thread Safety:
        - Type registration is serialized by the registry lock
        - Synthesis and record operations need no locking
        - Records are owned by their creator and are not synchronized

    Error Handling:
        - Structured error hierarchy rooted at FactoryError
        - Errors also derive from the matching builtin (TypeError, LookupError, ValueError)

    Logging:
        - Module-level loggers under the ``recfactory`` namespace
        - No handlers installed by the library
"""

from .core import (
    ArgumentError,
    ArityError,
    FactoryError,
    FieldSchema,
    Record,
    RecordFactory,
    TypeRegistry,
    UnknownFieldError,
    UnknownTypeError,
    synthesize,
)

__version__ = "0.1.0"

Factory = RecordFactory()

__all__ = [
    "Factory",
    "RecordFactory",
    "Record",
    "FieldSchema",
    "TypeRegistry",
    "synthesize",
    # Errors
    "FactoryError",
    "ArityError",
    "UnknownFieldError",
    "UnknownTypeError",
    "ArgumentError",
]
