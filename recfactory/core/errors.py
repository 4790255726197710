# recfactory/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Optional


class FactoryError(Exception):
    """
    Base exception class for errors raised by the record factory and the
    record types it synthesizes.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ArityError(FactoryError, TypeError):
    """
    Raised when a record is constructed with a number of values that does not
    match its field count.
    """

    def __init__(self, message: str, expected: int, given: int) -> None:
        super().__init__(message, {"expected": expected, "given": given})
        self.expected = expected
        self.given = given


class UnknownFieldError(FactoryError, LookupError):
    """
    Raised when a field is read or written through a name that is not part of
    the schema, or an index outside of it.
    """

    def __init__(self, message: str, field: Any) -> None:
        super().__init__(message, {"field": field})
        self.field = field


class ArgumentError(FactoryError, ValueError):
    """
    Raised when the factory is given an unusable field list or extension.
    """


class UnknownTypeError(FactoryError, LookupError):
    """
    Raised when a record type is looked up under a name nothing is bound to.
    """

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message, {"name": name})
        self.name = name
