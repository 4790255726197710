# recfactory/core/factory.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import keyword
from typing import Any, List, Optional, Tuple, Type

from recfactory.core.errors import ArgumentError
from recfactory.core.record import Record
from recfactory.core.registry import TypeRegistry
from recfactory.core.synthesizer import Extension, synthesize


def is_type_name(value: Any) -> bool:
    """
    True if ``value`` reads as a type name rather than a field name: an
    identifier starting with an uppercase letter.
    """
    return (
        isinstance(value, str)
        and value.isidentifier()
        and value[0].isupper()
        and not keyword.iskeyword(value)
    )


class RecordFactory:
    """
    Creates record types and keeps the named ones in a registry.

    Calling the factory returns a new record type, never an instance::

        Point = factory("Point", "x", "y")      # registered as "Point"
        Pair = factory("left", "right")         # anonymous
        Pair = factory("left", "right", name="Pair")

    A leading type name is recognized by its shape (see :func:`is_type_name`),
    so field names are expected to start in lowercase. Registered types are
    reachable afterwards as ``factory["Point"]`` or ``factory.Point``.
    """

    def __init__(self, registry: Optional[TypeRegistry] = None, allow_empty: bool = True) -> None:
        """
        Initialize the factory.

        :param registry: Registry for named types. A private one is created
            when omitted.
        :param allow_empty: Whether record types without fields may be built.
        """
        self._registry = registry if registry is not None else TypeRegistry()
        self._allow_empty = allow_empty

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    @property
    def allow_empty(self) -> bool:
        return self._allow_empty

    def __call__(
        self, *args: Any, extension: Optional[Extension] = None, name: Optional[str] = None
    ) -> Type[Record]:
        """
        Build a record type.

        :param args: Optional leading type name followed by field names.
        :param extension: Members merged into the new type; they take
            precedence over the generated ones.
        :param name: Explicit type name. When given, every positional
            argument is a field name.
        :return: The new record type.
        :raises ArgumentError: If no fields remain and empty types are
            disallowed, or the field list or extension is invalid.
        """
        type_name, fields = self._split_arguments(args, name)
        if not fields and not self._allow_empty:
            raise ArgumentError(
                "At least one field is required", {"type_name": type_name}
            )

        record_type = synthesize(fields, extension=extension, name=type_name)
        if type_name is None:
            return record_type
        return self._registry.bind(type_name, record_type)

    @staticmethod
    def _split_arguments(args: Tuple[Any, ...], name: Optional[str]) -> Tuple[Optional[str], List[Any]]:
        if name is not None:
            if not isinstance(name, str) or not name.isidentifier():
                raise ArgumentError(f"Invalid type name {name!r}", {"type_name": name})
            return name, list(args)
        if args and is_type_name(args[0]):
            return args[0], list(args[1:])
        return None, list(args)

    def __getitem__(self, name: str) -> Type[Record]:
        return self._registry.lookup(name)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __getattr__(self, name: str) -> Type[Record]:
        if name.startswith("_"):
            raise AttributeError(name)
        record_type = self._registry.get(name)
        if record_type is None:
            raise AttributeError(f"{type(self).__name__} has no record type named '{name}'")
        return record_type
