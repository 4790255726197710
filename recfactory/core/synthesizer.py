# recfactory/core/synthesizer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Type, Union

from recfactory.core.errors import ArgumentError
from recfactory.core.record import FieldAccessor, Record
from recfactory.core.schema import FieldSchema

logger = logging.getLogger(__name__)

ANONYMOUS_NAME = "Anonymous"

Extension = Union[Mapping[str, Any], type]

# Names the record storage itself depends on.
_RESERVED_FIELDS = frozenset({"_values", "__schema__"})

# Class-body entries that belong to the extension class itself.
_EXTENSION_SKIP = frozenset(
    {
        "__dict__",
        "__weakref__",
        "__module__",
        "__qualname__",
        "__slots__",
        "__firstlineno__",
        "__static_attributes__",
    }
)


def synthesize(
    fields: Iterable[str],
    extension: Optional[Extension] = None,
    name: Optional[str] = None,
) -> Type[Record]:
    """
    Build a new record type over ``fields``.

    The returned class stores one value per field, in declaration order, and
    inherits the full instance contract from :class:`Record`. Each field also
    gets an attribute accessor. Members taken from ``extension`` are installed
    last and therefore replace accessors or contract methods of the same name.

    Every call produces a distinct class, even for identical field lists.

    :param fields: Field names in declaration order. May be empty.
    :param extension: Mapping of member names to values, or a class whose own
        namespace is merged into the new type.
    :param name: Class name; anonymous types are named ``Anonymous``.
    :return: The synthesized record type.
    :raises ArgumentError: On duplicate, non-string, reserved or dunder field
        names, or an extension that is neither a mapping nor a class, or a
        class that declares slots.
    """
    schema = FieldSchema(fields)
    reserved = _RESERVED_FIELDS.intersection(schema)
    if reserved:
        raise ArgumentError(
            f"Field names {sorted(reserved)} are reserved by the record storage",
            {"fields": sorted(reserved)},
        )
    dunders = [field for field in schema if field.startswith("__") and field.endswith("__")]
    if dunders:
        raise ArgumentError(
            f"Field names {dunders} would replace Python protocol members",
            {"fields": dunders},
        )

    type_name = name or ANONYMOUS_NAME
    namespace: Dict[str, Any] = {
        "__slots__": (),
        "__schema__": schema,
        "__module__": Record.__module__,
        "__qualname__": type_name,
        "__doc__": f"{type_name}({', '.join(schema)})",
    }
    for index, field in enumerate(schema):
        namespace[field] = FieldAccessor(field, index)

    if extension is not None:
        namespace.update(_extension_members(extension))
        # storage layout is not overridable
        namespace["__slots__"] = ()
        namespace["__schema__"] = schema

    record_type = type(type_name, (Record,), namespace)
    logger.debug("Synthesized record type %s with fields %s", type_name, list(schema))
    return record_type


def _extension_members(extension: Extension) -> Dict[str, Any]:
    """Collect the members an extension contributes to a new record type."""
    if isinstance(extension, type):
        if vars(extension).get("__slots__"):
            raise ArgumentError(
                f"Extension class {extension.__name__} declares __slots__; records cannot take extra slots",
                {"extension": extension},
            )
        members = {
            key: value for key, value in vars(extension).items() if key not in _EXTENSION_SKIP
        }
        if members.get("__doc__") is None:
            members.pop("__doc__", None)
        return members
    if isinstance(extension, Mapping):
        for key in extension:
            if not isinstance(key, str):
                raise ArgumentError(
                    f"Extension member names must be strings, got {type(key).__name__}",
                    {"member": key},
                )
        return dict(extension)
    raise ArgumentError(
        f"Extension must be a mapping or a class, got {type(extension).__name__}",
        {"extension": extension},
    )
