# recfactory/core/record.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from reprlib import recursive_repr
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from recfactory.core.errors import ArityError
from recfactory.core.schema import FieldKey, FieldSchema

Visitor = Callable[[Any], Any]
PairVisitor = Callable[[str, Any], Any]


class FieldAccessor:
    """
    Data descriptor exposing one record slot as a read/write attribute.
    """

    def __init__(self, name: str, index: int) -> None:
        self.name = name
        self.index = index
        self.__doc__ = f"Field '{name}' (slot #{index} of the record)"

    def __get__(self, instance: Optional["Record"], owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance._values[self.index]

    def __set__(self, instance: "Record", value: Any) -> None:
        instance._values[self.index] = value

    def __repr__(self) -> str:
        return f"FieldAccessor(name={self.name!r}, index={self.index})"


class Record:
    """
    Generic instance representation shared by every synthesized record type.

    Values live in a list ordered by the class schema; every lookup resolves
    through ``__schema__`` rather than through instance attributes. Subclasses
    are produced by the synthesizer and carry their own schema, so the field
    count of an instance is fixed for its whole life.
    """

    __slots__ = ("_values",)
    __schema__: FieldSchema = FieldSchema(())

    def __init__(self, *values: Any) -> None:
        schema = type(self).__schema__
        if len(values) != len(schema):
            raise ArityError(
                f"{type(self).__name__} expects {len(schema)} values, got {len(values)}",
                expected=len(schema),
                given=len(values),
            )
        self._values: List[Any] = list(values)

    # -- lookup -----------------------------------------------------------

    def get(self, key: FieldKey) -> Any:
        """
        Return the value of a field.

        :param key: Position in declaration order or field name.
        :raises UnknownFieldError: If the key does not designate a field.
        """
        return self._values[type(self).__schema__.index_of(key)]

    def set(self, key: FieldKey, value: Any) -> Any:
        """
        Overwrite the value of a field and return the new value.

        :raises UnknownFieldError: If the key does not designate a field.
        """
        self._values[type(self).__schema__.index_of(key)] = value
        return value

    def __getitem__(self, key: FieldKey) -> Any:
        return self._values[type(self).__schema__.index_of(key)]

    def __setitem__(self, key: FieldKey, value: Any) -> None:
        self._values[type(self).__schema__.index_of(key)] = value

    def dig(self, key: FieldKey, *keys: Any) -> Any:
        """
        Follow a chain of keys through nested records and containers.

        Each step indexes the previous result. The walk stops with ``None``
        as soon as a result is ``None`` or cannot be indexed, or when a
        plain container has no such key or index or rejects the kind of key.
        Unknown fields of nested records still raise.
        """
        current: Any = self
        for step in (key,) + keys:
            if current is None or not hasattr(type(current), "__getitem__"):
                return None
            if isinstance(current, Record):
                current = current[step]
                continue
            try:
                current = current[step]
            except (KeyError, IndexError, TypeError):
                return None
        return current

    # -- iteration --------------------------------------------------------

    def each(self, visit: Optional[Visitor] = None):
        """
        Call ``visit`` with every value in declaration order and return the
        record. Without a callback, return an iterator over the values.
        """
        if visit is None:
            return iter(list(self._values))
        for value in list(self._values):
            visit(value)
        return self

    def each_pair(self, visit: Optional[PairVisitor] = None):
        """
        Call ``visit(name, value)`` for every field in declaration order and
        return the record. Without a callback, return an iterator of pairs.
        """
        pairs = list(zip(type(self).__schema__.names, self._values))
        if visit is None:
            return iter(pairs)
        for name, value in pairs:
            visit(name, value)
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._values))

    # -- projection -------------------------------------------------------

    @property
    def members(self) -> List[str]:
        return list(type(self).__schema__.names)

    @property
    def size(self) -> int:
        return len(self._values)

    @property
    def length(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def select(self, predicate: Callable[[Any], bool]) -> List[Any]:
        """Values for which ``predicate`` holds, in declaration order."""
        return [value for value in self._values if predicate(value)]

    def to_a(self) -> List[Any]:
        return list(self._values)

    to_sequence = to_a

    def to_h(self) -> Dict[str, Any]:
        return dict(zip(type(self).__schema__.names, self._values))

    def values_at(self, *keys: Union[FieldKey, slice]) -> List[Any]:
        """
        Values at the requested positions or names, in request order.
        Repeated keys yield repeated values. A slice contributes the values
        of the positions it covers, clipped to the record like a list slice.
        """
        schema = type(self).__schema__
        selected: List[Any] = []
        for key in keys:
            if isinstance(key, slice):
                selected.extend(self._values[key])
            else:
                selected.append(self._values[schema.index_of(key)])
        return selected

    # -- comparison -------------------------------------------------------

    def eql(self, other: object) -> bool:
        """
        True if ``other`` is an instance of exactly the same record type and
        holds equal values. Records of distinct types never compare equal,
        even when their schemas match.
        """
        return type(other) is type(self) and self._values == other._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return type(other) is type(self) and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    @recursive_repr()
    def __repr__(self) -> str:
        fields: Tuple[str, ...] = type(self).__schema__.names
        body = ", ".join(f"{name}={value!r}" for name, value in zip(fields, self._values))
        return f"{type(self).__name__}({body})"
