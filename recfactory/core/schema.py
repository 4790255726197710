# recfactory/core/schema.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Dict, Iterable, Iterator, List, Tuple, Union

from recfactory.core.errors import ArgumentError, UnknownFieldError

FieldKey = Union[int, str]


class FieldSchema:
    """
    Ordered, immutable list of field names together with the name-to-slot
    mapping used to resolve field lookups.

    The declaration order is the positional construction order and the
    iteration order of every record built on this schema.
    """

    __slots__ = ("_names", "_slots")

    def __init__(self, names: Iterable[str]) -> None:
        """
        Build a schema from field names.

        :param names: Field names in declaration order.
        :raises ArgumentError: If a name is not a string or is declared twice.
        """
        ordered: List[str] = []
        slots: Dict[str, int] = {}
        for name in names:
            if not isinstance(name, str):
                raise ArgumentError(
                    f"Field names must be strings, got {type(name).__name__}", {"field": name}
                )
            if name in slots:
                raise ArgumentError(f"Duplicate field name '{name}'", {"field": name})
            slots[name] = len(ordered)
            ordered.append(name)
        self._names: Tuple[str, ...] = tuple(ordered)
        self._slots = slots

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    def index_of(self, key: FieldKey) -> int:
        """
        Resolve a field key to its slot index.

        Integers are positions in declaration order; negative positions count
        from the end. Strings are field names.

        :param key: Position or field name.
        :return: Slot index in ``range(len(self))``.
        :raises UnknownFieldError: If the key does not designate a field.
        """
        # bool is an int subclass but never a meaningful position
        if isinstance(key, int) and not isinstance(key, bool):
            size = len(self._names)
            index = key + size if key < 0 else key
            if not 0 <= index < size:
                raise UnknownFieldError(
                    f"Offset {key} out of range for record with {size} fields", key
                )
            return index
        if isinstance(key, str):
            try:
                return self._slots[key]
            except KeyError:
                raise UnknownFieldError(f"No field '{key}' in record", key) from None
        raise UnknownFieldError(
            f"Field key must be an int or str, got {type(key).__name__}", key
        )

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._slots

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldSchema):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"FieldSchema({list(self._names)!r})"
