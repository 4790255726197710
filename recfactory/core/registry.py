# recfactory/core/registry.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
import threading
from typing import Dict, Iterator, List, Optional, Type

from recfactory.core.errors import UnknownTypeError
from recfactory.core.record import Record

logger = logging.getLogger(__name__)


class TypeRegistry:
    """
    Maps type names to the record types bound under them.

    All reads and writes of the mapping happen under a single lock, so
    factories used from several threads see one consistent binding per name.
    Binding a name that is already taken replaces the previous type.
    """

    def __init__(self) -> None:
        self._types: Dict[str, Type[Record]] = {}
        self._lock = threading.Lock()

    def bind(self, name: str, record_type: Type[Record]) -> Type[Record]:
        """
        Bind ``record_type`` under ``name`` and return it.

        :param name: Type name.
        :param record_type: Synthesized record type.
        :return: The bound record type.
        """
        with self._lock:
            previous = self._types.get(name)
            self._types[name] = record_type
        if previous is not None:
            logger.warning("Record type %s re-bound, previous definition replaced", name)
        else:
            logger.debug("Registered record type %s", name)
        return record_type

    def lookup(self, name: str) -> Type[Record]:
        """
        Return the record type bound under ``name``.

        :raises UnknownTypeError: If no type is bound under that name.
        """
        with self._lock:
            try:
                return self._types[name]
            except KeyError:
                raise UnknownTypeError(f"No record type registered as '{name}'", name) from None

    def get(self, name: str, default: Optional[Type[Record]] = None) -> Optional[Type[Record]]:
        with self._lock:
            return self._types.get(name, default)

    def unbind(self, name: str) -> Type[Record]:
        """
        Remove and return the record type bound under ``name``.

        :raises UnknownTypeError: If no type is bound under that name.
        """
        with self._lock:
            try:
                record_type = self._types.pop(name)
            except KeyError:
                raise UnknownTypeError(f"No record type registered as '{name}'", name) from None
        logger.debug("Unregistered record type %s", name)
        return record_type

    def names(self) -> List[str]:
        with self._lock:
            return list(self._types)

    def clear(self) -> None:
        with self._lock:
            self._types.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return isinstance(name, str) and name in self._types

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
