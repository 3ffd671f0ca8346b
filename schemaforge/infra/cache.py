"""Thread-safe caches owned by a ValidatorFactory."""

from __future__ import annotations

from threading import Lock
from typing import Any, Hashable, MutableMapping

from ..domain.node import NodeType, schema_key
from ..validators.base import Validator


class ValidatorCache:
    """Compiled validators keyed by (node type, schema content).

    Entries are never evicted: schemas are immutable once loaded, so an entry
    stays correct for the lifetime of its factory. Concurrent compiles of the
    same key are allowed; the last ``put`` wins.
    """

    def __init__(self) -> None:
        self._store: MutableMapping[tuple[NodeType, Hashable], Validator] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def get(self, kind: NodeType, schema: Any) -> Validator | None:
        key = (kind, schema_key(schema))
        with self._lock:
            return self._store.get(key)

    def put(self, kind: NodeType, schema: Any, validator: Validator) -> None:
        key = (kind, schema_key(schema))
        with self._lock:
            self._store[key] = validator


class ValidatedSchemaSet:
    """Schemas known to have passed syntax checking, by content.

    Grows monotonically.
    """

    def __init__(self) -> None:
        self._keys: set[Hashable] = set()
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)

    def __contains__(self, schema: Any) -> bool:
        key = schema_key(schema)
        with self._lock:
            return key in self._keys

    def add(self, schema: Any) -> None:
        key = schema_key(schema)
        with self._lock:
            self._keys.add(key)
