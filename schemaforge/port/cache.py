"""Cache port: Protocol for the compiled validator cache."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.node import NodeType
    from ..validators.base import Validator


@runtime_checkable
class CachePort(Protocol):
    """Port for a validator cache keyed by (node type, schema content).

    Two schemas with equal content must share an entry, whatever their
    identity.
    """

    def get(self, kind: NodeType, schema: Any) -> Validator | None:
        """Retrieve a cached validator, or None if absent."""
        ...

    def put(self, kind: NodeType, schema: Any, validator: Validator) -> None:
        """Store a validator, replacing any previous entry for the key."""
        ...

    def __len__(self) -> int:
        """Return the number of cached entries."""
        ...
