"""Structural classification and content identity of document nodes.

Documents are plain Python JSON values: ``dict``, ``list``, ``str``, ``int``,
``float``, ``bool`` and ``None``. The engine never mutates them, but because
they are mutable containers they cannot serve as dictionary keys directly.
``schema_key`` derives a hashable, content-based key instead.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Hashable, Mapping, Sequence
from urllib.parse import unquote

from .errors import InvalidDocumentError


class NodeType(str, Enum):
    """Structural kind of a document node."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"

    def __str__(self) -> str:
        return self.value


REF_KEYWORD = "$ref"

NUMERIC_TYPES = frozenset({NodeType.INTEGER, NodeType.NUMBER})
TYPE_NAMES = frozenset(kind.value for kind in NodeType)


def classify(value: Any) -> NodeType:
    """Return the structural kind of ``value``.

    ``bool`` is a subclass of ``int`` and must be tested first.
    """
    if value is None:
        return NodeType.NULL
    if isinstance(value, bool):
        return NodeType.BOOLEAN
    if isinstance(value, int):
        return NodeType.INTEGER
    if isinstance(value, float):
        return NodeType.NUMBER
    if isinstance(value, str):
        return NodeType.STRING
    if isinstance(value, Mapping):
        return NodeType.OBJECT
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return NodeType.ARRAY
    raise InvalidDocumentError(value)


def schema_key(value: Any) -> Hashable:
    """Return a hashable key equal for structurally equal documents.

    Arrays keep their order, object members do not. Every level is tagged
    with its kind so that ``True``, ``1`` and ``1.0`` stay distinct.
    """
    kind = classify(value)
    if kind is NodeType.OBJECT:
        return kind, frozenset((name, schema_key(member)) for name, member in value.items())
    if kind is NodeType.ARRAY:
        return kind, tuple(schema_key(element) for element in value)
    return kind, value


def json_equal(left: Any, right: Any) -> bool:
    """JSON equality: numbers compare by value, booleans never equal numbers."""
    left_kind = classify(left)
    right_kind = classify(right)
    if left_kind in NUMERIC_TYPES and right_kind in NUMERIC_TYPES:
        return Decimal(repr(left)) == Decimal(repr(right))
    if left_kind is not right_kind:
        return False
    if left_kind is NodeType.OBJECT:
        if left.keys() != right.keys():
            return False
        return all(json_equal(left[name], right[name]) for name in left)
    if left_kind is NodeType.ARRAY:
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))
    return left == right


def escape_segment(segment: str | int) -> str:
    """Escape one JSON pointer reference token (RFC 6901)."""
    return str(segment).replace("~", "~0").replace("/", "~1")


def append_pointer(pointer: str, *segments: str | int) -> str:
    for segment in segments:
        pointer = f"{pointer}/{escape_segment(segment)}"
    return pointer


def resolve_pointer(document: Any, pointer: str) -> Any:
    """Resolve a JSON pointer, optionally given as a URI fragment.

    Raises ``LookupError`` when the pointer does not designate a node.
    """
    if pointer.startswith("#"):
        pointer = unquote(pointer[1:])
    if not pointer:
        return document
    if not pointer.startswith("/"):
        raise LookupError(f"invalid JSON pointer {pointer!r}")

    node = document
    for token in pointer[1:].split("/"):
        token = token.replace("~1", "/").replace("~0", "~")
        kind = classify(node)
        if kind is NodeType.OBJECT:
            if token not in node:
                raise LookupError(f"no member {token!r} in {pointer!r}")
            node = node[token]
        elif kind is NodeType.ARRAY:
            if not token.isdigit() or int(token) >= len(node):
                raise LookupError(f"no index {token!r} in {pointer!r}")
            node = node[int(token)]
        else:
            raise LookupError(f"cannot descend into {kind} at {pointer!r}")
    return node
