"""Container validators performing recursive descent."""

from __future__ import annotations

import re
from abc import abstractmethod
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Iterator, Mapping

from ..domain.node import REF_KEYWORD
from ..domain.report import ValidationReport
from .base import Validator

if TYPE_CHECKING:
    from ..domain.context import ValidationContext


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


class ContainerValidator(Validator):
    """Run the container's own keywords, then validate every child.

    A schema holding ``$ref`` yields no children.
    """

    def __init__(self, schema: Mapping[str, Any], validator: Validator) -> None:
        self.schema = schema
        self.validator = validator

    def validate(self, context: ValidationContext, instance: Any) -> ValidationReport:
        report = self.validator.validate(context, instance)
        for segment, child, subschemas in self.children(instance):
            child_context = context.relocate(segment)
            for subschema, schema_segments in subschemas:
                report = report.merge(
                    child_context.with_schema(subschema, *schema_segments).validate(child)
                )
        return report

    @abstractmethod
    def children(self, instance: Any) -> Iterator[tuple[Any, Any, list[tuple[Any, tuple]]]]:
        """Yield (segment, child, [(subschema, schema segments), ...])."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.validator!r})"


class ArrayValidator(ContainerValidator):
    """Descend into array elements following ``items`` and ``additionalItems``."""

    def children(self, instance):
        if not isinstance(self.schema, Mapping) or REF_KEYWORD in self.schema:
            return
        items = self.schema.get("items")
        additional = self.schema.get("additionalItems")

        if isinstance(items, Mapping):
            for index, element in enumerate(instance):
                yield index, element, [(items, ("items",))]
            return

        tuple_items = items if isinstance(items, list) else []
        for index, element in enumerate(instance):
            if index < len(tuple_items):
                yield index, element, [(tuple_items[index], ("items", index))]
            elif isinstance(additional, Mapping):
                yield index, element, [(additional, ("additionalItems",))]


class ObjectValidator(ContainerValidator):
    """Descend into object members.

    A member is validated against ``properties[name]`` and every matching
    ``patternProperties`` schema; ``additionalProperties`` only applies when
    neither matched.
    """

    def children(self, instance):
        if not isinstance(self.schema, Mapping) or REF_KEYWORD in self.schema:
            return
        properties = self.schema.get("properties")
        if not isinstance(properties, Mapping):
            properties = {}
        patterns = self.schema.get("patternProperties")
        if not isinstance(patterns, Mapping):
            patterns = {}
        additional = self.schema.get("additionalProperties")

        for name in sorted(instance):
            subschemas = []
            if name in properties:
                subschemas.append((properties[name], ("properties", name)))
            for pattern, subschema in patterns.items():
                if compile_pattern(pattern).search(name):
                    subschemas.append((subschema, ("patternProperties", pattern)))
            if not subschemas and isinstance(additional, Mapping):
                subschemas.append((additional, ("additionalProperties",)))
            if subschemas:
                yield name, instance[name], subschemas
