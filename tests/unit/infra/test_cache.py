"""Unit tests for the validator cache and validated-schema set."""

from __future__ import annotations

import threading

from schemaforge.domain.node import NodeType
from schemaforge.infra.cache import ValidatedSchemaSet, ValidatorCache
from schemaforge.port.cache import CachePort
from schemaforge.validators.base import AlwaysTrueValidator


class TestValidatorCache:
    def test_satisfies_cache_port(self):
        assert isinstance(ValidatorCache(), CachePort)

    def test_miss_returns_none(self):
        assert ValidatorCache().get(NodeType.OBJECT, {"type": "object"}) is None

    def test_hit_by_content_not_identity(self):
        cache = ValidatorCache()
        validator = AlwaysTrueValidator()
        cache.put(NodeType.OBJECT, {"type": "object", "required": ["a"]}, validator)
        assert cache.get(NodeType.OBJECT, {"required": ["a"], "type": "object"}) is validator

    def test_kinds_do_not_share_entries(self):
        cache = ValidatorCache()
        schema = {"minItems": 1}
        array_validator = AlwaysTrueValidator()
        cache.put(NodeType.ARRAY, schema, array_validator)
        assert cache.get(NodeType.OBJECT, schema) is None
        assert cache.get(NodeType.ARRAY, schema) is array_validator

    def test_last_writer_wins(self):
        cache = ValidatorCache()
        first, second = AlwaysTrueValidator(), AlwaysTrueValidator()
        cache.put(NodeType.NULL, {}, first)
        cache.put(NodeType.NULL, {}, second)
        assert cache.get(NodeType.NULL, {}) is second
        assert len(cache) == 1

    def test_concurrent_puts(self):
        cache = ValidatorCache()

        def worker(index: int) -> None:
            for n in range(50):
                cache.put(NodeType.INTEGER, {"minimum": n}, AlwaysTrueValidator())

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(cache) == 50


class TestValidatedSchemaSet:
    def test_membership_by_content(self):
        validated = ValidatedSchemaSet()
        validated.add({"type": "string", "enum": ["a"]})
        assert {"enum": ["a"], "type": "string"} in validated
        assert {"enum": ["b"], "type": "string"} not in validated

    def test_grows_monotonically(self):
        validated = ValidatedSchemaSet()
        validated.add({})
        validated.add({})
        validated.add({"type": "null"})
        assert len(validated) == 2
