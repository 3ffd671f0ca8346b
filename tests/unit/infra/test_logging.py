"""Unit tests for structured logging configuration."""

from __future__ import annotations

import json
import logging
from io import StringIO

import structlog

from schemaforge.infra.config import Settings
from schemaforge.infra.logging import (
    add_engine_context,
    clear_context,
    configure_logging,
    get_schema_id,
    set_schema_id,
)


class TestAddEngineContext:
    def test_renames_engine_keys(self) -> None:
        event_dict = {
            "event": "test",
            "instance_path": "/a",
            "schema_path": "#/properties/a",
            "keyword": "type",
        }
        result = add_engine_context(None, "info", event_dict)

        assert result["schemaforge.instance.path"] == "/a"
        assert result["schemaforge.schema.path"] == "#/properties/a"
        assert result["schemaforge.keyword"] == "type"
        assert "instance_path" not in result
        assert "schema_path" not in result
        assert "keyword" not in result

    def test_preserves_other_fields(self) -> None:
        result = add_engine_context(None, "info", {"event": "test", "count": 42})
        assert result == {"event": "test", "count": 42}

    def test_adds_schema_id_from_context(self) -> None:
        clear_context()
        set_schema_id("order.json")
        try:
            result = add_engine_context(None, "info", {"event": "test"})
            assert result["schemaforge.schema.id"] == "order.json"
        finally:
            clear_context()


class TestContextVars:
    def test_set_and_get_schema_id(self) -> None:
        clear_context()
        assert get_schema_id() is None

        set_schema_id("person.json")
        assert get_schema_id() == "person.json"

        clear_context()
        assert get_schema_id() is None


class TestConfigureLogging:
    def test_json_output_includes_namespaced_keys(self) -> None:
        configure_logging(Settings(log_level="DEBUG", log_format="json"))

        stream = StringIO()
        root = logging.getLogger()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(root.handlers[0].formatter)
        root.addHandler(handler)
        try:
            structlog.get_logger("test").info("compiled", schema_path="#/items")
            output = stream.getvalue().strip().splitlines()
            assert output
            log_data = json.loads(output[-1])
            assert log_data["event"] == "compiled"
            assert log_data["schemaforge.schema.path"] == "#/items"
        finally:
            root.removeHandler(handler)
            structlog.reset_defaults()
