"""JSON helpers wrapping orjson."""

from __future__ import annotations

from typing import Any

import orjson

from ..domain.report import ValidationReport


def loads(data: str | bytes) -> Any:
    """Parse a JSON document into plain python values.

    Raises:
        orjson.JSONDecodeError: when ``data`` is not valid JSON.
    """

    return orjson.loads(data)


def dumps(value: Any, *, indent: bool = False) -> str:
    """Serialize a document to a JSON string with sorted object members."""

    option = orjson.OPT_SORT_KEYS
    if indent:
        option |= orjson.OPT_INDENT_2
    return orjson.dumps(value, option=option).decode()


def report_to_json(report: ValidationReport, *, indent: bool = False) -> str:
    """Render a validation report as JSON."""

    return dumps(report.to_dict(), indent=indent)
