"""Validation features toggled per validator."""

from __future__ import annotations

from enum import Enum


class ValidationFeature(str, Enum):
    """Switches recognised by the validation engine.

    - SKIP_SCHEMACHECK: treat every schema as already syntax-checked
    - FAIL_FAST: abort on the first violation instead of collecting a report
    """

    SKIP_SCHEMACHECK = "skip_schemacheck"
    FAIL_FAST = "fail_fast"
