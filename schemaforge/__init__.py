"""schemaforge: cached JSON Schema validation engine."""

from .bundle import ValidatorBundle, default_bundle
from .domain.context import ValidationContext
from .domain.errors import (
    BundleError,
    InvalidDocumentError,
    SchemaForgeError,
    ValidationFailureError,
)
from .domain.features import ValidationFeature
from .domain.node import NodeType
from .domain.report import ValidationMessage, ValidationReport
from .infra.json import report_to_json
from .infra.logging import configure_logging
from .services.factory import ValidatorFactory
from .services.json_validator import JsonValidator

__all__ = [
    "BundleError",
    "InvalidDocumentError",
    "JsonValidator",
    "NodeType",
    "SchemaForgeError",
    "ValidationContext",
    "ValidationFailureError",
    "ValidationFeature",
    "ValidationMessage",
    "ValidationReport",
    "ValidatorBundle",
    "ValidatorFactory",
    "configure_logging",
    "default_bundle",
    "report_to_json",
]
