"""Validator variants composed by the engine."""

from .base import AlwaysFalseValidator, AlwaysTrueValidator, MatchAllValidator, Validator
from .container import ArrayValidator, ObjectValidator

__all__ = [
    "AlwaysFalseValidator",
    "AlwaysTrueValidator",
    "ArrayValidator",
    "MatchAllValidator",
    "ObjectValidator",
    "Validator",
]
