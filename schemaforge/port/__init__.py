"""Port protocols for the collaborators of ValidatorFactory."""

from .cache import CachePort
from .compiler import FormatCompilerPort, KeywordCompilerPort, SyntaxCompilerPort

__all__ = ["CachePort", "FormatCompilerPort", "KeywordCompilerPort", "SyntaxCompilerPort"]
