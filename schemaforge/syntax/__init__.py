"""Schema syntax checking."""

from .checkers import SyntaxChecker
from .validator import SyntaxValidator

__all__ = ["SyntaxChecker", "SyntaxValidator"]
