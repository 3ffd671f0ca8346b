"""Format validators."""

from .validators import DEFAULT_FORMATS, FormatValidator

__all__ = ["DEFAULT_FORMATS", "FormatValidator"]
