"""Keyword validators of the default bundle."""
