"""
src/errors.py

Exceptions raised by the report pipeline.

Both concrete errors subclass ValueError so callers that only care about
"bad input" can catch ValueError, while the CLI and dashboard can tell a
broken file apart from an out-of-range value.
"""


class ReportError(ValueError):
    """Base class for all pipeline errors."""


class LoadError(ReportError):
    """The input CSV is missing, unreadable, or does not match the schema."""


class ValidationError(ReportError):
    """A numeric value lies outside the domain its field allows."""
