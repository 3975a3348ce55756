"""
Coach error taxonomy.

Only ``ConfigurationError`` and ``ValidationError`` ever reach the HTTP
caller.  ``UpstreamError`` and ``ParseError`` are absorbed by the
pipelines into a conservative fallback verdict.
"""


class CoachError(Exception):
    """Base class for all coach errors."""


class ConfigurationError(CoachError):
    """Required credentials or configuration are missing (fatal, 5xx)."""


class UpstreamError(CoachError):
    """The external generator failed or returned an unusable body."""


class ParseError(CoachError):
    """External response was not valid structured output."""


class ValidationError(CoachError):
    """Inbound request is missing or has malformed fields (4xx)."""
