"""Grammar loading and validation errors."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Failure categories surfaced while building an engine."""

    CONFIGURATION = "configuration"
    SOURCE_UNAVAILABLE = "source_unavailable"
    MALFORMED_SOURCE = "malformed_source"


class GrammarError(ValueError):
    """Base class for grammar errors raised at construction time."""

    kind: ErrorKind = ErrorKind.CONFIGURATION


class ConfigurationError(GrammarError):
    """Raised when a grammar field is missing or has the wrong shape."""

    kind = ErrorKind.CONFIGURATION


class SourceUnavailableError(GrammarError):
    """Raised when a grammar file does not exist or cannot be read."""

    kind = ErrorKind.SOURCE_UNAVAILABLE


class MalformedSourceError(GrammarError):
    """Raised when a grammar file is not valid JSON."""

    kind = ErrorKind.MALFORMED_SOURCE
