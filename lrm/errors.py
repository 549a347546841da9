"""Exception types raised at the library boundary.

The matching core itself never raises for string input; these cover invalid
options/configuration and document extraction failures.
"""

from __future__ import annotations


class LrmError(Exception):
    """Base class for all list-reconcile-matcher errors."""


class ConfigurationError(LrmError, ValueError):
    """Invalid match options or configuration values."""


class ParseError(LrmError):
    """A source document could not be turned into a list of items."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


__all__ = ["LrmError", "ConfigurationError", "ParseError"]
