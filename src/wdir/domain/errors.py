from __future__ import annotations

"""
Domain Exception Hierarchy.
"""


class WdirError(Exception):
    """Base class for all errors raised by wdir."""


class TraversalError(WdirError):
    """
    The traversal root failed its precondition check.

    Attributes:
        path: The offending root path as supplied by the caller.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"{reason}: '{path}'")
        self.path = path
        self.reason = reason


class ConfigError(WdirError, TypeError):
    """A configuration value failed strict validation."""
