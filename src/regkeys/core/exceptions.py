"""
Custom exception classes for the regkeys package.

Absence is not an error here: a key without a parser parses to ``None`` and a
key without a stringer renders a diagnostic string. Only malformed input and
programmer mistakes raise.
"""

from typing import Any, Optional


class RegkeysException(Exception):
    """Base exception class for all regkeys exceptions."""

    pass


class FormatError(RegkeysException, ValueError):
    """
    Raised by a derived parser when text is not a valid literal for its type.

    Example:
        >>> raise FormatError("yes", "bool")
        Traceback (most recent call last):
        ...
        regkeys.core.exceptions.FormatError: 'yes' is not a valid bool literal
    """

    def __init__(self, raw: Any, target: str, reason: Optional[str] = None):
        self.raw = raw
        self.target = target
        self.reason = reason
        message = f"{raw!r} is not a valid {target} literal"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ConfigurationError(RegkeysException):
    """Raised when a key is built without its required fields."""

    pass


class RegistryError(RegkeysException):
    """Raised when a registry rejects a read or write."""

    pass
