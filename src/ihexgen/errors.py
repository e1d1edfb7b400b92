"""
ihexgen Error Hierarchy
=======================

This module defines the exception hierarchy for the ihexgen package.
All exceptions inherit from IHexError, allowing callers to catch every
encoder-related error with a single except clause if desired.

Exception Hierarchy
-------------------
IHexError (base)
├── InvalidInputError - payload is empty, not hexadecimal, or odd-length
└── ConfigurationError - record length cannot be encoded in a record

Both errors are raised before any record is produced, so a caller never
sees partial output.

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class IHexError(Exception):
    """
    Base exception for all ihexgen errors.

    Carries an optional hint that is appended to the message:

        try:
            encode("12G4")
        except IHexError as e:
            print(e)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format as 'error: ...' with an optional 'hint: ...' line."""
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Encoder Exceptions
# =============================================================================

class InvalidInputError(IHexError):
    """
    Malformed payload.

    Raised when the combined hex string:
    - Is empty
    - Contains characters outside [0-9A-Fa-f]
    - Has an odd number of digits (a trailing half byte)
    """

    def __init__(
        self,
        message: str,
        hint: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.position = position
        super().__init__(message, hint=hint)


class ConfigurationError(IHexError):
    """
    Invalid encoder configuration.

    The record length must be a positive integer no larger than 255,
    since it is stored in the 1-byte length field of each data record.
    """
    pass
