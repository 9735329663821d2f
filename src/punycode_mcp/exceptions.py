"""Exception handling and error processing for Punycode conversions.

This module provides the exception types raised by the Bootstring codec and
the error handling utility used by the Model Context Protocol (MCP) tools.

The module serves two main purposes:
1. Define the exceptions raised while encoding or decoding Punycode
2. Map codec and other exceptions to human-readable messages

Note: All codec errors derive from ``ValueError`` so callers that treat
malformed input generically keep working. Overflow errors are additionally
instances of the builtin ``OverflowError``.
"""


class PunycodeError(ValueError):
    """Base exception for Punycode encoding and decoding errors."""


class InvalidInputError(PunycodeError):
    """Raised when the input contains a symbol the codec cannot accept."""

    def __init__(self, message: str = "invalid input") -> None:
        super().__init__(message)


class CodecOverflowError(PunycodeError, OverflowError):
    """Raised when an intermediate value exceeds the supported integer range."""

    def __init__(self, message: str = "overflow, needs wider integers") -> None:
        super().__init__(message)


def handle_codec_error(error: Exception) -> str:
    """Convert codec related exceptions to descriptive error messages."""
    err_str = f"Unexpected error: {str(error)}"
    if isinstance(error, UnicodeError):
        err_str = f"Invalid text encoding: {str(error)}"
    if isinstance(error, InvalidInputError):
        err_str = f"Invalid Punycode input: {str(error)}"
    if isinstance(error, CodecOverflowError):
        err_str = f"Punycode overflow: {str(error)}"
    return err_str
