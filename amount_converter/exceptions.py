"""
Custom exception hierarchy for amount conversion.

Each exception type maps to a specific category of conversion failure,
so the CLI and the HTTP API can report a machine-readable code.
"""

from __future__ import annotations


class AmountConversionError(Exception):
    """Base exception for all amount conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ParseError(AmountConversionError):
    """The payload is not a recognizable numeral."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("PARSE_FAILED", message, details)


class DispatchError(AmountConversionError):
    """The marker fell outside the closed set the dispatcher knows about."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNRECOGNIZED_MARKER", message, details)


class InvalidRateError(AmountConversionError):
    """The exchange rate is zero, negative or not a finite number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_RATE", message, details)
