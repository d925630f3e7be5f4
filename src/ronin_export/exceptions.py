"""
Exceptions raised by the exporter.

Every failure is terminal for a run: the CLI logs the error and exits
with a non-zero status.
"""


class ExportError(Exception):
    """Base class for all exporter errors."""


class InvalidAddressError(ExportError, ValueError):
    """Raised when an address does not match the Ronin address format."""


class NetworkError(ExportError):
    """Raised when an HTTP request fails after all retry attempts."""


class DecodeError(ExportError):
    """Raised when the REST API returns a malformed response."""
