"""
Exception hierarchy for the Kaiascan SDK.

Every failed call raises exactly one of the four leaf classes. None of them is
retried by the SDK; callers decide their own retry policy.
"""

from typing import Optional


class KaiascanError(Exception):
    """Base class for all SDK errors."""


class ValidationError(KaiascanError, ValueError):
    """Caller input was rejected before any network request was made."""


class TransportError(KaiascanError):
    """
    The HTTP exchange itself failed: connection error, timeout, or a non-2xx
    status. ``status_code`` is None when no response was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DecodeError(KaiascanError):
    """The response body was not JSON or did not have the envelope shape."""


class ApiError(KaiascanError):
    """The API answered with a well-formed envelope whose ``code`` is non-zero."""

    def __init__(self, code: int, message: str):
        super().__init__(f"API error! code: {code}, message: {message}")
        self.code = code
        self.message = message
