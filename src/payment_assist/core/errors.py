"""
Exception types raised by the Payment Assist SDK.

Every failure surfaced by the public API is a :class:`PASDKError` carrying
exactly one of three kinds. Callers can branch on the subclass or on
:attr:`PASDKError.kind`.
"""

from __future__ import annotations

__all__ = [
    "VALIDATION_FAILED",
    "REQUEST_REFUSED",
    "UNEXPECTED",
    "PASDKError",
    "ValidationFailedError",
    "ConfigError",
    "RequestRefusedError",
    "UnexpectedError",
]

VALIDATION_FAILED = "validation_failed"
REQUEST_REFUSED = "request_refused"
UNEXPECTED = "unexpected"

_ERROR_TYPES = {
    VALIDATION_FAILED: "ValidationFailedError",
    REQUEST_REFUSED: "RequestRefusedError",
    UNEXPECTED: "UnexpectedError",
}


class PASDKError(Exception):
    """Base class for all SDK errors."""

    kind: str = UNEXPECTED

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def wrap(self, prefix: str) -> "PASDKError":
        """
        Prepend ``prefix`` to the message and return the same error.

        The kind is never changed, so errors can be wrapped as they cross each
        layer without losing their classification.
        """
        self.message = prefix + self.message
        self.args = (self.message,)
        return self

    @property
    def error_type(self) -> str:
        return _ERROR_TYPES[self.kind]

    @property
    def is_validation_failed(self) -> bool:
        return self.kind == VALIDATION_FAILED

    @property
    def is_request_refused(self) -> bool:
        return self.kind == REQUEST_REFUSED

    @property
    def is_unexpected(self) -> bool:
        return self.kind == UNEXPECTED

    def __str__(self) -> str:
        return self.message


class ValidationFailedError(PASDKError):
    """
    Pre-request checks determined the request is invalid.

    Retrying the same request is guaranteed to fail the same way.
    """

    kind = VALIDATION_FAILED


class ConfigError(ValidationFailedError):
    """Raised when the supplied configuration is invalid."""


class RequestRefusedError(PASDKError):
    """
    The API received the request but refused to process it.

    Retrying without changing the input is unlikely to succeed.
    """

    kind = REQUEST_REFUSED


class UnexpectedError(PASDKError):
    """
    Catch-all for connection failures, malformed responses and internal faults.

    These may be transient, so callers may choose to retry.
    """

    kind = UNEXPECTED
