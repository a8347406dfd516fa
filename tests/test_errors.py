"""Tests for the SDK error kinds and message wrapping."""

from __future__ import annotations

import pytest

from payment_assist.core.errors import (
    ConfigError,
    PASDKError,
    RequestRefusedError,
    UnexpectedError,
    ValidationFailedError,
)


@pytest.mark.parametrize(
    "error_cls, error_type",
    [
        (ValidationFailedError, "ValidationFailedError"),
        (ConfigError, "ValidationFailedError"),
        (RequestRefusedError, "RequestRefusedError"),
        (UnexpectedError, "UnexpectedError"),
    ],
)
def test_exactly_one_kind(error_cls, error_type) -> None:
    error = error_cls("message")
    assert error.error_type == error_type
    flags = [error.is_validation_failed, error.is_request_refused, error.is_unexpected]
    assert flags.count(True) == 1


def test_wrap_prepends_and_keeps_kind() -> None:
    error = RequestRefusedError("the API refused your request: {}")

    wrapped = error.wrap("API request failed: ")

    assert wrapped is error
    assert str(wrapped) == "API request failed: the API refused your request: {}"
    assert wrapped.args == ("API request failed: the API refused your request: {}",)
    assert wrapped.is_request_refused


def test_nested_wrapping() -> None:
    error = ValidationFailedError("token cannot be empty")
    error.wrap("request is invalid: ").wrap("capture: ")
    assert error.message == "capture: request is invalid: token cannot be empty"
    assert isinstance(error, PASDKError)
