"""
HTTP client for the Payment Assist API.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

import requests

from .config import ClientConfig
from .endpoints import (
    AccountRequest,
    BeginRequest,
    CaptureRequest,
    Endpoint,
    InvoiceRequest,
    PlanRequest,
    PreapprovalRequest,
    StatusRequest,
    UpdateRequest,
)
from .errors import PASDKError, ValidationFailedError
from .models import (
    AccountResponse,
    BeginResponse,
    CaptureResponse,
    InvoiceResponse,
    PlanResponse,
    PreapprovalResponse,
    StatusResponse,
    UpdateResponse,
)
from .transport import SignedRequest, build_request, execute, guarded

__all__ = ["PaymentAssistClient", "fetch"]

T = TypeVar("T")


def _validate(request: Endpoint) -> None:
    try:
        request.validate()
    except ValidationFailedError as exc:
        raise exc.wrap("request is invalid: ")


def fetch(
    session: requests.Session,
    config: ClientConfig,
    request: Endpoint,
    decoder: Callable[[Any], T],
) -> T:
    """
    Validate, sign and send ``request``, decoding the response with ``decoder``.

    Anything that fails after validation, including missing credentials or a
    bad base URL, carries the ``"API request failed: "`` prefix.
    """
    _validate(request)
    try:
        signed = build_request(
            config, request.path, request.params(), method=request.method
        )
        return execute(session, config, signed, decoder)
    except PASDKError as exc:
        raise exc.wrap("API request failed: ")


class PaymentAssistClient:
    """
    One method per API operation.

    The session is shared across calls and carries no request state, so a
    single client can serve a whole application.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    @guarded
    def sign(self, request: Endpoint) -> SignedRequest:
        """Build the signed request without sending it."""
        _validate(request)
        return build_request(
            self.config, request.path, request.params(), method=request.method
        )

    @guarded
    def account(self) -> AccountResponse:
        return fetch(self.session, self.config, AccountRequest(), AccountResponse.from_data)

    @guarded
    def begin(self, request: BeginRequest) -> BeginResponse:
        return fetch(self.session, self.config, request, BeginResponse.from_data)

    @guarded
    def status(self, request: StatusRequest) -> StatusResponse:
        return fetch(self.session, self.config, request, StatusResponse.from_data)

    @guarded
    def update(self, request: UpdateRequest) -> UpdateResponse:
        return fetch(self.session, self.config, request, UpdateResponse.from_data)

    @guarded
    def capture(self, request: CaptureRequest) -> CaptureResponse:
        return fetch(self.session, self.config, request, CaptureResponse.from_data)

    @guarded
    def invoice(self, request: InvoiceRequest) -> InvoiceResponse:
        return fetch(self.session, self.config, request, InvoiceResponse.from_data)

    @guarded
    def plan(self, request: PlanRequest) -> PlanResponse:
        return fetch(self.session, self.config, request, PlanResponse.from_data)

    @guarded
    def preapproval(self, request: PreapprovalRequest) -> PreapprovalResponse:
        return fetch(self.session, self.config, request, PreapprovalResponse.from_data)
