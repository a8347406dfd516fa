"""
Public facade for the Payment Assist SDK.

The most useful pieces are re-exported here so integrators can
``from payment_assist import ...`` without navigating the package.
"""

from .api import create_client
from .core import (
    AccountRequest,
    AccountResponse,
    BeginRequest,
    BeginResponse,
    CaptureRequest,
    CaptureResponse,
    ClientConfig,
    ClientParameters,
    ConfigError,
    InvoiceRequest,
    InvoiceResponse,
    PASDKError,
    PaymentAssistClient,
    Plan,
    PlanRequest,
    PlanResponse,
    PreapprovalRequest,
    PreapprovalResponse,
    Repayment,
    RequestRefusedError,
    StatusRequest,
    StatusResponse,
    UnexpectedError,
    UpdateRequest,
    UpdateResponse,
    ValidationFailedError,
    load_client_config,
)

__all__ = (
    "AccountRequest",
    "AccountResponse",
    "BeginRequest",
    "BeginResponse",
    "CaptureRequest",
    "CaptureResponse",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "InvoiceRequest",
    "InvoiceResponse",
    "PASDKError",
    "PaymentAssistClient",
    "Plan",
    "PlanRequest",
    "PlanResponse",
    "PreapprovalRequest",
    "PreapprovalResponse",
    "Repayment",
    "RequestRefusedError",
    "StatusRequest",
    "StatusResponse",
    "UnexpectedError",
    "UpdateRequest",
    "UpdateResponse",
    "ValidationFailedError",
    "create_client",
    "load_client_config",
)
