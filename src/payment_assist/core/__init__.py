"""
Core primitives that implement request signing and response decoding.
"""

from .client import PaymentAssistClient, fetch
from .config import (
    ClientConfig,
    ClientParameters,
    load_client_config,
    resolve_api_url,
)
from .endpoints import (
    AccountRequest,
    BeginRequest,
    CaptureRequest,
    InvoiceRequest,
    PlanRequest,
    PreapprovalRequest,
    StatusRequest,
    UpdateRequest,
)
from .envelope import Envelope, JSONNumber, decode_envelope, parse_envelope
from .environment import build_environment, read_env_file
from .errors import (
    ConfigError,
    PASDKError,
    RequestRefusedError,
    UnexpectedError,
    ValidationFailedError,
)
from .models import (
    AccountResponse,
    BeginResponse,
    CaptureResponse,
    InvoiceResponse,
    Plan,
    PlanResponse,
    PreapprovalResponse,
    Repayment,
    StatusResponse,
    UpdateResponse,
)
from .signing import canonicalize, generate_signature, sign
from .transport import SignedRequest, build_request, classify_status

__all__ = [
    "AccountRequest",
    "AccountResponse",
    "BeginRequest",
    "BeginResponse",
    "CaptureRequest",
    "CaptureResponse",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "Envelope",
    "InvoiceRequest",
    "InvoiceResponse",
    "JSONNumber",
    "PASDKError",
    "PaymentAssistClient",
    "Plan",
    "PlanRequest",
    "PlanResponse",
    "PreapprovalRequest",
    "PreapprovalResponse",
    "Repayment",
    "RequestRefusedError",
    "SignedRequest",
    "StatusRequest",
    "StatusResponse",
    "UnexpectedError",
    "UpdateRequest",
    "UpdateResponse",
    "ValidationFailedError",
    "build_environment",
    "build_request",
    "canonicalize",
    "classify_status",
    "decode_envelope",
    "fetch",
    "generate_signature",
    "load_client_config",
    "parse_envelope",
    "read_env_file",
    "resolve_api_url",
    "sign",
]
