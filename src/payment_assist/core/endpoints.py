"""
Request types for each Payment Assist endpoint.

Every request knows its wire path, HTTP method, how to validate itself and
which parameters it sends. Parameters are listed in alphabetical order of
their wire names, which is the order they are signed in.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, replace
from typing import ClassVar, List, Optional

from .errors import ValidationFailedError
from .signing import Parameter
from .transport import GET, POST

__all__ = [
    "AccountRequest",
    "BeginRequest",
    "CaptureRequest",
    "Endpoint",
    "InvoiceRequest",
    "PlanRequest",
    "PreapprovalRequest",
    "StatusRequest",
    "UpdateRequest",
]


def _require(value: Optional[str], name: str) -> None:
    if not value:
        raise ValidationFailedError(f"{name} cannot be empty")


def _require_positive(value: Optional[int], name: str) -> None:
    if value is None or value <= 0:
        raise ValidationFailedError(f"field {name} must be greater than 0")


class Endpoint:
    path: ClassVar[str]
    method: ClassVar[str] = POST

    def validate(self) -> None:
        return None

    def params(self) -> List[Parameter]:
        return []


@dataclass(frozen=True)
class AccountRequest(Endpoint):
    """Account details and the plan types available to it."""

    path: ClassVar[str] = "account"
    method: ClassVar[str] = GET


@dataclass(frozen=True)
class BeginRequest(Endpoint):
    """
    Begin a new application.

    Amounts are in pence. ``customer_email`` is required when ``send_email``
    is set and ``customer_telephone`` when ``send_sms`` is set. Unset flags
    take the API defaults applied by :meth:`with_defaults`.
    """

    path: ClassVar[str] = "begin"

    order_id: str
    amount: int
    customer_first_name: str
    customer_last_name: str
    customer_address1: str
    customer_postcode: str
    customer_address2: Optional[str] = None
    customer_address3: Optional[str] = None
    customer_town: Optional[str] = None
    customer_county: Optional[str] = None
    customer_email: Optional[str] = None
    customer_telephone: Optional[str] = None
    send_email: Optional[bool] = None
    send_sms: Optional[bool] = None
    enable_multi_plan: Optional[bool] = None
    return_qr_code: Optional[bool] = None
    enable_auto_capture: Optional[bool] = None
    failure_url: Optional[str] = None
    success_url: Optional[str] = None
    webhook_url: Optional[str] = None
    plan_id: Optional[int] = None
    vehicle_registration_plate: Optional[str] = None
    description: Optional[str] = None
    expiry: Optional[int] = None  # seconds, 24 hours when unset

    def with_defaults(self) -> "BeginRequest":
        return replace(
            self,
            send_email=False if self.send_email is None else self.send_email,
            send_sms=False if self.send_sms is None else self.send_sms,
            enable_multi_plan=(
                False if self.enable_multi_plan is None else self.enable_multi_plan
            ),
            return_qr_code=False if self.return_qr_code is None else self.return_qr_code,
            enable_auto_capture=(
                True if self.enable_auto_capture is None else self.enable_auto_capture
            ),
        )

    def validate(self) -> None:
        _require(self.order_id, "order_id")
        _require_positive(self.amount, "amount")
        _require(self.customer_first_name, "customer_first_name")
        _require(self.customer_last_name, "customer_last_name")
        _require(self.customer_address1, "customer_address1")
        _require(self.customer_postcode, "customer_postcode")
        if self.send_email and not self.customer_email:
            raise ValidationFailedError(
                "customer_email cannot be empty if send_email is true"
            )
        if self.send_sms and not self.customer_telephone:
            raise ValidationFailedError(
                "customer_telephone cannot be empty if send_sms is true"
            )

    def params(self) -> List[Parameter]:
        request = self.with_defaults()
        return [
            ("addr1", request.customer_address1),
            ("addr2", request.customer_address2),
            ("addr3", request.customer_address3),
            ("amount", request.amount),
            ("auto_capture", request.enable_auto_capture),
            ("county", request.customer_county),
            ("description", request.description),
            ("email", request.customer_email),
            ("expiry", request.expiry),
            ("f_name", request.customer_first_name),
            ("failure_url", request.failure_url),
            ("multi_plan", request.enable_multi_plan),
            ("order_id", request.order_id),
            ("plan_id", request.plan_id),
            ("postcode", request.customer_postcode),
            ("qr_code", request.return_qr_code),
            ("reg_no", request.vehicle_registration_plate),
            ("s_name", request.customer_last_name),
            ("send_email", request.send_email),
            ("send_sms", request.send_sms),
            ("success_url", request.success_url),
            ("telephone", request.customer_telephone),
            ("town", request.customer_town),
            ("webhook_url", request.webhook_url),
        ]


@dataclass(frozen=True)
class StatusRequest(Endpoint):
    path: ClassVar[str] = "status"
    method: ClassVar[str] = GET

    token: str

    def validate(self) -> None:
        _require(self.token, "token")

    def params(self) -> List[Parameter]:
        return [("token", self.token)]


@dataclass(frozen=True)
class UpdateRequest(Endpoint):
    """
    Update an existing application.

    ``order_id`` can only change once the application is completed.
    ``expires_in`` (seconds from now, 0 expires immediately) and ``amount``
    (which must be lower than the current amount) can only change while the
    application is pending, in progress or pending capture.
    """

    path: ClassVar[str] = "update"

    token: str
    order_id: Optional[str] = None
    expires_in: Optional[int] = None
    amount: Optional[int] = None

    def validate(self) -> None:
        _require(self.token, "token")

    def params(self) -> List[Parameter]:
        return [
            ("amount", self.amount),
            ("expiry", self.expires_in),
            ("order_id", self.order_id),
            ("token", self.token),
        ]


@dataclass(frozen=True)
class CaptureRequest(Endpoint):
    """Finalise an application in the ``pending_capture`` state."""

    path: ClassVar[str] = "capture"

    token: str

    def validate(self) -> None:
        _require(self.token, "token")

    def params(self) -> List[Parameter]:
        return [("token", self.token)]


@dataclass(frozen=True)
class InvoiceRequest(Endpoint):
    """Upload an invoice for a completed application."""

    path: ClassVar[str] = "invoice"

    token: str
    file_type: str  # "pdf", "html", "txt", "doc", "xls", ...
    file_data: bytes

    def validate(self) -> None:
        _require(self.token, "token")
        _require(self.file_type, "file_type")
        if not self.file_data:
            raise ValidationFailedError("file_data cannot be empty")

    def params(self) -> List[Parameter]:
        return [
            ("filedata", base64.b64encode(self.file_data).decode("ascii")),
            ("filetype", self.file_type),
            ("token", self.token),
        ]


@dataclass(frozen=True)
class PlanRequest(Endpoint):
    """
    Quote a repayment schedule for ``amount`` pence.

    Without ``plan_id`` the account's default plan is used. ``plan_length``
    must be one of the lengths the plan offers.
    """

    path: ClassVar[str] = "plan"

    amount: int
    plan_id: Optional[int] = None
    plan_length: Optional[int] = None

    def validate(self) -> None:
        _require_positive(self.amount, "amount")

    def params(self) -> List[Parameter]:
        return [
            ("amount", self.amount),
            ("plan_id", self.plan_id),
            ("plan_length", self.plan_length),
        ]


@dataclass(frozen=True)
class PreapprovalRequest(Endpoint):
    """
    Check a customer's eligibility in advance.

    Approval only means the internal checks passed; the customer still needs
    funds for any deposit.
    """

    path: ClassVar[str] = "preapproval"

    customer_first_name: str
    customer_last_name: str
    customer_postcode: str
    customer_address1: str

    def validate(self) -> None:
        _require(self.customer_first_name, "customer_first_name")
        _require(self.customer_last_name, "customer_last_name")
        _require(self.customer_address1, "customer_address1")
        _require(self.customer_postcode, "customer_postcode")

    def params(self) -> List[Parameter]:
        return [
            ("addr1", self.customer_address1),
            ("f_name", self.customer_first_name),
            ("postcode", self.customer_postcode),
            ("s_name", self.customer_last_name),
        ]
