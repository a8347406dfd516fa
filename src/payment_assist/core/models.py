"""
Typed response objects for each API endpoint.

Each type exposes a ``from_data`` classmethod that turns the ``data`` member
of a successful envelope into an instance, raising ``TypeError``,
``KeyError`` or ``ValueError`` when the payload has the wrong shape.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List, Mapping, Optional

from .envelope import JSONNumber

__all__ = [
    "AccountResponse",
    "BeginResponse",
    "CaptureResponse",
    "InvoiceResponse",
    "Plan",
    "PlanResponse",
    "PreapprovalResponse",
    "Repayment",
    "StatusResponse",
    "UpdateResponse",
]

DATE_FORMAT = "%Y-%m-%d"

_JSON_INTEGER = re.compile(r"-?(?:0|[1-9][0-9]*)")
_JSON_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def _object(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{name} must be a JSON object, got {type(value).__name__}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"field '{key}' must be a string, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    if data.get(key) is None:
        return None
    return _str(data, key)


def _as_int(key: str, value: Any) -> int:
    if isinstance(value, JSONNumber):
        if not _JSON_INTEGER.fullmatch(value.token):
            raise TypeError(f"field '{key}' must be an integer, got {value.token}")
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field '{key}' must be an integer, got {value!r}")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    return _as_int(key, data[key])


def _optional_int(data: Mapping[str, Any], key: str) -> Optional[int]:
    if data.get(key) is None:
        return None
    return _int(data, key)


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"field '{key}' must be a boolean, got {value!r}")
    return value


def _optional_bool(data: Mapping[str, Any], key: str) -> Optional[bool]:
    if data.get(key) is None:
        return None
    return _bool(data, key)


def _decimal_text(data: Mapping[str, Any], key: str) -> str:
    """
    Return a rate as decimal text, accepting either a JSON number or a string.

    JSON numbers come back exactly as the API wrote them, whatever their size
    or notation. Strings must themselves be valid JSON numbers, so ``"NaN"``
    and ``"Infinity"`` are rejected.
    """
    value = data[key]
    if isinstance(value, JSONNumber):
        return value.token
    if isinstance(value, bool):
        raise TypeError(f"field '{key}' must be a number, got {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        if not _JSON_NUMBER.fullmatch(value):
            raise ValueError(f"field '{key}' is not a decimal number: {value!r}")
        return value
    raise TypeError(f"field '{key}' must be a number, got {value!r}")


def _int_from_text(data: Mapping[str, Any], key: str) -> Optional[int]:
    # "update" echoes numbers back as strings.
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        if not _JSON_INTEGER.fullmatch(value):
            raise ValueError(f"field '{key}' is not an integer: {value!r}")
        return int(value)
    return _as_int(key, value)


def _date(data: Mapping[str, Any], key: str) -> date:
    return datetime.strptime(_str(data, key), DATE_FORMAT).date()


def _datetime(data: Mapping[str, Any], key: str) -> datetime:
    return datetime.fromisoformat(_str(data, key))


def _optional_datetime(data: Mapping[str, Any], key: str) -> Optional[datetime]:
    if data.get(key) is None:
        return None
    return _datetime(data, key)


def _list(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data[key]
    if not isinstance(value, list):
        raise TypeError(f"field '{key}' must be a list, got {value!r}")
    return value


@dataclass(frozen=True)
class Plan:
    """A plan type available to the dealer."""

    plan_id: int
    name: str
    instalments: int
    deposit: bool  # first payment is taken immediately
    apr: str
    frequency: str
    min_amount: Optional[int]  # pence
    max_amount: Optional[int]  # pence
    commission_rate: str  # percentage
    commission_fixed_fee: Optional[int]  # pence

    @classmethod
    def from_data(cls, value: Any) -> "Plan":
        data = _object(value, "plan")
        return cls(
            plan_id=_int(data, "plan_id"),
            name=_str(data, "name"),
            instalments=_int(data, "instalments"),
            deposit=_bool(data, "deposit"),
            apr=_decimal_text(data, "apr"),
            frequency=_str(data, "frequency"),
            min_amount=_optional_int(data, "min_amount"),
            max_amount=_optional_int(data, "max_amount"),
            commission_rate=_decimal_text(data, "commission_rate"),
            commission_fixed_fee=_optional_int(data, "commission_fixed_fee"),
        )


@dataclass(frozen=True)
class AccountResponse:
    legal_name: str
    display_name: str
    plans: List[Plan]

    @classmethod
    def from_data(cls, value: Any) -> "AccountResponse":
        data = _object(value, "data")
        return cls(
            legal_name=_str(data, "legal_name"),
            display_name=_str(data, "display_name"),
            plans=[Plan.from_data(item) for item in _list(data, "plans")],
        )


@dataclass(frozen=True)
class BeginResponse:
    token: str  # save this to refer to the application later
    url: str  # where the customer continues the application

    @classmethod
    def from_data(cls, value: Any) -> "BeginResponse":
        data = _object(value, "data")
        return cls(token=_str(data, "token"), url=_str(data, "url"))


@dataclass(frozen=True)
class StatusResponse:
    token: str
    status: str
    amount: int
    expires_at: datetime
    pa_ref: Optional[str]
    requires_invoice: bool
    has_invoice: bool
    last_accessed_at: Optional[datetime] = None

    @classmethod
    def from_data(cls, value: Any) -> "StatusResponse":
        data = _object(value, "data")
        return cls(
            token=_str(data, "token"),
            status=_str(data, "status"),
            amount=_int(data, "amount"),
            expires_at=_datetime(data, "expires_at"),
            pa_ref=_optional_str(data, "pa_ref"),
            requires_invoice=_bool(data, "requires_invoice"),
            has_invoice=_bool(data, "has_invoice"),
            last_accessed_at=_optional_datetime(data, "last_accessed_at"),
        )


@dataclass(frozen=True)
class UpdateResponse:
    token: str
    order_id: Optional[str]
    expires_in: Optional[int]
    amount: Optional[int]

    @classmethod
    def from_data(cls, value: Any) -> "UpdateResponse":
        data = _object(value, "data")
        return cls(
            token=_str(data, "token"),
            order_id=_optional_str(data, "order_id"),
            expires_in=_int_from_text(data, "expiry"),
            amount=_int_from_text(data, "amount"),
        )


@dataclass(frozen=True)
class CaptureResponse:
    """
    Result of a capture.

    ``deposit_captured`` is ``None`` when the application has no deposit and
    ``deposit_reason`` is only set when the deposit capture failed.
    """

    token: str
    status: str
    deposit_captured: Optional[bool] = None
    deposit_reason: Optional[str] = None

    @classmethod
    def from_data(cls, value: Any) -> "CaptureResponse":
        data = _object(value, "data")
        return cls(
            token=_str(data, "token"),
            status=_str(data, "status"),
            deposit_captured=_optional_bool(data, "deposit_captured"),
            deposit_reason=_optional_str(data, "deposit_reason"),
        )


@dataclass(frozen=True)
class InvoiceResponse:
    token: str
    upload_status: str  # "success" or "failed"

    @property
    def succeeded(self) -> bool:
        return self.upload_status == "success"

    @classmethod
    def from_data(cls, value: Any) -> "InvoiceResponse":
        data = _object(value, "data")
        return cls(
            token=_str(data, "token"),
            upload_status=_str(data, "upload_status"),
        )


@dataclass(frozen=True)
class Repayment:
    date: date
    amount: int  # pence

    @classmethod
    def from_data(cls, value: Any) -> "Repayment":
        data = _object(value, "repayment")
        return cls(date=_date(data, "date"), amount=_int(data, "amount"))


@dataclass(frozen=True)
class PlanResponse:
    plan: str
    amount: int
    interest: int
    repayable: int
    schedule: List[Repayment]

    @classmethod
    def from_data(cls, value: Any) -> "PlanResponse":
        data = _object(value, "data")
        return cls(
            plan=_str(data, "plan"),
            amount=_int(data, "amount"),
            interest=_int(data, "interest"),
            repayable=_int(data, "repayable"),
            schedule=[Repayment.from_data(item) for item in _list(data, "schedule")],
        )


@dataclass(frozen=True)
class PreapprovalResponse:
    approved: bool

    @classmethod
    def from_data(cls, value: Any) -> "PreapprovalResponse":
        data = _object(value, "data")
        return cls(approved=_bool(data, "approved"))
