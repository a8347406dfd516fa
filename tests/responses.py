"""Canned API responses and fake transport objects used across the tests."""

from __future__ import annotations

from typing import Dict
from unittest.mock import MagicMock

API_KEY = "testapikey"
API_SECRET = "testsecret"
API_URL = "https://api.example.test/"

RESPONSES: Dict[str, str] = {
    "account": """
        {
            "status": "ok",
            "msg": null,
            "data": {
                "legal_name": "Test Merchant",
                "display_name": "Test Merchant",
                "plans": [
                    {
                        "plan_id": 6,
                        "name": "3-Payment",
                        "instalments": 3,
                        "deposit": true,
                        "apr": 0,
                        "frequency": "monthly",
                        "min_amount": null,
                        "max_amount": 500000,
                        "commission_rate": "8.50",
                        "commission_fixed_fee": null
                    },
                    {
                        "plan_id": 1,
                        "name": "4-Payment",
                        "instalments": 4,
                        "deposit": false,
                        "apr": 5.5,
                        "frequency": "monthly",
                        "min_amount": 10000,
                        "max_amount": 300000,
                        "commission_rate": "0",
                        "commission_fixed_fee": 5000
                    }
                ]
            }
        }""",
    "begin": """
        {
            "status": "ok",
            "msg": null,
            "data": {
                "token": "0138ef43-f703-41cb-8f08-f36f41b47560",
                "url": "https://example.com"
            }
        }""",
    "status": """
        {
            "status": "ok",
            "msg": null,
            "data": {
                "token": "aed3bd4e-c478-4d73-a6fa-3640a7155e4f",
                "status": "pending",
                "amount": 50000,
                "expires_at": "2022-05-24T19:28:06+01:00",
                "pa_ref": "testreference",
                "requires_invoice": true,
                "has_invoice": true,
                "last_accessed_at": "2025-11-12T12:00:00+00:00"
            }
        }""",
    "update": """
        {
            "status": "ok",
            "msg": null,
            "data": {
                "token": "aed3bd4e-c478-4d73-a6fa-3640a7155e4f",
                "order_id": "neworderid",
                "expiry": "600",
                "amount": "100000"
            }
        }""",
    "capture": """
        {
            "status": "ok",
            "msg": null,
            "data": {
                "token": "aed3bd4e-c478-4d73-a6fa-3640a7155e4f",
                "status": "completed",
                "deposit_captured": true
            }
        }""",
    "invoice": """
        {
            "status": "ok",
            "msg": null,
            "data": {
                "token": "aed3bd4e-c478-4d73-a6fa-3640a7155e4f",
                "upload_status": "success"
            }
        }""",
    "plan": """
        {
            "status": "ok",
            "msg": null,
            "data": {
                "plan": "4-Payment",
                "amount": 50000,
                "interest": 0,
                "repayable": 50000,
                "schedule": [
                    {"date": "2019-03-12", "amount": 12500},
                    {"date": "2019-04-12", "amount": 12500},
                    {"date": "2019-05-12", "amount": 12500},
                    {"date": "2019-06-12", "amount": 12500}
                ]
            }
        }""",
    "preapproval": """
        {
            "status": "ok",
            "msg": null,
            "data": {
                "approved": true
            }
        }""",
}


def make_response(body: str, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = body
    response.content = body.encode("utf-8")
    return response


def make_session(body: str, status_code: int = 200) -> MagicMock:
    session = MagicMock()
    session.request.return_value = make_response(body, status_code)
    return session
