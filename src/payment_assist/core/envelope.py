"""
Decoding of the ``{"status", "msg", "data"}`` envelope wrapping every API response.

The shape of ``data`` depends on whether the request succeeded (an error
response may carry ``null`` or an empty list), so decoding happens in two
phases: the status is probed first and ``data`` is only handed to the
endpoint decoder once the status is confirmed to be ``"ok"``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Optional, TypeVar, Union

from .errors import RequestRefusedError, UnexpectedError

__all__ = ["Envelope", "JSONNumber", "decode_envelope", "parse_envelope"]

T = TypeVar("T")

STATUS_OK = "ok"
STATUS_ERROR = "error"


class JSONNumber(Decimal):
    """
    A JSON number that keeps the exact token it was read from.

    Integers and fractions both arrive as this type, so no number in a
    response ever goes through ``int()`` digit limits or ``float``.
    """

    def __new__(cls, token: str) -> "JSONNumber":
        number = super().__new__(cls, token)
        number.token = token
        return number


@dataclass(frozen=True)
class Envelope:
    status: str
    msg: Optional[str]
    data: Any


def _as_text(payload: Union[bytes, str]) -> str:
    if isinstance(payload, bytes):
        return payload.decode("utf-8", errors="replace")
    return payload


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON number")


def _loads(text: str) -> Any:
    return json.loads(
        text,
        parse_int=JSONNumber,
        parse_float=JSONNumber,
        parse_constant=_reject_constant,
    )


def _probe_status(text: str) -> Any:
    try:
        document = _loads(text)
    except ValueError as exc:
        raise UnexpectedError(f"failed to parse API response: {exc}") from exc
    if not isinstance(document, dict):
        raise UnexpectedError(
            "failed to parse API response: expected a JSON object, got "
            f"{type(document).__name__}"
        )
    return document.get("status")


def parse_envelope(payload: Union[bytes, str, None]) -> Envelope:
    """
    Parse ``payload`` and return the envelope of a successful response.

    Raises :class:`UnexpectedError` for empty, unparsable or unrecognised
    responses and :class:`RequestRefusedError` when the status is ``"error"``.
    Every number is kept as a :class:`JSONNumber`.
    """
    if not payload:
        raise UnexpectedError(
            "the response from the API was malformed: the response body was empty"
        )

    text = _as_text(payload)
    status = _probe_status(text)
    logging.debug("API responded with envelope status %r", status)

    if status == STATUS_ERROR:
        raise RequestRefusedError("the API refused your request: " + text)
    if status != STATUS_OK:
        raise UnexpectedError("the API returned an unexpected response: " + text)

    document = _loads(text)
    msg = document.get("msg")
    if msg is not None and not isinstance(msg, str):
        raise UnexpectedError(
            f"parsing JSON failed: msg must be a string or null, got {msg!r}"
        )
    return Envelope(status=status, msg=msg, data=document.get("data"))


def decode_envelope(
    payload: Union[bytes, str, None],
    decoder: Callable[[Any], T],
) -> T:
    """Decode a full response, turning ``data`` into ``T`` with ``decoder``."""
    envelope = parse_envelope(payload)
    try:
        return decoder(envelope.data)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise UnexpectedError(f"parsing JSON failed: {exc!r}") from exc
