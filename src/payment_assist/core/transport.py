"""
Signed request construction and the HTTP exchange with the Payment Assist API.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar
from urllib.parse import quote_plus, urlencode

import requests

from .config import ClientConfig, check_credentials, resolve_api_url
from .envelope import decode_envelope
from .errors import (
    PASDKError,
    RequestRefusedError,
    UnexpectedError,
    ValidationFailedError,
)
from .signing import Parameter, generate_signature, remove_empty_params

__all__ = [
    "GET",
    "POST",
    "SignedRequest",
    "build_request",
    "classify_status",
    "execute",
    "guarded",
    "send_request",
]

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

GET = "GET"
POST = "POST"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class SignedRequest:
    """Everything needed to put a signed call on the wire."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    params: Tuple[Tuple[str, str], ...] = ()

    @property
    def signature(self) -> str:
        return dict(self.params)["signature"]


def _resolve_endpoint(config: ClientConfig, path: str) -> str:
    try:
        base_url = resolve_api_url(config.api_url, config.api_secret)
    except ValidationFailedError as exc:
        raise exc.wrap("failed determining request URL: ")
    return base_url + path.lstrip("/")


def build_request(
    config: ClientConfig,
    path: str,
    params: Sequence[Parameter],
    *,
    method: str = POST,
) -> SignedRequest:
    """
    Sign ``params`` and describe the request for ``path``.

    Empty values are dropped and the rest are sorted by name before signing.
    ``api_key`` and ``signature`` are appended afterwards and are not part of
    the signed string.
    """
    check_credentials(config.api_key, config.api_secret)
    endpoint = _resolve_endpoint(config, path)

    present = sorted(remove_empty_params(params), key=lambda pair: pair[0])
    signature = generate_signature(present, config.api_secret)

    wire: List[Tuple[str, str]] = list(present)
    wire.append(("api_key", config.api_key))
    wire.append(("signature", signature))

    headers = {"X-Origin": config.origin}

    if method == GET:
        query = "&".join(f"{name}={quote_plus(value)}" for name, value in wire)
        return SignedRequest(
            method=GET,
            url=f"{endpoint}?{query}",
            headers=headers,
            params=tuple(wire),
        )

    if method == POST:
        headers["Content-Type"] = FORM_CONTENT_TYPE
        return SignedRequest(
            method=POST,
            url=endpoint,
            headers=headers,
            body=urlencode(wire),
            params=tuple(wire),
        )

    raise ValidationFailedError(f"unsupported HTTP method '{method}'")


def classify_status(status_code: int, body: str) -> Optional[PASDKError]:
    """
    Map an HTTP status code onto an SDK error, or ``None`` for 2xx.

    4xx means the API refused the request. Anything else outside 2xx is
    unexpected.
    """
    if 200 <= status_code < 300:
        return None

    if 400 <= status_code < 500:
        return RequestRefusedError(
            f"API refused your request returning status code {status_code}: {body}"
        )

    return UnexpectedError(
        f"API request failed returning status code {status_code}: {body}"
    )


def send_request(
    session: requests.Session,
    request: SignedRequest,
    *,
    timeout: float,
) -> bytes:
    """
    Perform the exchange and return the raw body of a 2xx response.

    The body is streamed, so a connection dropped while reading it is reported
    separately from one that fails before any response arrives.
    """
    logging.info("Sending %s request to %s", request.method, request.url.split("?", 1)[0])
    try:
        response = session.request(
            request.method,
            request.url,
            headers=request.headers,
            data=request.body,
            timeout=timeout,
            stream=True,
        )
    except requests.RequestException as exc:
        raise UnexpectedError(f"API request failed: {exc}") from exc

    try:
        body = response.content
    except requests.RequestException as exc:
        response.close()
        raise UnexpectedError(f"reading API response failed: {exc}") from exc

    error = classify_status(response.status_code, response.text)
    if error is not None:
        logging.warning(
            "API responded with status %s (%s)", response.status_code, error.error_type
        )
        raise error

    return body


def execute(
    session: requests.Session,
    config: ClientConfig,
    request: SignedRequest,
    decoder: Callable[[Any], T],
) -> T:
    body = send_request(session, request, timeout=config.timeout_seconds)
    try:
        return decode_envelope(body, decoder)
    except PASDKError as exc:
        logging.warning("API response could not be used (%s)", exc.error_type)
        raise


def guarded(func: F) -> F:
    """
    Turn any non-SDK exception raised by ``func`` into an :class:`UnexpectedError`.

    Applied to every public client operation so callers only ever have to
    handle :class:`PASDKError`.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except PASDKError:
            raise
        except Exception as exc:  # noqa: BLE001
            logging.exception("Unexpected failure in %s", func.__name__)
            raise UnexpectedError(
                "there was an unexpected error; this may indicate a bug, "
                f"please contact support: {exc!r}"
            ) from exc

    return wrapper  # type: ignore[return-value]
