"""
Canonical parameter serialization and HMAC request signatures.
"""

from __future__ import annotations

import hashlib
import hmac
from decimal import Decimal
from typing import Any, List, Sequence, Tuple

__all__ = [
    "Parameter",
    "canonicalize",
    "generate_signature",
    "remove_empty_params",
    "sign",
    "stringify",
]

Parameter = Tuple[str, Any]


def stringify(value: Any) -> str:
    """Serialize a parameter value the way the API expects it on the wire."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    return str(value)


def remove_empty_params(params: Sequence[Parameter]) -> List[Tuple[str, str]]:
    """Serialize every value and drop the pairs that end up empty."""
    output: List[Tuple[str, str]] = []
    for name, value in params:
        text = stringify(value)
        if text:
            output.append((name, text))
    return output


def canonicalize(params: Sequence[Tuple[str, str]]) -> str:
    """
    Build the string that gets signed.

    Names are upper-cased and joined to their values with ``=``, pairs are
    joined with ``&`` and a trailing ``&`` is added when there is at least one
    pair. Values are used verbatim. ``params`` must already be in alphabetical
    order by name; this function does not sort.
    """
    joined = "&".join(f"{name.upper()}={value}" for name, value in params)
    if joined:
        joined += "&"
    return joined


def sign(canonical: str, secret: str) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``canonical`` keyed by ``secret``."""
    digest = hmac.new(
        secret.encode("utf-8"),
        canonical.encode("utf-8"),
        hashlib.sha256,
    )
    return digest.hexdigest()


def generate_signature(params: Sequence[Tuple[str, str]], secret: str) -> str:
    return sign(canonicalize(params), secret)
