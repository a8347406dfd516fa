"""
Public, high-level helpers for building a Payment Assist client.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import PaymentAssistClient
from .core.config import ClientConfig, ClientParameters, load_client_config

__all__ = ["create_client"]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    api_secret: Optional[str] = None,
    api_url: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> PaymentAssistClient:
    """
    Construct a :class:`PaymentAssistClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data. Pass a shared ``session`` to
    reuse pooled connections across clients.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            api_key,
            api_secret,
            api_url,
            timeout_seconds,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            parameters=parameters,
            api_key=api_key,
            api_secret=api_secret,
            api_url=api_url,
            timeout_seconds=timeout_seconds,
        )
    return PaymentAssistClient(cfg, session=session)
