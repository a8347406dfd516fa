"""
Configuration objects and helpers for the Payment Assist client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment
from .errors import ConfigError, ValidationFailedError

__all__ = [
    "DEFAULT_ORIGIN",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEMO_API_URL",
    "ClientConfig",
    "ClientParameters",
    "check_credentials",
    "load_client_config",
    "resolve_api_url",
]

DEMO_API_URL = "https://api.demo.payassi.st/"
DEMO_SECRET_PREFIX = "demo_"
DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_ORIGIN = "payment-assist-python-sdk"

_PARAMETER_TO_ENV_KEY = {
    "api_key": "PA_API_KEY",
    "api_secret": "PA_API_SECRET",
    "api_url": "PA_API_URL",
    "timeout_seconds": "PA_TIMEOUT_SECONDS",
}


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_client_config`.
    """

    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    api_url: Optional[str] = None
    timeout_seconds: Optional[int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = str(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = str(value)
    return overrides


def resolve_api_url(api_url: Optional[str], api_secret: str) -> str:
    """
    Work out the base URL requests are sent to.

    An explicit URL always wins. Without one, demo secrets (``demo_`` prefix)
    resolve to the demo environment. The result always ends in ``/``.
    """
    url = (api_url or "").strip()
    if not url:
        if api_secret.startswith(DEMO_SECRET_PREFIX):
            return DEMO_API_URL
        raise ValidationFailedError(
            "the API URL must be provided for non-demo credentials"
        )

    if not url.startswith("https:"):
        raise ValidationFailedError('the API URL must start with "https:"')

    if not url.endswith("/"):
        url += "/"
    return url


def check_credentials(api_key: str, api_secret: str) -> None:
    if not api_key:
        raise ValidationFailedError("api_key cannot be empty")
    if not api_secret:
        raise ValidationFailedError("api_secret cannot be empty")


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"PA_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("PA_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    api_secret: str
    api_url: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    origin: str = DEFAULT_ORIGIN

    @property
    def is_demo(self) -> bool:
        return self.api_secret.startswith(DEMO_SECRET_PREFIX)

    @classmethod
    def create(
        cls,
        api_key: str,
        api_secret: str,
        api_url: Optional[str] = None,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> "ClientConfig":
        """Validate credentials and resolve the base URL up front."""
        try:
            check_credentials(api_key, api_secret)
            resolved = resolve_api_url(api_url, api_secret)
        except ValidationFailedError as exc:
            raise ConfigError(exc.message) from exc
        return cls(
            api_key=api_key,
            api_secret=api_secret,
            api_url=resolved,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        api_key = values.get("PA_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("PA_API_KEY must be provided")

        api_secret = values.get("PA_API_SECRET", "").strip()
        if not api_secret:
            raise ConfigError("PA_API_SECRET must be provided")

        timeout_seconds = _parse_timeout(
            values.get("PA_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        )

        return cls.create(
            api_key,
            api_secret,
            values.get("PA_API_URL"),
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout_seconds: Optional[int | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "api_key": api_key,
                "api_secret": api_secret,
                "api_url": api_url,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    api_secret: Optional[str] = None,
    api_url: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    The configuration can be provided through environment variables, a
    ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        api_key=api_key,
        api_secret=api_secret,
        api_url=api_url,
        timeout_seconds=timeout_seconds,
    )
