"""Shared fixtures for the Payment Assist SDK tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from payment_assist.core.config import ClientConfig

from .responses import API_KEY, API_SECRET, API_URL, RESPONSES, make_response


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key=API_KEY, api_secret=API_SECRET, api_url=API_URL)


@pytest.fixture
def endpoint_session() -> MagicMock:
    """A session answering each endpoint with its canned success response."""

    def respond(method, url, **kwargs):
        path = url.split("?", 1)[0].rsplit("/", 1)[-1]
        return make_response(RESPONSES[path])

    session = MagicMock()
    session.request.side_effect = respond
    return session
