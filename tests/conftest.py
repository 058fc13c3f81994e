"""Shared test fixtures for dgraphql tests."""

from __future__ import annotations

import httpx
import pytest

from dgraphql import QueryClient
from tests.fakes.transport import ENDPOINT, TOKEN, ClientFactory, Handler, RecordingTransport


@pytest.fixture
def make_client() -> ClientFactory:
    """Build a client whose HTTP calls are answered by *handler*."""

    def _make(
        handler: Handler,
        *,
        endpoint: str = ENDPOINT,
        token: str = TOKEN,
        **kwargs: object,
    ) -> tuple[QueryClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        http_client = httpx.AsyncClient(transport=transport)
        client = QueryClient(endpoint, token, http_client=http_client, **kwargs)  # type: ignore[arg-type]
        return client, transport

    return _make
