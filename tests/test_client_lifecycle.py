"""Construction, config wiring and HTTP client ownership."""

from __future__ import annotations

import httpx
import pytest

from dgraphql import QueryClient
from tests.fakes.transport import ENDPOINT, TOKEN, RecordingTransport, respond


def test_construction_does_no_validation_or_io() -> None:
    client = QueryClient("not a url", "")

    assert client.endpoint == "not a url"
    assert client.token == ""
    assert client.timeout == 20.0


@pytest.mark.asyncio
async def test_context_manager_owns_http_client(monkeypatch: pytest.MonkeyPatch) -> None:
    transport = RecordingTransport(respond(200, json={"data": {}}))
    real_async_client = httpx.AsyncClient
    opened: list[httpx.AsyncClient] = []

    def factory() -> httpx.AsyncClient:
        http_client = real_async_client(transport=transport)
        opened.append(http_client)
        return http_client

    monkeypatch.setattr(httpx, "AsyncClient", factory)

    async with QueryClient(ENDPOINT, TOKEN) as client:
        await client.graphql("{ q }")
        await client.dql("{ q }")

    assert len(opened) == 1
    assert opened[0].is_closed
    assert len(transport.requests) == 2


@pytest.mark.asyncio
async def test_calls_outside_context_manager_use_short_lived_clients(monkeypatch: pytest.MonkeyPatch) -> None:
    transport = RecordingTransport(respond(200, json={"data": {}}))
    real_async_client = httpx.AsyncClient
    opened: list[httpx.AsyncClient] = []

    def factory() -> httpx.AsyncClient:
        http_client = real_async_client(transport=transport)
        opened.append(http_client)
        return http_client

    monkeypatch.setattr(httpx, "AsyncClient", factory)
    client = QueryClient(ENDPOINT, TOKEN)

    await client.graphql("{ q }")
    await client.rdf('_:a <name> "A" .')

    assert len(opened) == 2
    assert all(http_client.is_closed for http_client in opened)


@pytest.mark.asyncio
async def test_injected_http_client_is_left_open() -> None:
    http_client = httpx.AsyncClient(transport=RecordingTransport(respond(200, json={})))

    async with QueryClient(ENDPOINT, TOKEN, http_client=http_client) as client:
        await client.dql("{ q }")

    assert not http_client.is_closed
    await http_client.aclose()

