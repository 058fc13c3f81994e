"""Async HTTP client for a Dgraph server.

The server answers every request with HTTP 200, including logical failures,
which it reports as an ``errors`` list in the JSON body. :class:`QueryClient`
turns that convention into exceptions and decodes successful bodies into a
caller-supplied result type.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from dgraphql.contracts.context import DEFAULT_TIMEOUT, CallContext
from dgraphql.contracts.envelope import ErrorEnvelope, GraphQLRequest
from dgraphql.contracts.exceptions import (
    BodyReadError,
    DecodeError,
    EncodingError,
    ServerReportedError,
    StatusError,
    TransportError,
)
from dgraphql.contracts.protocol import DQL, GRAPHQL, RAW_GRAPHQL, RDF, BodyEncoding, Protocol
from dgraphql.tracing import NoopTracer, Tracer

_LOG = logging.getLogger(__name__)

AUTH_HEADER = "Dg-Auth"

T = TypeVar("T")


class QueryClient:
    """Issues GraphQL, DQL and RDF requests against one Dgraph endpoint.

    The endpoint and token are fixed at construction. Each call is sent once,
    bounded by ``timeout`` seconds or the caller's deadline, whichever is
    tighter, and never retried.

    Use ``async with`` to share one connection pool across calls; otherwise
    every call opens and closes its own ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        endpoint: str,
        token: str,
        *,
        tracer: Tracer | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._token = token
        self._tracer = tracer or NoopTracer()
        self._timeout = timeout
        self._http_client = http_client
        self._owns_http_client = False

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def token(self) -> str:
        return self._token

    @property
    def timeout(self) -> float:
        return self._timeout

    async def __aenter__(self) -> QueryClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient()
            self._owns_http_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False

    async def graphql(
        self,
        query: str,
        result_type: type[T] | None = None,
        *,
        variables: dict[str, Any] | None = None,
        ctx: CallContext | None = None,
    ) -> T | None:
        """Run a GraphQL query or mutation against ``<endpoint>/graphql``.

        Args:
            query: The GraphQL operation string.
            result_type: Type the full response body is validated into, or None
                to skip decoding.
            variables: Optional GraphQL variables.
            ctx: Optional caller deadline.

        Returns:
            The decoded body, or None when no result type was given.
        """
        return await self._execute(GRAPHQL, query, result_type, variables=variables, ctx=ctx)

    async def raw_query(
        self,
        query: str,
        result_type: type[T] | None = None,
        *,
        variables: dict[str, Any] | None = None,
        ctx: CallContext | None = None,
    ) -> T | None:
        """Post a GraphQL envelope to the endpoint URL exactly as configured."""
        return await self._execute(RAW_GRAPHQL, query, result_type, variables=variables, ctx=ctx)

    async def dql(
        self,
        query: str,
        result_type: type[T] | None = None,
        *,
        ctx: CallContext | None = None,
    ) -> T | None:
        """Run a raw DQL query against ``<endpoint>/query``."""
        return await self._execute(DQL, query, result_type, ctx=ctx)

    async def rdf(
        self,
        mutation: str,
        result_type: type[T] | None = None,
        *,
        ctx: CallContext | None = None,
    ) -> T | None:
        """Apply RDF triples through ``<endpoint>/mutate``, committed immediately.

        The response is decoded without looking for an ``errors`` list.
        """
        return await self._execute(RDF, mutation, result_type, ctx=ctx)

    async def _execute(
        self,
        protocol: Protocol,
        text: str,
        result_type: type[T] | None,
        *,
        variables: dict[str, Any] | None = None,
        ctx: CallContext | None = None,
    ) -> T | None:
        span = self._tracer.start_span(protocol.span_name)
        try:
            body = _encode_body(protocol, text, variables)
            timeout = (ctx or CallContext()).effective_timeout(self._timeout)
            payload = await self._round_trip(protocol, body, timeout)

            if protocol.check_errors:
                _raise_for_server_errors(payload)

            if result_type is None:
                return None
            return _decode(payload, result_type)
        finally:
            span.end()

    async def _round_trip(self, protocol: Protocol, body: bytes, timeout: float) -> bytes:
        if timeout <= 0:
            raise TransportError("deadline exceeded before request was sent")
        try:
            return await asyncio.wait_for(self._send(protocol, body, timeout), timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise TransportError(f"request to {self._endpoint} exceeded {timeout:.3f}s deadline") from exc

    async def _send(self, protocol: Protocol, body: bytes, timeout: float) -> bytes:
        if self._http_client is not None:
            return await self._post(self._http_client, protocol, body, timeout)
        async with httpx.AsyncClient() as client:
            return await self._post(client, protocol, body, timeout)

    async def _post(self, client: httpx.AsyncClient, protocol: Protocol, body: bytes, timeout: float) -> bytes:
        url = self._endpoint + protocol.path
        # httpx only accepts ASCII for str header values
        token = self._token.encode("utf-8", errors="surrogatepass")
        headers = {"Content-Type": protocol.content_type, AUTH_HEADER: token}
        try:
            request = client.build_request(
                "POST",
                url,
                params=dict(protocol.params) or None,
                headers=headers,
                content=body,
                timeout=timeout,
            )
        except httpx.InvalidURL as exc:
            raise TransportError(f"invalid endpoint URL {url!r}: {exc}") from exc

        _LOG.debug("POST %s (%s)", request.url, protocol.name)
        try:
            response = await client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise TransportError(f"{protocol.name} request failed: {exc}") from exc

        try:
            # Dgraph always answers 200, even for errors
            if response.status_code != 200:
                raise StatusError(response.status_code)
            try:
                return await response.aread()
            except httpx.TimeoutException as exc:
                raise TransportError(f"{protocol.name} response timed out: {exc}") from exc
            except httpx.HTTPError as exc:
                raise BodyReadError(f"failed reading {protocol.name} response: {exc}") from exc
        finally:
            await response.aclose()


def _encode_body(protocol: Protocol, text: str, variables: dict[str, Any] | None) -> bytes:
    if protocol.encoding is BodyEncoding.RAW:
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise EncodingError(f"failed encoding {protocol.name} body as UTF-8: {exc}") from exc
    try:
        return GraphQLRequest(query=text, variables=variables).model_dump_json().encode("utf-8")
    except (ValueError, TypeError) as exc:
        raise EncodingError(f"failed encoding GraphQL request: {exc}") from exc


# A bare JSON null decodes to "no envelope", like an object without errors.
_ERROR_ENVELOPE = TypeAdapter(ErrorEnvelope | None)


def _raise_for_server_errors(payload: bytes) -> None:
    try:
        envelope = _ERROR_ENVELOPE.validate_json(payload)
    except ValidationError as exc:
        raise DecodeError(f"response is not a JSON object: {exc}") from exc
    if envelope is not None and envelope.errors:
        raise ServerReportedError(envelope.errors[0].message)


@functools.lru_cache(maxsize=128)
def _type_adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def _decode(payload: bytes, result_type: type[T]) -> T:
    try:
        return _type_adapter(result_type).validate_json(payload)
    except ValidationError as exc:
        raise DecodeError(f"failed decoding response into {result_type!r}: {exc}") from exc
    except TypeError as exc:
        raise DecodeError(f"invalid result type {result_type!r}: {exc}") from exc
