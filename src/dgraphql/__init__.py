"""Async client for Dgraph's GraphQL, DQL and RDF HTTP endpoints."""

from dgraphql.client import AUTH_HEADER, QueryClient
from dgraphql.contracts import (
    DEFAULT_TIMEOUT,
    BodyReadError,
    CallContext,
    DecodeError,
    DgraphQLError,
    EncodingError,
    ServerReportedError,
    StatusError,
    TransportError,
)
from dgraphql.tracing import LoggingTracer, NoopTracer, Span, Tracer

__all__ = [
    "AUTH_HEADER",
    "DEFAULT_TIMEOUT",
    "BodyReadError",
    "CallContext",
    "DecodeError",
    "DgraphQLError",
    "EncodingError",
    "LoggingTracer",
    "NoopTracer",
    "QueryClient",
    "ServerReportedError",
    "Span",
    "StatusError",
    "Tracer",
    "TransportError",
]
