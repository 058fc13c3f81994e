"""Contracts-domain exports."""

from dgraphql.contracts.context import DEFAULT_TIMEOUT, CallContext
from dgraphql.contracts.envelope import ErrorEnvelope, GraphQLRequest, ServerError
from dgraphql.contracts.exceptions import (
    BodyReadError,
    DecodeError,
    DgraphQLError,
    EncodingError,
    ServerReportedError,
    StatusError,
    TransportError,
)
from dgraphql.contracts.protocol import DQL, GRAPHQL, RAW_GRAPHQL, RDF, BodyEncoding, Protocol

__all__ = [
    "DEFAULT_TIMEOUT",
    "DQL",
    "GRAPHQL",
    "RAW_GRAPHQL",
    "RDF",
    "BodyEncoding",
    "BodyReadError",
    "CallContext",
    "DecodeError",
    "DgraphQLError",
    "EncodingError",
    "ErrorEnvelope",
    "GraphQLRequest",
    "Protocol",
    "ServerError",
    "ServerReportedError",
    "StatusError",
    "TransportError",
]
