"""Protocol descriptors for the server's HTTP endpoints.

Each entry point of :class:`~dgraphql.client.QueryClient` differs only in the
values captured here; the request/response sequence itself is shared.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BodyEncoding(str, Enum):
    GRAPHQL_ENVELOPE = "graphql-envelope"
    RAW = "raw"


@dataclass(frozen=True)
class Protocol:
    name: str
    path: str
    content_type: str
    encoding: BodyEncoding
    check_errors: bool
    span_name: str
    params: tuple[tuple[str, str], ...] = ()


GRAPHQL = Protocol(
    name="graphql",
    path="/graphql",
    content_type="application/json",
    encoding=BodyEncoding.GRAPHQL_ENVELOPE,
    check_errors=True,
    span_name="query",
)

DQL = Protocol(
    name="dql",
    path="/query",
    content_type="application/dql",
    encoding=BodyEncoding.RAW,
    check_errors=True,
    span_name="query",
)

# Mutation responses carry a mutation summary rather than an error envelope.
RDF = Protocol(
    name="rdf",
    path="/mutate",
    content_type="application/rdf",
    encoding=BodyEncoding.RAW,
    check_errors=False,
    span_name="rdf",
    params=(("commitNow", "true"),),
)

RAW_GRAPHQL = Protocol(
    name="raw-graphql",
    path="",
    content_type="application/json",
    encoding=BodyEncoding.GRAPHQL_ENVELOPE,
    check_errors=True,
    span_name="query",
)
