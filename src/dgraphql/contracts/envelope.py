"""Wire models shared by the GraphQL and DQL endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class GraphQLRequest(BaseModel):
    query: str
    variables: dict[str, Any] | None = None


class ServerError(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str = ""


class ErrorEnvelope(BaseModel):
    """Partial view of a response body that only looks at ``errors``.

    A missing or null ``errors`` field means the server reported no failure.
    """

    model_config = ConfigDict(extra="ignore")

    errors: list[ServerError] | None = None
