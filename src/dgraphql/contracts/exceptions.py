"""Exception hierarchy for dgraphql.

All dgraphql exceptions inherit from :class:`DgraphQLError`, so callers can catch
every library failure with a single ``except`` clause while still handling the
individual stages of a call separately.
"""

from __future__ import annotations


class DgraphQLError(Exception):
    """Base exception for all dgraphql errors."""


class EncodingError(DgraphQLError):
    """Outbound request body could not be serialized."""


class TransportError(DgraphQLError):
    """Network, connection or deadline failure before a response arrived."""


class StatusError(DgraphQLError):
    """Server answered with a status other than 200.

    Attributes:
        status_code: The HTTP status returned by the server.
    """

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"db returned non 200 code: {status_code}")


class BodyReadError(DgraphQLError):
    """Response body could not be read after the headers arrived."""


class ServerReportedError(DgraphQLError):
    """Server returned 200 with a non-empty ``errors`` list.

    Only the first message is surfaced; later entries are dropped.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DecodeError(DgraphQLError):
    """Response body could not be decoded into the requested shape."""
