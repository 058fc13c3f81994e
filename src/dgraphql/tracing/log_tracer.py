"""Tracer that emits span boundaries as DEBUG log records."""

from __future__ import annotations

import logging
import time

from dgraphql.tracing.base import Span, Tracer

_LOG = logging.getLogger(__name__)


class LoggingSpan(Span):
    def __init__(self, name: str, logger: logging.Logger) -> None:
        self.name = name
        self._logger = logger
        self._started = time.monotonic()
        self._ended = False

    def end(self) -> None:
        if self._ended:
            return
        self._ended = True
        elapsed_ms = (time.monotonic() - self._started) * 1000.0
        self._logger.debug("span %s ended after %.1fms", self.name, elapsed_ms)


class LoggingTracer(Tracer):
    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _LOG

    def start_span(self, name: str) -> Span:
        self._logger.debug("span %s started", name)
        return LoggingSpan(name, self._logger)
