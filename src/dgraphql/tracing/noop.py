"""Tracer that records nothing."""

from __future__ import annotations

from dgraphql.tracing.base import Span, Tracer


class NoopSpan(Span):
    def end(self) -> None:
        return None


class NoopTracer(Tracer):
    _SPAN = NoopSpan()

    def start_span(self, name: str) -> Span:
        return self._SPAN
