"""Injectable tracing capability."""

from dgraphql.tracing.base import Span, Tracer
from dgraphql.tracing.log_tracer import LoggingTracer
from dgraphql.tracing.noop import NoopTracer

__all__ = ["LoggingTracer", "NoopTracer", "Span", "Tracer"]
