"""Tracing interfaces.

The client opens exactly one span per call and always ends it, whatever the
outcome. Spans are a side channel: nothing a tracer does may change the result
of a call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Span(ABC):
    @abstractmethod
    def end(self) -> None: ...


class Tracer(ABC):
    @abstractmethod
    def start_span(self, name: str) -> Span: ...
