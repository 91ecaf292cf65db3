from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from typing import Mapping, Protocol


class SpanRecorder(Protocol):
    def span(self, name: str, tags: Mapping[str, object]) -> AbstractContextManager[None]: ...


class NoopSpanRecorder:
    def span(self, name: str, tags: Mapping[str, object]) -> AbstractContextManager[None]:
        return nullcontext()
