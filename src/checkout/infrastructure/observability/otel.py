from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator, Mapping

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

_OTEL_CONFIGURED = False
_INSTRUMENTATION_NAME = "checkout.money"
logger = logging.getLogger(__name__)


def configure_otel() -> None:
    global _OTEL_CONFIGURED
    if _OTEL_CONFIGURED:
        return

    service_name = os.getenv("OTEL_SERVICE_NAME", "checkout-money")
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")

    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    if endpoint:
        try:
            exporter = OTLPSpanExporter(
                endpoint=endpoint,
                insecure=endpoint.startswith("http://"),
            )
            provider.add_span_processor(BatchSpanProcessor(exporter))
        except Exception:
            logger.exception("otel_exporter_setup_failed")

    trace.set_tracer_provider(provider)
    _OTEL_CONFIGURED = True


class OtelSpanRecorder:
    def __init__(self, tracer_provider: trace.TracerProvider | None = None) -> None:
        self._tracer = trace.get_tracer(_INSTRUMENTATION_NAME, tracer_provider=tracer_provider)

    @contextmanager
    def span(self, name: str, tags: Mapping[str, object]) -> Iterator[None]:
        with self._tracer.start_as_current_span(name) as span:
            for key, value in tags.items():
                if not isinstance(value, (str, bool, int, float)):
                    value = str(value)
                span.set_attribute(key, value)
            yield
