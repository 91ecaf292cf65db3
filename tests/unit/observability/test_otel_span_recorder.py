from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from checkout.application.use_cases.money_operations import MoneyOperations
from checkout.domain.common.money import MismatchingCurrencyError, MoneyValue
from checkout.infrastructure.observability.logging_config import JsonFormatter
from checkout.infrastructure.observability.otel import OtelSpanRecorder


@pytest.fixture
def exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def recorder(exporter: InMemorySpanExporter) -> OtelSpanRecorder:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    return OtelSpanRecorder(tracer_provider=provider)


def test_otel_recorder_exports_span_with_attributes(
    recorder: OtelSpanRecorder, exporter: InMemorySpanExporter
) -> None:
    operations = MoneyOperations(recorder)
    m = MoneyValue(currency_code="USD", units=1, nanos=500_000_000)

    assert operations.multiply_slow(m, 3) == MoneyValue(currency_code="USD", units=4, nanos=500_000_000)

    spans = exporter.get_finished_spans()
    assert [span.name for span in spans] == ["money.multiply_slow"]
    assert dict(spans[0].attributes) == {
        "price.currency": "USD",
        "price.units": 1,
        "price.nanos": 500_000_000,
        "factor": 3,
    }


def test_otel_recorder_marks_failed_sum_span(
    recorder: OtelSpanRecorder, exporter: InMemorySpanExporter
) -> None:
    operations = MoneyOperations(recorder)

    with pytest.raises(MismatchingCurrencyError):
        operations.sum(
            MoneyValue(currency_code="USD", units=1, nanos=0),
            MoneyValue(currency_code="EUR", units=1, nanos=0),
        )

    (span,) = exporter.get_finished_spans()
    assert span.name == "money.sum"
    assert span.status.status_code is StatusCode.ERROR


def test_json_formatter_includes_money_extras() -> None:
    record = logging.LogRecord(
        name="checkout.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="money_sum_rejected",
        args=(),
        exc_info=None,
    )
    record.operation = "sum"
    record.error_code = "INVALID_VALUE"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "money_sum_rejected"
    assert payload["level"] == "WARNING"
    assert payload["operation"] == "sum"
    assert payload["error_code"] == "INVALID_VALUE"
    assert "currency" not in payload
    assert payload["trace_id"] is None
