from __future__ import annotations

from checkout.application.dto.responses import QuotePayload
from checkout.application.mappers.quote_mapper import to_quote_payload
from checkout.application.metrics.money_operations import record_quote_created
from checkout.application.ports.tracing import NoopSpanRecorder, SpanRecorder
from checkout.domain.shipping.quote import Quote, create_quote_from_count, create_quote_from_float


class QuoteShipping:
    def __init__(self, recorder: SpanRecorder | None = None) -> None:
        self._recorder = recorder or NoopSpanRecorder()

    def from_price(self, value: float) -> QuotePayload:
        return self._publish(create_quote_from_float(value))

    def from_count(self, count: int) -> QuotePayload:
        return self._publish(create_quote_from_count(count))

    def _publish(self, quote: Quote) -> QuotePayload:
        tags = {
            "quote.dollars": quote.dollars,
            "quote.cents": quote.cents,
            "quote.total": quote.total,
        }
        with self._recorder.span("quote.create", tags):
            record_quote_created()
            return to_quote_payload(quote)
