from __future__ import annotations

from checkout.application.dto.responses import QuotePayload
from checkout.domain.shipping.quote import Quote


def to_quote_payload(quote: Quote) -> QuotePayload:
    return QuotePayload(dollars=quote.dollars, cents=quote.cents, total=quote.total)


def from_quote_payload(payload: QuotePayload) -> Quote:
    return Quote(dollars=payload.dollars, cents=payload.cents)
