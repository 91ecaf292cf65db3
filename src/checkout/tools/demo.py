from __future__ import annotations

import argparse
import logging
from typing import Sequence

from checkout.application.mappers.money_mapper import to_money_payload
from checkout.application.mappers.quote_mapper import from_quote_payload
from checkout.application.use_cases.money_operations import MoneyOperations
from checkout.application.use_cases.quote_shipping import QuoteShipping
from checkout.domain.common.money import MoneyValue
from checkout.domain.shipping.quote import quote_to_money
from checkout.infrastructure.observability.logging_config import configure_logging
from checkout.infrastructure.observability.otel import OtelSpanRecorder, configure_otel

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Quote shipping for a cart and print the order total."
    )
    parser.add_argument("--items", type=int, default=5, help="Number of items in the cart.")
    parser.add_argument(
        "--unit-price",
        type=float,
        default=19.99,
        help="Price of a single item.",
    )
    parser.add_argument("--currency", default="USD", help="Currency code of the cart.")
    args = parser.parse_args(argv)
    if args.items < 1:
        parser.error("--items must be >= 1")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging()
    configure_otel()

    recorder = OtelSpanRecorder()
    quotes = QuoteShipping(recorder)
    operations = MoneyOperations(recorder)

    shipping = quotes.from_count(args.items)
    print(f"Quote: {shipping.dollars} dollars and {shipping.cents} cents")

    unit_price = quote_to_money(
        from_quote_payload(quotes.from_price(args.unit_price)),
        currency_code=args.currency,
    )
    items_total = operations.multiply_slow(unit_price, args.items)
    shipping_money = quote_to_money(
        from_quote_payload(shipping),
        currency_code=args.currency,
    )
    total: MoneyValue = operations.sum(items_total, shipping_money)

    logger.info("order_total_computed", extra={"operation": "sum", "currency": total.currency_code})
    print(to_money_payload(total).model_dump_json())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
