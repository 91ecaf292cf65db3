from __future__ import annotations

import math
from dataclasses import dataclass

from checkout.domain.common.money import NANOS_MOD, MoneyValue

FLAT_SHIPPING_PRICE = 8.99
NANOS_PER_CENT = NANOS_MOD // 100


@dataclass(frozen=True)
class Quote:
    dollars: int
    cents: int

    def __post_init__(self) -> None:
        if self.dollars < 0:
            raise ValueError("dollars must be >= 0")
        if not 0 <= self.cents <= 99:
            raise ValueError("cents must be between 0 and 99")

    @property
    def total(self) -> str:
        return f"{self.dollars}.{self.cents:02d}"


def create_quote_from_float(value: float) -> Quote:
    if not math.isfinite(value):
        raise ValueError("value must be finite")
    if value < 0:
        raise ValueError("value must be >= 0")

    fraction, units = math.modf(value)
    return Quote(dollars=int(units), cents=math.trunc(fraction * 100))


def create_quote_from_count(count: int) -> Quote:
    # flat rate, independent of the number of items
    if count < 0:
        raise ValueError("count must be >= 0")
    return create_quote_from_float(FLAT_SHIPPING_PRICE)


def quote_to_money(quote: Quote, currency_code: str = "USD") -> MoneyValue:
    return MoneyValue(
        currency_code=currency_code,
        units=quote.dollars,
        nanos=quote.cents * NANOS_PER_CENT,
    )
