from __future__ import annotations

from checkout.application.dto.responses import MoneyPayload
from checkout.domain.common.money import MoneyValue


def to_money_payload(m: MoneyValue) -> MoneyPayload:
    return MoneyPayload(currencyCode=m.currency_code, units=m.units, nanos=m.nanos)
