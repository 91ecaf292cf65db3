from __future__ import annotations

from pydantic import BaseModel


class MoneyPayload(BaseModel):
    currencyCode: str = ""
    units: int = 0
    nanos: int = 0


class QuotePayload(BaseModel):
    dollars: int
    cents: int
    total: str
