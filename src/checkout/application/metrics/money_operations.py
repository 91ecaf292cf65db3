from __future__ import annotations

from prometheus_client import Counter

MONEY_OPERATIONS_TOTAL = Counter(
    "checkout_money_operations_total",
    "Total number of money operations invoked through the traced API.",
    ["operation"],
)

MONEY_SUM_FAILURES_TOTAL = Counter(
    "checkout_money_sum_failures_total",
    "Total number of rejected money sums by error code.",
    ["code"],
)

QUOTES_CREATED_TOTAL = Counter(
    "checkout_quotes_created_total",
    "Total number of shipping quotes created.",
)


def record_operation(operation: str) -> None:
    MONEY_OPERATIONS_TOTAL.labels(operation=operation).inc()


def record_sum_failure(code: str) -> None:
    MONEY_SUM_FAILURES_TOTAL.labels(code=code).inc()


def record_quote_created() -> None:
    QUOTES_CREATED_TOTAL.inc()
