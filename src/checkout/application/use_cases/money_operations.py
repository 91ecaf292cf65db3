from __future__ import annotations

import logging

from checkout.application.metrics.money_operations import record_operation, record_sum_failure
from checkout.application.ports.tracing import NoopSpanRecorder, SpanRecorder
from checkout.domain.common import money
from checkout.domain.common.money import MoneyError, MoneyPreconditionViolation, MoneyValue

logger = logging.getLogger(__name__)


def _price_tags(m: MoneyValue) -> dict[str, object]:
    return {
        "price.currency": m.currency_code,
        "price.units": m.units,
        "price.nanos": m.nanos,
    }


class MoneyOperations:
    def __init__(self, recorder: SpanRecorder | None = None) -> None:
        self._recorder = recorder or NoopSpanRecorder()

    def is_valid(self, m: MoneyValue) -> bool:
        record_operation("is_valid")
        with self._recorder.span("money.is_valid", _price_tags(m)):
            return money.is_valid(m)

    def is_zero(self, m: MoneyValue) -> bool:
        record_operation("is_zero")
        with self._recorder.span("money.is_zero", _price_tags(m)):
            return money.is_zero(m)

    def is_positive(self, m: MoneyValue) -> bool:
        record_operation("is_positive")
        with self._recorder.span("money.is_positive", _price_tags(m)):
            return money.is_positive(m)

    def is_negative(self, m: MoneyValue) -> bool:
        record_operation("is_negative")
        with self._recorder.span("money.is_negative", _price_tags(m)):
            return money.is_negative(m)

    def are_same_currency(self, left: MoneyValue, right: MoneyValue) -> bool:
        record_operation("are_same_currency")
        with self._recorder.span("money.are_same_currency", _price_tags(left)):
            return money.are_same_currency(left, right)

    def are_equal(self, left: MoneyValue, right: MoneyValue) -> bool:
        record_operation("are_equal")
        with self._recorder.span("money.are_equal", _price_tags(left)):
            return money.are_equal(left, right)

    def negate(self, m: MoneyValue) -> MoneyValue:
        record_operation("negate")
        with self._recorder.span("money.negate", _price_tags(m)):
            return money.negate(m)

    def sum(self, left: MoneyValue, right: MoneyValue) -> MoneyValue:
        record_operation("sum")
        with self._recorder.span("money.sum", _price_tags(left)):
            try:
                return money.sum(left, right)
            except MoneyError as exc:
                record_sum_failure(exc.code)
                logger.warning(
                    "money_sum_rejected",
                    extra={
                        "operation": "sum",
                        "currency": left.currency_code,
                        "error_code": exc.code,
                    },
                )
                raise

    def must_sum(self, left: MoneyValue, right: MoneyValue) -> MoneyValue:
        record_operation("must_sum")
        with self._recorder.span("money.must_sum", _price_tags(left)):
            try:
                return money.must_sum(left, right)
            except MoneyPreconditionViolation:
                logger.exception(
                    "money_precondition_violated",
                    extra={"operation": "must_sum", "currency": left.currency_code},
                )
                raise

    def multiply_slow(self, m: MoneyValue, n: int) -> MoneyValue:
        record_operation("multiply_slow")
        tags = _price_tags(m)
        tags["factor"] = n
        with self._recorder.span("money.multiply_slow", tags):
            try:
                return money.multiply_slow(m, n)
            except MoneyPreconditionViolation:
                logger.exception(
                    "money_precondition_violated",
                    extra={"operation": "multiply_slow", "currency": m.currency_code},
                )
                raise
