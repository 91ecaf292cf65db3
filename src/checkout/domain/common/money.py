from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

NANOS_MIN = -999_999_999
NANOS_MAX = 999_999_999
NANOS_MOD = 1_000_000_000


@dataclass(frozen=True)
class MoneyValue:
    currency_code: str
    units: int
    nanos: int


class MoneyError(Exception):
    code = "MONEY_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class InvalidValueError(MoneyError):
    code = "INVALID_VALUE"


class MismatchingCurrencyError(MoneyError):
    code = "MISMATCHING_CURRENCY"


class MoneyPreconditionViolation(AssertionError):
    pass


def is_valid(m: MoneyValue) -> bool:
    signs_match = (
        (m.units >= 0 and m.nanos >= 0)
        or (m.units <= 0 and m.nanos <= 0)
    )
    return signs_match and NANOS_MIN <= m.nanos <= NANOS_MAX


def is_zero(m: MoneyValue) -> bool:
    return m.units == 0 and m.nanos == 0


def is_positive(m: MoneyValue) -> bool:
    return is_valid(m) and (m.units > 0 or (m.units == 0 and m.nanos > 0))


def is_negative(m: MoneyValue) -> bool:
    return is_valid(m) and (m.units < 0 or (m.units == 0 and m.nanos < 0))


def are_same_currency(left: MoneyValue, right: MoneyValue) -> bool:
    return left.currency_code == right.currency_code and left.currency_code != ""


def are_equal(left: MoneyValue, right: MoneyValue) -> bool:
    return (
        left.currency_code == right.currency_code
        and left.units == right.units
        and left.nanos == right.nanos
    )


def negate(m: MoneyValue) -> MoneyValue:
    return MoneyValue(currency_code=m.currency_code, units=-m.units, nanos=-m.nanos)


def _carry(nanos: int) -> tuple[int, int]:
    # truncating division: the remainder keeps the sign of nanos
    whole = abs(nanos) // NANOS_MOD
    if nanos < 0:
        whole = -whole
    return whole, nanos - whole * NANOS_MOD


def sum(left: MoneyValue, right: MoneyValue) -> MoneyValue:
    """Add two amounts of the same currency.

    Raises InvalidValueError if either operand breaks the sign/range
    invariants, and MismatchingCurrencyError if the currency codes differ.
    Two empty codes are considered matching here.
    """
    if not is_valid(left) or not is_valid(right):
        raise InvalidValueError(
            "one of the specified money values is invalid",
            details={"left": left, "right": right},
        )
    if left.currency_code != right.currency_code:
        raise MismatchingCurrencyError(
            "mismatching currency codes",
            details={"left": left.currency_code, "right": right.currency_code},
        )

    units = left.units + right.units
    nanos = left.nanos + right.nanos

    if (units >= 0 and nanos >= 0) or (units <= 0 and nanos <= 0):
        whole, nanos = _carry(nanos)
        units += whole
    elif units > 0:
        units -= 1
        nanos += NANOS_MOD
    else:
        units += 1
        nanos -= NANOS_MOD

    return MoneyValue(currency_code=left.currency_code, units=units, nanos=nanos)


def must(operation: Callable[..., MoneyValue], *args: MoneyValue) -> MoneyValue:
    """Run a fallible money operation whose preconditions the caller has
    already established. Any MoneyError becomes MoneyPreconditionViolation."""
    try:
        return operation(*args)
    except MoneyError as exc:
        raise MoneyPreconditionViolation(f"{exc.code}: {exc}") from exc


def must_sum(left: MoneyValue, right: MoneyValue) -> MoneyValue:
    return must(sum, left, right)


def multiply_slow(m: MoneyValue, n: int) -> MoneyValue:
    if n < 0:
        raise ValueError("n must be >= 0")
    out = m
    while n > 1:
        out = must_sum(out, m)
        n -= 1
    return out
