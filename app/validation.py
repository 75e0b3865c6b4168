"""Pre-flight validation for voucher generation.

This module validates that:
1. Check-out happens strictly after check-in
2. Daily rate and advance payment are not negative
3. Every amount, the stay total included, fits in cents

Validation runs before any amount is computed. A failure aborts the
generation, nothing is rendered.
"""
import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .errors import DateOrderError, InvalidAmountError
from .formatting import CENTS
from .models import VoucherInput

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


def as_date(value: Optional[DateLike]) -> Optional[date]:
    """Drop the time component, vouchers only deal with calendar days."""
    if isinstance(value, datetime):
        return value.date()
    return value


def validate_stay(checkin: Optional[DateLike], checkout: Optional[DateLike]) -> None:
    """Raise DateOrderError unless checkout is strictly after checkin."""
    checkin = as_date(checkin)
    checkout = as_date(checkout)

    if checkin is None or checkout is None:
        logger.warning("Stay rejected: missing check-in or check-out date")
        raise DateOrderError()

    if checkout <= checkin:
        logger.warning(f"Stay rejected: check-out {checkout} is not after check-in {checkin}")
        raise DateOrderError()


def check_representable(field_name: str, amount) -> None:
    """Raise InvalidAmountError if the amount cannot be shown in cents."""
    value = Decimal(amount)
    try:
        representable = value.is_finite() and value.quantize(CENTS) is not None
    except InvalidOperation:
        representable = False

    if not representable:
        logger.warning(f"Amount rejected: {field_name}={amount} is out of range")
        raise InvalidAmountError(field_name, amount, "está fora do intervalo permitido")


def validate_amounts(daily_rate: Decimal, advance_payment: Decimal) -> None:
    """Raise InvalidAmountError for negative or out-of-range amounts."""
    check_representable("daily_rate", daily_rate)
    check_representable("advance_payment", advance_payment)
    if daily_rate < 0:
        raise InvalidAmountError("daily_rate", daily_rate)
    if advance_payment < 0:
        raise InvalidAmountError("advance_payment", advance_payment)


def validate_input(voucher_input: VoucherInput) -> None:
    """Run every check a voucher input must pass before building a record."""
    validate_stay(voucher_input.checkin_date, voucher_input.checkout_date)
    validate_amounts(voucher_input.daily_rate, voucher_input.advance_payment)

    nights = (as_date(voucher_input.checkout_date) - as_date(voucher_input.checkin_date)).days
    check_representable("total", Decimal(voucher_input.daily_rate) * nights)
