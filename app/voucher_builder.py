"""Voucher record builder.

Turns the raw form data into a VoucherRecord: stay length, totals, payment
status, formatted strings and a fresh voucher id.
"""
import logging
import math
import secrets
import string
import time
from datetime import date
from decimal import Decimal
from typing import Optional

from .formatting import format_currency, format_date
from .models import AccommodationType, PaymentStatus, VoucherInput, VoucherRecord
from .validation import DateLike, as_date, validate_input

logger = logging.getLogger(__name__)

ACCOMMODATION_LABELS = {
    AccommodationType.SINGLE.value: "Quarto Individual",
    AccommodationType.DOUBLE.value: "Quarto Duplo",
    AccommodationType.TWIN.value: "Quarto Twin",
    AccommodationType.SUITE.value: "Suíte",
    AccommodationType.FAMILY.value: "Quarto Familiar",
}

DEFAULT_OBSERVATIONS = "Nenhuma observação adicional."

_ID_ALPHABET = string.digits + string.ascii_lowercase
_SECONDS_PER_DAY = 24 * 60 * 60


def get_accommodation_label(code: str) -> str:
    """Convert an accommodation code to its display label."""
    return ACCOMMODATION_LABELS.get(code, code)


def compute_stay(checkin: Optional[DateLike], checkout: Optional[DateLike]) -> int:
    """Number of nights between two dates.

    Uses the absolute difference, so a reversed span gives a positive count.
    Call validate_stay first.
    """
    checkin = as_date(checkin)
    checkout = as_date(checkout)
    if checkin is None or checkout is None:
        return 0

    seconds = abs((checkout - checkin).total_seconds())
    return max(0, math.ceil(seconds / _SECONDS_PER_DAY))


def generate_voucher_id() -> str:
    """Create a voucher id like 'VOUCHER-1709251200000-K3X9A'."""
    timestamp = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(5))
    return f"VOUCHER-{timestamp}-{suffix}".upper()


def build_record(voucher_input: VoucherInput, issued_on: Optional[date] = None) -> VoucherRecord:
    """Validate the input and compute every voucher field."""
    validate_input(voucher_input)

    daily_rate = Decimal(voucher_input.daily_rate)
    advance_payment = Decimal(voucher_input.advance_payment)

    nights = compute_stay(voucher_input.checkin_date, voucher_input.checkout_date)
    total_value = daily_rate * nights
    remaining_value = max(Decimal("0"), total_value - advance_payment)
    status = PaymentStatus.PAID if remaining_value == 0 else PaymentStatus.PENDING

    observations = voucher_input.observations or ""
    if not observations.strip():
        observations = DEFAULT_OBSERVATIONS

    record = VoucherRecord(
        guest_name=voucher_input.guest_name,
        accommodation_label=get_accommodation_label(voucher_input.accommodation_type),
        observations=observations,
        nights=nights,
        total_value=total_value,
        remaining_value=remaining_value,
        status=status,
        formatted_checkin=format_date(as_date(voucher_input.checkin_date)),
        formatted_checkout=format_date(as_date(voucher_input.checkout_date)),
        formatted_issue_date=format_date(issued_on or date.today()),
        formatted_daily_rate=format_currency(daily_rate),
        formatted_advance=format_currency(advance_payment),
        formatted_total=format_currency(total_value),
        formatted_remaining=format_currency(remaining_value),
        voucher_id=generate_voucher_id(),
    )

    logger.info(
        f"Built voucher {record.voucher_id}: {nights} nights, "
        f"total {record.formatted_total}, status {status.value}"
    )
    return record
