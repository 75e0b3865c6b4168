"""Brazilian Portuguese date and currency formatting.

The voucher always uses pt-BR conventions and Brazilian Real amounts, there
is no locale switch.
"""
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CURRENCY_SYMBOL = "R$"
# pt-BR currency format separates the symbol with a no-break space
SYMBOL_SEPARATOR = "\u00a0"
THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","

CENTS = Decimal("0.01")


def format_currency(amount: Union[Decimal, int, float, str]) -> str:
    """Format an amount as 'R$ 1.234,56'."""
    value = Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer_part, fraction_part = f"{abs(value):.2f}".split(".")

    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)

    number = THOUSANDS_SEPARATOR.join(groups) + DECIMAL_SEPARATOR + fraction_part
    return f"{sign}{CURRENCY_SYMBOL}{SYMBOL_SEPARATOR}{number}"


def format_date(d: Union[date, datetime]) -> str:
    """Format date as 'DD/MM/YYYY'."""
    return d.strftime("%d/%m/%Y")
