"""
Formatting utilities.

Thin wrappers over Babel with a fixed locale and currency.
"""

import datetime
import decimal
from typing import Union

from babel.dates import format_date as babel_format_date
from babel.numbers import format_currency as babel_format_currency

from .config import Config

LOCALE = "en_US"
CURRENCY = "USD"

# en_US numeric date with the full year, e.g. 1/2/2024
DATE_PATTERN = "M/d/y"

NAN_PATTERN = "\u00a4#,##0"

Amount = Union[int, float, decimal.Decimal]


def format_currency(amount: Amount) -> str:
    """
    Format an amount as US-dollar currency.

    Args:
        amount: The amount in major units (dollars, not cents).

    Returns:
        Formatted currency string, e.g. ``$1,234.50``.
    """
    with decimal.localcontext() as ctx:
        ctx.rounding = decimal.ROUND_HALF_UP
        if decimal.Decimal(str(amount)).is_nan():
            # NaN has no fraction digits
            return babel_format_currency(
                amount, CURRENCY, format=NAN_PATTERN, locale=LOCALE, currency_digits=False
            )
        return babel_format_currency(amount, CURRENCY, locale=LOCALE)


def format_date(date: datetime.date) -> str:
    """
    Format a date as a short numeric en_US date.

    Aware datetimes are shown in the configured display time zone.

    Args:
        date: A date or datetime.

    Returns:
        Formatted date string, e.g. ``1/2/2024``.
    """
    if isinstance(date, datetime.datetime):
        if date.tzinfo is not None:
            date = date.astimezone(Config().timezone())
        date = date.date()

    return babel_format_date(date, DATE_PATTERN, locale=LOCALE)
