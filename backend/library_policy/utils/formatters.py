"""
Formatting utilities for display.

Amounts are stored in the base unit everywhere. Conversion to the display
currency happens here, exactly once, right before formatting.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from library_policy.core.config import get_settings


def to_display_amount(amount: Decimal | float | int, rate: Optional[Decimal] = None) -> Decimal:
    """
    Convert a base-unit amount to the display currency.

    Args:
        amount: Amount in the base unit
        rate: Exchange rate (defaults to CURRENCY_RATE)

    Returns:
        Converted amount, not rounded
    """
    if rate is None:
        rate = get_settings().CURRENCY_RATE
    return Decimal(str(amount)) * rate


def format_currency(
    amount: Decimal | float | int,
    symbol: Optional[str] = None,
    rate: Optional[Decimal] = None,
) -> str:
    """
    Format a base-unit amount in the display currency.

    Args:
        amount: Amount in the base unit (never pass an already converted value)
        symbol: Currency symbol (defaults to CURRENCY_SYMBOL)
        rate: Exchange rate (defaults to CURRENCY_RATE)

    Returns:
        Formatted string with thousands separator and no decimals, e.g. "Rs. 7,000"
    """
    if symbol is None:
        symbol = get_settings().CURRENCY_SYMBOL

    converted = to_display_amount(amount, rate).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if converted < 0 else ""
    return f"{sign}{symbol} {abs(converted):,}"


def format_amount(amount: Decimal | float | int) -> str:
    """Format a base-unit amount with two decimals, without conversion."""
    return f"{Decimal(str(amount)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)}"


def format_date(value: Optional[date | datetime]) -> str:
    """
    Format a date for display.

    Returns:
        Formatted date string (DD/MM/YYYY) or "-"
    """
    if not value:
        return "-"
    return value.strftime("%d/%m/%Y")
