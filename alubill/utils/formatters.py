"""
Formatting helpers for bills, receipts and reports.
Amounts are shown the Pakistani way: comma thousands, dot decimals, Rs prefix.
"""
from decimal import Decimal, InvalidOperation
from datetime import date, datetime
from typing import Union, Optional
import re

from alubill.utils.number_format import quantize, within_float_range

CURRENCY_SYMBOLS = {
    'PKR': 'Rs',
    'USD': '$',
    'AED': 'AED',
}


def _to_decimal(value) -> Optional[Decimal]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        num = Decimal(str(value).replace(",", ""))
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not num.is_finite():
        return None
    if not isinstance(value, Decimal) and not within_float_range(num):
        return None
    return num


def _group_thousands(integer_part: str) -> str:
    reversed_int = integer_part[::-1]
    groups = [reversed_int[i:i+3] for i in range(0, len(reversed_int), 3)]
    return ','.join(groups)[::-1]


def num_fixed(value: Union[int, float, Decimal, str, None], decimals: int = 2) -> str:
    """
    Format a number with a fixed amount of decimals and no grouping.

    Examples:
        num_fixed(1500) -> "1500.00"
        num_fixed(2.345) -> "2.35"
        num_fixed(7, 0) -> "7"
        num_fixed(None) -> "-"
    """
    num = _to_decimal(value)
    if num is None:
        return "-"
    exponent = Decimal(1).scaleb(-decimals)
    return str(quantize(num, exponent))


def money_pk(value: Union[int, float, Decimal, str, None], currency: str = 'PKR') -> str:
    """
    Format a monetary amount with thousands grouping and exactly 2 decimals.

    Args:
        value: Amount to format
        currency: ISO currency code, used to pick the symbol

    Returns:
        Formatted string (e.g. "Rs 1,500.00"). Returns "-" when invalid.

    Examples:
        money_pk(1500) -> "Rs 1,500.00"
        money_pk(-42.5) -> "-Rs 42.50"
        money_pk(1234567.891, 'USD') -> "$ 1,234,567.89"
    """
    num = _to_decimal(value)
    if num is None:
        return "-"

    num = quantize(num)
    sign = "-" if num < 0 else ""
    integer_part, decimal_part = str(abs(num)).split(".")
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), currency.upper())

    return f"{sign}{symbol} {_group_thousands(integer_part)}.{decimal_part}"


def leading_zero(value: Union[int, float, Decimal, str, None]) -> str:
    """
    Show whole numbers below 10 with a leading zero ("7" -> "07").

    Empty or invalid input gives an empty string; other numbers are
    returned unchanged.
    """
    num = _to_decimal(value)
    if num is None:
        return ""

    if num == num.to_integral_value():
        whole = int(num)
        if 0 <= whole < 10:
            return f"0{whole}"
        return str(whole)
    return str(num.normalize())


DATE_STYLES = {
    'short': "%m/%d/%Y",
    'long': "%B %d, %Y",
    'datetime': "%b %d, %Y, %I:%M %p",
}


def date_pk(value: Union[date, datetime, str, None], style: str = 'short') -> str:
    """
    Format a date for display.

    Styles:
        short    -> "01/12/2026"
        long     -> "January 12, 2026"
        datetime -> "Jan 12, 2026, 03:30 PM"

    ISO strings are accepted; anything unparseable gives "-".
    """
    if value is None:
        return "-"

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return "-"

    if not isinstance(value, date):
        return "-"

    fmt = DATE_STYLES.get(style, DATE_STYLES['short'])
    if style == 'datetime' and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    return value.strftime(fmt)


def truncate_text(text: Optional[str], max_length: int = 50) -> str:
    """Cut text to max_length characters and add an ellipsis."""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def format_phone(phone: Optional[str]) -> str:
    """
    Format an 11 digit mobile number as 03xx-xxxxxxx.

    Other lengths are returned as given.
    """
    if not phone:
        return ""
    digits = re.sub(r"\D", "", phone)
    if len(digits) == 11:
        return f"{digits[:4]}-{digits[4:]}"
    return phone
