"""Number coercion utilities shared by the bill and document calculators."""
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

TWO_PLACES = Decimal('0.01')
ZERO = Decimal('0')

# Magnitudes a dashboard number (IEEE double) can carry; beyond this it
# overflows to Infinity or underflows to 0 before it ever reaches us.
MAX_EXPONENT = 308
MIN_EXPONENT = -324

# Grouped thousands as typed in the dashboard: 1,234.56
GROUPED_NUMBER_PATTERN = re.compile(r"^-?\d{1,3}(?:,\d{3})+(?:\.\d+)?$", re.ASCII)

# Numeric prefix of a typed value: "07abc" -> "07", "1.5e3 m" -> "1.5e3"
LEADING_NUMBER_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def within_float_range(number: Decimal) -> bool:
    """True when a finite Decimal is 0 or has a double-sized exponent."""
    if not number:
        return True
    return MIN_EXPONENT <= number.adjusted() <= MAX_EXPONENT


def safe_number(value) -> Decimal:
    """
    Coerce a loose input value to Decimal.

    Rules:
    - None, empty strings and booleans are 0
    - int / float / Decimal are taken as-is
    - Numeric strings are parsed (surrounding spaces and grouped
      thousands "1,234.50" are accepted, only ASCII digits count)
    - Anything else, NaN and infinities are 0, as are parsed numbers
      outside the double range (Decimals pass through at any magnitude)

    Never raises.
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        cleaned = value.strip()
        if not cleaned or not cleaned.isascii():
            return ZERO
        if GROUPED_NUMBER_PATTERN.match(cleaned):
            cleaned = cleaned.replace(',', '')
        try:
            number = Decimal(cleaned)
        except (InvalidOperation, ValueError):
            return ZERO
    else:
        return ZERO

    if not number.is_finite():
        return ZERO
    if not isinstance(value, Decimal) and not within_float_range(number):
        return ZERO
    return number


def quantize(number: Decimal, exponent: Decimal = TWO_PLACES) -> Decimal:
    """
    Quantize half away from zero at any magnitude.

    The working precision is raised to fit every integer digit, so large
    totals are rounded instead of raising InvalidOperation.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() - exponent.as_tuple().exponent + 2)
        return number.quantize(exponent, rounding=ROUND_HALF_UP)


def round2(value) -> Decimal:
    """Round to 2 decimal places, half away from zero."""
    return quantize(safe_number(value))


def parse_leading_zero(value) -> Decimal:
    """
    Parse a number typed into a leading-zero input ("07" -> 7).

    Like a browser number parse, the numeric prefix of a string is read
    and the rest ignored ("07abc" -> 7). Invalid or empty input is 0.
    """
    if not isinstance(value, str):
        return safe_number(value)
    match = LEADING_NUMBER_PATTERN.match(value)
    return safe_number(match.group(1)) if match else ZERO
