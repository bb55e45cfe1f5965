"""Bill Calculator Service - line item and document totals.

Every function here is total: bad or missing numbers are coerced to 0 by
safe_number and nothing raises. Monetary results are Decimal rounded to
2 places (half away from zero) at each step.
"""
import logging
from decimal import Decimal
from typing import Iterable, Optional

from alubill.models import LineItem, BillSummary, as_line_item
from alubill.utils.number_format import safe_number, round2, ZERO

logger = logging.getLogger(__name__)

HUNDRED = Decimal('100')

DISCOUNT_SOURCE_PERCENT = 'percent'
DISCOUNT_SOURCE_AMOUNT = 'amount'


def calculate_item_total(length, quantity, rate) -> Decimal:
    """Length x Quantity x Rate, rounded to 2 decimals."""
    return round2(safe_number(length) * safe_number(quantity) * safe_number(rate))


def _raw_gross(item: LineItem) -> Decimal:
    return item.length * item.quantity * item.sales_rate


def gross_amount(item) -> Decimal:
    """
    Gross amount for a single line item.

    Always derived from length, quantity and rate; a stored `amount`
    is ignored because it may be stale after an edit.
    """
    return round2(_raw_gross(as_line_item(item)))


def discount_amount_from_percent(gross, percent) -> Decimal:
    """Discount amount for a percentage of gross. Percent is not clamped."""
    return round2(safe_number(percent) / HUNDRED * safe_number(gross))


def discount_percent_from_amount(gross, amount) -> Decimal:
    """Discount percentage that `amount` represents of gross (0 when gross is 0)."""
    gross = safe_number(gross)
    if gross == 0:
        return round2(ZERO)
    return round2(safe_number(amount) / gross * HUNDRED)


def net_amount(gross, discount_amount) -> Decimal:
    """Gross minus discount, never below 0."""
    return round2(max(ZERO, safe_number(gross) - safe_number(discount_amount)))


def pending_amount(total, received) -> Decimal:
    """Amount still owed on a document, never below 0."""
    return round2(max(ZERO, safe_number(total) - safe_number(received)))


def summarize(items: Optional[Iterable]) -> BillSummary:
    """
    Aggregate totals for a list of line items.

    Gross is recomputed per item; discounts are summed as stored (not
    re-derived from the percent).
    """
    gross_total = ZERO
    discount_total = ZERO
    count = 0

    for raw in items or ():
        item = as_line_item(raw)
        gross_total += _raw_gross(item)
        discount_total += item.discount_amount
        count += 1

    gross_total = round2(gross_total)
    discount_total = round2(discount_total)

    return BillSummary(
        total_gross_amount=gross_total,
        total_discount_amount=discount_total,
        total_net_amount=net_amount(gross_total, discount_total),
        item_count=count,
    )


def apply_discount_percent(item, percent) -> LineItem:
    """Set the discount percent on a line and derive the amount from it."""
    item = as_line_item(item)
    percent = safe_number(percent)
    gross = gross_amount(item)
    discount = discount_amount_from_percent(gross, percent)
    return item.with_values(
        discount=percent,
        discount_amount=discount,
        amount=gross,
        net_amount=net_amount(gross, discount),
    )


def apply_discount_amount(item, amount) -> LineItem:
    """Set the discount amount on a line and derive the percent from it."""
    item = as_line_item(item)
    discount = round2(amount)
    gross = gross_amount(item)
    return item.with_values(
        discount=discount_percent_from_amount(gross, discount),
        discount_amount=discount,
        amount=gross,
        net_amount=net_amount(gross, discount),
    )


def recalculate_line(item, discount_source: Optional[str] = None) -> LineItem:
    """
    Refresh gross, discount and net for a line after any edit.

    discount_source picks which discount field is authoritative. When it
    is not given, a non-zero percent wins, otherwise the stored amount.
    """
    item = as_line_item(item)

    if discount_source is None:
        discount_source = DISCOUNT_SOURCE_PERCENT if item.discount != 0 else DISCOUNT_SOURCE_AMOUNT

    if discount_source == DISCOUNT_SOURCE_PERCENT:
        return apply_discount_percent(item, item.discount)
    if discount_source == DISCOUNT_SOURCE_AMOUNT:
        return apply_discount_amount(item, item.discount_amount)

    logger.warning(f"Unknown discount source '{discount_source}', keeping stored amount")
    return apply_discount_amount(item, item.discount_amount)
