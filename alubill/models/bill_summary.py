"""BillSummary model for document totals."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict

from alubill.utils.number_format import ZERO


@dataclass(frozen=True)
class BillSummary:
    """
    Totals over a list of line items.

    total_net_amount is always max(0, total_gross_amount - total_discount_amount).
    """

    total_gross_amount: Decimal = ZERO
    total_discount_amount: Decimal = ZERO
    total_net_amount: Decimal = ZERO
    item_count: int = 0

    @property
    def subtotal(self) -> Decimal:
        return self.total_gross_amount

    def to_dict(self) -> Dict[str, Any]:
        return {
            'subtotal': float(self.subtotal),
            'totalGrossAmount': float(self.total_gross_amount),
            'totalDiscountAmount': float(self.total_discount_amount),
            'totalNetAmount': float(self.total_net_amount),
            'itemCount': self.item_count,
        }
