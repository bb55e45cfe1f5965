"""LineItem model for sales and purchase document rows."""
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Union

from alubill.utils.number_format import safe_number, ZERO

# Dashboard payloads are camelCase; purchase screens send rate/percent
# instead of salesRate/discount.
FIELD_ALIASES = {
    'id': ('id', '_id'),
    'item_name': ('item_name', 'itemName', 'productName', 'product_name'),
    'unit': ('unit',),
    'quantity': ('quantity', 'qty'),
    'length': ('length',),
    'sales_rate': ('sales_rate', 'salesRate', 'rate'),
    'discount': ('discount', 'percent', 'discount_percent', 'discountPercent'),
    'discount_amount': ('discount_amount', 'discountAmount'),
    'amount': ('amount', 'grossAmount', 'gross_amount', 'totalGrossAmount', 'total_gross_amount'),
    'net_amount': ('net_amount', 'netAmount', 'totalNetAmount', 'total_net_amount'),
    'color': ('color',),
    'thickness': ('thickness',),
    'brand': ('brand',),
}

NUMERIC_FIELDS = ('quantity', 'length', 'sales_rate', 'discount', 'discount_amount', 'amount', 'net_amount')


def _pick(data: Mapping[str, Any], field_name: str):
    for key in FIELD_ALIASES[field_name]:
        if key in data:
            return data[key]
    return None


def _text(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class LineItem:
    """
    One row of a sales or purchase document.

    `amount` and `net_amount` hold whatever the caller last stored; the
    calculators always recompute gross from length x quantity x rate.
    """

    id: Optional[Union[str, int]] = None
    item_name: str = ''
    unit: str = ''
    quantity: Decimal = ZERO
    length: Decimal = ZERO
    sales_rate: Decimal = ZERO
    discount: Decimal = ZERO
    discount_amount: Decimal = ZERO
    amount: Decimal = ZERO
    net_amount: Decimal = ZERO
    color: Optional[str] = None
    thickness: Optional[str] = None
    brand: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'LineItem':
        """Build a LineItem from a loose record, coercing every number."""
        if isinstance(data, LineItem):
            return data
        if not isinstance(data, Mapping):
            return cls()

        values = {name: _pick(data, name) for name in FIELD_ALIASES}
        for name in NUMERIC_FIELDS:
            values[name] = safe_number(values[name])
        for name in ('color', 'thickness', 'brand'):
            values[name] = _text(values[name])
        values['item_name'] = _text(values['item_name']) or ''
        values['unit'] = _text(values['unit']) or ''
        return cls(**values)

    def with_values(self, **changes) -> 'LineItem':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys the dashboard uses."""
        return {
            '_id': self.id,
            'itemName': self.item_name,
            'unit': self.unit,
            'quantity': float(self.quantity),
            'length': float(self.length),
            'salesRate': float(self.sales_rate),
            'discount': float(self.discount),
            'discountAmount': float(self.discount_amount),
            'amount': float(self.amount),
            'totalGrossAmount': float(self.amount),
            'totalNetAmount': float(self.net_amount),
            'color': self.color,
            'thickness': self.thickness,
            'brand': self.brand,
        }

    def __repr__(self):
        return f"<LineItem(id={self.id}, item='{self.item_name}', qty={self.quantity}, length={self.length}, rate={self.sales_rate})>"


def as_line_item(item) -> LineItem:
    """Accept either a LineItem or a loose mapping."""
    return LineItem.from_dict(item)
