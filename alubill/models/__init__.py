"""Models package - exports the document value objects."""
from alubill.models.line_item import LineItem, as_line_item
from alubill.models.bill_summary import BillSummary

__all__ = [
    'LineItem',
    'as_line_item',
    'BillSummary',
]
