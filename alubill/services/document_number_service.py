"""Document Number Service - sequential numbering for document series.

Numbers are derived from the numbers already in use, never from a stored
counter. Two callers working from the same snapshot will get the same
number; uniqueness must be enforced where the document is persisted.
"""
import logging
import re
from typing import Iterable, Optional

from alubill.exceptions import BusinessLogicError

logger = logging.getLogger(__name__)

DEFAULT_DIGITS = 4

# ASCII digits only; a bare \d also matches Arabic-Indic and other Unicode digits
GENERIC_NUMBER_PATTERN = re.compile(r"^[A-Z]+-\d+$", re.ASCII | re.IGNORECASE)
TRAILING_DIGITS_PATTERN = re.compile(r"(\d+)$", re.ASCII)

# Series used by the dashboard screens
DOCUMENT_PREFIXES = {
    'purchase_order': 'PO',
    'goods_receipt': 'GRN',
    'purchase_invoice': 'PINV',
    'purchase_return': 'PRET',
    'sales_invoice': 'INV',
    'quotation': 'QUOT',
    'sales_return': 'SR',
    'receipt_voucher': 'RV',
    'payment_voucher': 'PV',
    'expense': 'EXP',
}


def prefix_for(kind: str) -> str:
    """Resolve a document kind (e.g. 'purchase_order') to its prefix."""
    key = (kind or '').strip().lower().replace('-', '_').replace(' ', '_')
    if key not in DOCUMENT_PREFIXES:
        raise BusinessLogicError(f"Unknown document kind: {kind}")
    return DOCUMENT_PREFIXES[key]


def _series_pattern(prefix: str):
    return re.compile(rf"^{re.escape(prefix)}-(\d+)$", re.ASCII | re.IGNORECASE)


def next_number(prefix: str, existing_numbers: Optional[Iterable], digits: int = DEFAULT_DIGITS) -> str:
    """
    Next number in a series: one more than the largest number seen.

    Entries with another prefix, a non-numeric suffix, a zero suffix or
    that are not strings at all are ignored.

    Examples:
        next_number("PO", ["PO-0001", "PO-0002"]) -> "PO-0003"
        next_number("INV", []) -> "INV-0001"
    """
    pattern = _series_pattern(prefix)
    highest = 0
    ignored = 0

    for entry in existing_numbers or ():
        match = pattern.fullmatch(entry) if isinstance(entry, str) else None
        value = int(match.group(1)) if match else 0
        if value > 0:
            highest = max(highest, value)
        else:
            ignored += 1

    if ignored:
        logger.debug(f"next_number({prefix}): ignored {ignored} entries outside the series")

    return f"{prefix}-{str(highest + 1).zfill(digits)}"


def parse_number(doc_number) -> int:
    """Numeric part of a document number ("PO-0042" -> 42), 0 if none."""
    if not isinstance(doc_number, str):
        return 0
    match = TRAILING_DIGITS_PATTERN.search(doc_number)
    return int(match.group(1)) if match else 0


def validate_number(doc_number, prefix: Optional[str] = None) -> bool:
    """
    Check the PREFIX-digits format, case-insensitively.

    Without a prefix any alphabetic prefix is accepted.
    """
    if not doc_number or not isinstance(doc_number, str):
        return False

    pattern = _series_pattern(prefix) if prefix else GENERIC_NUMBER_PATTERN
    return pattern.fullmatch(doc_number) is not None
