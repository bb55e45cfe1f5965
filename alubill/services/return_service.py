"""Return Service - stock and purchase order effects of a purchase return.

Works on plain dict records as they come back from the backend API.
Inputs are never mutated; updated copies are returned.
"""
import logging
from typing import Any, Dict, List, Optional

from alubill.utils.number_format import safe_number, ZERO

logger = logging.getLogger(__name__)


def _record_id(record: Dict[str, Any]) -> Optional[str]:
    value = record.get('_id', record.get('id'))
    return None if value is None else str(value)


def _returned_quantities(purchase_return: Dict[str, Any]) -> Dict[str, Any]:
    """Returned quantity per item id (the first line for an id wins)."""
    quantities = {}
    for line in purchase_return.get('items') or []:
        if not isinstance(line, dict):
            continue
        line_id = _record_id(line)
        if line_id is not None and line_id not in quantities:
            quantities[line_id] = safe_number(line.get('quantity'))
    return quantities


def inventory_after_return(inventory: List[Dict[str, Any]], purchase_return: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Reduce stock of every returned item, floored at 0.

    Items are matched by id compared as strings.
    """
    returned = _returned_quantities(purchase_return or {})
    updated = []

    for item in inventory or []:
        item_id = _record_id(item)
        if item_id in returned:
            stock = max(ZERO, safe_number(item.get('stock')) - returned[item_id])
            updated.append({**item, 'stock': stock})
        else:
            updated.append(dict(item))

    return updated


def purchases_after_return(purchases: List[Dict[str, Any]], purchase_return: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Reduce the received quantity on the purchase order a return is linked to.

    Returns without a linked order leave the purchases untouched.
    """
    purchase_return = purchase_return or {}
    linked_po_id = purchase_return.get('linkedPoId', purchase_return.get('linked_po_id'))
    if not linked_po_id:
        return [dict(po) for po in purchases or []]

    returned = _returned_quantities(purchase_return)
    updated = []
    matched = False

    for po in purchases or []:
        if _record_id(po) != str(linked_po_id):
            updated.append(dict(po))
            continue

        matched = True
        products = []
        for line in po.get('products') or []:
            line_id = _record_id(line) if isinstance(line, dict) else None
            if line_id is None or line_id not in returned:
                products.append(dict(line) if isinstance(line, dict) else line)
                continue
            received = max(ZERO, safe_number(line.get('received')) - returned[line_id])
            products.append({**line, 'received': received})
        updated.append({**po, 'products': products})

    if not matched:
        logger.info(f"Return linked to purchase order {linked_po_id} which is not in the list")

    return updated
