"""Returns blueprint - stock and purchase order effects of a purchase return."""
from decimal import Decimal

from flask import Blueprint, jsonify

from alubill.exceptions import BusinessLogicError
from alubill.services.return_service import inventory_after_return, purchases_after_return
from alubill.utils.request_utils import get_json_object, get_list

returns_bp = Blueprint('returns', __name__, url_prefix='/api/returns')


def _plain(records):
    """Decimal quantities back to JSON numbers."""
    out = []
    for record in records:
        if not isinstance(record, dict):
            out.append(record)
            continue
        row = {}
        for key, value in record.items():
            if isinstance(value, Decimal):
                value = float(value)
            elif key == 'products' and isinstance(value, list):
                value = _plain(value)
            row[key] = value
        out.append(row)
    return out


@returns_bp.route('/apply', methods=['POST'])
def apply_return():
    """
    Apply a purchase return.

    Body: {"inventory": [...], "purchases": [...], "return": {...}}
    """
    data = get_json_object()
    purchase_return = data.get('return')
    if not isinstance(purchase_return, dict):
        raise BusinessLogicError("'return' must be a JSON object.")
    get_list(purchase_return, 'items')

    inventory = [r for r in get_list(data, 'inventory') if isinstance(r, dict)]
    purchases = [r for r in get_list(data, 'purchases') if isinstance(r, dict)]

    return jsonify({
        'inventory': _plain(inventory_after_return(inventory, purchase_return)),
        'purchases': _plain(purchases_after_return(purchases, purchase_return)),
    })
