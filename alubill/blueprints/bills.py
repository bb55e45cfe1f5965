"""Bills blueprint - line item and document totals as a JSON API."""
from flask import Blueprint, jsonify, current_app

from alubill.blueprints.metrics import bill_summaries_total
from alubill.models.line_item import FIELD_ALIASES
from alubill.services.bill_calculator import (
    recalculate_line,
    summarize,
    pending_amount,
    DISCOUNT_SOURCE_PERCENT,
    DISCOUNT_SOURCE_AMOUNT,
)
from alubill.utils.formatters import money_pk
from alubill.utils.request_utils import get_json_object, get_list
from alubill.utils.validators import ensure_valid, non_negative_number, optional

bills_bp = Blueprint('bills', __name__, url_prefix='/api/bills')


def _discount_source_rule(value, data):
    if value in (None, DISCOUNT_SOURCE_PERCENT, DISCOUNT_SOURCE_AMOUNT):
        return None
    return "'discountSource' must be 'percent' or 'amount'."


# Every spelling of an editable quantity must be a number >= 0 when sent
LINE_SCHEMA = {
    key: {'custom': optional(non_negative_number, f"'{key}' must be a number >= 0.")}
    for field in ('quantity', 'length', 'sales_rate', 'discount', 'discount_amount')
    for key in FIELD_ALIASES[field]
}
LINE_SCHEMA['discountSource'] = {'custom': _discount_source_rule}

PENDING_SCHEMA = {
    'total': {'custom': optional(non_negative_number, "'total' must be a number >= 0.")},
    'received': {'custom': optional(non_negative_number, "'received' must be a number >= 0.")},
}


@bills_bp.route('/line', methods=['POST'])
def line():
    """
    Recalculate one line item.

    Body: the line item record, optionally with "discountSource"
    ("percent" or "amount") naming the field the user just edited.
    """
    data = get_json_object()
    ensure_valid(data, LINE_SCHEMA)

    item = recalculate_line(data, discount_source=data.get('discountSource'))
    return jsonify(item.to_dict())


@bills_bp.route('/summary', methods=['POST'])
def summary():
    """Totals for {"items": [...]} plus display strings."""
    data = get_json_object()
    items = get_list(data, 'items', required=True)

    result = summarize(items)
    bill_summaries_total.inc()

    currency = current_app.config.get('CURRENCY_CODE', 'PKR')
    body = result.to_dict()
    body['formatted'] = {
        'subtotal': money_pk(result.subtotal, currency),
        'totalDiscountAmount': money_pk(result.total_discount_amount, currency),
        'totalNetAmount': money_pk(result.total_net_amount, currency),
    }
    return jsonify(body)


@bills_bp.route('/pending', methods=['POST'])
def pending():
    """Outstanding balance for {"total", "received"}."""
    data = get_json_object()
    ensure_valid(data, PENDING_SCHEMA)

    amount = pending_amount(data.get('total'), data.get('received'))
    return jsonify({'pending': float(amount)})
