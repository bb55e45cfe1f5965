"""Documents blueprint - document number series as a JSON API."""
import re

from flask import Blueprint, jsonify, request, current_app

from alubill.blueprints.metrics import document_numbers_issued_total
from alubill.services.document_number_service import (
    next_number,
    parse_number,
    validate_number,
    prefix_for,
)
from alubill.utils.request_utils import get_json_object, get_list, get_int
from alubill.utils.validators import ensure_valid

documents_bp = Blueprint('documents', __name__, url_prefix='/api/documents')

PREFIX_PATTERN = re.compile(r"[A-Za-z0-9._]+")

NEXT_NUMBER_SCHEMA = {
    'prefix': {
        'required': True,
        'pattern': PREFIX_PATTERN,
        'custom': lambda value, data: None if isinstance(value, str) else "'prefix' must be a string.",
    },
}


@documents_bp.route('/next-number', methods=['POST'])
def next_document_number():
    """
    Next number for a series.

    Body: {"prefix": "PO"} or {"kind": "purchase_order"}, plus
    "existing" (numbers already used) and optional "digits".
    """
    data = get_json_object()

    prefix = data.get('prefix')
    if prefix is None and data.get('kind') is not None:
        prefix = prefix_for(str(data['kind']))
    if isinstance(prefix, str):
        prefix = prefix.strip()
    ensure_valid({'prefix': prefix}, NEXT_NUMBER_SCHEMA)

    existing = get_list(data, 'existing')
    digits = get_int(data, 'digits', current_app.config.get('DOCUMENT_NUMBER_DIGITS', 4), minimum=1)

    number = next_number(prefix, existing, digits)
    document_numbers_issued_total.labels(prefix=prefix.upper()).inc()
    current_app.logger.info(f"Next document number for {prefix}: {number} ({len(existing)} in use)")

    return jsonify({'number': number})


@documents_bp.route('/parse')
def parse():
    """Numeric part of ?number=PO-0042."""
    number = request.args.get('number', '')
    return jsonify({'number': number, 'sequence': parse_number(number)})


@documents_bp.route('/validate')
def validate():
    """Check ?number= against the format, optionally for ?prefix=."""
    number = request.args.get('number', '')
    prefix = request.args.get('prefix') or None
    return jsonify({'number': number, 'prefix': prefix, 'valid': validate_number(number, prefix)})
