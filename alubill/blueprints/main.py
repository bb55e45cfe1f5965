"""Main blueprint with health check endpoint."""
from flask import Blueprint, jsonify, current_app

main_bp = Blueprint('main', __name__)


@main_bp.route('/health')
def health():
    """
    Health check endpoint.

    Returns:
        200: Healthy
    """
    return jsonify({
        'status': 'ok',
        'business': current_app.config.get('BUSINESS_NAME'),
    }), 200
