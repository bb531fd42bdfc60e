"""
Health Routes
"""
from flask import Blueprint, current_app, jsonify

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health():
    """Liveness probe; does not call the context provider"""
    return jsonify({
        'status': 'healthy',
        'service': current_app.config.get('SITE_NAME'),
    }), 200
