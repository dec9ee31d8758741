"""
Health and Status Routes
"""
import logging

from flask import Blueprint, current_app, jsonify, request

from sse_demo.core import get_monitor
from .service import HealthService

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    service = HealthService(get_monitor())
    return jsonify(service.get_health(current_app)), 200


@health_bp.route('/api/v1/status', methods=['GET'])
def status():
    """Stream counters and process usage"""
    service = HealthService(get_monitor())
    return jsonify(service.get_status(current_app.config))


@health_bp.route('/api/v1/logs', methods=['GET'])
def logs():
    """Get recent stream logs with filtering"""
    level_filter = request.args.get('level', 'ALL')
    try:
        limit = int(request.args.get('limit', 50))
    except ValueError:
        return jsonify({'error': 'limit must be an integer'}), 400
    if limit <= 0:
        return jsonify({'error': 'limit must be positive'}), 400

    service = HealthService(get_monitor())
    return jsonify(service.get_logs(level_filter=level_filter, limit=limit))
