"""
Health Component
"""
from sse_demo.components import mount_component
from .routes import health_bp
from .service import HealthService


def init_health(app):
    """Initialize Health component with Flask app"""
    return mount_component(app, 'health', health_bp)


__all__ = ['health_bp', 'HealthService', 'init_health']
