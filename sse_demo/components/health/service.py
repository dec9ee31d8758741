"""
Health Service
"""
from sse_demo.components import mounted_components

STATUS_CONFIG_KEYS = ('STREAM_COUNT', 'STREAM_INTERVAL', 'FRONTEND_ORIGIN', 'CORS_ENABLED')


class HealthService:
    """Service for health and status reporting"""

    SERVICE_NAME = 'SSE Counter Stream'

    def __init__(self, monitor):
        self.monitor = monitor

    def get_health(self, app):
        return {
            'status': 'healthy',
            'service': self.SERVICE_NAME,
            'components': mounted_components(app)
        }

    def get_status(self, config):
        """Get stream counters, process usage and the effective stream settings"""
        return {
            'streams': self.monitor.get_metrics(),
            'process': self.monitor.get_process_info(),
            'config': {key: config.get(key) for key in STATUS_CONFIG_KEYS}
        }

    def get_logs(self, level_filter='ALL', limit=50):
        return self.monitor.get_logs(level_filter=level_filter.upper(), limit=limit)
