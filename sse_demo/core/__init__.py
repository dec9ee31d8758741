"""
Core services shared by the stream components
"""
from flask import current_app

from .monitoring import StreamMonitor

MONITOR_EXTENSION = 'sse_demo.monitor'


def init_monitor(app):
    """Attach a StreamMonitor to the Flask app"""
    monitor = StreamMonitor(max_log_entries=app.config['MAX_LOG_ENTRIES'])
    app.extensions[MONITOR_EXTENSION] = monitor
    return monitor


def get_monitor():
    """Get the monitor of the current app"""
    return current_app.extensions[MONITOR_EXTENSION]


__all__ = ['StreamMonitor', 'init_monitor', 'get_monitor', 'MONITOR_EXTENSION']
