"""
Stream monitoring service
"""
import logging
import os
import threading
import time
from collections import deque
from datetime import datetime

import psutil

logger = logging.getLogger(__name__)


class StreamMonitor:
    """Tracks stream lifecycles and keeps a ring of recent log entries"""

    def __init__(self, max_log_entries=1000):
        self._lock = threading.Lock()
        self.started_at = time.time()
        self.system_logs = deque(maxlen=max_log_entries)
        self.stream_metrics = {
            'total_streams': 0,
            'active_streams': 0,
            'completed_streams': 0,
            'disconnected_streams': 0,
            'frames_sent': 0,
        }

    def stream_opened(self, remote_addr=None):
        with self._lock:
            self.stream_metrics['total_streams'] += 1
            self.stream_metrics['active_streams'] += 1
            stream_no = self.stream_metrics['total_streams']
        self._add_log('INFO', f'Stream #{stream_no} opened by {remote_addr or "unknown client"}')
        return stream_no

    def frame_sent(self):
        with self._lock:
            self.stream_metrics['frames_sent'] += 1

    def stream_completed(self, stream_no, frames):
        with self._lock:
            self.stream_metrics['active_streams'] -= 1
            self.stream_metrics['completed_streams'] += 1
        self._add_log('INFO', f'Stream #{stream_no} completed after {frames} frames')

    def stream_disconnected(self, stream_no, frames):
        with self._lock:
            self.stream_metrics['active_streams'] -= 1
            self.stream_metrics['disconnected_streams'] += 1
        self._add_log('INFO', f'Stream #{stream_no} closed by client after {frames} frames')

    def _add_log(self, level, message):
        """Add log entry"""
        logger.log(logging.getLevelName(level), message)
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'level': level,
            'message': message
        }
        with self._lock:
            self.system_logs.append(log_entry)

    def get_logs(self, level_filter='ALL', limit=50):
        """Get filtered logs"""
        with self._lock:
            logs = list(self.system_logs)

        if level_filter != 'ALL':
            logs = [log for log in logs if log['level'] == level_filter]

        return logs[-limit:] if limit else logs

    def get_metrics(self):
        """Get a snapshot of the stream counters"""
        with self._lock:
            return dict(self.stream_metrics)

    def get_process_info(self):
        """Get resource usage of the serving process"""
        try:
            process = psutil.Process(os.getpid())
            with process.oneshot():
                return {
                    'pid': process.pid,
                    'memory_rss_mb': round(process.memory_info().rss / 1024 / 1024, 2),
                    'cpu_percent': process.cpu_percent(interval=None),
                    'threads': process.num_threads(),
                    'uptime_seconds': round(time.time() - self.started_at, 1),
                }
        except psutil.Error as e:
            self._add_log('ERROR', f'Failed to read process info: {e}')
            return {'error': str(e)}
