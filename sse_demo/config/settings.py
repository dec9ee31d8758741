"""
Stream service configuration settings
"""
import os


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class StreamConfig:
    """Centralized configuration for the stream service"""

    # Server settings
    HOST = os.environ.get('SSE_DEMO_HOST', '0.0.0.0')
    PORT = int(os.environ.get('SSE_DEMO_PORT', 8084))

    # Stream settings
    STREAM_COUNT = int(os.environ.get('SSE_DEMO_STREAM_COUNT', 10))
    STREAM_INTERVAL = float(os.environ.get('SSE_DEMO_STREAM_INTERVAL', 1.0))

    # Frontend dev server runs on its own origin
    FRONTEND_ORIGIN = os.environ.get('SSE_DEMO_FRONTEND_ORIGIN', 'http://localhost:3000')
    CORS_ENABLED = _env_bool('SSE_DEMO_CORS_ENABLED', True)

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"

    # Logging
    LOG_LEVEL = os.environ.get('SSE_DEMO_LOG_LEVEL', 'INFO')
    MAX_LOG_ENTRIES = 1000

    @staticmethod
    def validate(config):
        """Check stream settings loaded into a Flask config mapping"""
        count = config.get('STREAM_COUNT')
        interval = config.get('STREAM_INTERVAL')
        if not isinstance(count, int) or count < 0:
            raise ValueError(f'STREAM_COUNT must be a non-negative integer, got {count!r}')
        if interval is None or interval < 0:
            raise ValueError(f'STREAM_INTERVAL must be non-negative, got {interval!r}')
        if config.get('MAX_LOG_ENTRIES', 0) <= 0:
            raise ValueError('MAX_LOG_ENTRIES must be positive')
