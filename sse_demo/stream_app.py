"""
SSE Counter Stream Service
Flask application serving the counter stream and the page that consumes it
"""
import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from sse_demo.config.settings import StreamConfig
from sse_demo.core import init_monitor
from sse_demo.components.counter_stream import init_counter_stream
from sse_demo.components.stream_page import init_stream_page
from sse_demo.components.health import init_health

logger = logging.getLogger(__name__)


def configure_logging(level):
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )


def _api_error(message, status_code):
    return jsonify({'error': message}), status_code


class StreamApp:
    """Main stream service application class"""

    def __init__(self):
        self.app = None
        self.monitor = None

    def create_app(self, config=None):
        """Create and configure Flask application"""
        self.app = Flask(__name__)

        # Load configuration
        self.app.config.from_object(StreamConfig)
        if config:
            self.app.config.update(config)
        StreamConfig.validate(self.app.config)

        configure_logging(self.app.config['LOG_LEVEL'])

        # Initialize extensions
        Limiter(
            key_func=get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI']
        )
        if self.app.config['CORS_ENABLED']:
            CORS(self.app, resources={r"/api/*": {"origins": [self.app.config['FRONTEND_ORIGIN']]}})

        # Initialize monitoring
        self.monitor = init_monitor(self.app)

        # Initialize components
        init_counter_stream(self.app)
        init_stream_page(self.app)
        init_health(self.app)

        self._register_error_handlers()

        return self.app

    def _register_error_handlers(self):
        @self.app.errorhandler(404)
        def not_found(e):
            if request.path.startswith('/api/'):
                return _api_error('Not found', 404)
            return e

        @self.app.errorhandler(500)
        def internal_error(e):
            original = getattr(e, 'original_exception', None) or e
            logger.error(f"Unhandled error on {request.path}: {original}", exc_info=original)
            if request.path.startswith('/api/'):
                return _api_error(str(original), 500)
            return e

    def run(self):
        """Start the stream service"""
        host = self.app.config['HOST']
        port = self.app.config['PORT']

        self.monitor._add_log('INFO', 'Stream service started')

        logger.info("=" * 60)
        logger.info("SSE Counter Stream Service")
        logger.info(f"Starting on: http://localhost:{port}")
        logger.info("Endpoints:")
        logger.info(f"   - Page:      http://localhost:{port}/")
        logger.info(f"   - Stream:    http://localhost:{port}/api/v1/stream")
        logger.info(f"   - Health:    http://localhost:{port}/health")
        logger.info(f"   - Status:    http://localhost:{port}/api/v1/status")
        if self.app.config['CORS_ENABLED']:
            logger.info(f"CORS enabled for: {self.app.config['FRONTEND_ORIGIN']}")
        logger.info("=" * 60)

        # Streams hold their thread for the whole run
        self.app.run(host=host, port=port, debug=False, threaded=True)


def create_app(config=None):
    """Application factory"""
    return StreamApp().create_app(config)


def main():
    """Main entry point"""
    stream_app = StreamApp()
    stream_app.create_app()
    stream_app.run()


if __name__ == '__main__':
    main()
