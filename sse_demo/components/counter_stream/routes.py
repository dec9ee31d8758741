"""
Counter Stream API Routes
"""
from flask import Blueprint, current_app

HANDLER_EXTENSION = 'sse_demo.counter_stream'

# Create counter stream blueprint
counter_stream_bp = Blueprint('counter_stream', __name__, url_prefix='/api/v1')


@counter_stream_bp.route('/stream')
def api_counter_stream():
    """SSE endpoint emitting the counter values one frame at a time"""
    sse_handler = current_app.extensions[HANDLER_EXTENSION]
    return sse_handler.stream_counter()
