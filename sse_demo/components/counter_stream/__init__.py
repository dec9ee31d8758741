"""
Counter Stream Component
Streams a fixed run of counter values over SSE
"""
from sse_demo.components import mount_component
from .routes import counter_stream_bp, HANDLER_EXTENSION
from .service import CounterStreamService
from .sse_handler import CounterSSEHandler, format_sse_frame


def init_counter_stream(app):
    """Initialize Counter Stream component with Flask app"""
    service = CounterStreamService.from_config(app.config)
    app.extensions[HANDLER_EXTENSION] = CounterSSEHandler(service)
    return mount_component(app, 'counter_stream', counter_stream_bp)


__all__ = ['counter_stream_bp', 'CounterStreamService', 'CounterSSEHandler',
           'format_sse_frame', 'init_counter_stream']
