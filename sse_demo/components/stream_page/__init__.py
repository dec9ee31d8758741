"""
Stream Page Component
Browser page consuming the counter stream
"""
from sse_demo.components import mount_component
from .routes import stream_page_bp


def init_stream_page(app):
    """Initialize stream page component with Flask app"""
    return mount_component(app, 'stream_page', stream_page_bp)


__all__ = ['stream_page_bp', 'init_stream_page']
