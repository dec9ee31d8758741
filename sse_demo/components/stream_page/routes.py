"""
Stream Page Routes
"""
from flask import Blueprint, render_template, url_for

# Create blueprint with template support
stream_page_bp = Blueprint(
    'stream_page',
    __name__,
    template_folder='templates'
)


@stream_page_bp.route('/')
def stream_page():
    """Page that opens an EventSource on the counter stream and lists messages"""
    return render_template('stream_page.html',
                           stream_url=url_for('counter_stream.api_counter_stream'))
