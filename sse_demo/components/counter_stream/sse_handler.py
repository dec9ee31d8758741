"""
Counter SSE Handler
Handles the text/event-stream response for the counter stream
"""
import logging
import re

from flask import Response, request

from sse_demo.core import get_monitor

logger = logging.getLogger(__name__)

# SSE lines end at CRLF, CR or LF only
LINE_END = re.compile(r'\r\n|\r|\n')

SSE_HEADERS = {
    'Cache-Control': 'no-cache',
    'X-Accel-Buffering': 'no'
}


def format_sse_frame(data, event=None, event_id=None):
    """Render one SSE frame

    Every line of `data` goes on its own ``data:`` line and the frame is
    terminated by a blank line.
    """
    lines = []
    if event is not None:
        lines.append(f'event: {event}')
    if event_id is not None:
        lines.append(f'id: {event_id}')
    for line in LINE_END.split(str(data)):
        lines.append(f'data: {line}')
    return '\n'.join(lines) + '\n\n'


class CounterSSEHandler:
    """Handle SSE streaming of counter values"""

    def __init__(self, service):
        self.service = service

    def generate(self, monitor, remote_addr=None):
        """Yield one frame per counter value and report the lifecycle to the monitor"""
        stream_no = monitor.stream_opened(remote_addr)
        frames = 0
        last = self.service.count - 1
        try:
            for value in self.service.iter_values():
                yield format_sse_frame(value)
                frames += 1
                monitor.frame_sent()
        except GeneratorExit:
            if frames == last:
                # Closed while holding the final frame: everything went out
                frames += 1
                monitor.frame_sent()
                monitor.stream_completed(stream_no, frames)
            else:
                monitor.stream_disconnected(stream_no, frames)
            raise
        monitor.stream_completed(stream_no, frames)

    def stream_counter(self):
        """SSE endpoint body for the counter stream"""
        monitor = get_monitor()
        return Response(
            self.generate(monitor, request.remote_addr),
            mimetype="text/event-stream",
            headers=SSE_HEADERS
        )
