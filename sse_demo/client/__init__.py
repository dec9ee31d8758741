"""
Python client for the counter stream
"""
from .event_source import (
    CLOSED,
    CONNECTING,
    OPEN,
    EventSource,
    EventSourceError,
    EventStreamParser,
    MessageEvent,
    parse_event_stream,
)
from .stream_page import StreamPage

__all__ = ['EventSource', 'EventSourceError', 'EventStreamParser', 'MessageEvent',
           'parse_event_stream', 'StreamPage', 'CONNECTING', 'OPEN', 'CLOSED']
