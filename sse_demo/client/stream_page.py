"""
Stream page state
Mirrors the browser page: one EventSource at a time, received messages kept in a list
"""
import logging
import threading

from .event_source import EventSource

logger = logging.getLogger(__name__)


class StreamPage:
    """Holds at most one open EventSource and the messages it delivered"""

    def __init__(self, url, source_factory=EventSource):
        self.url = url
        self.source_factory = source_factory
        self.source = None
        self.messages = []
        self._lock = threading.Lock()

    @property
    def connected(self):
        return self.source is not None

    def start(self):
        """Open a new connection, closing any prior one first"""
        self._close_current()
        source = self.source_factory(self.url, on_message=self._on_message, on_error=self._on_error)
        with self._lock:
            self.source = source
        source.start()
        return source

    def teardown(self):
        """Close the connection when the page goes away"""
        self._close_current()

    def render(self):
        """Render received messages as a bullet list"""
        with self._lock:
            return '\n'.join(f'• {message}' for message in self.messages)

    def _close_current(self):
        with self._lock:
            source, self.source = self.source, None
        if source is not None:
            source.close()

    def _on_message(self, source, event):
        with self._lock:
            if source is not self.source:
                return
            self.messages.append(event.data)

    def _on_error(self, source, error):
        with self._lock:
            if source is self.source:
                self.source = None
        source.close()
        if error is not None:
            logger.warning(f'Stream connection to {self.url} failed: {error}')
