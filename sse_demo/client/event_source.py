"""
EventSource client
Consumes a text/event-stream response with requests, the way a browser EventSource does
"""
import logging
import re
import threading

import requests

logger = logging.getLogger(__name__)

CONNECTING = 0
OPEN = 1
CLOSED = 2

READY_STATE_NAMES = {CONNECTING: 'CONNECTING', OPEN: 'OPEN', CLOSED: 'CLOSED'}

EVENT_STREAM_MIMETYPE = 'text/event-stream'

# SSE lines end at CRLF, CR or LF only
LINE_END = re.compile(r'\r\n|\r|\n')
ASCII_DIGITS = frozenset('0123456789')


class EventSourceError(Exception):
    """Raised when the server response cannot be consumed as an event stream"""


class MessageEvent:
    """A dispatched SSE event"""

    def __init__(self, data, event='message', last_event_id=''):
        self.data = data
        self.event = event
        self.last_event_id = last_event_id

    def __eq__(self, other):
        if not isinstance(other, MessageEvent):
            return NotImplemented
        return (self.data, self.event, self.last_event_id) == \
            (other.data, other.event, other.last_event_id)

    def __repr__(self):
        return f'MessageEvent(data={self.data!r}, event={self.event!r}, last_event_id={self.last_event_id!r})'


class EventStreamParser:
    """Incremental parser for the SSE text framing

    Feed decoded text chunks to `feed`, or single lines (without their
    terminators) to `feed_line`. A MessageEvent is produced when a blank
    line completes a frame.
    """

    def __init__(self):
        self.last_event_id = ''
        self.retry = None
        self._data = []
        self._event = ''
        self._first_line = True
        self._buffer = ''
        self._skip_lf = False

    def feed(self, chunk):
        """Split a chunk into lines and return the events they complete"""
        if not chunk:
            return []
        if self._skip_lf and chunk.startswith('\n'):
            chunk = chunk[1:]
        self._skip_lf = False

        buffer = self._buffer + chunk
        events = []
        pos = 0
        for match in LINE_END.finditer(buffer):
            event = self.feed_line(buffer[pos:match.start()])
            if event is not None:
                events.append(event)
            pos = match.end()
        self._buffer = buffer[pos:]
        # A CR ending the chunk may be the first half of a CRLF
        self._skip_lf = buffer.endswith('\r')
        return events

    def feed_line(self, line):
        if self._first_line:
            self._first_line = False
            if line.startswith('\ufeff'):
                line = line[1:]

        if line == '':
            return self._dispatch()
        if line.startswith(':'):
            return None

        field, sep, value = line.partition(':')
        if sep and value.startswith(' '):
            value = value[1:]

        if field == 'data':
            self._data.append(value)
        elif field == 'event':
            self._event = value
        elif field == 'id':
            if '\0' not in value:
                self.last_event_id = value
        elif field == 'retry':
            if value and set(value) <= ASCII_DIGITS:
                self.retry = int(value)
        return None

    def _dispatch(self):
        data, event = self._data, self._event
        self._data, self._event = [], ''
        if not data:
            return None
        return MessageEvent('\n'.join(data), event or 'message', self.last_event_id)


def parse_event_stream(lines):
    """Yield MessageEvents from an iterable of decoded lines

    A trailing frame with no terminating blank line is discarded.
    """
    parser = EventStreamParser()
    for line in lines:
        event = parser.feed_line(line)
        if event is not None:
            yield event


class EventSource:
    """One connection to an SSE endpoint

    Callbacks are called as ``on_message(source, event)`` and
    ``on_error(source, error)``. `error` is None when the server ended the
    stream normally. No reconnection is attempted: after any error the
    source is CLOSED.
    """

    def __init__(self, url, on_message=None, on_error=None, session=None, timeout=(3.05, None)):
        self.url = url
        self.on_message = on_message
        self.on_error = on_error
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout
        self.ready_state = CONNECTING
        self.last_event_id = ''
        self.retry = None
        self._response = None
        self._thread = None
        self._lock = threading.Lock()

    @property
    def closed(self):
        return self.ready_state == CLOSED

    def start(self):
        """Read the stream on a daemon thread"""
        self._thread = threading.Thread(target=self.run, name=f'EventSource({self.url})', daemon=True)
        self._thread.start()
        return self

    def join(self, timeout=None):
        if self._thread is not None:
            self._thread.join(timeout)

    def run(self):
        """Read the stream on the calling thread until it ends, fails or is closed"""
        try:
            response = self._connect()
            if response is None:
                return
            parser = EventStreamParser()
            for chunk in response.iter_content(chunk_size=None, decode_unicode=True):
                if self.closed:
                    return
                for event in parser.feed(chunk):
                    if event.event == 'message' and self.on_message:
                        self.on_message(self, event)
                    if self.closed:
                        return
                self.last_event_id = parser.last_event_id
                self.retry = parser.retry
        except (requests.RequestException, OSError, ValueError, EventSourceError) as e:
            if self.closed:
                logger.debug(f'Stream read stopped after close: {e}')
                return
            logger.info(f'EventSource error on {self.url}: {e}')
            self._fail(e)
            return

        if not self.closed:
            logger.info(f'Server closed stream {self.url}')
            self._fail(None)

    def _connect(self):
        response = self.session.get(
            self.url,
            headers={'Accept': EVENT_STREAM_MIMETYPE, 'Cache-Control': 'no-cache'},
            stream=True,
            timeout=self.timeout
        )
        with self._lock:
            if self.ready_state == CLOSED:
                response.close()
                return None
            self._response = response

        if response.status_code != 200:
            raise EventSourceError(f'HTTP {response.status_code}')
        mimetype = response.headers.get('Content-Type', '').split(';')[0].strip().lower()
        if mimetype != EVENT_STREAM_MIMETYPE:
            raise EventSourceError(f'Unexpected content type: {mimetype or "none"}')

        # Event streams are always UTF-8
        response.encoding = 'utf-8'
        with self._lock:
            if self.ready_state == CONNECTING:
                self.ready_state = OPEN
        logger.debug(f'EventSource open on {self.url}')
        return response

    def _fail(self, error):
        self.close()
        if self.on_error:
            self.on_error(self, error)

    def close(self):
        """Close the connection; further frames are not dispatched"""
        with self._lock:
            if self.ready_state == CLOSED:
                return
            self.ready_state = CLOSED
            response, self._response = self._response, None
        if response is not None:
            response.close()
        if self._owns_session:
            self.session.close()

    def __repr__(self):
        return f"EventSource(url={self.url!r}, ready_state={READY_STATE_NAMES[self.ready_state]})"
