from sse_demo.client import EventSource, MessageEvent, StreamPage

from fakes import FakeResponse, FakeSession, counter_lines


class FakeSource:
    """Records lifecycle calls into a shared log instead of connecting"""

    def __init__(self, log, url, on_message=None, on_error=None):
        self.log = log
        self.url = url
        self.on_message = on_message
        self.on_error = on_error
        self.close_calls = 0
        self.number = len([entry for entry in log if entry[0] == 'open']) + 1
        log.append(('open', self.number))

    def start(self):
        self.log.append(('start', self.number))
        return self

    def close(self):
        self.close_calls += 1
        self.log.append(('close', self.number))

    def emit(self, data):
        self.on_message(self, MessageEvent(data))

    def fail(self, error=None):
        self.on_error(self, error)


def make_page(log):
    return StreamPage('http://test/api/v1/stream',
                      source_factory=lambda url, **kw: FakeSource(log, url, **kw))


def test_start_opens_one_connection():
    log = []
    page = make_page(log)

    source = page.start()

    assert page.source is source
    assert page.connected
    assert log == [('open', 1), ('start', 1)]


def test_restart_closes_prior_connection_first():
    log = []
    page = make_page(log)

    first = page.start()
    second = page.start()

    assert log == [('open', 1), ('start', 1), ('close', 1), ('open', 2), ('start', 2)]
    assert first.close_calls == 1
    assert second.close_calls == 0
    assert page.source is second


def test_messages_are_appended_in_order():
    page = make_page([])
    source = page.start()

    for n in range(3):
        source.emit(str(n))

    assert page.messages == ['0', '1', '2']
    assert page.render() == '• 0\n• 1\n• 2'


def test_messages_survive_restart():
    page = make_page([])
    page.start().emit('a')
    page.start().emit('b')

    assert page.messages == ['a', 'b']


def test_error_closes_and_clears_handle():
    page = make_page([])
    source = page.start()

    source.fail(ConnectionError('reset'))

    assert page.source is None
    assert not page.connected
    assert source.close_calls == 1


def test_error_from_stale_source_keeps_current():
    page = make_page([])
    stale = page.start()
    current = page.start()

    stale.fail(ConnectionError('late'))
    stale.emit('ignored')

    assert page.source is current
    assert page.messages == []


def test_teardown_closes_connection():
    page = make_page([])
    source = page.start()

    page.teardown()

    assert page.source is None
    assert source.close_calls == 1


def test_teardown_without_connection_is_noop():
    page = make_page([])
    page.teardown()
    assert page.source is None


def test_full_stream_through_event_source(counter_session):
    page = StreamPage('http://test/api/v1/stream',
                      source_factory=lambda url, **kw: EventSource(url, session=counter_session, **kw))

    source = page.start()
    source.join(timeout=5)

    assert page.messages == [str(n) for n in range(10)]
    # Server closing the stream surfaces as an error and clears the handle
    assert page.source is None
    assert source.closed


def test_transport_failure_through_event_source():
    session = FakeSession(FakeResponse(counter_lines(), status_code=503))
    page = StreamPage('http://test/api/v1/stream',
                      source_factory=lambda url, **kw: EventSource(url, session=session, **kw))

    source = page.start()
    source.join(timeout=5)

    assert page.messages == []
    assert page.source is None
    assert session.response.closed


def test_malformed_retry_does_not_strand_the_handle():
    session = FakeSession(FakeResponse(['retry: ²', 'data: 0', '', 'data: 1', '']))
    page = StreamPage('http://test/api/v1/stream',
                      source_factory=lambda url, **kw: EventSource(url, session=session, **kw))

    source = page.start()
    source.join(timeout=5)

    assert page.messages == ['0', '1']
    assert page.source is None
    assert source.closed
