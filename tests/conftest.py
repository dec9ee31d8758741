import pytest

from sse_demo.stream_app import create_app

from fakes import FakeResponse, FakeSession, counter_lines


@pytest.fixture
def app():
    return create_app({
        'TESTING': True,
        'STREAM_INTERVAL': 0,
        'RATELIMIT_ENABLED': False,
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def counter_session():
    return FakeSession(FakeResponse(counter_lines()))
