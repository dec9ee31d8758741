from flask import Flask

from sse_demo.components import mounted_components


def test_health_lists_components(client):
    resp = client.get('/health')

    assert resp.status_code == 200
    data = resp.get_json()
    assert data['status'] == 'healthy'
    assert data['components'] == ['counter_stream', 'health', 'stream_page']


def test_status_reports_config_and_process(client):
    data = client.get('/api/v1/status').get_json()

    assert data['config']['STREAM_COUNT'] == 10
    assert data['config']['STREAM_INTERVAL'] == 0
    assert data['config']['FRONTEND_ORIGIN'] == 'http://localhost:3000'
    assert data['streams']['total_streams'] == 0
    assert data['process']['pid'] > 0


def test_logs_record_stream_lifecycle(client):
    client.get('/api/v1/stream').get_data()

    logs = client.get('/api/v1/logs').get_json()
    messages = [entry['message'] for entry in logs]
    assert any('opened' in message for message in messages)
    assert any('completed after 10 frames' in message for message in messages)
    assert all(entry['level'] == 'INFO' for entry in logs)


def test_logs_filter_and_limit(client):
    for _ in range(3):
        client.get('/api/v1/stream').get_data()

    assert len(client.get('/api/v1/logs?limit=2').get_json()) == 2
    assert client.get('/api/v1/logs?level=ERROR').get_json() == []
    assert len(client.get('/api/v1/logs?level=info').get_json()) == 6


def test_logs_reject_bad_limit(client):
    resp = client.get('/api/v1/logs?limit=abc')
    assert resp.status_code == 400
    assert 'error' in resp.get_json()

    resp = client.get('/api/v1/logs?limit=0')
    assert resp.status_code == 400


def test_unknown_api_path_returns_json_404(client):
    resp = client.get('/api/v1/missing')

    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Not found'}


def test_unknown_page_keeps_html_404(client):
    resp = client.get('/missing')

    assert resp.status_code == 404
    assert resp.mimetype == 'text/html'


def test_components_are_recorded_per_app(app):
    assert mounted_components(app) == ['counter_stream', 'health', 'stream_page']
    assert mounted_components(Flask('bare')) == []
