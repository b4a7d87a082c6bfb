import pytest

from app import create_app, run
from config import TestConfig


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    body = response.get_json()
    assert body['status']
    assert body['timestamp'].endswith('Z')
    assert body['uptime'] >= 0


def test_index_describes_api(client):
    body = client.get('/').get_json()
    assert body['message'] == 'MindAI Backend API'
    assert body['version'] == '1.0.0'
    assert body['endpoints']['tasks'] == '/api/tasks'


def test_unknown_route_uses_envelope(client):
    response = client.get('/api/nope')
    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_wrong_method_uses_envelope(client):
    response = client.get('/api/chat')
    assert response.status_code == 405
    assert response.get_json()['success'] is False


def test_unexpected_error_returns_500(app):
    def boom():
        raise RuntimeError('kaboom')

    app.add_url_rule('/boom', 'boom', boom)
    response = app.test_client().get('/boom')
    assert response.status_code == 500
    assert response.get_json() == {'success': False, 'error': 'Internal server error', 'message': 'kaboom'}


def test_cors_headers(client):
    response = client.get('/health', headers={'Origin': 'http://example.com'})
    assert response.headers['Access-Control-Allow-Origin'] == '*'


def test_each_app_has_its_own_state():
    first = create_app(TestConfig).test_client()
    second = create_app(TestConfig).test_client()
    first.post('/api/tasks', json={'title': 'only here'})
    assert first.get('/api/tasks').get_json()['total'] == 1
    assert second.get('/api/tasks').get_json()['total'] == 0


def test_end_to_end(client):
    response = client.post('/api/auth/signup', json={'email': 'a@b.com', 'password': 'x', 'name': 'A'})
    assert response.status_code == 201
    user_id = response.get_json()['user']['id']

    response = client.post('/api/auth/login', json={'email': 'a@b.com', 'password': 'x'})
    assert response.status_code == 200
    assert response.get_json()['user']['id'] == user_id

    response = client.post('/api/tasks', json={'title': 'buy milk'})
    assert response.status_code == 201
    task = response.get_json()['task']
    assert task['priority'] == 'medium'

    assert client.get('/api/tasks').get_json()['total'] == 1
    assert client.delete(f"/api/tasks/{task['id']}").status_code == 200
    assert client.get('/api/tasks').get_json()['total'] == 0


class RequireAuthConfig(TestConfig):
    REQUIRE_AUTH = True


@pytest.fixture
def strict_client():
    return create_app(RequireAuthConfig).test_client()


@pytest.mark.parametrize('method, path, payload', [
    ('post', '/api/chat', {'message': 'hello'}),
    ('post', '/api/tasks', {'title': 'buy milk'}),
    ('get', '/api/tasks', None),
    ('put', '/api/tasks/1', {'completed': True}),
    ('delete', '/api/tasks/1', None),
])
def test_require_auth_rejects_anonymous_requests(strict_client, method, path, payload):
    response = getattr(strict_client, method)(path, json=payload)
    assert response.status_code == 401
    assert response.get_json()['success'] is False


def test_require_auth_accepts_valid_token(strict_client):
    token = strict_client.post('/api/auth/signup', json={'email': 'a@b.com', 'password': 'x'}).get_json()['token']
    headers = {'Authorization': f'Bearer {token}'}
    response = strict_client.post('/api/tasks', json={'title': 'buy milk'}, headers=headers)
    assert response.status_code == 201
    assert strict_client.get('/api/tasks', headers=headers).get_json()['total'] == 1
    assert strict_client.get('/api/tasks', headers={'Authorization': 'Bearer forged'}).status_code == 401


@pytest.mark.parametrize('path', ['/api/auth/signup', '/api/auth/login', '/api/chat', '/api/tasks'])
@pytest.mark.parametrize('payload', [['a'], 'a@b.com', 42])
def test_non_object_json_body_is_a_validation_error(client, path, payload):
    response = client.post(path, json=payload)
    assert response.status_code == 400
    body = response.get_json()
    assert body['success'] is False
    assert 'message' not in body


def test_dev_server_handles_one_request_at_a_time(monkeypatch):
    calls = []
    monkeypatch.setattr('flask.Flask.run', lambda self, **kwargs: calls.append(kwargs))
    run(TestConfig)
    assert calls == [{'port': TestConfig.PORT, 'threaded': False}]
