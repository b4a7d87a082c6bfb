import pytest

from app import create_app
from config import TestConfig


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signup(client):
    def _signup(email='a@b.com', password='x', name='A'):
        return client.post('/api/auth/signup', json={'email': email, 'password': password, 'name': name})
    return _signup


@pytest.fixture
def add_task(client):
    def _add_task(title='buy milk', **fields):
        response = client.post('/api/tasks', json={'title': title, **fields})
        assert response.status_code == 201
        return response.get_json()['task']
    return _add_task
