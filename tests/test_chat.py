import pytest

from models import Message
from responder import GREETING_REPLY, MATH_REPLY
from store import stores


def test_hello_gets_greeting(client):
    response = client.post('/api/chat', json={'message': 'hello'})
    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert body['message'] == GREETING_REPLY
    assert body['conversationId'] == 'conv-1'
    assert body['timestamp'].endswith('Z')


def test_solve_gets_math_template(client):
    body = client.post('/api/chat', json={'message': 'solve 2x=4'}).get_json()
    assert body['message'] == MATH_REPLY


def test_fallback_echoes_input(client):
    body = client.post('/api/chat', json={'message': 'what is the capital of France'}).get_json()
    assert '"what is the capital of France"' in body['message']


@pytest.mark.parametrize('payload', [{}, {'message': ''}, {'message': None}])
def test_message_required(client, payload):
    response = client.post('/api/chat', json=payload)
    assert response.status_code == 400
    assert response.get_json() == {'success': False, 'error': 'Message required'}


def test_reply_is_logged_as_assistant_message(app, client):
    client.post('/api/chat', json={'message': 'hello'})
    client.post('/api/chat', json={'message': 'help'})
    with app.app_context():
        messages = stores().messages.list()
        assert [m.role for m in messages] == ['assistant', 'assistant']
        assert messages[0].content == GREETING_REPLY
        assert messages[0].id != messages[1].id
        assert isinstance(messages[0], Message)
