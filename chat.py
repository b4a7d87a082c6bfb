from flask import Blueprint, current_app, jsonify

from auth import auth_required
from errors import ValidationError, json_body
from models import Message, isoformat, utcnow
from responder import generate_reply
from store import stores

chat_bp = Blueprint('chat', __name__, url_prefix='/api')


@chat_bp.route('/chat', methods=['POST'])
@auth_required
def chat():
    data = json_body()
    message = data.get('message')
    if not message:
        raise ValidationError('Message required')

    reply = generate_reply(str(message))

    # Assistant replies are logged but never read back
    stores().messages.put(Message(role='assistant', content=reply))

    return jsonify(
        success=True,
        message=reply,
        conversationId=current_app.config['CONVERSATION_ID'],
        timestamp=isoformat(utcnow()),
    )
