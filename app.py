import time

from flask import Blueprint, Flask, current_app, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from auth import auth_bp, login_manager
from chat import chat_bp
from config import Config
from errors import InternalError
from models import db, isoformat, utcnow
from store import sql_stores
from tasks import tasks_bp

STARTED_AT = time.monotonic()

meta_bp = Blueprint('meta', __name__)


@meta_bp.route('/health')
def health():
    return jsonify(
        status='Server running! ✅',
        timestamp=isoformat(utcnow()),
        uptime=time.monotonic() - STARTED_AT,
    )


@meta_bp.route('/')
def index():
    return jsonify(
        message='MindAI Backend API',
        version=current_app.config['VERSION'],
        status='Running ✅',
        endpoints={
            'auth': '/api/auth/signup, /api/auth/login, /api/auth/me',
            'chat': '/api/chat',
            'tasks': '/api/tasks',
            'health': '/health',
        },
    )


def handle_http_error(error):
    return jsonify(success=False, error=error.description), error.code


def handle_unexpected_error(error):
    current_app.logger.exception("Unhandled error: %s", error)
    return jsonify(success=False, error=InternalError.description, message=str(error)), InternalError.code


def create_app(config=Config):
    app = Flask(__name__)
    app.config.from_object(config)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    db.init_app(app)
    login_manager.init_app(app)
    CORS(app, origins=app.config['CORS_ORIGINS'])

    app.extensions['mindai.stores'] = sql_stores()

    app.register_blueprint(meta_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(chat_bp)
    app.register_blueprint(tasks_bp)

    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)

    with app.app_context():
        db.create_all()

    return app


def run(config=Config):
    app = create_app(config)
    port = app.config['PORT']
    print(f"✅ MindAI Backend running on port {port}")
    print(f"📍 URL: http://localhost:{port}")
    print(f"🏥 Health check: http://localhost:{port}/health")
    # One request at a time over the shared in-memory connection
    app.run(port=port, threaded=False)


if __name__ == '__main__':
    run()
