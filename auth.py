from functools import wraps

from flask import Blueprint, current_app, jsonify
from flask_login import LoginManager, current_user, login_required
from itsdangerous import BadSignature, URLSafeTimedSerializer
from werkzeug.security import check_password_hash, generate_password_hash

from errors import AuthError, ConflictError, ValidationError, json_body
from models import db, User
from store import stores

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')
login_manager = LoginManager()

TOKEN_SALT = 'mindai-auth-token'


def _serializer():
    return URLSafeTimedSerializer(current_app.config['SECRET_KEY'], salt=TOKEN_SALT)


def issue_token(user):
    return _serializer().dumps({'uid': user.id})


def user_from_token(token):
    """User behind a signed token, or None if it is forged, expired or stale."""
    try:
        payload = _serializer().loads(token, max_age=current_app.config.get('TOKEN_MAX_AGE'))
    except BadSignature:
        return None
    user_id = payload.get('uid') if isinstance(payload, dict) else None
    if user_id is None:
        return None
    return db.session.get(User, user_id)


@login_manager.request_loader
def load_user_from_request(req):
    header = req.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token:
        return None
    return user_from_token(token.strip())


@login_manager.unauthorized_handler
def unauthorized():
    raise AuthError('Invalid or missing token')


def auth_required(view):
    """Require a valid bearer token when the app runs with REQUIRE_AUTH."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_app.config.get('REQUIRE_AUTH') and not current_user.is_authenticated:
            raise AuthError('Invalid or missing token')
        return view(*args, **kwargs)
    return wrapper


def _credentials():
    data = json_body()
    email = data.get('email')
    password = data.get('password')
    if not email or not password:
        raise ValidationError('Email and password required')
    return data, email, str(password)


@auth_bp.route('/signup', methods=['POST'])
def signup():
    data, email, password = _credentials()
    users = stores().users

    if users.get(email):
        raise ConflictError('User already exists')

    user = User(email=email, password=generate_password_hash(password), name=data.get('name') or 'User')
    users.put(user)
    current_app.logger.info("New user signed up: %s (id=%s)", user.email, user.id)

    return jsonify(success=True, user=user.to_dict(), token=issue_token(user)), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    _, email, password = _credentials()
    user = stores().users.get(email)

    if not user or not check_password_hash(user.password, password):
        current_app.logger.info("Failed login for %s", email)
        raise AuthError('Invalid email or password')

    current_app.logger.info("User logged in: %s (id=%s)", user.email, user.id)
    return jsonify(success=True, user=user.to_dict(), token=issue_token(user))


@auth_bp.route('/me')
@login_required
def me():
    return jsonify(success=True, user=current_user.to_dict())
