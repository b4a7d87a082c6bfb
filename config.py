import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _flag(name, default='false'):
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


def _seconds(name):
    value = os.getenv(name)
    return int(value) if value else None


class Config:
    VERSION = '1.0.0'
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-change-me')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///:memory:')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    REQUIRE_AUTH = _flag('REQUIRE_AUTH')
    TOKEN_MAX_AGE = _seconds('TOKEN_MAX_AGE')  # None: tokens never expire
    PORT = int(os.getenv('PORT', 3001))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    CONVERSATION_ID = 'conv-1'


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    REQUIRE_AUTH = False
    TOKEN_MAX_AGE = None


class ClientConfig:
    API_URL = os.getenv('MINDAI_API_URL', 'http://localhost:3001')
    SESSION_FILE = Path(os.getenv('MINDAI_SESSION_FILE', Path.home() / '.mindai' / 'session.json'))
