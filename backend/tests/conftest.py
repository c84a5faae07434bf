import os
import sys
import pytest

# Ensure the backend root (containing the `glyphica` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from flask import g
from flask.testing import FlaskClient

from glyphica import create_app, db


class IsolatedLoginClient(FlaskClient):
    """Test client that drops Flask-Login's per-request user cache.

    The ``flask_app`` fixture keeps an app context open for the whole test, and
    Flask reuses it for every test-client request, so ``g`` (where Flask-Login
    caches the current user) would otherwise leak between clients.
    """

    def open(self, *args, **kwargs):
        g.pop('_login_user', None)
        return super().open(*args, **kwargs)


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BCRYPT_LOG_ROUNDS = 4
    BCRYPT_HANDLE_LONG_PASSWORDS = True
    LEADERBOARD_LIMIT = 50
    LEADERBOARD_MAX_LIMIT = 100
    RECENT_GAMES_LIMIT = 10
    DEFAULT_GAME_MODE = 'classic'
    CORS_ORIGINS = ['http://localhost:3000']


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    application.test_client_class = IsolatedLoginClient
    with application.app_context():
        # Ensure models are imported so tables are created
        import glyphica.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_user(flask_app):
    from glyphica.services import accounts

    def _make_user(username, password='secret'):
        return accounts.register(username, password)
    return _make_user


@pytest.fixture()
def logged_in_client(flask_app):
    """A test client with a freshly registered (and therefore logged in) user."""
    test_client = flask_app.test_client()
    res = test_client.post('/api/auth/register', json={'username': 'player1', 'password': 'secret'})
    assert res.status_code == 201
    test_client.user = res.get_json()['user']
    return test_client
