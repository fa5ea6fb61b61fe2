import os
import sys
import pytest

# Ensure the backend root (containing the `scoreboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from scoreboard import create_app, db, socketio

from helpers import NAMESPACE


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = ['*']
    SOCKETIO_NAMESPACE = NAMESPACE
    HISTORY_LIMIT = 10
    DEFAULT_PLAYERS = ['Player 1', 'Player 2']
    ARCHIVE_SESSIONS = True
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace=NAMESPACE
    )
    yield test_client
    try:
        test_client.disconnect(namespace=NAMESPACE)
    except Exception:
        pass


@pytest.fixture()
def make_sio_client(flask_app):
    """Factory for extra observers, disconnected at teardown."""
    created = []

    def _make():
        c = socketio.test_client(flask_app, namespace=NAMESPACE)
        created.append(c)
        return c

    yield _make
    for c in created:
        if c.is_connected(NAMESPACE):
            c.disconnect(namespace=NAMESPACE)
