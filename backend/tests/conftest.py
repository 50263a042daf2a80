import os
import sys
import pytest

# Ensure the backend root (containing the `scoreboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from scoreboard import create_app
from scoreboard.store import MemoryStore, StoreError


class TestConfig:
    TESTING = True
    STORE_BACKEND = 'memory'
    PORT = 8080
    LOG_LEVEL = 'DEBUG'
    CORS_ORIGINS = '*'


class BrokenStore(MemoryStore):
    """Memory store whose listed operations raise StoreError."""

    def __init__(self, failing=()):
        super().__init__()
        self.failing = set(failing)
        for name in self.failing:
            setattr(self, name, self._fail)

    def _fail(self, *args, **kwargs):
        raise StoreError('connection refused')


@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def flask_app(store):
    application = create_app(TestConfig, store=store)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_client():
    def _make(store):
        return create_app(TestConfig, store=store).test_client()
    return _make
