import os

# Must be set before nexus_cms.config is imported
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret"
os.environ.pop("RESEND_API_KEY", None)
os.environ.pop("NOTIFY_EMAIL", None)

import pytest
import resend
from fastapi.testclient import TestClient

from nexus_cms.config import settings
from nexus_cms.database import Database
from nexus_cms.main import create_app
from nexus_cms.services.media_storage import MediaStorage


class InMemoryStorage(MediaStorage):
    """Media store double: keeps objects in a dict, can be told to fail."""

    def __init__(self, max_size_mb: int = 1):
        super().__init__(max_size_mb=max_size_mb)
        self.objects = {}
        self.fail_with = None

    def _put(self, path, content, content_type):
        if self.fail_with:
            raise RuntimeError(self.fail_with)
        self.objects[path] = (content, content_type)
        return f"https://cdn.example.test/{path}"

    def _remove(self, path):
        if self.fail_with:
            raise RuntimeError(self.fail_with)
        return self.objects.pop(path, None) is not None


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'nexus_test.db'}")
    yield db
    db.close()


@pytest.fixture
def db_session(database):
    database.create_all()
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def client(database, storage):
    app = create_app(database=database, storage=storage)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sent_emails(monkeypatch):
    """Enable notifications and capture what would be sent through Resend."""
    sent = []

    def fake_send(params):
        sent.append(params)
        return {"id": f"email_{len(sent)}"}

    monkeypatch.setattr(settings, "RESEND_API_KEY", "re_test_key")
    monkeypatch.setattr(settings, "NOTIFY_EMAIL", "owner@nexus.com")
    monkeypatch.setattr(resend.Emails, "send", fake_send)
    return sent


@pytest.fixture
def api(client):
    """Small wrapper over /api/function: api("get", "get-products", id=..., json=...)."""

    def call(method, action=None, json=None, **params):
        if action is not None:
            params["action"] = action
        return client.request(method.upper(), "/api/function", params=params, json=json)

    return call
