import os

# Settings are read at import time; the tests never reach a real server
os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")
os.environ.setdefault("OPENAI_API_KEY", "")
os.environ.setdefault("EMAIL_USER", "")
os.environ.setdefault("EMAIL_PASS", "")

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from api.dependencies import AppContext, get_context
from api.main import app
from config.settings import settings
from services.chat_service import ChatResponder
from utils.errors import DeliveryFailed, StorageUnavailable, UpstreamUnavailable


class FakeDatabase:
    """In-memory stand-in for models.database.Database."""

    def __init__(self):
        self.collections = {}
        self.fail_inserts = False
        self.fail_finds = False

    def documents(self, collection):
        return self.collections.get(collection, [])

    async def insert_one(self, collection, document):
        if self.fail_inserts:
            raise StorageUnavailable("insert failed")
        doc = dict(document)
        doc["_id"] = ObjectId()
        self.collections.setdefault(collection, []).append(doc)
        return str(doc["_id"])

    async def find_one(self, collection, filter):
        if self.fail_finds:
            raise StorageUnavailable("find failed")
        for doc in self.documents(collection):
            if all(doc.get(key) == value for key, value in filter.items()):
                return dict(doc)
        return None


class FakeMailer:
    def __init__(self):
        self.sent = []
        self.fail = False

    async def send(self, to, subject, html_body):
        if self.fail:
            raise DeliveryFailed("relay down")
        self.sent.append({"to": to, "subject": subject, "html": html_body})


class FakeCompletion:
    def __init__(self, reply="Generated answer"):
        self.reply = reply
        self.fail = False
        self.prompts = []

    async def complete(self, prompt):
        self.prompts.append(prompt)
        if self.fail:
            raise UpstreamUnavailable("completion down")
        return self.reply


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def fake_mailer():
    return FakeMailer()


@pytest.fixture
def fake_completion():
    return FakeCompletion()


@pytest.fixture
def context(fake_db, fake_mailer, fake_completion, tmp_path):
    return AppContext(
        database=fake_db,
        mailer=fake_mailer,
        responder=ChatResponder(fake_db, fake_completion),
        settings=settings.model_copy(update={"static_dir": str(tmp_path)}),
    )


@pytest.fixture
def client(context):
    app.dependency_overrides[get_context] = lambda: context
    yield TestClient(app)
    app.dependency_overrides.clear()
