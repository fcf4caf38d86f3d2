import base64

import mongomock
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from app.core.config import settings
from app.core.database import get_db
from app.core.storage import get_storage
from app.main import create_app

PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)
PNG_B64 = base64.b64encode(PNG_BYTES).decode()


class BrokenCollection:
    """Коллекция, у которой любой вызов падает как недоступный сервер."""

    name = "broken"

    def __getattr__(self, item):
        def fail(*args, **kwargs):
            raise ServerSelectionTimeoutError("backend unavailable")

        return fail


class BrokenDatabase:
    def __getitem__(self, name):
        return BrokenCollection()


class FakeS3:
    def __init__(self):
        self.objects = {}

    def put_object(self, Bucket, Key, Body, ContentType, **kwargs):
        self.objects[Key] = {"bucket": Bucket, "body": Body, "content_type": ContentType}


@pytest.fixture
def db():
    return mongomock.MongoClient()["portfolio_test"]


@pytest.fixture
def s3():
    return FakeS3()


@pytest.fixture
def app(db, s3):
    application = create_app()
    application.dependency_overrides[get_db] = lambda: db
    application.dependency_overrides[get_storage] = lambda: s3
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_client(client):
    response = client.post(
        "/auth/login",
        json={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def broken_client(app):
    app.dependency_overrides[get_db] = lambda: BrokenDatabase()
    return TestClient(app, raise_server_exceptions=False)
