import os
import tempfile

# Configure before the app (and its settings singleton) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CACHE_ENABLED"] = "false"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="catalog-uploads-")
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.db.init_db import init_db, drop_db
from app.db.session import SessionLocal
from app.core.security import create_access_token
from app.schemas.user import UserCreate
from app.services.user_service import user_service


@pytest.fixture(autouse=True)
def database():
    init_db()
    yield
    drop_db()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(db):
    def _make(username, password="secret1", is_admin=False, email=None):
        return user_service.create_user(
            db, UserCreate(username=username, password=password, email=email), is_admin=is_admin
        )
    return _make


def bearer(user):
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def admin(make_user):
    return make_user("admin", is_admin=True)


@pytest.fixture
def admin_headers(admin):
    return bearer(admin)


@pytest.fixture
def user(make_user):
    return make_user("amal")


@pytest.fixture
def user_headers(user):
    return bearer(user)


@pytest.fixture
def headers_for():
    return bearer
