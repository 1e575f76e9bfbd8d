import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from itemrequest.main import app
from itemrequest.builders.content_builder import BitstreamBuilder, ItemBuilder
from itemrequest.builders.request_item_builder import RequestItemBuilder
from itemrequest.core.config import settings
from itemrequest.core.rate_limit import limiter
from itemrequest.core.security import get_password_hash
from itemrequest.db.base import *  # noqa: register all tables
from itemrequest.db.session import get_session
from itemrequest.models.user import User

STAFF_PASSWORD = "staffpassword"


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory database shared by every session of one test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    """Create a test database session."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Create a test client with database session dependency override."""
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    limiter.enabled = False
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
    limiter.enabled = settings.rate_limit_enabled


@pytest.fixture(name="item")
def item_fixture(session: Session):
    builder = ItemBuilder.create_item(session, "Restricted thesis").with_handle("123456789/1")
    yield builder.build()
    builder.cleanup()


@pytest.fixture(name="bitstream")
def bitstream_fixture(session: Session, item):
    builder = BitstreamBuilder.create_bitstream(session, item, RequestItemBuilder.REQ_PATH).with_size(2048)
    yield builder.build()
    builder.cleanup()


@pytest.fixture(name="request_item")
def request_item_fixture(session: Session, item, bitstream):
    """A pending request created through the builder."""
    builder = RequestItemBuilder.create_request_item(session, item, bitstream)
    yield builder.build()
    builder.cleanup()


def _create_user(session: Session, username: str, is_admin: bool) -> User:
    user = User(
        username=username,
        email=f"{username}@example.com",
        hashed_password=get_password_hash(STAFF_PASSWORD),
        is_admin=is_admin
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="staff_user")
def staff_user_fixture(session: Session):
    """Create an admin (staff) user."""
    return _create_user(session, "staff", is_admin=True)


@pytest.fixture(name="plain_user")
def plain_user_fixture(session: Session):
    """Create an authenticated user without staff rights."""
    return _create_user(session, "visitor", is_admin=False)


def _auth_headers(client: TestClient, user: User) -> dict:
    response = client.post(
        "/api/v1/auth/token",
        data={"username": user.username, "password": STAFF_PASSWORD}
    )
    assert response.status_code == 200, f"Failed to get access token: {response.json()}"
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(name="staff_headers")
def staff_headers_fixture(client: TestClient, staff_user: User):
    """Get authentication headers for the staff user."""
    return _auth_headers(client, staff_user)


@pytest.fixture(name="plain_headers")
def plain_headers_fixture(client: TestClient, plain_user: User):
    return _auth_headers(client, plain_user)
