import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_COOKIE_CSRF_PROTECT", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import Base, build_engine, get_db
from main import app
from models.user import User
from routers.auth import current_user_id


@pytest.fixture
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(test_engine)
    yield test_engine
    Base.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def users(session_factory) -> dict[str, int]:
    """Three registered users, keyed by first name."""
    session = session_factory()
    try:
        created = {}
        for name in ("alice", "bob", "carol"):
            user = User(
                email=f"{name}@example.com",
                full_name=name.title(),
                profile_pic=f"https://avatars.example.com/{name}.png",
                password_hash="not-a-real-hash",
            )
            session.add(user)
            session.commit()
            created[name] = user.id
        return created
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def act_as():
    """Make every following request run as the given user id."""

    def _act_as(user_id: int) -> None:
        app.dependency_overrides[current_user_id] = lambda: user_id

    return _act_as
