"""Shared fixtures: a throwaway SQLite database and small entity factories."""

from __future__ import annotations

import itertools
import os
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

from christ_collective.config import get_settings  # noqa: E402

get_settings.cache_clear()

from christ_collective.domain.entities import (  # noqa: E402
    Campaign,
    Ministry,
    MinistryEvent,
    Post,
    User,
)
from christ_collective.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from christ_collective.infrastructure.repositories import (  # noqa: E402
    CampaignRepository,
    ChatRepository,
    MinistryRepository,
    PostRepository,
    UserRepository,
)
from christ_collective.utils import now_in_app_naive_datetime  # noqa: E402


@pytest.fixture(autouse=True)
def setup_database():
    """Give every test an empty schema."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session):
    """Insert users directly; the stored password is not a real hash."""

    counter = itertools.count(1)

    def _make_user(
        name: str | None = None,
        *,
        email: str | None = None,
        profile_image_url: str | None = None,
        is_active: bool = True,
    ) -> User:
        index = next(counter)
        return UserRepository(session).create(
            User(
                id=None,
                name=name or f"User {index}",
                email=email or f"user{index}@example.com",
                password="not-a-real-hash",
                profile_image_url=profile_image_url,
                is_active=is_active,
                created_at=now_in_app_naive_datetime(),
            )
        )

    return _make_user


@pytest.fixture()
def make_post(session):
    def _make_post(author: User, title: str = "Sunday reflections", **kwargs) -> Post:
        return PostRepository(session).create(
            Post(id=None, user_id=author.id, title=title, content="Grace and peace", **kwargs)
        )

    return _make_post


@pytest.fixture()
def make_campaign(session):
    def _make_campaign(owner: User, title: str = "Roof repair") -> Campaign:
        return CampaignRepository(session).create(
            Campaign(id=None, user_id=owner.id, title=title, slug=title.lower().replace(" ", "-"))
        )

    return _make_campaign


@pytest.fixture()
def make_ministry(session):
    def _make_ministry(owner: User, name: str = "Youth Ministry") -> Ministry:
        return MinistryRepository(session).create(Ministry(id=None, user_id=owner.id, name=name))

    return _make_ministry


@pytest.fixture()
def make_event(session):
    def _make_event(ministry: Ministry, title: str = "Bible study") -> MinistryEvent:
        return MinistryRepository(session).create_event(
            MinistryEvent(
                id=None,
                ministry_id=ministry.id,
                title=title,
                start_date=datetime(2030, 1, 1, 18, 0) + timedelta(days=7),
            )
        )

    return _make_event


@pytest.fixture()
def make_chat(session):
    def _make_chat(first: User, second: User):
        return ChatRepository(session).create(first.id, second.id)

    return _make_chat


@pytest.fixture()
def client():
    """Return a test client bound to a fresh application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    """Mint a bearer token for ``user`` without going through the login form."""

    from christ_collective.infrastructure.security import create_access_token
    from christ_collective.interfaces.api.dependencies import password_signature

    def _auth_headers(user: User) -> dict[str, str]:
        token = create_access_token(
            data={"sub": user.email, "pwd_sig": password_signature(user)}
        )
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
