"""
Pytest configuration and fixtures for Board API tests.
"""
import os

# Keep the application engine off disk; tests use their own engine below
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from board_api.auth import create_access_token, get_password_hash
from board_api.database import Base, get_db
from board_api.exceptions import StorageUploadError
from board_api.limiter import limiter
from board_api.main import app
from board_api.models import Board, Category, User
from board_api.services.storage import get_upload_service

# Disable rate limiting for tests
limiter.enabled = False

# Use in-memory SQLite for tests with shared connection
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Global session for sharing across requests
_test_session = None

# One hash for every fixture user; bcrypt is slow
PASSWORD = "testpassword123"
PASSWORD_HASH = get_password_hash(PASSWORD)


def get_test_db():
    """Get the shared test database session."""
    yield _test_session


class FakeUploader:
    """Records uploads instead of talking to S3."""

    def __init__(self):
        self.uploads = []
        self.fail = False

    def upload(self, file, dirname):
        if self.fail:
            raise StorageUploadError()
        content = file.file.read()
        self.uploads.append((dirname, file.filename, content))
        return f"https://cdn.test/{dirname}/{len(self.uploads)}-{file.filename}"


@pytest.fixture(scope="function")
def uploader():
    return FakeUploader()


@pytest.fixture(scope="function")
def db(uploader):
    """Create a fresh database for each test."""
    global _test_session

    Base.metadata.create_all(bind=engine)
    _test_session = TestingSessionLocal()

    app.dependency_overrides[get_db] = get_test_db
    app.dependency_overrides[get_upload_service] = lambda: uploader

    yield _test_session

    # Cleanup
    app.dependency_overrides.clear()
    _test_session.close()
    _test_session = None

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Create a test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def make_user(db):
    """Factory for active users sharing the fixture password."""
    def _make_user(name: str, image: str = None) -> User:
        user = User(
            email=f"{name}@example.com",
            hashed_password=PASSWORD_HASH,
            name=name,
            image=image or f"https://cdn.test/profile/{name}.png",
            is_active=True,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture(scope="function")
def writer(make_user):
    return make_user("writer")


@pytest.fixture(scope="function")
def other_user(make_user):
    return make_user("other")


def _headers_for(user: User) -> dict:
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def headers_for():
    """Bearer headers for any user."""
    return _headers_for


@pytest.fixture(scope="function")
def writer_headers(writer):
    return _headers_for(writer)


@pytest.fixture(scope="function")
def other_headers(other_user):
    return _headers_for(other_user)


BASE_TIME = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def make_board(db):
    """Factory for boards; ``minutes`` offsets created_at from a fixed base."""
    def _make_board(
        member: User,
        title: str = "A board",
        category: Category = Category.FREE,
        minutes: int = 0,
    ) -> Board:
        board = Board(
            member_id=member.id,
            title=title,
            content=f"{title} content",
            category=category.value,
            image=f"https://cdn.test/board/{title}.png",
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )
        db.add(board)
        db.commit()
        db.refresh(board)
        return board
    return _make_board
