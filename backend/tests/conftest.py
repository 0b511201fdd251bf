import os

# Settings are read at import time: make sure the app can start and never touches a real DB.
os.environ.setdefault("JWT_SECRET", "test_jwt_secret")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
# Lowest bcrypt cost keeps the suite fast; production default is 10.
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.core.base import Base
from jobboard.core.database import get_db
from jobboard.core.security import TokenIssuer
from jobboard.dependencies.auth import get_token_issuer

# Import models so they register with SQLAlchemy metadata.
from jobboard.models.saved_job import SavedJob  # noqa: F401
from jobboard.models.user import User  # noqa: F401
from jobboard.services.identity import IdentityService

TEST_SIGNING_KEY = "fixed-test-signing-key"
TEST_PASSWORD = "Password_12345"


@pytest.fixture(scope="session")
def db_engine():
    # In-memory SQLite for fast, isolated tests.
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture()
def db_session(db_engine):
    # StaticPool keeps one in-memory DB for the whole session; reset schema per test.
    Base.metadata.drop_all(bind=db_engine)
    Base.metadata.create_all(bind=db_engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def signing_key():
    return TEST_SIGNING_KEY


@pytest.fixture()
def token_issuer(signing_key):
    return TokenIssuer(signing_key)


@pytest.fixture()
def app(db_session, token_issuer):
    import jobboard.main as main

    fastapi_app = main.app

    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_token_issuer] = lambda: token_issuer
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def identity(db_session, token_issuer):
    return IdentityService(db_session, token_issuer)


@pytest.fixture()
def user_password():
    return TEST_PASSWORD


@pytest.fixture()
def user(identity, user_password):
    """A registered user whose plaintext password is `user_password`."""
    return identity.register(
        username="test_user",
        email="test@example.com",
        password=user_password,
        experience_level="mid",
    )


@pytest.fixture()
def auth_headers(user, token_issuer):
    return {"Authorization": f"Bearer {token_issuer.issue(user.id)}"}
