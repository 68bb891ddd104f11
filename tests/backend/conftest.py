import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Ensure both the repo root (for the mentor package) and the backend
# directory (for the app package) are importable from the tests/ directory.
_repo_root = str(Path(__file__).resolve().parents[2])
sys.path.insert(0, _repo_root)
sys.path.insert(0, str(Path(_repo_root) / "backend"))

from app.database import Base, get_db  # noqa: E402
from app.dependencies import get_resolver_config  # noqa: E402
from app.main import app  # noqa: E402
from mentor.config import ResolverConfig  # noqa: E402

TEST_MODELS = ("gemini-2.5-flash", "gemini-pro-latest", "gemini-flash-latest")


@pytest.fixture()
def db_engine(tmp_path):
    """Create a fresh SQLite database in a temporary directory for each test."""
    db_path = tmp_path / "test.db"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(db_engine):
    """Provide a SQLAlchemy session bound to the temporary test database."""
    Session = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def resolver_config():
    """Gemini chain with no default key; tests replace it to change behaviour."""
    return ResolverConfig(backend="gemini", models=TEST_MODELS, default_api_key=None)


@pytest.fixture(autouse=True)
def mock_gemini_post():
    """Prevent real Gemini calls during backend tests.

    The mock answers every model with the same feedback text.  Individual
    tests can change ``return_value`` / ``side_effect`` to simulate
    outages.
    """
    import httpx

    with patch("mentor.providers.gemini.httpx.post") as mock:
        mock.return_value = httpx.Response(
            200,
            json={"candidates": [{"content": {"parts": [{"text": "Mocked AI feedback"}]}}]},
            request=httpx.Request("POST", "https://generativelanguage.googleapis.com"),
        )
        yield mock


@pytest.fixture()
def client(db_engine, resolver_config):
    """
    Provide a Starlette TestClient whose requests use the temporary database
    and the test resolver configuration instead of the production ones.
    """
    from starlette.testclient import TestClient

    Session = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_resolver_config] = lambda: resolver_config
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
