import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Point the application engine at SQLite before anything imports it
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

from db.database import Base, get_db  # noqa: E402
from main import app  # noqa: E402
import models.settings  # noqa: E402,F401

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# A store without the settings table: every query fails with OperationalError
broken_engine = create_engine(
    "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
)
BrokenSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=broken_engine)


def _override(session_factory):
    def override_get_db():
        db = None
        try:
            db = session_factory()
            yield db
        finally:
            if db:
                db.close()

    return override_get_db


@pytest.fixture
def test_db():
    Base.metadata.create_all(bind=engine)
    yield  # Run the tests
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(test_db):
    app.dependency_overrides[get_db] = _override(TestingSessionLocal)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_db] = _override(BrokenSessionLocal)
    yield TestClient(app)
    app.dependency_overrides.clear()
