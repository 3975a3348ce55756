"""
Shared test setup.

Points the application at an in-memory SQLite database and blanks the
Gemini key before any ``app`` module is imported.
"""

import os

os.environ["DATABASE_URL_OVERRIDE"] = "sqlite://"
os.environ["GEMINI_API_KEY"] = ""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401,E402


@pytest.fixture
def engine():
    """Fresh in-memory database shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session
