"""
Shared pytest fixtures.

Uses a SQLite file database so no Postgres is required for tests. The
database is shared by the whole session, so tests that assert exact
counts work in date windows (or with tag names) no other test touches.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.db.base import Base, get_db
from app.main import app
from app.models.prompt import DailyPrompt

SQLITE_URL = "sqlite:///./test_daybook.db"

engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

_DEFAULT_PROMPTS = [
    ("What are three things you're grateful for today?", "Gratitude"),
    ("What challenged you today and how did you handle it?", "Reflection"),
    ("What habit would you like to build or break?", "Growth"),
]


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def create_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    # Seed writing prompts (normally done by Alembic migration)
    db = TestingSessionLocal()
    try:
        if db.query(DailyPrompt).count() == 0:
            for text, category in _DEFAULT_PROMPTS:
                db.add(DailyPrompt(text=text, category=category))
            db.commit()
    finally:
        db.close()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(db):
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
