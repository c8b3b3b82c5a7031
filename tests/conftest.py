"""Shared fixtures: a fresh application and contact store per test."""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from app import create_app
from utils.store import MemoryContactStore


VALID_PAYLOAD = {
    "name": "Jordan Lee",
    "email": "jordan@example.com",
    "message": "I would like to discuss an opportunity.",
}


@pytest.fixture
def valid_payload():
    return dict(VALID_PAYLOAD)


@pytest.fixture
def store():
    return MemoryContactStore()


@pytest.fixture
def app(store, tmp_path):
    app = create_app("testing", store=store)
    app.config["RESUME_PATH"] = str(tmp_path / "missing.pdf")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_app():
    """Application using the SQLAlchemy-backed store on in-memory SQLite."""
    app = create_app("testing")
    app.config["CONTACT_STORE"] = "database"
    from extensions import db
    from utils.store import DatabaseContactStore
    import models  # noqa: F401

    with app.app_context():
        db.create_all()
        app.extensions["contact_store"] = DatabaseContactStore(db)
        yield app
        db.session.remove()
        db.drop_all()
