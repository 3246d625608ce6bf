"""
Shared fixtures: every test gets a fresh app on a temporary SQLite file
and a temporary static folder.
"""

import os
import shutil
import tempfile

import pytest

from portfolio_core import create_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def tmp_dir():
    """Create a temporary directory for the database and uploads, cleaned up after."""
    d = tempfile.mkdtemp(prefix="portfolio-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def app(tmp_dir):
    """Fully initialised Flask app with all modules registered."""
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "SQLALCHEMY_DATABASE_URI": "sqlite:///" + os.path.join(tmp_dir, "db", "portfolio.db"),
        "STATIC_FOLDER": os.path.join(tmp_dir, "static"),
        "ADMIN_USERNAME": ADMIN_USERNAME,
        "ADMIN_PASSWORD": ADMIN_PASSWORD,
        "CORS_ORIGINS": "",
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded_client(client):
    """Client after /api/init has created the admin and default content."""
    response = client.get("/api/init")
    assert response.status_code == 200
    return client


@pytest.fixture
def auth_client(seeded_client):
    """Client signed in as the seeded admin."""
    response = seeded_client.post("/api/auth", json={
        "username": ADMIN_USERNAME,
        "password": ADMIN_PASSWORD,
    })
    assert response.status_code == 200
    return seeded_client
