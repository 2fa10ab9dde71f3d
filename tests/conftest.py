"""
Basic test configuration and fixtures.

Every test gets its own SQLite file and upload directory under tmp_path.
"""

import pytest
from fastapi.testclient import TestClient

from healthwallet.core.config import Settings
from healthwallet.core.database import Database
from healthwallet.main import create_app

TEST_SECRET = "test-secret-key"
PDF_BYTES = b"%PDF-1.4\n% test report\n"


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "jwt_secret_key": TEST_SECRET,
        "database_url": f"sqlite:///{tmp_path / 'test.db'}",
        "upload_dir": str(tmp_path / "uploads"),
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path):
    """Settings fixture for testing."""
    return make_settings(tmp_path)


@pytest.fixture
def database(settings):
    db = Database(settings.database_url)
    yield db
    db.close()


@pytest.fixture
def app(settings, database):
    return create_app(settings=settings, database=database)


@pytest.fixture
def client(app):
    """Test client fixture; entering it runs the startup hooks."""
    with TestClient(app) as test_client:
        yield test_client


def register(client, name="Alice", email="alice@example.com", password="secret123"):
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def upload_report(
    client,
    headers,
    filename="blood_test.pdf",
    content=PDF_BYTES,
    report_type="Blood Test",
    report_date="2024-01-15",
    vital_types=None,
):
    data = {}
    if report_type is not None:
        data["report_type"] = report_type
    if report_date is not None:
        data["report_date"] = report_date
    if vital_types:
        data["vital_types"] = vital_types
    return client.post(
        "/api/reports/upload",
        headers=headers,
        files={"file": (filename, content, "application/octet-stream")},
        data=data,
    )


@pytest.fixture
def alice(client):
    """Registered user: (user dict, auth headers)."""
    body = register(client)
    return body["user"], auth_headers(body["token"])


@pytest.fixture
def bob(client):
    body = register(client, name="Bob", email="bob@example.com", password="hunter22")
    return body["user"], auth_headers(body["token"])
