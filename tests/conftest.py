from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from helpdesk.core.config import Settings
from helpdesk.main import create_application


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'helpdesk.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session(client, app):
    with Session(app.state.engine) as db_session:
        yield db_session


@pytest.fixture
def upload_dir(settings):
    return Path(settings.UPLOAD_DIR)


@pytest.fixture
def make_ticket(client):
    def _make_ticket(**overrides):
        payload = {"title": "Printer jammed", "reporter_name": "Dana"}
        payload.update(overrides)
        response = client.post("/api/tickets", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_ticket


@pytest.fixture
def team(client):
    """Seeded team members keyed by email."""
    return {member["email"]: member for member in client.get("/api/team").json()}
