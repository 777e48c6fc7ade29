from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from contact_directory_api.app.core.config import settings
from contact_directory_api.app.core.db import init_db
from contact_directory_api.app.main import create_app
from contact_directory_api.app.repositories import ContactRepository
from contact_directory_api.app.schemas.contact import Contact
from contact_directory_api.app.services.contact_service import ContactService


@pytest.fixture
def db_path(tmp_path: Path, monkeypatch) -> str:
    # Point every component at a fresh database file for this test.
    path = str(tmp_path / "contacts.db")
    monkeypatch.setattr(settings, "database_url", path)
    monkeypatch.setattr(settings, "contacts_page_size", 5)
    monkeypatch.setattr(settings, "contacts_cache_enabled", False)
    init_db(path)
    return path


@pytest.fixture
def repository(db_path: str) -> ContactRepository:
    return ContactRepository(db_path)


@pytest.fixture
def service(repository: ContactRepository) -> ContactService:
    return ContactService(repository, page_size=5)


@pytest.fixture
def client(db_path: str):
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def jessica() -> Contact:
    return Contact(name="Jessica Abigail", phone="62482211", email="jessica@ngilang.com")
