"""
Pytest configuration for Partifuller.

Provides fixtures for:
- A migrated SQLite database in a temporary directory
- Store, service and renderer instances wired to that database
- Settings and a TestClient for HTTP tests
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from partifuller.app.core.config import Settings
from partifuller.app.core.db import Database, init_db
from partifuller.app.main import create_app
from partifuller.app.services.renderer import ViewRenderer
from partifuller.app.services.rsvp_service import RsvpService
from partifuller.app.services.rsvp_store import RsvpStore


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "rsvps.db"


@pytest.fixture
def database(db_path: Path) -> Database:
    """Database handle with all migrations applied."""
    database = Database(str(db_path))
    init_db(database)
    return database


@pytest.fixture
def store(database: Database) -> RsvpStore:
    return RsvpStore(database)


@pytest.fixture
def service(store: RsvpStore) -> RsvpService:
    return RsvpService(store)


@pytest.fixture
def test_settings(db_path: Path) -> Settings:
    """Settings with the database redirected to the temporary directory."""
    return Settings(database_url=str(db_path), log_level="DEBUG")


@pytest.fixture
def renderer(test_settings: Settings) -> ViewRenderer:
    return ViewRenderer(test_settings.templates_dir)


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """TestClient whose lifespan has run, so the schema exists."""
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client
