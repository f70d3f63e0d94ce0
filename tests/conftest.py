"""Test configuration and fixtures for the Animal Rescue backend.

This module provides isolated test environments:
- Temporary SQLite database, schema and seed data per test
- Header helper that mimics the identity forwarded by the SSO gateway
"""
import os
from pathlib import Path
from typing import Callable, Dict, Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment BEFORE importing app modules
os.environ["RESCUE_SEED_DATA"] = "true"
os.environ["RESCUE_LOG_LEVEL"] = "WARNING"


@pytest.fixture(scope="function")
def fresh_database(tmp_path: Path, monkeypatch) -> Generator[Path, None, None]:
    """Point the app at a fresh database file with schema and seed data."""
    import animal_rescue.database as db_module

    db_path = tmp_path / "test.db"
    monkeypatch.setattr(db_module, "DATABASE_PATH", db_path)

    db_module.init_db()
    db_module.seed_db()

    yield db_path


@pytest.fixture(scope="function")
def db_connection(fresh_database: Path):
    """Direct database connection for arranging and asserting state."""
    from animal_rescue.database import create_connection

    conn = create_connection()
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="function")
def client(fresh_database: Path) -> Generator[TestClient, None, None]:
    """Create test client against the isolated database.

    Usage:
        def test_something(client):
            response = client.get("/animals")
            assert response.status_code == 200
    """
    from animal_rescue.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> Callable[..., Dict[str, str]]:
    """Build gateway identity headers.

    Usage:
        client.post(url, json=body, headers=auth_headers("test-user-1", "adoption.request"))
    """
    from animal_rescue.config import USER_HEADER, AUTHORITIES_HEADER

    def _headers(username: str, *authorities: str) -> Dict[str, str]:
        headers = {USER_HEADER: username}
        if authorities:
            headers[AUTHORITIES_HEADER] = ",".join(authorities)
        return headers

    return _headers


@pytest.fixture
def adopter_headers(auth_headers) -> Callable[[str], Dict[str, str]]:
    """Headers for a user holding the adoption.request capability."""
    from animal_rescue.config import ADOPTION_REQUEST_CAPABILITY

    def _headers(username: str) -> Dict[str, str]:
        return auth_headers(username, ADOPTION_REQUEST_CAPABILITY)

    return _headers
