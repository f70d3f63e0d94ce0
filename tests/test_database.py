"""Schema and seed data tests."""
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

import animal_rescue.database as db_module
from animal_rescue.infrastructure.repositories import AnimalRepository


@pytest.fixture
def empty_database(tmp_path: Path, monkeypatch) -> Path:
    """Schema only, no seed data."""
    db_path = tmp_path / "seed.db"
    monkeypatch.setattr(db_module, "DATABASE_PATH", db_path)
    db_module.init_db()
    return db_path


def count_rows(table: str) -> int:
    conn = db_module.create_connection()
    try:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    finally:
        conn.close()


class TestSeedDb:

    def test_seed_populates_empty_database(self, empty_database):
        assert db_module.seed_db() is True

        conn = db_module.create_connection()
        try:
            animal = AnimalRepository(conn).get_by_id(1)
        finally:
            conn.close()
        assert animal["name"] == "Chocobo"
        assert count_rows("animals") == len(db_module.SEED_ANIMALS)
        assert count_rows("adoption_requests") == len(db_module.SEED_ADOPTION_REQUESTS)

    def test_seed_is_idempotent(self, empty_database):
        assert db_module.seed_db() is True
        assert db_module.seed_db() is False

        assert count_rows("animals") == len(db_module.SEED_ANIMALS)
        assert count_rows("adoption_requests") == len(db_module.SEED_ADOPTION_REQUESTS)

    def test_concurrent_seeding_inserts_once(self, empty_database):
        """Workers starting together must not duplicate the catalogue."""
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: db_module.seed_db(), range(4)))

        assert results.count(True) == 1
        assert count_rows("animals") == len(db_module.SEED_ANIMALS)
        assert count_rows("adoption_requests") == len(db_module.SEED_ADOPTION_REQUESTS)
