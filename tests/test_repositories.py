"""Tests for repositories against a real SQLite database."""
import sqlite3

import pytest

from animal_rescue.infrastructure.repositories import AnimalRepository, AdoptionRequestRepository


@pytest.fixture
def animal_repo(db_connection):
    return AnimalRepository(db_connection)


@pytest.fixture
def request_repo(db_connection):
    return AdoptionRequestRepository(db_connection)


class TestAnimalRepository:

    def test_list_all_returns_seeded_animals_in_id_order(self, animal_repo):
        animals = animal_repo.list_all()

        assert len(animals) == 10
        assert [a["id"] for a in animals] == list(range(1, 11))
        assert animals[0]["name"] == "Chocobo"

    def test_list_all_nests_requests_in_creation_order(self, animal_repo):
        chocobo = animal_repo.list_all()[0]

        assert [r["adopter_name"] for r in chocobo["adoption_requests"]] == ["alice", "bob", "carol"]

    def test_animal_without_requests_has_empty_list(self, animal_repo):
        assert animal_repo.get_by_id(2)["adoption_requests"] == []

    def test_get_by_id_missing(self, animal_repo):
        assert animal_repo.get_by_id(999) is None

    def test_exists_and_count(self, animal_repo):
        assert animal_repo.exists(1) is True
        assert animal_repo.exists(999) is False
        assert animal_repo.count() == 10


class TestAdoptionRequestRepository:

    def test_create_appends_to_animal(self, animal_repo, request_repo):
        request_id = request_repo.create(1, "test-user-1", "a@email.com", "Yaaas!")

        requests = animal_repo.get_by_id(1)["adoption_requests"]
        assert requests[-1]["id"] == request_id
        assert requests[-1]["adopter_name"] == "test-user-1"

    def test_create_generates_unique_ids(self, request_repo):
        first = request_repo.create(1, "test-user-1", "a@email.com", "one")
        second = request_repo.create(1, "test-user-1", "a@email.com", "two")

        assert first != second

    def test_create_for_missing_animal_is_rejected(self, request_repo):
        with pytest.raises(sqlite3.IntegrityError):
            request_repo.create(999, "test-user-1", "a@email.com", "Yaaas!")

    def test_update_keeps_adopter_and_animal(self, request_repo):
        assert request_repo.update(2, email="new@email.com", notes="updated") is True

        updated = request_repo.get_by_id(2)
        assert updated["email"] == "new@email.com"
        assert updated["notes"] == "updated"
        assert updated["adopter_name"] == "bob"
        assert updated["animal_id"] == 1

    def test_update_missing_returns_false(self, request_repo):
        assert request_repo.update(999, email="x", notes="y") is False

    def test_delete_removes_only_that_request(self, request_repo):
        before = [r["id"] for r in request_repo.get_by_animal(1)]

        assert request_repo.delete(2) is True

        assert request_repo.get_by_id(2) is None
        assert [r["id"] for r in request_repo.get_by_animal(1)] == [i for i in before if i != 2]

    def test_delete_missing_returns_false(self, request_repo):
        assert request_repo.delete(999) is False
