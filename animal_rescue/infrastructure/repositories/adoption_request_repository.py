"""Adoption request repository.

A request always belongs to exactly one animal. ``animal_id`` and
``adopter_name`` are written once on insert and never updated.
"""
from typing import Optional, List, Dict

from .base import Repository


class AdoptionRequestRepository(Repository):
    """Repository for adoption requests."""

    def create(self, animal_id: int, adopter_name: str, email: str, notes: str) -> int:
        """Create a new adoption request for an animal.

        Args:
            animal_id: Animal the request is for (must exist)
            adopter_name: Principal submitting the request
            email: Contact email
            notes: Free-form notes from the adopter

        Returns:
            New adoption request ID

        Raises:
            sqlite3.IntegrityError: If the animal does not exist
        """
        cursor = self._execute(
            """INSERT INTO adoption_requests (animal_id, adopter_name, email, notes)
               VALUES (?, ?, ?, ?)""",
            (animal_id, adopter_name, email, notes)
        )
        self._commit()
        return cursor.lastrowid

    def get_by_id(self, request_id: int) -> Optional[Dict]:
        """Get adoption request by ID."""
        cursor = self._execute(
            """SELECT id, animal_id, adopter_name, email, notes
               FROM adoption_requests WHERE id = ?""",
            (request_id,)
        )
        return self._row_to_dict(cursor.fetchone())

    def get_by_animal(self, animal_id: int) -> List[Dict]:
        """Get adoption requests for an animal in creation order."""
        cursor = self._execute(
            """SELECT id, animal_id, adopter_name, email, notes
               FROM adoption_requests
               WHERE animal_id = ?
               ORDER BY id""",
            (animal_id,)
        )
        return [self._row_to_dict(row) for row in cursor.fetchall()]

    def update(self, request_id: int, email: str, notes: str) -> bool:
        """Overwrite email and notes of a request.

        Returns:
            True if a request was updated
        """
        cursor = self._execute(
            "UPDATE adoption_requests SET email = ?, notes = ? WHERE id = ?",
            (email, notes, request_id)
        )
        self._commit()
        return cursor.rowcount > 0

    def delete(self, request_id: int) -> bool:
        """Delete a request.

        Returns:
            True if a request was deleted
        """
        cursor = self._execute(
            "DELETE FROM adoption_requests WHERE id = ?",
            (request_id,)
        )
        self._commit()
        return cursor.rowcount > 0
