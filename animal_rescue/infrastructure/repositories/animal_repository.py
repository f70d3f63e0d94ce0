"""Animal repository - read access to the rescued animal catalogue.

Animals are seeded at startup and never created through the API.
Each animal is returned together with its adoption requests in
creation order.
"""
from typing import Optional, List, Dict

from .base import Repository


class AnimalRepository(Repository):
    """Repository for animals and their nested adoption requests."""

    def list_all(self) -> List[Dict]:
        """Get all animals ordered by id, each with its adoption requests."""
        cursor = self._execute(
            """SELECT id, name, avatar_url, description, rescue_date
               FROM animals
               ORDER BY id"""
        )
        animals = [self._row_to_dict(row) for row in cursor.fetchall()]

        requests_by_animal: Dict[int, List[Dict]] = {}
        cursor = self._execute(
            """SELECT id, animal_id, adopter_name, email, notes
               FROM adoption_requests
               ORDER BY id"""
        )
        for row in cursor.fetchall():
            requests_by_animal.setdefault(row["animal_id"], []).append(dict(row))

        for animal in animals:
            animal["adoption_requests"] = requests_by_animal.get(animal["id"], [])
        return animals

    def get_by_id(self, animal_id: int) -> Optional[Dict]:
        """Get animal by ID with its adoption requests."""
        cursor = self._execute(
            """SELECT id, name, avatar_url, description, rescue_date
               FROM animals WHERE id = ?""",
            (animal_id,)
        )
        animal = self._row_to_dict(cursor.fetchone())
        if not animal:
            return None

        cursor = self._execute(
            """SELECT id, animal_id, adopter_name, email, notes
               FROM adoption_requests
               WHERE animal_id = ?
               ORDER BY id""",
            (animal_id,)
        )
        animal["adoption_requests"] = [dict(row) for row in cursor.fetchall()]
        return animal

    def exists(self, animal_id: int) -> bool:
        """Check whether an animal with this ID exists."""
        cursor = self._execute(
            "SELECT 1 FROM animals WHERE id = ?",
            (animal_id,)
        )
        return cursor.fetchone() is not None

    def count(self) -> int:
        """Count animals in the catalogue."""
        cursor = self._execute("SELECT COUNT(*) as count FROM animals")
        row = cursor.fetchone()
        return row["count"] if row else 0
