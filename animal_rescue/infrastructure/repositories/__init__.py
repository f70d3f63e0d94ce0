# Repository Pattern Implementation
"""
Repositories abstract database operations.
Each entity has its own repository.

Usage:
    repo = AnimalRepository(db)
    animals = repo.list_all()
"""
from .base import Repository, ConnectionProtocol
from .animal_repository import AnimalRepository
from .adoption_request_repository import AdoptionRequestRepository

__all__ = [
    "Repository",
    "ConnectionProtocol",
    "AnimalRepository",
    "AdoptionRequestRepository",
]
