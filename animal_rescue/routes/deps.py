"""Shared dependencies for animal routes.

Factory functions that build services on top of a request-scoped
database connection.
"""
from ..application.services import AdoptionService, PermissionService
from ..infrastructure.repositories import AnimalRepository, AdoptionRequestRepository


def get_permission_service() -> PermissionService:
    """Create PermissionService."""
    return PermissionService()


def get_adoption_service(db) -> AdoptionService:
    """Create AdoptionService with repositories."""
    return AdoptionService(
        animal_repository=AnimalRepository(db),
        adoption_request_repository=AdoptionRequestRepository(db),
        permission_service=get_permission_service()
    )
