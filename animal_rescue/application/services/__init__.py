"""Application services - business logic layer."""

from .permission_service import PermissionService
from .adoption_service import AdoptionService

__all__ = [
    "PermissionService",
    "AdoptionService",
]
