"""Adoption service - submitting, editing and withdrawing adoption requests.

Every mutation resolves its target, runs the ownership check and only
then writes. The three steps run under a single store lock so that a
concurrent request can never slip in between the check and the write.
"""
import threading
from typing import Dict, List, Optional

import structlog
from fastapi import HTTPException

from ...infrastructure.repositories import AnimalRepository, AdoptionRequestRepository
from .permission_service import PermissionService

logger = structlog.get_logger(__name__)

# Serializes check-then-write across all worker threads
STORE_LOCK = threading.Lock()


class AdoptionService:
    """Service for animals and their adoption requests.

    Responsibilities:
    - List animals with nested adoption requests
    - Submit a request on behalf of the authenticated adopter
    - Edit/withdraw a request, only by its original adopter
    """

    def __init__(
        self,
        animal_repository: AnimalRepository,
        adoption_request_repository: AdoptionRequestRepository,
        permission_service: PermissionService,
        lock: Optional[threading.Lock] = None
    ):
        self.animal_repo = animal_repository
        self.request_repo = adoption_request_repository
        self.permissions = permission_service
        self._lock = lock or STORE_LOCK

    # ========================================================================
    # Animals
    # ========================================================================

    def list_animals(self) -> List[Dict]:
        """Get all animals ordered by id with their adoption requests."""
        return self.animal_repo.list_all()

    def get_animal(self, animal_id: int) -> Dict:
        """Get a single animal.

        Raises:
            HTTPException: 404 if the animal does not exist
        """
        animal = self.animal_repo.get_by_id(animal_id)
        if not animal:
            raise HTTPException(404, "Animal not found")
        return animal

    # ========================================================================
    # Adoption Requests
    # ========================================================================

    def submit_request(self, animal_id: int, principal: str, email: str, notes: str) -> int:
        """Create an adoption request for an animal.

        Args:
            animal_id: Animal to adopt
            principal: Authenticated adopter; stored as ``adopter_name``
            email: Contact email
            notes: Notes for the shelter

        Returns:
            New adoption request ID

        Raises:
            HTTPException: 404 if the animal does not exist
        """
        with self._lock:
            if not self.animal_repo.exists(animal_id):
                raise HTTPException(404, "Animal not found")

            request_id = self.request_repo.create(
                animal_id=animal_id,
                adopter_name=principal,
                email=email,
                notes=notes
            )

        logger.info(
            "adoption_request_created",
            animal_id=animal_id,
            request_id=request_id,
            adopter=principal
        )
        return request_id

    def edit_request(
        self,
        animal_id: int,
        request_id: int,
        principal: str,
        email: str,
        notes: str
    ) -> Dict:
        """Update email and notes of an adoption request.

        Returns:
            The updated request

        Raises:
            HTTPException: 404 if missing, 403 if principal is not the adopter
        """
        with self._lock:
            adoption_request = self._get_owned_request(animal_id, request_id, principal, "edit")
            self.request_repo.update(request_id, email=email, notes=notes)

        logger.info("adoption_request_updated", animal_id=animal_id, request_id=request_id)
        adoption_request.update(email=email, notes=notes)
        return adoption_request

    def delete_request(self, animal_id: int, request_id: int, principal: str) -> bool:
        """Withdraw an adoption request.

        Raises:
            HTTPException: 404 if missing, 403 if principal is not the adopter
        """
        with self._lock:
            self._get_owned_request(animal_id, request_id, principal, "delete")
            deleted = self.request_repo.delete(request_id)

        logger.info("adoption_request_deleted", animal_id=animal_id, request_id=request_id)
        return deleted

    # ========================================================================
    # Guards
    # ========================================================================

    def _get_owned_request(
        self,
        animal_id: int,
        request_id: int,
        principal: str,
        action: str
    ) -> Dict:
        """Resolve a request under an animal and check ownership.

        Must be called with the store lock held and before any write.
        """
        adoption_request = self.request_repo.get_by_id(request_id)
        if not adoption_request or adoption_request["animal_id"] != animal_id:
            raise HTTPException(404, "Adoption request not found")

        if not self.permissions.can_mutate(principal, adoption_request):
            logger.warning(
                "adoption_request_forbidden",
                action=action,
                animal_id=animal_id,
                request_id=request_id,
                principal=principal
            )
            raise HTTPException(403, f"Only the original adopter can {action} this request")

        return adoption_request
