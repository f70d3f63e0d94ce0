"""Permission service - decides who may change an adoption request.

Both checks are pure: they look only at their arguments and never
touch the database, so they can run before any write is attempted.
"""
from typing import Dict, Iterable

from ...config import ADOPTION_REQUEST_CAPABILITY


class PermissionService:
    """Service for adoption request access control.

    Responsibilities:
    - Coarse capability gate for mutation endpoints
    - Ownership check for editing and withdrawing requests
    """

    def can_mutate(self, principal: str, adoption_request: Dict) -> bool:
        """Check if principal may edit or delete an adoption request.

        Only the adopter who submitted the request may change it.

        Args:
            principal: Authenticated user name
            adoption_request: Request record with ``adopter_name``

        Returns:
            True if principal is the original adopter
        """
        if not principal:
            return False
        return principal == adoption_request["adopter_name"]

    def has_capability(
        self,
        authorities: Iterable[str],
        capability: str = ADOPTION_REQUEST_CAPABILITY
    ) -> bool:
        """Check if the granted authorities include a capability."""
        return capability in set(authorities or ())
