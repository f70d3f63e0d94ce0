"""Shared FastAPI dependencies."""
from fastapi import Request, HTTPException

from .application.services import PermissionService
from .config import ADOPTION_REQUEST_CAPABILITY


def get_current_user(request: Request) -> dict | None:
    """Get current user from request state."""
    return getattr(request.state, "user", None)


def require_user(request: Request) -> dict:
    """Require authenticated user, raise 401 if not authenticated."""
    user = get_current_user(request)
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def require_capability(request: Request, capability: str = ADOPTION_REQUEST_CAPABILITY) -> dict:
    """Require authenticated user holding a capability.

    Raises 401 if not authenticated, 403 if the capability is missing.
    """
    user = require_user(request)
    if not PermissionService().has_capability(user["authorities"], capability):
        raise HTTPException(
            status_code=403,
            detail=f"Missing required authority: {capability}"
        )
    return user


def require_adopter(request: Request) -> dict:
    """Route dependency for adoption request mutations.

    Declared with ``Depends`` so the identity gate runs before the
    request body is validated.
    """
    return require_capability(request, ADOPTION_REQUEST_CAPABILITY)
