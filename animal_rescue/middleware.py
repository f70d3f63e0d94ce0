"""Application middleware."""
import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from .config import USER_HEADER, AUTHORITIES_HEADER

logger = structlog.get_logger(__name__)


def parse_authorities(raw: str | None) -> frozenset[str]:
    """Split a comma-separated authority header into a set."""
    if not raw:
        return frozenset()
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


class AuthMiddleware(BaseHTTPMiddleware):
    """Attach the identity forwarded by the SSO gateway to the request.

    The gateway authenticates the user and passes the principal name and
    granted authorities as headers. Requests without a principal continue
    anonymously; route dependencies decide whether that is allowed.
    """

    async def dispatch(self, request: Request, call_next):
        username = (request.headers.get(USER_HEADER) or "").strip()

        if username:
            request.state.user = {
                "username": username,
                "authorities": parse_authorities(request.headers.get(AUTHORITIES_HEADER))
            }
        else:
            request.state.user = None

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            method=request.method,
            path=request.url.path,
            principal=username or None
        )

        response = await call_next(request)

        logger.info("request_completed", status_code=response.status_code)
        return response
