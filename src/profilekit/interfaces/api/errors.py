"""Map domain exceptions to HTTP responses."""

import falcon
import falcon.asgi

from profilekit.domain.exceptions import (
    BuilderStateError,
    DuplicateRoleError,
    IncompleteProfileError,
    ProfileKitError,
    UnknownRoleError,
    ValidationError,
)
from profilekit.logging import get_logger

logger = get_logger(__name__)

_STATUS_BY_ERROR: dict[type[ProfileKitError], str] = {
    UnknownRoleError: falcon.HTTP_404,
    DuplicateRoleError: falcon.HTTP_409,
    IncompleteProfileError: falcon.HTTP_400,
    BuilderStateError: falcon.HTTP_400,
    ValidationError: falcon.HTTP_400,
}


async def handle_domain_error(req: falcon.asgi.Request, resp: falcon.asgi.Response, ex, params) -> None:
    """Render a ProfileKitError as a JSON error body."""
    resp.status = _STATUS_BY_ERROR.get(type(ex), falcon.HTTP_400)
    media = {"error": str(ex)}
    if isinstance(ex, IncompleteProfileError):
        media["missing_fields"] = list(ex.missing_fields)
    resp.media = media


async def handle_unexpected_error(req: falcon.asgi.Request, resp: falcon.asgi.Response, ex, params) -> None:
    """Log and hide unexpected exceptions."""
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}
