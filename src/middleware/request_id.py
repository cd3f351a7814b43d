"""Request ID middleware.

Every response carries an ``X-Request-Id`` header.  When the ingress controller
already stamped the request with a UUID (ingress-nginx sets ``X-Request-ID``),
that value is reused so proxy and application logs line up; otherwise a fresh
UUID4 is generated.  The ID is also stored in a ``ContextVar`` so the access
logger can read it without touching the raw request object.

Ordering note
-------------
Add this middleware *last* via ``app.add_middleware`` so it is invoked *outermost*
(first-in, last-out) and covers all other layers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-Id"

# Defaults to "" so consumers never receive ``None``.
REQUEST_ID_CTX: ContextVar[str] = ContextVar("request_id", default="")


def _inbound_request_id(request: Request) -> str | None:
    """Return the caller-supplied request ID if it is a well-formed UUID."""
    raw = request.headers.get(REQUEST_ID_HEADER)
    if not raw:
        return None
    try:
        return str(uuid.UUID(raw))
    except ValueError:
        return None


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach an ``X-Request-Id`` header to every HTTP response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _inbound_request_id(request) or str(uuid.uuid4())
        token = REQUEST_ID_CTX.set(request_id)
        try:
            response: Response = await call_next(request)
        finally:
            REQUEST_ID_CTX.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
