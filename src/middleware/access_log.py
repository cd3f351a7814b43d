"""Structured JSON access logging middleware.

Emits one ``INFO``-level log record per request containing:

    ``method``, ``path``, ``status``, ``duration_ms``, ``request_id``,
    ``remote_addr``, ``hostname``

``remote_addr`` is the client ``host:port`` as seen by the ASGI server and
``hostname`` is the pod that served the request, so a log line alone answers
"which replica handled this?".

The ``request_id`` field is populated from :data:`~src.middleware.request_id.REQUEST_ID_CTX`
so it matches the ``X-Request-Id`` header when :class:`~src.middleware.request_id.RequestIdMiddleware`
is wired outermost.
"""

import json
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.middleware.request_id import REQUEST_ID_CTX
from src.runtime import resolve_hostname

logger = logging.getLogger(__name__)


def _remote_addr(request: Request) -> str:
    if request.client is None:
        return ""
    return f"{request.client.host}:{request.client.port}"


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Emit a structured JSON access-log record after every HTTP request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response: Response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.info(
            json.dumps(
                {
                    "method": request.method,
                    "path": request.url.path,
                    "status": response.status_code,
                    "duration_ms": duration_ms,
                    "request_id": REQUEST_ID_CTX.get(),
                    "remote_addr": _remote_addr(request),
                    "hostname": resolve_hostname(),
                }
            )
        )
        return response
