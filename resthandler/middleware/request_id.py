"""
resthandler: Request ID Middleware
==================================

What:  Assigns a correlation ID to each incoming request and echoes it back.
How:   Reuses an inbound X-Request-ID header or generates a short UUID,
       stores it in a ContextVar and request.state, returns it in a header.
Who:   Applied to every request; read by the access log, the exception
       handlers, and RequestContext.

Exceptions no handler caught surface here as a generic 500 that still
carries the request ID (Starlette's own fallback runs outside this
middleware, after the ID is gone).
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from resthandler.responses import REQUEST_ID_HEADER, unexpected_error_response

logger = logging.getLogger(__name__)

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client's X-Request-ID header if present
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store in the ContextVar and request.state.request_id
        4. Add to the response headers, including on unexpected errors
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                rid, request.method, request.url.path, str(exc),
                exc_info=True,
            )
            response = unexpected_error_response(rid)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
