"""
resthandler: Error Response Bodies
==================================

What:  Builds the single JSON error shape every failed request returns.
Who:   The global exception handlers and RequestIDMiddleware (which answers
       for exceptions no handler caught).

Body:
    {"error": <code>, "message": <str>, "details": <dict|null>, "request_id": <str>}
"""

from typing import Any, Dict, Optional

from starlette.responses import JSONResponse

REQUEST_ID_HEADER = "X-Request-ID"


def error_response(
    status_code: int,
    error: str,
    message: str,
    request_id: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "details": details,
            "request_id": request_id,
        },
        headers={REQUEST_ID_HEADER: request_id} if request_id else None,
    )


def unexpected_error_response(request_id: str) -> JSONResponse:
    """Generic 500; the exception text stays in the server log."""
    return error_response(
        status_code=500,
        error="internal_server_error",
        message="An unexpected error occurred.",
        request_id=request_id,
    )
