"""
resthandler: Request Context
============================

What:  Per-request information handed to every handler operation.
How:   Built by the route layer from the incoming Starlette request before
       the handler is called; discarded when the response is sent.
Who:   Read by handlers (query parameters, pagination, version, headers).

The context is read-only from the handler's point of view, except for
`messages`, which a handler may append to with add_message(). Messages are
returned to the client in list responses.
"""

from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from starlette.requests import Request

from resthandler.middleware.request_id import request_id_var


@dataclass(frozen=True)
class RequestContext:
    """
    Attributes:
        request_id:    Correlation ID from RequestIDMiddleware
        version:       The {version} path segment, passed through verbatim
        resource_name: Name of the handler the request was routed to
        resource_id:   The {resource_id} path segment, None for collection routes
        limit:         Requested page size (list reads only)
        cursor:        Opaque pagination cursor, "" for the first page
        query_params:  All query string parameters (first value per key)
        headers:       Inbound request headers
    """

    request_id: str
    version: str
    resource_name: str
    resource_id: Optional[str] = None
    limit: Optional[int] = None
    cursor: str = ""
    query_params: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    messages: List[str] = field(default_factory=list)

    @classmethod
    def from_request(
        cls,
        request: Request,
        resource_name: str,
        version: str,
        resource_id: Optional[str] = None,
        limit: Optional[int] = None,
        cursor: str = "",
    ) -> "RequestContext":
        return cls(
            request_id=request_id_var.get(""),
            version=version,
            resource_name=resource_name,
            resource_id=resource_id,
            limit=limit,
            cursor=cursor,
            query_params=dict(request.query_params),
            headers=request.headers,
        )

    def add_message(self, message: str) -> None:
        """Attach an informational message to the response."""
        self.messages.append(message)
