"""
resthandler: Pydantic Response Schemas
======================================

What:  Response envelopes shared by every registered resource.
How:   FastAPI serializes these and publishes them in the OpenAPI schema.
       Single-entity responses use the handler's own resource_model; only
       list reads, errors and health checks are wrapped.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ResourceListResponse(BaseModel):
    """
    What:  Body of GET /api/{version}/{name}.

    Pagination:
        next_cursor is opaque to the client. Send it back as ?cursor= to
        fetch the next page; null means this was the last page.
    """
    results: List[Any] = Field(description="Entities on this page")
    next_cursor: Optional[str] = Field(
        default=None,
        description="Cursor for the next page. Null if no more pages."
    )
    has_more: bool = Field(description="Whether more pages are available")
    messages: List[str] = Field(
        default_factory=list,
        description="Informational messages attached by the handler"
    )


class ErrorResponse(BaseModel):
    """
    What:  Error body returned for every failed request.

    Example:
        {
            "error": "not_found",
            "message": "No resource with id 7",
            "details": {"resource": "resource", "resource_id": "7"},
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    resources: List[str] = Field(description="Names of registered resources")
    uptime_seconds: float = Field(description="Seconds since service started")
