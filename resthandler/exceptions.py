"""
resthandler: Exception Hierarchy
================================

What:  Errors a resource handler raises to signal a failed operation.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in application.py) catch these
       and return structured JSON error responses with the right status code.
Who:   Raised by handlers, Payload accessors and the API registry;
       caught by the global handlers.

Exception Hierarchy:
    ResourceError (base)            → 500 Internal Server Error
    ├── ValidationError             → 400 Bad Request
    ├── UnauthorizedError           → 401 Unauthorized
    ├── NotFoundError               → 404 Not Found
    └── MethodNotAllowedError       → 405 Method Not Allowed

Handlers return values on success and raise on failure; they never build
HTTP responses themselves.
"""

from typing import Any, Dict, Optional


class ResourceError(Exception):
    """
    Base exception for all resource handler errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; returned only for 4xx errors)
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ResourceError):
    """
    Raised when client input cannot be used.

    When:    The body is not a JSON object, or a payload field is missing
             or has the wrong type.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Field 'foobar' must be a string",
            "details": {"field": "foobar", "expected": "string"}
        }
    """

    status_code = 400
    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnauthorizedError(ResourceError):
    """
    Raised by a handler's authenticate hook to reject a request.

    The message is sent back with the response, so it must not echo the
    credential that was presented.
    """

    status_code = 401
    error_code = "unauthorized"

    def __init__(
        self,
        message: str = "Unauthorized request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(ResourceError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/{version}/{name}/{id} with an unknown id, or any other
             operation the handler cannot resolve to an entity.
    HTTP:    404 Not Found
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"No {resource} found"
            if resource_id is not None:
                message = f"No {resource} with id {resource_id}"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class MethodNotAllowedError(ResourceError):
    """
    Raised when a handler does not implement the requested operation.

    BaseResourceHandler raises this from every CRUD method, so a handler only
    overrides the operations it supports.
    """

    status_code = 405
    error_code = "method_not_allowed"

    def __init__(
        self,
        resource: str = "resource",
        operation: str = "operation",
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"Operation '{operation}' is not supported by resource '{resource}'"
        ctx = context or {}
        ctx["resource"] = resource
        ctx["operation"] = operation
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.operation = operation
