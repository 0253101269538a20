"""
resthandler: Resource Handler Interface
=======================================

What:  Abstract base class defining the contract between the API and the
       code that implements a resource.
How:   A concrete handler subclasses BaseResourceHandler, returns its name
       from resource_name(), and overrides the CRUD operations it supports.
Who:   Registered with API.register_resource_handler(); called by the
       routes generated in routes/resources.py.
When:  Once per inbound request, after authenticate() has accepted it.

Route mapping (for a handler named "foo"):
    POST   /api/{version}/foo        → create_resource
    GET    /api/{version}/foo/{id}   → read_resource
    GET    /api/{version}/foo        → read_resource_list
    PUT    /api/{version}/foo/{id}   → update_resource
    DELETE /api/{version}/foo/{id}   → delete_resource

Every operation is request-scoped: a handler keeps no per-request state
between calls.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple, Type

from pydantic import BaseModel
from starlette.datastructures import Headers

from resthandler.context import RequestContext
from resthandler.exceptions import MethodNotAllowedError
from resthandler.payload import Payload

# An entity returned by a handler: a Pydantic model or any JSON-serialisable value
Resource = Any


class ResourceHandler(ABC):
    """
    Full capability set a handler must provide.

    Contract:
        - Operations return the entity (or entities) on success.
        - Failures are raised as ResourceError subclasses; the route layer
          turns them into HTTP status codes.
        - authenticate() returns None to accept a request and raises
          UnauthorizedError to reject it.

    Attributes:
        resource_model: Optional Pydantic model describing the entity. Used
            as the response model for single-entity routes in the OpenAPI
            schema. Leave as None to return handler values untouched.
    """

    resource_model: Optional[Type[BaseModel]] = None

    @abstractmethod
    def resource_name(self) -> str:
        """Identifier used in the endpoint URLs, e.g. "foo"."""
        ...

    @abstractmethod
    async def create_resource(
        self, ctx: RequestContext, data: Payload, version: str
    ) -> Resource:
        """POST /api/{version}/{name}. Returns the newly created entity."""
        ...

    @abstractmethod
    async def read_resource(
        self, ctx: RequestContext, resource_id: str, version: str
    ) -> Resource:
        """
        GET /api/{version}/{name}/{id}.

        Raises:
            NotFoundError: No entity has the given id.
        """
        ...

    @abstractmethod
    async def read_resource_list(
        self, ctx: RequestContext, limit: int, cursor: str, version: str
    ) -> Tuple[List[Resource], str]:
        """
        GET /api/{version}/{name}.

        Returns:
            (entities, next_cursor). next_cursor is "" when there are no
            further pages; otherwise the client sends it back as ?cursor=.
        """
        ...

    @abstractmethod
    async def update_resource(
        self, ctx: RequestContext, resource_id: str, data: Payload, version: str
    ) -> Resource:
        """PUT /api/{version}/{name}/{id}. Returns the updated entity."""
        ...

    @abstractmethod
    async def delete_resource(
        self, ctx: RequestContext, resource_id: str, version: str
    ) -> Resource:
        """DELETE /api/{version}/{name}/{id}. Returns the deleted entity."""
        ...

    @abstractmethod
    async def authenticate(self, headers: Headers) -> None:
        """
        Accept or reject an inbound request before any operation runs.

        Raises:
            UnauthorizedError: The request carries no acceptable credential.
                The error message is sent back with the 401 response.
        """
        ...


class BaseResourceHandler(ResourceHandler):
    """
    Handler with default behavior for everything except resource_name().

    Defaults:
        - Every CRUD operation raises MethodNotAllowedError (HTTP 405).
        - authenticate() accepts all requests.
    """

    async def create_resource(self, ctx, data, version):
        raise MethodNotAllowedError(resource=self.resource_name(), operation="create")

    async def read_resource(self, ctx, resource_id, version):
        raise MethodNotAllowedError(resource=self.resource_name(), operation="read")

    async def read_resource_list(self, ctx, limit, cursor, version):
        raise MethodNotAllowedError(resource=self.resource_name(), operation="list")

    async def update_resource(self, ctx, resource_id, data, version):
        raise MethodNotAllowedError(resource=self.resource_name(), operation="update")

    async def delete_resource(self, ctx, resource_id, version):
        raise MethodNotAllowedError(resource=self.resource_name(), operation="delete")

    async def authenticate(self, headers):
        return None
