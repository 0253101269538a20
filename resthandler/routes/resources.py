"""
resthandler: Resource Route Builder
===================================

What:  Generates the five CRUD routes for one registered handler.
How:   Builds an APIRouter whose prefix is {api_prefix}/{version}/{name}.
       Each endpoint turns the Starlette request into a RequestContext (and
       a Payload for writes), awaits the matching handler operation, and
       returns its result. Errors raised by the handler propagate to the
       global exception handlers.
Who:   Called by create_app() once per handler.

Generated routes (handler "foo", default prefix):
    POST   /api/{version}/foo                  201  create_resource
    GET    /api/{version}/foo                  200  read_resource_list
    GET    /api/{version}/foo/{resource_id}    200  read_resource
    PUT    /api/{version}/foo/{resource_id}    200  update_resource
    DELETE /api/{version}/foo/{resource_id}    200  delete_resource

Every route depends on handler.authenticate(), so an unauthenticated request
never reaches the operation.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.encoders import jsonable_encoder

from resthandler.config import Settings, settings
from resthandler.context import RequestContext
from resthandler.exceptions import NotFoundError
from resthandler.handlers.base import ResourceHandler
from resthandler.payload import Payload
from resthandler.schemas.resource import ErrorResponse, ResourceListResponse

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"description": "Malformed request body", "model": ErrorResponse},
    401: {"description": "Authentication failed", "model": ErrorResponse},
    405: {"description": "Operation not supported", "model": ErrorResponse},
}
_NOT_FOUND = {404: {"description": "Resource not found", "model": ErrorResponse}}


def build_resource_router(handler: ResourceHandler, config: Settings = settings) -> APIRouter:
    """
    Create the router serving `handler`.

    Args:
        handler: The registered handler; its resource_name() becomes the
                 last prefix segment.
        config:  Settings providing api_prefix and the page-size bounds.
    """
    name = handler.resource_name()
    entity_model = handler.resource_model

    async def authenticate(request: Request) -> None:
        await handler.authenticate(request.headers)

    router = APIRouter(
        prefix=f"{config.api_prefix}/{{version}}/{name}",
        tags=[name],
        dependencies=[Depends(authenticate)],
        responses=_ERROR_RESPONSES,
    )

    @router.post(
        "",
        status_code=201,
        response_model=entity_model,
        summary=f"Create a {name}",
    )
    async def create_resource(request: Request, version: str):
        ctx = RequestContext.from_request(request, resource_name=name, version=version)
        data = Payload.from_body(await request.body())
        logger.debug("[%s] create %s (version=%s)", ctx.request_id, name, version)
        return await handler.create_resource(ctx, data, version)

    @router.get(
        "",
        response_model=ResourceListResponse,
        summary=f"List {name} resources",
    )
    async def read_resource_list(
        request: Request,
        version: str,
        limit: int = Query(
            default=config.default_page_limit, ge=1, le=config.max_page_limit,
            description="Maximum number of entities to return",
        ),
        cursor: str = Query(
            default="",
            description="Cursor from the previous page's next_cursor. Omit for the first page.",
        ),
    ) -> ResourceListResponse:
        ctx = RequestContext.from_request(
            request, resource_name=name, version=version, limit=limit, cursor=cursor
        )
        logger.debug(
            "[%s] list %s (version=%s, limit=%d, cursor=%r)",
            ctx.request_id, name, version, limit, cursor,
        )
        resources, next_cursor = await handler.read_resource_list(ctx, limit, cursor, version)
        return ResourceListResponse(
            results=jsonable_encoder(list(resources)),
            next_cursor=next_cursor or None,
            has_more=bool(next_cursor),
            messages=list(ctx.messages),
        )

    @router.get(
        "/{resource_id}",
        response_model=entity_model,
        responses=_NOT_FOUND,
        summary=f"Read a {name} by id",
    )
    async def read_resource(request: Request, version: str, resource_id: str):
        ctx = RequestContext.from_request(
            request, resource_name=name, version=version, resource_id=resource_id
        )
        logger.debug("[%s] read %s %s (version=%s)", ctx.request_id, name, resource_id, version)
        resource = await handler.read_resource(ctx, resource_id, version)
        if resource is None:
            raise NotFoundError(resource=name, resource_id=resource_id)
        return resource

    @router.put(
        "/{resource_id}",
        response_model=entity_model,
        responses=_NOT_FOUND,
        summary=f"Update a {name}",
    )
    async def update_resource(request: Request, version: str, resource_id: str):
        ctx = RequestContext.from_request(
            request, resource_name=name, version=version, resource_id=resource_id
        )
        data = Payload.from_body(await request.body())
        logger.debug("[%s] update %s %s (version=%s)", ctx.request_id, name, resource_id, version)
        return await handler.update_resource(ctx, resource_id, data, version)

    @router.delete(
        "/{resource_id}",
        response_model=entity_model,
        responses=_NOT_FOUND,
        summary=f"Delete a {name}",
    )
    async def delete_resource(request: Request, version: str, resource_id: str):
        ctx = RequestContext.from_request(
            request, resource_name=name, version=version, resource_id=resource_id
        )
        logger.debug("[%s] delete %s %s (version=%s)", ctx.request_id, name, resource_id, version)
        return await handler.delete_resource(ctx, resource_id, version)

    return router
