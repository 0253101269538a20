"""
resthandler: Foo Example Handler
================================

What:  A complete ResourceHandler for a toy entity, "Foo".
How:   Implements every CRUD operation plus authenticate(). There is no
       storage behind it: reads return fixed values and writes echo back
       what a database call would have produced.
Who:   Registered by resthandler.main; copied by anyone writing a handler.

Endpoints served once registered:
    POST   /api/{version}/foo         create (id is generated)
    GET    /api/{version}/foo/42      the only id that exists
    GET    /api/{version}/foo         always two entities, no next page
    PUT    /api/{version}/foo/{id}
    DELETE /api/{version}/foo/{id}

All requests need `Authorization: secret` (see Settings.auth_secret).
"""

import logging
import re
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from resthandler.config import settings
from resthandler.exceptions import NotFoundError, UnauthorizedError
from resthandler.handlers.base import BaseResourceHandler
from resthandler.identifiers import IdGenerator, RandomIdGenerator

logger = logging.getLogger(__name__)

_NUMERIC_ID = re.compile(r"[+-]?[0-9]+")


class FooResource(BaseModel):
    """Wire representation of a Foo: {"id": 42, "foobar": "hello world"}."""

    id: int = Field(description="Entity identifier")
    foobar: str = Field(description="Free-form text attribute")


class FooHandler(BaseResourceHandler):
    """
    Business logic for CRUD operations on Foo.

    Args:
        id_generator: Source of ids for created entities. Defaults to
            RandomIdGenerator().
        secret: Value the Authorization header must carry. Defaults to
            settings.auth_secret.
    """

    resource_model = FooResource

    def __init__(
        self,
        id_generator: Optional[IdGenerator] = None,
        secret: Optional[str] = None,
    ):
        self.id_generator = id_generator or RandomIdGenerator()
        self.secret = settings.auth_secret if secret is None else secret

    def resource_name(self) -> str:
        return "foo"

    async def create_resource(self, ctx, data, version) -> FooResource:
        # Make a database call here.
        created = FooResource(
            id=self.id_generator.next_id(),
            foobar=data.get_string("foobar", default=""),
        )
        logger.info("Created foo %d (version=%s)", created.id, version)
        return created

    async def read_resource(self, ctx, resource_id, version) -> FooResource:
        # Make a database call here.
        if resource_id == "42":
            return FooResource(id=42, foobar="hello world")
        raise NotFoundError(resource="resource", resource_id=resource_id)

    async def read_resource_list(
        self, ctx, limit, cursor, version
    ) -> Tuple[List[FooResource], str]:
        # Make a database call here.
        resources = [
            FooResource(id=1, foobar="hello"),
            FooResource(id=2, foobar="world"),
        ]
        return resources, ""

    async def update_resource(self, ctx, resource_id, data, version) -> FooResource:
        # Make a database call here.
        return FooResource(
            id=_parse_id(resource_id),
            foobar=data.get_string("foobar", default=""),
        )

    async def delete_resource(self, ctx, resource_id, version) -> FooResource:
        # Make a database call here.
        return FooResource(id=_parse_id(resource_id), foobar="Goodbye world")

    async def authenticate(self, headers) -> None:
        secrets = headers.getlist("Authorization")
        if secrets and secrets[0] == self.secret:
            return None
        raise UnauthorizedError("You shall not pass")


def _parse_id(resource_id: str) -> int:
    """
    Numeric value of a path id; anything but an optionally signed run of
    ASCII digits maps to 0 (so "1_000", " 5" and non-ASCII digits do too).
    """
    if not _NUMERIC_ID.fullmatch(resource_id):
        logger.warning("Non-numeric foo id %r, using 0", resource_id)
        return 0
    return int(resource_id)
