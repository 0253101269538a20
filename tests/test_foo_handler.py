"""
resthandler: Foo Handler Unit Tests
===================================

What:  Calls FooHandler operations directly, without HTTP.

What we test:
    ✅ Read of id "42" returns the fixed entity; other ids raise NotFoundError
    ✅ List always returns the same two entities and an empty cursor
    ✅ Create uses the injected id generator and the payload's foobar
    ✅ Update/Delete echo the numeric id
    ✅ Authenticate accepts only the first Authorization value "secret"
"""

import random

import pytest
from starlette.datastructures import Headers

from resthandler.exceptions import NotFoundError, UnauthorizedError
from resthandler.handlers.foo import FooHandler, FooResource
from resthandler.identifiers import RandomIdGenerator
from resthandler.payload import Payload


def test_resource_name(foo_handler):
    assert foo_handler.resource_name() == "foo"


class TestFooRead:
    """Tests for read_resource."""

    @pytest.mark.asyncio
    async def test_read_known_id(self, foo_handler, make_context):
        result = await foo_handler.read_resource(make_context(resource_id="42"), "42", "v1")
        assert result == FooResource(id=42, foobar="hello world")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("resource_id", ["1", "43", "abc", ""])
    async def test_read_unknown_id_raises(self, foo_handler, make_context, resource_id):
        with pytest.raises(NotFoundError) as excinfo:
            await foo_handler.read_resource(make_context(), resource_id, "v1")
        assert excinfo.value.message == f"No resource with id {resource_id}"
        assert excinfo.value.context["resource_id"] == resource_id


class TestFooList:
    """Tests for read_resource_list."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [1, 2, 100])
    async def test_list_ignores_limit(self, foo_handler, make_context, limit):
        resources, cursor = await foo_handler.read_resource_list(
            make_context(limit=limit), limit, "", "v1"
        )
        assert resources == [
            FooResource(id=1, foobar="hello"),
            FooResource(id=2, foobar="world"),
        ]
        assert cursor == ""

    @pytest.mark.asyncio
    async def test_list_ignores_cursor(self, foo_handler, make_context):
        resources, cursor = await foo_handler.read_resource_list(make_context(), 10, "abc", "v2")
        assert len(resources) == 2
        assert cursor == ""


class TestFooWrites:
    """Tests for create_resource, update_resource and delete_resource."""

    @pytest.mark.asyncio
    async def test_create_uses_payload_and_generator(self, foo_handler, make_context):
        first = await foo_handler.create_resource(make_context(), Payload({"foobar": "hi"}), "v1")
        second = await foo_handler.create_resource(make_context(), Payload({"foobar": "yo"}), "v1")

        assert first == FooResource(id=100, foobar="hi")
        assert second == FooResource(id=101, foobar="yo")

    @pytest.mark.asyncio
    async def test_create_without_foobar_uses_empty_string(self, foo_handler, make_context):
        created = await foo_handler.create_resource(make_context(), Payload(), "v1")
        assert created.foobar == ""

    @pytest.mark.asyncio
    async def test_create_with_default_generator_assigns_id(self, make_context):
        handler = FooHandler(id_generator=RandomIdGenerator(random.Random(7)))
        created = await handler.create_resource(make_context(), Payload({"foobar": "x"}), "v1")
        assert isinstance(created.id, int)
        assert created.id >= 0

    @pytest.mark.asyncio
    async def test_update_echoes_numeric_id(self, foo_handler, make_context):
        updated = await foo_handler.update_resource(
            make_context(), "17", Payload({"foobar": "changed"}), "v1"
        )
        assert updated == FooResource(id=17, foobar="changed")

    @pytest.mark.asyncio
    async def test_delete_echoes_numeric_id(self, foo_handler, make_context):
        deleted = await foo_handler.delete_resource(make_context(), "9", "v1")
        assert deleted == FooResource(id=9, foobar="Goodbye world")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("resource_id", ["1_000", " 5", "5 ", "٣", "1.5", "+", ""])
    async def test_loose_integer_forms_map_to_zero(self, foo_handler, make_context, resource_id):
        deleted = await foo_handler.delete_resource(make_context(), resource_id, "v1")
        assert deleted.id == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("resource_id,expected", [("+7", 7), ("-3", -3), ("007", 7)])
    async def test_signed_ids_parse(self, foo_handler, make_context, resource_id, expected):
        deleted = await foo_handler.delete_resource(make_context(), resource_id, "v1")
        assert deleted.id == expected

    @pytest.mark.asyncio
    async def test_non_numeric_id_maps_to_zero(self, foo_handler, make_context):
        deleted = await foo_handler.delete_resource(make_context(), "nine", "v1")
        updated = await foo_handler.update_resource(make_context(), "x1", Payload(), "v1")
        assert deleted.id == 0
        assert updated.id == 0


class TestFooAuthenticate:
    """Tests for the shared-secret authenticate hook."""

    @pytest.mark.asyncio
    async def test_correct_secret_accepted(self, foo_handler):
        assert await foo_handler.authenticate(Headers({"Authorization": "secret"})) is None

    @pytest.mark.asyncio
    async def test_header_name_is_case_insensitive(self, foo_handler):
        assert await foo_handler.authenticate(Headers({"authorization": "secret"})) is None

    @pytest.mark.asyncio
    async def test_missing_header_rejected(self, foo_handler):
        with pytest.raises(UnauthorizedError, match="You shall not pass"):
            await foo_handler.authenticate(Headers({}))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["Secret", "secret ", "Bearer secret", ""])
    async def test_wrong_secret_rejected(self, foo_handler, value):
        with pytest.raises(UnauthorizedError):
            await foo_handler.authenticate(Headers({"Authorization": value}))

    @pytest.mark.asyncio
    async def test_only_first_value_counts(self, foo_handler):
        headers = Headers(raw=[(b"authorization", b"nope"), (b"authorization", b"secret")])
        with pytest.raises(UnauthorizedError):
            await foo_handler.authenticate(headers)

    @pytest.mark.asyncio
    async def test_secret_is_configurable(self):
        handler = FooHandler(secret="s3cr3t")
        assert await handler.authenticate(Headers({"Authorization": "s3cr3t"})) is None
        with pytest.raises(UnauthorizedError):
            await handler.authenticate(Headers({"Authorization": "secret"}))
