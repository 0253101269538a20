"""
resthandler: Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── foo_handler:   FooHandler with deterministic ids (100, 101, ...)
    ├── make_context:  Factory for RequestContext values in unit tests
    ├── auth_headers:  Headers carrying the example shared secret
    ├── api:           API with foo_handler registered
    └── test_client:   HTTPX AsyncClient talking to api.app in-process
"""

import os

# Settings are read at import time; pin them before any resthandler import
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["AUTH_SECRET"] = "secret"
os.environ["API_PREFIX"] = "/api"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from resthandler.api import API
from resthandler.config import Settings
from resthandler.context import RequestContext
from resthandler.handlers.foo import FooHandler
from resthandler.identifiers import SequentialIdGenerator


@pytest.fixture
def foo_handler():
    """FooHandler whose created entities get ids 100, 101, 102, ..."""
    return FooHandler(id_generator=SequentialIdGenerator(start=100), secret="secret")


@pytest.fixture
def make_context():
    """
    Build a RequestContext without an HTTP request.

    Usage:
        ctx = make_context(resource_id="42")
    """
    def _make(**overrides):
        values = {"request_id": "test", "version": "v1", "resource_name": "foo"}
        values.update(overrides)
        return RequestContext(**values)
    return _make


@pytest.fixture
def auth_headers():
    return {"Authorization": "secret"}


@pytest.fixture
def api(foo_handler):
    api = API(Settings())
    api.register_resource_handler(foo_handler)
    return api


@pytest_asyncio.fixture
async def test_client(api):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server).

    Usage:
        async def test_read(test_client, auth_headers):
            response = await test_client.get("/api/v1/foo/42", headers=auth_headers)
    """
    transport = ASGITransport(app=api.app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
