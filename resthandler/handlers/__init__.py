# Handlers package init
"""
resthandler: Resource Handlers
==============================

What:  The objects that bind an entity type to CRUD operation logic.

Handler Inventory:
    - ResourceHandler (abstract): The full capability set the API calls
    - BaseResourceHandler: Defaults (405 for every operation, open auth)
    - FooHandler: Example binding for the "foo" resource
"""

from resthandler.handlers.base import BaseResourceHandler, Resource, ResourceHandler
from resthandler.handlers.foo import FooHandler, FooResource

__all__ = [
    "BaseResourceHandler",
    "FooHandler",
    "FooResource",
    "Resource",
    "ResourceHandler",
]
