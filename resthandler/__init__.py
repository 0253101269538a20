"""
resthandler: Application Package Initializer
============================================

What: A small CRUD-over-HTTP scaffold built on FastAPI, plus the "Foo"
      example resource that shows how to plug an entity into it.
Who:  Imported by uvicorn (`resthandler.main:app`), the tests, and any
      project that registers its own resource handlers.

Architecture Note:

    ┌─────────────────────────────────────┐
    │        API (registration, start)    │  ← api.py
    ├─────────────────────────────────────┤
    │     Routes (generated per handler)  │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Resource handlers (entity logic)  │  ← handlers/
    ├─────────────────────────────────────┤
    │   Payload / RequestContext / Errors │  ← request-scoped values
    └─────────────────────────────────────┘

    A handler never sees FastAPI: it receives a RequestContext and a Payload
    and raises ResourceError subclasses. The route layer translates those
    into status codes.
"""

__version__ = "1.0.0"
