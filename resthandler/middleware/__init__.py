# Middleware package init
"""
resthandler: Middleware Package
===============================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route

    Request ID runs first so the access log and the exception handlers can
    tag their output with the same correlation ID.
"""
