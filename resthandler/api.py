"""
resthandler: API Registry and Server Lifecycle
==============================================

What:  The object an application builds, registers handlers with, and starts.
How:   Keeps handlers in registration order, builds the FastAPI app on first
       access to `app`, and runs it under uvicorn from start().

Usage:
    api = API(settings)
    api.register_resource_handler(FooHandler())
    api.start()          # blocks, serving on settings.backend_port
"""

import logging
import re
from typing import Dict, List, Optional

import uvicorn
from fastapi import FastAPI

from resthandler.application import create_app
from resthandler.config import Settings, settings as default_settings
from resthandler.handlers.base import ResourceHandler

logger = logging.getLogger(__name__)

# Resource names become a single URL path segment
_RESOURCE_NAME = re.compile(r"^[A-Za-z0-9_-]+$")


class API:
    """
    Registry of resource handlers and owner of the FastAPI application.

    Registration is only possible until the app has been built; routes are
    generated once and never change afterwards.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self._handlers: Dict[str, ResourceHandler] = {}
        self._app: Optional[FastAPI] = None

    def register_resource_handler(self, handler: ResourceHandler) -> ResourceHandler:
        """
        Add a handler to the API.

        Raises:
            ValueError:   The resource name is empty, not URL-safe, or
                          already registered.
            RuntimeError: The application has already been built.
        """
        if self._app is not None:
            raise RuntimeError("Cannot register handlers after the application was built")

        name = handler.resource_name()
        if not name or not _RESOURCE_NAME.match(name):
            raise ValueError(
                f"Invalid resource name {name!r}: use letters, digits, '-' or '_'"
            )
        if name in self._handlers:
            raise ValueError(f"A handler for resource '{name}' is already registered")

        self._handlers[name] = handler
        logger.debug("Registered %s for resource '%s'", type(handler).__name__, name)
        return handler

    @property
    def resource_names(self) -> List[str]:
        return list(self._handlers)

    @property
    def app(self) -> FastAPI:
        if self._app is None:
            self._app = create_app(self._handlers.values(), self.settings)
        return self._app

    def start(self, host: Optional[str] = None, port: Optional[int] = None) -> None:
        """Serve the API until the process is interrupted. Blocks."""
        uvicorn.run(
            self.app,
            host=host or self.settings.backend_host,
            port=port or self.settings.backend_port,
            log_level=self.settings.log_level.lower(),
        )
