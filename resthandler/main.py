"""
resthandler: Example Entry Point
================================

What:  Wires the Foo example handler into an API and serves it.
How:   `uvicorn resthandler.main:app` or `resthandler-example`
       (which calls main() and listens on BACKEND_PORT, 8080 by default).

Try it:
    curl -H 'Authorization: secret' http://localhost:8080/api/v1/foo/42
    curl -H 'Authorization: secret' -X POST -d '{"foobar": "hi"}' \\
         http://localhost:8080/api/v1/foo
"""

from resthandler.api import API
from resthandler.config import settings
from resthandler.handlers.foo import FooHandler

api = API(settings)
api.register_resource_handler(FooHandler())

app = api.app


def main() -> None:
    api.start()


if __name__ == "__main__":
    main()
