"""Request-scoped access to the application context."""

from starlette.requests import HTTPConnection

from ..context import AppContext


def get_context(connection: HTTPConnection) -> AppContext:
    """Return the context the app was created with."""
    return connection.app.state.context
