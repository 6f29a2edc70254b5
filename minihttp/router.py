"""Route dispatcher using an ordered list of (predicate, handler) pairs."""

from typing import Callable

from minihttp.http_request import HTTPRequest
from minihttp.http_response import NOT_FOUND, HttpResponse
from minihttp.route_handler import RouteHandler

RoutePredicate = Callable[[str], bool]


class Router:
    """
    Route dispatcher with first-match-wins semantics.

    Routes are checked in registration order against the request path.
    When nothing matches, the shared not-found response is returned.
    """

    def __init__(self, not_found: HttpResponse = NOT_FOUND):
        """
        Initialize router with an empty route list.

        Args:
            not_found: Response returned when no route matches
        """
        self.not_found = not_found
        self._routes: list[tuple[RoutePredicate, RouteHandler]] = []

    def register(self, predicate: RoutePredicate, handler: RouteHandler) -> None:
        """
        Append a route.

        Args:
            predicate: Called with the request path, True if the handler applies
            handler: Handler instance implementing RouteHandler protocol
        """
        self._routes.append((predicate, handler))

    def exact(self, path: str, handler: RouteHandler) -> None:
        """Register a handler for one exact path."""
        self.register(lambda request_path: request_path == path, handler)

    def route(self, prefix: str, handler: RouteHandler) -> None:
        """Register a handler for every path starting with prefix."""
        self.register(lambda request_path: request_path.startswith(prefix), handler)

    def dispatch(self, request: HTTPRequest) -> HttpResponse:
        """
        Dispatch request to the first matching handler.

        Args:
            request: Parsed HTTP request

        Returns:
            HTTP response from handler, or the not-found response
        """
        handler = self.find_handler(request.path)

        if handler is None:
            return self.not_found

        return handler.handle(request)

    def find_handler(self, path: str) -> RouteHandler | None:
        for predicate, handler in self._routes:
            if predicate(path):
                return handler
        return None
