"""Route handlers using protocol pattern for extensibility."""

from http import HTTPStatus
from typing import Protocol

import minihttp.http_constants as constants
from minihttp.file_manager import FileManager
from minihttp.http_request import HTTPRequest
from minihttp.http_response import NOT_FOUND, HttpResponse


class RouteHandler(Protocol):
    """Protocol for route handlers (structural subtyping)."""

    def handle(self, request: HTTPRequest) -> HttpResponse:
        """
        Handle HTTP request and return response.

        Args:
            request: Parsed HTTP request

        Returns:
            HTTP response to send to client
        """
        ...


class RootHandler:
    """Handler for root path '/'."""

    def handle(self, request: HTTPRequest) -> HttpResponse:
        """Return 200 OK with empty body."""
        return HttpResponse(HTTPStatus.OK)


class EchoHandler:
    """Handler for /echo/<text> - echoes back the text."""

    def handle(self, request: HTTPRequest) -> HttpResponse:
        """Echo the third path segment, compressed if the client allows it."""
        message = request.path_segment(2)
        accept_encoding = request.headers.get(constants.HTTPHeaders.ACCEPT_ENCODING.value, "")
        return HttpResponse(
            HTTPStatus.OK,
            message,
            content_encoding=self._negotiate_encoding(accept_encoding),
        )

    @staticmethod
    def _negotiate_encoding(accept_encoding: str) -> str | None:
        """
        Pick the content encoding for the response.

        The Accept-Encoding value is split on ", " and the first token
        in SUPPORTED_ENCODINGS wins. Matching is exact and case-sensitive.

        Args:
            accept_encoding: Client's Accept-Encoding header value

        Returns:
            Selected encoding or None
        """
        requested = accept_encoding.split(constants.ACCEPT_ENCODING_SEPARATOR)
        supported = [e for e in requested if e in constants.SUPPORTED_ENCODINGS]
        return next(iter(supported), None)


class UserAgentHandler:
    """Handler for /user-agent - returns User-Agent header."""

    def handle(self, request: HTTPRequest) -> HttpResponse:
        """Return the User-Agent header value."""
        user_agent = request.headers.get(
            constants.HTTPHeaders.USER_AGENT.value, constants.UNKNOWN_USER_AGENT
        )
        return HttpResponse(HTTPStatus.OK, user_agent)


class FileHandler:
    """Handler for /files/<filename> - GET/POST file operations."""

    def __init__(self, file_manager: FileManager, not_found: HttpResponse = NOT_FOUND):
        """
        Initialize FileHandler with a FileManager.

        Args:
            file_manager: FileManager rooted at the storage directory
            not_found: Response returned for missing files
        """
        self.file_manager = file_manager
        self.not_found = not_found

    def handle(self, request: HTTPRequest) -> HttpResponse:
        """
        Route file operations based on HTTP method.

        POST writes, every other method reads.

        Args:
            request: HTTP request with the filename as third path segment

        Returns:
            HTTP response (200/201/404)
        """
        filename = request.path_segment(2)
        if not filename:
            return self.not_found

        if request.method.upper() == constants.HTTPMethod.POST.value:
            return self._handle_post(filename, request.body or "")
        return self._handle_get(filename)

    def _handle_get(self, filename: str) -> HttpResponse:
        if not self.file_manager.file_exists(filename):
            return self.not_found

        content = self.file_manager.read_file(filename)
        return HttpResponse(
            HTTPStatus.OK, content, content_type=constants.ContentType.OCTET_STREAM.value
        )

    def _handle_post(self, filename: str, content: str) -> HttpResponse:
        self.file_manager.write_file(filename, content)
        return HttpResponse(HTTPStatus.CREATED)
