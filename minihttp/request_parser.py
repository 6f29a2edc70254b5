from minihttp.exceptions import HTTPServerError
from minihttp.http_constants import METHODS_WITH_BODY
from minihttp.http_request import HTTPRequest


# Exception Hierarchy
class HTTPParseError(HTTPServerError):
    """Base exception for HTTP parsing errors"""

    pass


class EmptyRequestError(HTTPParseError):
    """Raised when request bytes are empty"""

    pass


class InvalidRequestLineError(HTTPParseError):
    """Raised when request line format is invalid"""

    pass


# HTTP Protocol Constants
LINE_SEPARATOR = "\r\n"
REQUEST_LINE_SEPARATOR = " "
HEADER_KEY_VALUE_SEPARATOR = ":"
DEFAULT_ENCODING = "utf-8"
BUFFER_PADDING = "\0"


class RequestParser:
    """HTTP request parser for a single, bounded read buffer"""

    @staticmethod
    def parse(raw_bytes: bytes) -> HTTPRequest:
        """
        Parse raw HTTP request bytes into HTTPRequest object.

        The body is the last CRLF-delimited element of the request, so
        only single-line bodies survive intact.

        Args:
            raw_bytes: Raw HTTP request as bytes

        Returns:
            HTTPRequest object with parsed data

        Raises:
            HTTPParseError: If request is empty or the request line is malformed
        """
        if not raw_bytes:
            raise EmptyRequestError("Received empty request")

        # A truncated buffer can split a multi-byte character
        request = raw_bytes.decode(DEFAULT_ENCODING, errors="replace")
        request = request.rstrip(BUFFER_PADDING)

        lines = request.split(LINE_SEPARATOR)
        method, path = RequestParser._parse_request_line(lines[0])
        headers = RequestParser._parse_headers(lines[1:])

        body = lines[-1] if method.upper() in METHODS_WITH_BODY else None

        return HTTPRequest(method=method, path=path, headers=headers, body=body)

    @staticmethod
    def _parse_request_line(line: str) -> tuple[str, str]:
        """
        Parse HTTP request line into method and path.

        Args:
            line: Request line string (e.g., "GET /path HTTP/1.1")

        Returns:
            Tuple of (method, path)

        Raises:
            InvalidRequestLineError: If request line format is invalid
        """
        components = line.split(REQUEST_LINE_SEPARATOR)
        if len(components) < 2:
            raise InvalidRequestLineError(
                f"Invalid request line format. Expected at least 2 components, got {len(components)}"
            )

        method, path = components[0], components[1]
        if not method or not path:
            raise InvalidRequestLineError(f"Invalid request line: {line!r}")
        return method, path

    @staticmethod
    def _parse_headers(lines: list[str]) -> dict[str, str]:
        """
        Parse header lines into a dictionary, stopping at the first blank line.

        Keys are lowercased. A repeated header overwrites the earlier value.

        Args:
            lines: Request lines following the request line

        Returns:
            Dictionary of header key-value pairs
        """
        headers_dict: dict[str, str] = {}
        for line in lines:
            if not line:
                break
            if HEADER_KEY_VALUE_SEPARATOR not in line:
                continue
            key, value = line.split(HEADER_KEY_VALUE_SEPARATOR, 1)
            key = key.strip().lower()
            if key:
                headers_dict[key] = value.strip()
        return headers_dict
