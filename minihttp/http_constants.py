from enum import Enum


class HTTPHeaders(str, Enum):
    """Request header names (lowercase, as stored by the parser)."""

    USER_AGENT = "user-agent"
    ACCEPT_ENCODING = "accept-encoding"


class HTTPMethod(str, Enum):
    """HTTP methods the handlers care about."""

    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"


class ContentType(str, Enum):
    TEXT_PLAIN = "text/plain"
    OCTET_STREAM = "application/octet-stream"


class StandardRoute(str, Enum):
    """Route paths and prefixes used in the server."""

    ROOT = "/"
    ECHO = "/echo"
    USER_AGENT = "/user-agent"
    FILES = "/files"


METHODS_WITH_BODY = frozenset(
    {HTTPMethod.POST.value, HTTPMethod.PUT.value, HTTPMethod.PATCH.value}
)
SUPPORTED_ENCODINGS = frozenset({"gzip"})
ACCEPT_ENCODING_SEPARATOR = ", "
UNKNOWN_USER_AGENT = "Unknown"
