"""Server-specific exceptions for better error handling."""


class HTTPServerError(Exception):
    """Base exception for HTTP server errors."""

    pass


class UnsupportedEncodingError(HTTPServerError):
    """Raised when a response asks for a content encoding we cannot produce."""

    pass
