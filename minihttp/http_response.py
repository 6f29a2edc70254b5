import gzip
from dataclasses import dataclass
from http import HTTPStatus

from minihttp.exceptions import UnsupportedEncodingError
from minihttp.http_constants import ContentType

HTTP_VERSION = "HTTP/1.1"
CRLF = "\r\n"
DEFAULT_ENCODING = "utf-8"
GZIP_COMPRESS_LEVEL = 6  # zlib default


@dataclass(frozen=True)
class HttpResponse:
    status: HTTPStatus
    body: str = ""
    content_type: str = ContentType.TEXT_PLAIN.value
    content_encoding: str | None = None

    @property
    def status_line(self) -> str:
        return f"{HTTP_VERSION} {self.status.value} {self.status.phrase}{CRLF}"

    def to_bytes(self) -> bytes:
        """
        Serialize the response into wire bytes.

        Unencoded bodies are written inside the header text, followed by
        two extra CRLFs. Encoded bodies are appended as raw compressed
        bytes after the blank line, and Content-Length counts those bytes.

        Returns:
            Complete HTTP response
        """
        if not self.content_encoding:
            body_length = len(self.body.encode(DEFAULT_ENCODING))
            header_lines = [
                f"Content-Type: {self.content_type}",
                f"Content-Length: {body_length}",
                "",
                self.body,
                "",
                "",
            ]
            return (self.status_line + CRLF.join(header_lines)).encode(DEFAULT_ENCODING)

        compressed = self._encode_content(self.body, self.content_encoding)
        header_lines = [
            f"Content-Type: {self.content_type}",
            f"Content-Encoding: {self.content_encoding}",
            f"Content-Length: {len(compressed)}",
            "",
        ]
        head = self.status_line + CRLF.join(header_lines) + CRLF
        return head.encode(DEFAULT_ENCODING) + compressed

    @staticmethod
    def _encode_content(body: str, encoding: str) -> bytes:
        match encoding:
            case "gzip":
                return gzip.compress(
                    body.encode(DEFAULT_ENCODING), compresslevel=GZIP_COMPRESS_LEVEL
                )
            case _:
                raise UnsupportedEncodingError(f"Unsupported encoding: {encoding}")


NOT_FOUND = HttpResponse(HTTPStatus.NOT_FOUND)
