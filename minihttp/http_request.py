from dataclasses import dataclass


@dataclass
class HTTPRequest:
    method: str
    path: str
    headers: dict[str, str]
    body: str | None = None

    @property
    def path_segments(self) -> list[str]:
        """Path split on '/', so '/echo/abc' gives ['', 'echo', 'abc']."""
        return self.path.split("/")

    def path_segment(self, index: int) -> str:
        """Return the path segment at index, or an empty string if absent."""
        segments = self.path_segments
        return segments[index] if len(segments) > index else ""
