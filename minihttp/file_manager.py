"""Plain text file storage under a base directory."""

from logging import Logger
from pathlib import Path

DEFAULT_ENCODING = "utf-8"
# Decoding drops a leading byte order mark
READ_ENCODING = "utf-8-sig"


class FileManager:
    """
    Text file reads and writes relative to a base directory.

    Filenames are joined to the base directory as given: there is no
    path traversal protection. Every call touches the filesystem, nothing
    is cached, and concurrent writers to one file race (last write wins).
    """

    def __init__(self, base_directory: str, logger: Logger):
        """
        Initialize FileManager with a base directory.

        Args:
            base_directory: Directory that filenames are resolved against
            logger: Logger instance for debug messages
        """
        self.base_dir = Path(base_directory)
        self.logger = logger

    def resolve(self, filename: str) -> Path:
        return self.base_dir / filename

    def file_exists(self, filename: str) -> bool:
        return self.resolve(filename).is_file()

    def read_file(self, filename: str) -> str:
        """
        Read a whole file as text.

        Args:
            filename: Filename relative to the base directory

        Returns:
            File contents, line endings untouched. Undecodable bytes
            become U+FFFD.

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        file_path = self.resolve(filename)
        self.logger.debug(f"Reading file: {file_path}")
        return file_path.read_bytes().decode(READ_ENCODING, errors="replace")

    def write_file(self, filename: str, content: str) -> None:
        """
        Create or overwrite a file with the given text.

        Args:
            filename: Filename relative to the base directory
            content: Full new contents of the file
        """
        file_path = self.resolve(filename)
        self.logger.debug(f"Writing file: {file_path}")
        with file_path.open("w", encoding=DEFAULT_ENCODING, newline="") as file:
            file.write(content)
