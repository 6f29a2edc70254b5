"""Server configuration, built once at startup."""

import os
from argparse import Namespace
from dataclasses import dataclass

HOST = "localhost"
PORT = 4221
BUFFER_SIZE = 1024

# Takes precedence over the --directory argument when set.
FILES_DIRECTORY_OVERRIDE: str | None = None


def resolve_files_directory(argument: str | None) -> str:
    """
    Pick the file storage directory.

    Order: FILES_DIRECTORY_OVERRIDE, then the startup argument,
    then the current working directory.

    Args:
        argument: Directory given on the command line, if any

    Returns:
        Directory path for file storage
    """
    if FILES_DIRECTORY_OVERRIDE is not None:
        return FILES_DIRECTORY_OVERRIDE
    if argument:
        return argument
    return os.getcwd()


@dataclass(frozen=True)
class ServerConfig:
    host: str = HOST
    port: int = PORT
    files_directory: str = "."
    buffer_size: int = BUFFER_SIZE

    @classmethod
    def from_args(cls, args: Namespace) -> "ServerConfig":
        """Build the config from parsed command-line arguments."""
        return cls(files_directory=resolve_files_directory(args.directory))
