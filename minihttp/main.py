import argparse
import asyncio
import logging

from minihttp.config import ServerConfig
from minihttp.http_server import HTTPServer


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="minihttp")
    parser.add_argument("--directory", default=None, help="Files directory")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None):
    """Main entry point for the async HTTP server."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    logger = logging.getLogger(__name__)
    config = ServerConfig.from_args(args)
    http_server = HTTPServer(logger, config)
    await http_server.start()


def run():
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
