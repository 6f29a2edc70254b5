"""Async HTTP/1.1 server with routing support."""

import asyncio
from logging import Logger

from minihttp.config import ServerConfig
from minihttp.file_manager import FileManager
from minihttp.http_constants import StandardRoute
from minihttp.http_response import HttpResponse
from minihttp.request_parser import RequestParser
from minihttp.route_handler import EchoHandler, FileHandler, RootHandler, UserAgentHandler
from minihttp.router import Router


class HTTPServer:
    """
    Async HTTP/1.1 server using asyncio.

    Each connection runs as its own task and serves exactly one request:
    one bounded read, parse, route, one write, close. Any failure while
    reading, parsing or routing is logged and answered with the router's
    not-found response.
    """

    def __init__(self, logger: Logger, config: ServerConfig, router: Router | None = None):
        """
        Initialize HTTP server.

        Args:
            logger: Logger instance for debug/info/error messages
            config: Host, port, storage directory and read buffer size
            router: Optional Router instance (creates default if None)
        """
        self.logger = logger
        self.config = config
        self.router = router or self._create_default_router()

    def _create_default_router(self) -> Router:
        """
        Create router with standard handlers.

        Returns:
            Router instance with registered handlers, in match order
        """
        router = Router()
        file_manager = FileManager(self.config.files_directory, self.logger)

        router.exact(StandardRoute.ROOT.value, RootHandler())
        router.route(StandardRoute.ECHO.value, EchoHandler())
        router.route(StandardRoute.USER_AGENT.value, UserAgentHandler())
        router.route(StandardRoute.FILES.value, FileHandler(file_manager, router.not_found))

        return router

    async def start(self):
        """Start async server and accept connections."""
        server = await asyncio.start_server(
            self.handle_connection, self.config.host, self.config.port
        )
        self.logger.info(f"Listening on {self.config.host}:{self.config.port}")
        self.logger.info(f"Serving files from {self.config.files_directory}")

        async with server:
            await server.serve_forever()

    async def handle_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ):
        """
        Handle single client connection asynchronously.

        Args:
            reader: Async stream reader for receiving data
            writer: Async stream writer for sending data
        """
        client_address = writer.get_extra_info("peername")
        self.logger.info(f"Connection from: {client_address}")

        response = self.router.not_found
        try:
            raw_request = await self._receive_request(reader, client_address)
            http_request = RequestParser.parse(raw_request)
            self.logger.debug(
                f"{http_request.method} {http_request.path} from {client_address}"
            )
            response = self.router.dispatch(http_request)
        except Exception as e:
            self.logger.error(
                f"Error while processing request from {client_address}: {e}",
                exc_info=True,
            )

        try:
            await self._send_response(writer, response)
            self.logger.info(
                f"Sent {response.status.value} response to {client_address}"
            )
        except OSError as e:
            self.logger.warning(f"Socket error for {client_address}: {e}")
        finally:
            if not writer.is_closing():
                writer.close()

    async def _receive_request(
        self, reader: asyncio.StreamReader, client_address
    ) -> bytes:
        """
        Receive request bytes with a single bounded read.

        Anything past config.buffer_size bytes is never read.

        Args:
            reader: Async stream reader
            client_address: Client address for logging

        Returns:
            Request bytes, possibly empty if the client sent nothing
        """
        self.logger.debug(f"Waiting for data from {client_address}")
        data = await reader.read(self.config.buffer_size)
        self.logger.info(f"Received {len(data)} bytes from {client_address}")
        return data

    @staticmethod
    async def _send_response(writer: asyncio.StreamWriter, response: HttpResponse) -> None:
        """
        Serialize and send a response.

        Args:
            writer: Async stream writer
            response: Response to send
        """
        writer.write(response.to_bytes())
        await writer.drain()
