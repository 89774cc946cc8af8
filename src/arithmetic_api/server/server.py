"""HTTP server hosting the arithmetic Flask application."""
import ipaddress
import socket

from flask import Flask
from pydantic import BaseModel, ConfigDict, Field
from werkzeug.serving import make_server

from arithmetic_api.common.logger import logger
from arithmetic_api.common.settings import ServerSettings
from arithmetic_api.server.app import create_app


class ArithmeticServer(BaseModel):
    """
    Threaded WSGI server for the arithmetic API.

    The listening socket is bound here rather than by Werkzeug, so a bind
    failure surfaces as an OSError to the caller instead of exiting the
    process from inside the server.
    """

    # Allow arbitrary types like flask.Flask
    model_config = ConfigDict(arbitrary_types_allowed=True)

    settings: ServerSettings = Field(default_factory=ServerSettings, description="Listening address")
    app: Flask = Field(default_factory=create_app, description="WSGI application to serve")

    def _bind(self) -> socket.socket:
        """
        Create, bind and listen on the configured address.

        :return: Listening socket
        :rtype: socket.socket
        :raises OSError: If the address cannot be bound (e.g. port in use)
        """
        host: str = str(self.settings.host)
        family = socket.AF_INET6 if ipaddress.ip_address(host).version == 6 else socket.AF_INET

        sock = socket.socket(family, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, self.settings.port))
            sock.listen()
        except OSError:
            sock.close()
            raise
        return sock

    def start(self) -> None:
        """
        Bind the listening socket and serve requests until interrupted.

        :return: None
        :raises OSError: If the listening socket cannot be bound
        """
        host: str = str(self.settings.host)
        logger.info(f"🖥️ Starting server on {host}:{self.settings.port}")

        with self._bind() as sock:
            server = make_server(host, self.settings.port, self.app, threaded=True, fd=sock.fileno())
            logger.info("🖥️ Server listening")
            try:
                server.serve_forever()
            finally:
                server.server_close()
