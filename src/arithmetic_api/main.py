"""
Command-line entrypoint of the arithmetic API service.

This script:
- Parses and validates the listening address and log level
- Configures the process-wide logger
- Serves the HTTP API until interrupted
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from arithmetic_api.common.logger import configure_logging, logger
from arithmetic_api.common.settings import ServerSettings
from arithmetic_api.server.server import ArithmeticServer


def parse_args(argv: Optional[List[str]] = None) -> ServerSettings:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated server settings
    :rtype: ServerSettings
    """
    defaults = ServerSettings()
    parser = argparse.ArgumentParser(description="HTTP service for integer arithmetic")

    parser.add_argument("--host", default=str(defaults.host), help="Interface to listen on")
    parser.add_argument("--port", default=defaults.port, help="TCP port to listen on")
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    args = parser.parse_args(argv)

    try:
        return ServerSettings(host=args.host, port=args.port, log_level=args.log_level.upper())
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    """
    Run the service.

    Exits with status 1 and a printed message if the listener cannot start.
    """
    settings = parse_args(argv)
    configure_logging(settings.log_level)

    server = ArithmeticServer(settings=settings)
    try:
        server.start()
    except OSError as exc:
        print(f"Server error: {exc}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("🛑 Server stopped")


if __name__ == "__main__":
    main()
