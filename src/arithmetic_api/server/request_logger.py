"""Dump and log every incoming request before it reaches a handler."""
from typing import List

from flask import Request
from werkzeug.exceptions import ClientDisconnected

from arithmetic_api.common.errors import TransportError
from arithmetic_api.common.logger import logger


def dump_request(req: Request) -> str:
    """
    Render a request as HTTP/1.x text: request line, headers, blank line, body.

    The body is cached on the request, so later reads see the full payload.

    :param Request req: Incoming Flask request

    :return: Textual dump of the request
    :rtype: str
    :raises TransportError: If the body cannot be read from the client
    """
    target: str = req.path
    if req.query_string:
        target = f"{target}?{req.query_string.decode('latin-1')}"
    protocol: str = req.environ.get("SERVER_PROTOCOL", "HTTP/1.1")

    lines: List[str] = [f"{req.method} {target} {protocol}"]
    lines.extend(f"{name}: {value}" for name, value in req.headers.items())

    try:
        body: str = req.get_data(cache=True, as_text=True)
    except (ClientDisconnected, OSError) as exc:
        raise TransportError(str(exc) or "Error while reading request body") from exc

    return "\r\n".join(lines) + "\r\n\r\n" + body


def log_request(req: Request) -> None:
    """Log the request dump on a single INFO line."""
    dump: str = dump_request(req)
    # repr() keeps the multi-line dump on one log line
    logger.info(f"📥 Received request dump={dump!r}")
