"""Errors turned into HTTP responses by the web application."""
import logging


class ApiError(Exception):
    """
    Base class for request failures.

    Each subclass fixes the HTTP status code of the response and the level
    at which the failure is logged. The message becomes the plain-text
    response body.
    """

    status_code: int = 500
    log_level: int = logging.ERROR

    def __init__(self, message: str, detail: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        return self.message


class TransportError(ApiError):
    """The request body could not be read."""

    status_code = 500


class MethodNotAllowed(ApiError):
    """A payload endpoint was called with a method other than POST."""

    status_code = 405
    log_level = logging.WARNING


class MalformedPayload(ApiError):
    """The body is not JSON or does not match the expected shape."""

    status_code = 400


class InvalidDomainValue(ApiError):
    """The payload decoded fine but a value is outside the operation's domain."""

    status_code = 400
