"""Flask application wiring the arithmetic handlers to their routes."""
from typing import Callable, List, Optional

from flask import Flask, Response, request
from pydantic import BaseModel
from werkzeug.exceptions import MethodNotAllowed as UnroutedMethod

from arithmetic_api.common.arithmetic import BINARY_OPERATIONS, divide, total
from arithmetic_api.common.errors import ApiError, MethodNotAllowed
from arithmetic_api.common.logger import logger
from arithmetic_api.common.operations import DivisionResult, NumberList, NumberPair, ScalarResult
from arithmetic_api.server.decoder import decode_json_body
from arithmetic_api.server.request_logger import log_request

# Every route accepts these methods so that the request is logged before the
# POST check rejects it; other methods go through handle_unrouted_method
HTTP_METHODS: List[str] = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# Routes that take a JSON payload and therefore only POST
PAYLOAD_ROUTES: List[str] = [f"/{name}" for name in BINARY_OPERATIONS] + ["/divide", "/sum"]


def write_response(result: BaseModel) -> Response:
    """
    Serialize a result model as the JSON response body.

    :param BaseModel result: Result to send back

    :return: Response with an application/json content type
    :rtype: Response
    """
    return Response(result.model_dump_json(), mimetype="application/json")


def handle_api_error(error: ApiError) -> Response:
    """Log a request failure and answer with its plain-text message."""
    log_message = f"❌ {error.message}"
    if error.detail:
        log_message = f"{log_message} {error.detail}"
    logger.log(error.log_level, log_message)
    return Response(error.message, status=error.status_code, mimetype="text/plain")


def hello(path: str = "") -> Response:
    """Catch-all endpoint: the request has been logged, acknowledge it."""
    if request.method == "POST":
        return Response("Received POST request!", mimetype="text/plain")
    return Response("Request received and logged!", mimetype="text/plain")


def handle_unrouted_method(error: UnroutedMethod) -> Response:
    """
    Answer methods outside HTTP_METHODS the way the routes themselves would.

    Payload routes reject them with the plain-text 405; every other path is
    the catch-all and acknowledges the request.
    """
    if request.path in PAYLOAD_ROUTES:
        return handle_api_error(MethodNotAllowed("Method not allowed!", detail=f"method={request.method}"))
    return hello()


def binary_operation(name: str) -> Callable[[], Response]:
    """
    Build the handler applying a BINARY_OPERATIONS entry to a NumberPair.

    :param str name: Key in BINARY_OPERATIONS, also the route name

    :return: Flask view function
    """
    operation = BINARY_OPERATIONS[name]

    def handler() -> Response:
        pair: NumberPair = decode_json_body(request, NumberPair)
        return write_response(ScalarResult(result=operation(pair.number1, pair.number2)))

    handler.__name__ = name
    handler.__doc__ = f"POST /{name}: apply {name} to number1 and number2."
    return handler


def divide_numbers() -> Response:
    """POST /divide: truncating quotient and remainder of number1 by number2."""
    pair: NumberPair = decode_json_body(request, NumberPair)
    quotient, remainder = divide(pair.number1, pair.number2)
    return write_response(DivisionResult(quotient=quotient, remainder=remainder))


def sum_numbers() -> Response:
    """POST /sum: total of a JSON array of integers."""
    numbers: List[int] = decode_json_body(request, NumberList)
    return write_response(ScalarResult(result=total(numbers)))


def create_app(import_name: Optional[str] = None) -> Flask:
    """
    Build the Flask application.

    Request flow: ``log_request`` runs first for every route, then the view
    decodes its payload, computes and writes the result. Any ApiError raised
    along the way is turned into a plain-text response by ``handle_api_error``.

    :param str import_name: Import name given to Flask, defaults to this module

    :return: Configured application
    :rtype: Flask
    """
    app = Flask(import_name or __name__)

    app.before_request(lambda: log_request(request))
    app.register_error_handler(ApiError, handle_api_error)
    app.register_error_handler(UnroutedMethod, handle_unrouted_method)

    app.add_url_rule("/", "hello", hello, methods=HTTP_METHODS)
    app.add_url_rule("/<path:path>", "hello_path", hello, methods=HTTP_METHODS)
    for operation_name in BINARY_OPERATIONS:
        app.add_url_rule(
            f"/{operation_name}", operation_name, binary_operation(operation_name), methods=HTTP_METHODS
        )
    app.add_url_rule("/divide", "divide", divide_numbers, methods=HTTP_METHODS)
    app.add_url_rule("/sum", "sum", sum_numbers, methods=HTTP_METHODS)

    return app
