"""Decode JSON request bodies into an expected payload shape."""
from functools import lru_cache
from typing import Any, Type, TypeVar

from flask import Request
from pydantic import TypeAdapter, ValidationError

from arithmetic_api.common.errors import MalformedPayload, MethodNotAllowed

T = TypeVar("T")


def decode_json_body(req: Request, shape: Type[T]) -> T:
    """
    Parse a POST body as JSON and validate it against ``shape``.

    ``shape`` is anything pydantic can build a TypeAdapter for: a model class
    such as NumberPair, or an annotated type such as NumberList.

    :param Request req: Incoming Flask request
    :param shape: Expected payload type

    :return: The decoded payload
    :raises MethodNotAllowed: If the request method is not POST
    :raises MalformedPayload: If the body is not valid JSON of the expected shape
    """
    if req.method != "POST":
        raise MethodNotAllowed("Method not allowed!", detail=f"method={req.method}")

    try:
        return _adapter_for(shape).validate_json(req.get_data(cache=True))
    except ValidationError as exc:
        raise MalformedPayload(_describe(exc)) from exc


@lru_cache(maxsize=None)
def _adapter_for(shape: Any) -> TypeAdapter[Any]:
    """Build the TypeAdapter for a payload shape once."""
    return TypeAdapter(shape)


def _describe(exc: ValidationError) -> str:
    """
    Flatten a ValidationError into one line per failing location.

    :param ValidationError exc: Error raised by pydantic

    :return: Human readable error text
    :rtype: str
    """
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(loc) for loc in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)
