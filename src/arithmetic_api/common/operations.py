"""Pydantic models for arithmetic request payloads and results."""
from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, Field, StrictInt, field_validator, model_validator


def _null_as_zero(value: Any) -> Any:
    """JSON null leaves an integer at its zero value."""
    return 0 if value is None else value


def _null_as_empty(value: Any) -> Any:
    """JSON null stands for an empty list."""
    return [] if value is None else value


class NumberPair(BaseModel):
    """
    Operands of a binary operation.

    A missing or null operand counts as 0. Keys match case-insensitively,
    so ``{"Number1": 3}`` sets ``number1``; when several spellings of the
    same key are sent, the last one wins. Unknown keys are ignored.
    """

    number1: StrictInt = Field(default=0, description="Left operand")
    number2: StrictInt = Field(default=0, description="Right operand")

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        """Lower-case incoming keys; a null payload is an empty object."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key.lower() if isinstance(key, str) else key: value for key, value in data.items()}
        return data

    @field_validator("number1", "number2", mode="before")
    @classmethod
    def null_operand_is_zero(cls, v: Any) -> Any:
        return _null_as_zero(v)


# Input of /sum: a bare JSON array of integers; null elements count as 0
NullableInt = Annotated[StrictInt, BeforeValidator(_null_as_zero)]
NumberList = Annotated[List[NullableInt], BeforeValidator(_null_as_empty)]


class ScalarResult(BaseModel):
    """Result of add, subtract, multiply and sum."""

    result: int = Field(..., description="Computed integer result")


class DivisionResult(BaseModel):
    """Result of a truncating integer division."""

    quotient: int = Field(..., description="Quotient truncated toward zero")
    remainder: int = Field(..., description="Remainder with the sign of the dividend")
