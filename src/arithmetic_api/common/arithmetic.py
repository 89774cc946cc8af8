"""Integer arithmetic behind the HTTP handlers."""
import operator
from typing import Callable, Iterable, Tuple

from arithmetic_api.common.errors import InvalidDomainValue


# Type alias for binary integer operators
OperatorFn = Callable[[int, int], int]

# Mapping of route names to binary operators returning a single integer
BINARY_OPERATIONS: dict[str, OperatorFn] = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
}


def divide(dividend: int, divisor: int) -> Tuple[int, int]:
    """
    Divide two integers, truncating the quotient toward zero.

    Python's ``//`` and ``%`` round toward negative infinity, so the quotient
    is computed on magnitudes and the sign restored afterwards. The remainder
    then takes the sign of the dividend: ``-7 / 2`` gives ``(-3, -1)``.

    :param int dividend: Number to divide
    :param int divisor: Non-zero number to divide by

    :return: Tuple of (quotient, remainder)
    :rtype: Tuple[int, int]
    :raises InvalidDomainValue: If divisor is 0
    """
    if divisor == 0:
        raise InvalidDomainValue("Number 2 value cannot be 0!", detail="reason=cannot divide by 0")

    quotient: int = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    remainder: int = dividend - divisor * quotient
    return quotient, remainder


def total(numbers: Iterable[int]) -> int:
    """Sum integers; an empty sequence sums to 0."""
    return sum(numbers, 0)
