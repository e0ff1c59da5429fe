"""Money normalization helpers"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

Number = Union[int, float, Decimal]

ZERO = Decimal("0")


def to_decimal(value: Number) -> Decimal:
    """Convert an int/float/Decimal amount to Decimal without binary float drift"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps the shortest repr, so 0.1 becomes Decimal("0.1")
        return Decimal(str(value))
    return Decimal(value)


def to_finite_decimal(value: Any) -> Optional[Decimal]:
    """Like to_decimal, but None for NaN, infinities and values that are not numbers"""
    try:
        amount = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    return amount if amount.is_finite() else None
