"""
Lox Values
==========
Runtime values are plain Python scalars:

    str    String
    float  Number
    bool   Boolean
    None   Nil

Python's own equality and truthiness do not match Lox's (0.0 == False,
"" is falsy), so the interpreter goes through these helpers instead.
"""
import math
from decimal import Decimal
from typing import Union

Value = Union[str, float, bool, None]


def is_truthy(value: Value) -> bool:
    """nil and false are falsy; everything else, including 0 and "", is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Value, b: Value) -> bool:
    """Type-strict structural equality. Different variants are never equal."""
    if type(a) is not type(b):
        return False
    return a == b


def divide(left: float, right: float) -> float:
    """IEEE-754 division: a zero divisor yields ±inf or nan instead of raising."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def stringify(value: Value) -> str:
    """Format a value for display."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == int(value):
            if value == 0.0 and math.copysign(1.0, value) < 0:
                return "-0"
            return str(int(value))
        # Shortest round-trip digits, never in exponent form
        return format(Decimal(repr(value)), "f")
    return value
