"""
Runtime value wrappers for the letlang interpreter.

Values pair a raw Python datum with its letlang type tag so that each
operator can dispatch on the tags of its operands.
"""

from dataclasses import dataclass
from typing import Any, Union

from ..types import PrimitiveType, INTEGER, REAL, BOOLEAN


@dataclass(frozen=True)
class Value:
    """
    A runtime value with letlang type information.

    The `data` field holds the Python int, float or bool.
    The `type` field holds the letlang type used for dispatch.
    """
    data: Any
    type: PrimitiveType

    def __repr__(self) -> str:
        return f"Value({self.data!r}, {self.type})"

    def __str__(self) -> str:
        if self.type == BOOLEAN:
            return "true" if self.data else "false"
        return repr(self.data)

    @property
    def is_integer(self) -> bool:
        return self.type == INTEGER

    @property
    def is_real(self) -> bool:
        return self.type == REAL

    @property
    def is_boolean(self) -> bool:
        return self.type == BOOLEAN

    @property
    def is_numeric(self) -> bool:
        return self.type.is_numeric


# Convenience constructors

def int_val(n: int) -> Value:
    """Create an integer value."""
    return Value(int(n), INTEGER)


def real_val(x: float) -> Value:
    """Create a real value."""
    return Value(float(x), REAL)


def bool_val(b: bool) -> Value:
    """Create a boolean value."""
    return Value(bool(b), BOOLEAN)


def wrap_python(data: Union[int, float, bool]) -> Value:
    """Wrap a raw Python scalar, inferring its letlang type."""
    # bool first: it is a subclass of int
    if isinstance(data, bool):
        return bool_val(data)
    if isinstance(data, int):
        return int_val(data)
    if isinstance(data, float):
        return real_val(data)
    raise ValueError(f"Cannot wrap {type(data).__name__} as a letlang value")


def widen(value: Value) -> float:
    """Widen a numeric value to a Python float for comparison.

    Raises:
        OverflowError: if an integer is beyond the range of a float
    """
    return float(value.data)
