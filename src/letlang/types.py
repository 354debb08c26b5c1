"""
Runtime type tags for letlang values.

The language has exactly three primitive types: int, real and bool.
Integers widen to reals only for relational comparisons.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PrimitiveType:
    """A primitive type (int, real, bool)."""
    _name: str

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_numeric(self) -> bool:
        return self in (INTEGER, REAL)

    def __str__(self) -> str:
        return self._name


INTEGER = PrimitiveType("int")
REAL = PrimitiveType("real")
BOOLEAN = PrimitiveType("bool")
