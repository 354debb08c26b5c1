"""
Token types for letlang syntax trees.

The lexer and parser live outside this package; they hand us tokens and
operator tags drawn from the enum below.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """Token and operator tags recognized by the evaluator."""

    # --- Literals ---
    INT = auto()                # 42
    REAL = auto()               # 3.14
    TRUE = auto()               # true
    FALSE = auto()              # false

    # --- Identifiers ---
    ID = auto()                 # user-defined names

    # --- Arithmetic operators ---
    ADD = auto()                # +
    SUB = auto()                # -
    MULT = auto()               # *
    DIV = auto()                # /
    MOD = auto()                # mod

    # --- Logical operators ---
    AND = auto()                # and
    OR = auto()                 # or
    NOT = auto()                # not

    # --- Relational operators ---
    LT = auto()                 # <
    LTE = auto()                # <=
    GT = auto()                 # >
    GTE = auto()                # >=
    EQ = auto()                 # =
    NEQ = auto()                # !=


@dataclass(frozen=True)
class Token:
    """A single token handed over by the parser."""
    type: TokenType
    value: Any              # Identifier name or literal text

    def __str__(self) -> str:
        if self.type in (TokenType.INT, TokenType.REAL, TokenType.ID):
            return f"{self.type.name}({self.value!r})"
        return self.type.name


def identifier(name: str) -> Token:
    """Build an identifier token (as the parser would for a let variable)."""
    return Token(TokenType.ID, name)
