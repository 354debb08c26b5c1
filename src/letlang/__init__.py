"""
letlang expression evaluator.

This module provides:
- Syntax nodes: literals, identifiers, unary/binary/relational operators, let
- Values: tagged int, real and bool results
- Environment: lexically scoped variable bindings
- Interpreter: evaluates a tree and reports failures as diagnostics

Lexing and parsing live outside this package; a parser builds the tree
from the node classes exported here.

Usage:
    from letlang import BinOp, Let, Identifier, TokenType, make_literal
    from letlang import identifier, evaluate

    # (2 + 3) * (let x = 4 in x - 1)
    tree = BinOp(
        BinOp(make_literal(2), TokenType.ADD, make_literal(3)),
        TokenType.MULT,
        Let(
            identifier("x"),
            make_literal(4),
            BinOp(Identifier("x"), TokenType.SUB, make_literal(1)),
        ),
    )
    result = evaluate(tree)
    print(result)   # 15
"""

from .tokens import (
    Token,
    TokenType,
    identifier,
)

from .ast import (
    # Base
    SyntaxNode,
    AstVisitor,
    # Leaves
    Literal,
    Identifier,
    # Operators
    UnaryOp,
    BinOp,
    RelOp,
    Let,
    # Helpers
    make_literal,
    walk,
    check_tree,
    DisplayVisitor,
    print_ast,
)

from .errors import (
    LetlangError,
    EvaluationError,
    ErrorKind,
    Diagnostic,
    DiagnosticCollector,
)

from .types import (
    PrimitiveType,
    INTEGER,
    REAL,
    BOOLEAN,
)

from .runtime import (
    Value,
    int_val,
    real_val,
    bool_val,
    wrap_python,
    Environment,
    Interpreter,
    evaluate,
)

__all__ = [
    # Tokens
    'Token',
    'TokenType',
    'identifier',
    # AST
    'SyntaxNode',
    'AstVisitor',
    'Literal',
    'Identifier',
    'UnaryOp',
    'BinOp',
    'RelOp',
    'Let',
    'make_literal',
    'walk',
    'check_tree',
    'DisplayVisitor',
    'print_ast',
    # Errors
    'LetlangError',
    'EvaluationError',
    'ErrorKind',
    'Diagnostic',
    'DiagnosticCollector',
    # Types
    'PrimitiveType',
    'INTEGER',
    'REAL',
    'BOOLEAN',
    # Runtime
    'Value',
    'int_val',
    'real_val',
    'bool_val',
    'wrap_python',
    'Environment',
    'Interpreter',
    'evaluate',
]
