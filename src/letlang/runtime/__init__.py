"""
letlang runtime - Tree-walking interpreter for letlang expressions.

This module provides:
- Interpreter: Evaluates syntax trees and reports failures
- Value: Runtime value wrappers with type metadata
- Environment: Variable scope management
"""

from .values import (
    Value,
    int_val,
    real_val,
    bool_val,
    wrap_python,
    widen,
)

from .environment import (
    Environment,
)

from .interpreter import (
    Interpreter,
    evaluate,
)

__all__ = [
    # Values
    'Value',
    'int_val',
    'real_val',
    'bool_val',
    'wrap_python',
    'widen',

    # Environment
    'Environment',

    # Interpreter
    'Interpreter',
    'evaluate',
]
