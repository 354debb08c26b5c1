"""
Tree-walking interpreter for letlang expressions.

Evaluates AST nodes to produce int, real and bool values. All operator
type rules live here so the full matrix can be read in one place.
"""

import sys
from typing import Optional, TextIO

from .values import Value, int_val, real_val, bool_val, widen
from .environment import Environment
from ..ast import SyntaxNode, Literal, Identifier, UnaryOp, BinOp, RelOp, Let, check_tree
from ..errors import (
    EvaluationError,
    DiagnosticCollector,
    error_type_mismatch,
    error_unsupported_operator,
    error_division_by_zero,
    error_depth_exceeded,
    error_numeric_overflow,
)
from ..tokens import TokenType


class Interpreter:
    """
    Tree-walking interpreter for letlang expressions.

    Evaluates AST nodes by dispatching to type-specific methods. Errors
    are raised from the point of detection; `evaluate` records and
    writes each one before re-raising it to the caller.

    An Interpreter is not re-entrant: use one per thread.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        max_depth: Optional[int] = None,
        validate: bool = False,
    ):
        """
        Initialize the interpreter.

        Args:
            stream: Where diagnostics are written (default: sys.stderr)
            max_depth: Optional limit on evaluation nesting
            validate: Reject shared or cyclic trees before evaluating
        """
        self.stream = stream
        self.max_depth = max_depth
        self.validate = validate
        self.diagnostics = DiagnosticCollector()
        self._depth = 0

    def evaluate(self, node: SyntaxNode, env: Optional[Environment] = None) -> Value:
        """
        Evaluate a tree under an environment.

        Args:
            node: The root of the tree
            env: The initial environment (default: a fresh empty one)

        Returns:
            The int, real or bool Value of the tree

        Raises:
            EvaluationError: on the first failure, after it is reported
            ValueError: if `validate` is set and the tree is not a tree
        """
        if env is None:
            env = Environment()
        if self.validate:
            check_tree(node)

        self._depth = 0
        try:
            return self._evaluate(node, env)
        except EvaluationError as e:
            self._report(e)
            raise

    def _report(self, error: EvaluationError) -> None:
        """Record a failure and write it to the diagnostic stream."""
        self.diagnostics.add_error(error)
        stream = self.stream if self.stream is not None else sys.stderr
        print(f"Evaluation error: {error.diagnostic.format()}", file=stream)

    def _evaluate(self, node: SyntaxNode, env: Environment) -> Value:
        """Evaluate a node to produce a Value."""
        self._depth += 1
        try:
            if self.max_depth is not None and self._depth > self.max_depth:
                raise error_depth_exceeded(self.max_depth, node.line)

            if isinstance(node, Literal):
                return self._eval_literal(node)
            elif isinstance(node, Identifier):
                return env.lookup(node.name, node.line)
            elif isinstance(node, UnaryOp):
                return self._eval_unary_op(node, env)
            elif isinstance(node, BinOp):
                return self._eval_bin_op(node, env)
            elif isinstance(node, RelOp):
                return self._eval_rel_op(node, env)
            elif isinstance(node, Let):
                return self._eval_let(node, env)
            else:
                raise RuntimeError(f"Unknown node type: {type(node).__name__}")
        finally:
            self._depth -= 1

    def _eval_literal(self, lit: Literal) -> Value:
        """Evaluate a literal value."""
        if lit.literal_type == TokenType.INT:
            return int_val(int(lit.value))
        elif lit.literal_type == TokenType.REAL:
            return real_val(float(lit.value))
        elif lit.literal_type == TokenType.TRUE:
            return bool_val(True)
        elif lit.literal_type == TokenType.FALSE:
            return bool_val(False)
        else:
            raise RuntimeError(f"Unknown literal type: {lit.literal_type}")

    def _eval_unary_op(self, node: UnaryOp, env: Environment) -> Value:
        """Evaluate a unary operation."""
        operand = self._evaluate(node.operand, env)

        if node.op == TokenType.NOT:
            if operand.is_boolean:
                return bool_val(not operand.data)
            raise error_type_mismatch(node.op, [operand], node.line, expected="a bool")
        raise error_unsupported_operator(node.op, "unary", node.line)

    def _eval_bin_op(self, node: BinOp, env: Environment) -> Value:
        """
        Evaluate a binary operation.

        Both operands are always evaluated, left first. The operand pair
        must be int/int, real/real or bool/bool; there is no widening.
        """
        left = self._evaluate(node.left, env)
        right = self._evaluate(node.right, env)

        if left.is_integer and right.is_integer:
            return self._integer_op(node, left.data, right.data)
        elif left.is_real and right.is_real:
            return self._real_op(node, left.data, right.data)
        elif left.is_boolean and right.is_boolean:
            return self._boolean_op(node, left.data, right.data)
        raise error_type_mismatch(
            node.op, [left, right], node.line,
            expected="two ints, two reals or two bools",
        )

    def _integer_op(self, node: BinOp, l: int, r: int) -> Value:
        op = node.op
        if op == TokenType.ADD:
            return int_val(l + r)
        elif op == TokenType.SUB:
            return int_val(l - r)
        elif op == TokenType.MULT:
            return int_val(l * r)
        elif op in (TokenType.DIV, TokenType.MOD):
            if r == 0:
                raise error_division_by_zero(op, l, node.line)
            quotient = _truncating_div(l, r)
            if op == TokenType.DIV:
                return int_val(quotient)
            # Remainder takes the sign of the dividend
            return int_val(l - quotient * r)
        raise error_unsupported_operator(op, "binary integer", node.line)

    def _real_op(self, node: BinOp, l: float, r: float) -> Value:
        op = node.op
        if op == TokenType.ADD:
            return real_val(l + r)
        elif op == TokenType.SUB:
            return real_val(l - r)
        elif op == TokenType.MULT:
            return real_val(l * r)
        elif op == TokenType.DIV:
            if r == 0.0:
                raise error_division_by_zero(op, l, node.line)
            return real_val(l / r)
        raise error_unsupported_operator(op, "binary real", node.line)

    def _boolean_op(self, node: BinOp, l: bool, r: bool) -> Value:
        op = node.op
        if op == TokenType.AND:
            return bool_val(l and r)
        elif op == TokenType.OR:
            return bool_val(l or r)
        raise error_unsupported_operator(op, "binary boolean", node.line)

    def _eval_rel_op(self, node: RelOp, env: Environment) -> Value:
        """
        Evaluate a relational comparison.

        Any mix of int and real is accepted; both sides are widened to
        float and compared exactly.
        """
        left = self._evaluate(node.left, env)
        right = self._evaluate(node.right, env)

        if not (left.is_numeric and right.is_numeric):
            raise error_type_mismatch(
                node.op, [left, right], node.line, expected="two numbers",
            )

        try:
            l = widen(left)
            r = widen(right)
        except OverflowError:
            raise error_numeric_overflow(node.op, [left, right], node.line) from None
        op = node.op
        if op == TokenType.LT:
            return bool_val(l < r)
        elif op == TokenType.LTE:
            return bool_val(l <= r)
        elif op == TokenType.GT:
            return bool_val(l > r)
        elif op == TokenType.GTE:
            return bool_val(l >= r)
        elif op == TokenType.EQ:
            return bool_val(l == r)
        elif op == TokenType.NEQ:
            return bool_val(l != r)
        raise error_unsupported_operator(op, "relational", node.line)

    def _eval_let(self, node: Let, env: Environment) -> Value:
        """
        Evaluate a let expression.

        The bound expression sees the enclosing environment only; the
        body runs in a child scope that is dropped on return.
        """
        value = self._evaluate(node.bound, env)
        local_env = env.extend(node.name, value)
        return self._evaluate(node.body, local_env)


def _truncating_div(l: int, r: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(l) // abs(r)
    return quotient if (l < 0) == (r < 0) else -quotient


# Convenience function for simple evaluation
def evaluate(
    node: SyntaxNode,
    env: Optional[Environment] = None,
    stream: Optional[TextIO] = None,
    max_depth: Optional[int] = None,
    validate: bool = False,
) -> Value:
    """
    Evaluate a tree under an environment.

    This is a convenience wrapper around Interpreter.evaluate().
    """
    interpreter = Interpreter(stream=stream, max_depth=max_depth, validate=validate)
    return interpreter.evaluate(node, env)
