"""
Abstract Syntax Tree (AST) node definitions for letlang.

Nodes are built by an external parser. Each node owns its children
exclusively and carries the source line it came from. Evaluation is
implemented once, in `letlang.runtime.interpreter`; display is
implemented once, in `DisplayVisitor` below.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, TextIO, Union
from abc import ABC
from .tokens import Token, TokenType


# =============================================================================
# Base Classes
# =============================================================================

@dataclass
class SyntaxNode(ABC):
    """Base class for all AST nodes.

    Subclasses declare their children first and `line` last, mirroring
    the order the parser supplies them in.
    """

    def accept(self, visitor: "AstVisitor") -> Any:
        """Accept a visitor for traversal."""
        method_name = f"visit_{self.__class__.__name__}"
        method = getattr(visitor, method_name, visitor.generic_visit)
        return method(self)

    def children(self) -> List["SyntaxNode"]:
        """Direct child nodes, in evaluation order."""
        return []

    def evaluate(self, env: "Environment") -> "Value":
        """
        Evaluate this node under `env`.

        Failures are written to standard error before the
        EvaluationError propagates.
        """
        from .runtime.interpreter import evaluate
        return evaluate(self, env)

    def display_subtree(self, indent: int = 0) -> str:
        """Render this node and its children, indented by `indent` spaces."""
        return "\n".join(self.accept(DisplayVisitor(indent)))


class AstVisitor(ABC):
    """Base class for AST visitors."""

    def generic_visit(self, node: SyntaxNode) -> Any:
        """Default visit method."""
        raise NotImplementedError(f"No visitor for {node.__class__.__name__}")


# =============================================================================
# Leaf Nodes
# =============================================================================

@dataclass
class Literal(SyntaxNode):
    """A literal value (int, real, true, false)."""
    value: Union[int, float, bool, str]
    literal_type: TokenType  # INT, REAL, TRUE, FALSE
    line: int = 0


@dataclass
class Identifier(SyntaxNode):
    """A variable reference."""
    name: str
    line: int = 0


# =============================================================================
# Operator Nodes
# =============================================================================

@dataclass
class UnaryOp(SyntaxNode):
    """A unary operation (not x)."""
    operand: SyntaxNode
    op: TokenType  # Only NOT is defined
    line: int = 0

    def children(self) -> List[SyntaxNode]:
        return [self.operand]


@dataclass
class BinOp(SyntaxNode):
    """An arithmetic or logical binary operation (a + b, x and y)."""
    left: SyntaxNode
    op: TokenType  # ADD, SUB, MULT, DIV, MOD, AND, OR
    right: SyntaxNode
    line: int = 0

    def children(self) -> List[SyntaxNode]:
        return [self.left, self.right]


@dataclass
class RelOp(SyntaxNode):
    """A relational comparison between two numbers (a < b)."""
    left: SyntaxNode
    op: TokenType  # LT, LTE, GT, GTE, EQ, NEQ
    right: SyntaxNode
    line: int = 0

    def children(self) -> List[SyntaxNode]:
        return [self.left, self.right]


@dataclass
class Let(SyntaxNode):
    """A let expression: let variable = bound in body."""
    variable: Token  # ID token
    bound: SyntaxNode
    body: SyntaxNode
    line: int = 0

    @property
    def name(self) -> str:
        return self.variable.value

    def children(self) -> List[SyntaxNode]:
        return [self.bound, self.body]


# =============================================================================
# Construction Helpers
# =============================================================================

def make_literal(value: Union[int, float, bool], line: int = 0) -> Literal:
    """Build a Literal from a Python scalar, as the parser would."""
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return Literal(value, TokenType.TRUE if value else TokenType.FALSE, line)
    if isinstance(value, int):
        return Literal(value, TokenType.INT, line)
    if isinstance(value, float):
        return Literal(value, TokenType.REAL, line)
    raise ValueError(f"No literal form for {type(value).__name__}")


def walk(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield every node of the tree, pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))


def check_tree(root: SyntaxNode) -> None:
    """
    Verify that `root` is a finite tree.

    Raises:
        ValueError: if a node object is reachable twice, either because a
            child is shared between parents or because of a cycle
    """
    seen = set()
    for node in walk(root):
        if id(node) in seen:
            raise ValueError(
                f"{node.__class__.__name__} at line {node.line} appears more than "
                f"once in the tree"
            )
        seen.add(id(node))


# =============================================================================
# Visitor Helpers
# =============================================================================

class DisplayVisitor(AstVisitor):
    """Renders a subtree as indented lines of text."""

    def __init__(self, indent: int = 0):
        self.indent = indent

    def _pad(self, text: str) -> str:
        return " " * self.indent + text

    def _nested(self, node: SyntaxNode) -> List[str]:
        return node.accept(DisplayVisitor(self.indent + 2))

    def visit_Literal(self, node: Literal) -> List[str]:
        return [self._pad(f"Literal[{node.literal_type.name}]({node.value})")]

    def visit_Identifier(self, node: Identifier) -> List[str]:
        return [self._pad(f"Identifier[{node.name}]")]

    def visit_UnaryOp(self, node: UnaryOp) -> List[str]:
        lines = [self._pad(f"UnaryOp[{node.op.name}](")]
        lines += self._nested(node.operand)
        lines.append(self._pad(")"))
        return lines

    def visit_BinOp(self, node: BinOp) -> List[str]:
        lines = [self._pad(f"BinOp[{node.op.name}](")]
        lines += self._nested(node.left)
        lines += self._nested(node.right)
        lines.append(self._pad(")"))
        return lines

    def visit_RelOp(self, node: RelOp) -> List[str]:
        lines = [self._pad(f"RelOp[{node.op.name}](")]
        lines += self._nested(node.left)
        lines += self._nested(node.right)
        lines.append(self._pad(")"))
        return lines

    def visit_Let(self, node: Let) -> List[str]:
        lines = [self._pad(f"Let[ {node.name} ](")]
        lines += self._nested(node.bound)
        lines.append(self._pad(") In ("))
        lines += self._nested(node.body)
        lines.append(self._pad(")"))
        return lines


def print_ast(node: SyntaxNode, file: Optional[TextIO] = None) -> None:
    """Print an AST node for debugging."""
    print(node.display_subtree(), file=file)
