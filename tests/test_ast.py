"""
Tests for letlang syntax nodes: construction, traversal and display.
"""

import dataclasses
import textwrap

import pytest

from letlang import (
    Literal, Identifier, UnaryOp, BinOp, RelOp, Let,
    TokenType, Token, identifier, make_literal,
    walk, check_tree, print_ast, evaluate, int_val,
)


def sample_tree():
    """(2 + 3) * (let x = 4 in x - 1)"""
    return BinOp(
        BinOp(make_literal(2, 1), TokenType.ADD, make_literal(3, 1), 1),
        TokenType.MULT,
        Let(
            identifier("x"),
            make_literal(4, 2),
            BinOp(Identifier("x", 3), TokenType.SUB, make_literal(1, 3), 3),
            2,
        ),
        1,
    )


class TestConstruction:
    """Test node construction helpers."""

    def test_make_literal(self):
        assert make_literal(2) == Literal(2, TokenType.INT)
        assert make_literal(2.5, 4) == Literal(2.5, TokenType.REAL, 4)
        assert make_literal(True) == Literal(True, TokenType.TRUE)
        assert make_literal(False) == Literal(False, TokenType.FALSE)

    def test_make_literal_rejects_strings(self):
        with pytest.raises(ValueError):
            make_literal("2")

    def test_let_name_comes_from_token(self):
        node = Let(Token(TokenType.ID, "y"), make_literal(1), Identifier("y"), 5)
        assert node.name == "y"
        assert node.line == 5

    def test_token_str(self):
        assert str(identifier("x")) == "ID('x')"
        assert str(Token(TokenType.ADD, "+")) == "ADD"

    def test_tokens_carry_no_position(self):
        """Line numbers live on nodes, so equal tokens compare equal."""
        assert identifier("x") == Token(TokenType.ID, "x")
        assert [f.name for f in dataclasses.fields(Token)] == ["type", "value"]

    def test_children_in_evaluation_order(self):
        tree = sample_tree()
        assert tree.children() == [tree.left, tree.right]
        assert tree.right.children() == [tree.right.bound, tree.right.body]
        assert make_literal(1).children() == []


class TestWalk:
    """Test traversal and tree validation."""

    def test_walk_is_preorder(self):
        names = [type(n).__name__ for n in walk(sample_tree())]
        assert names == [
            "BinOp", "BinOp", "Literal", "Literal",
            "Let", "Literal", "BinOp", "Identifier", "Literal",
        ]

    def test_check_tree_accepts_tree(self):
        check_tree(sample_tree())

    def test_check_tree_rejects_shared_child(self):
        """A child owned by two parents is not a tree."""
        shared = make_literal(1)
        tree = BinOp(shared, TokenType.ADD, shared)
        with pytest.raises(ValueError, match="more than once"):
            check_tree(tree)

    def test_check_tree_rejects_cycle(self):
        node = UnaryOp(make_literal(True), TokenType.NOT)
        node.operand = node
        with pytest.raises(ValueError):
            check_tree(node)


class TestDisplay:
    """Test indented subtree rendering."""

    def test_binop_display(self):
        tree = BinOp(make_literal(2), TokenType.ADD, make_literal(3))
        assert tree.display_subtree() == textwrap.dedent("""\
            BinOp[ADD](
              Literal[INT](2)
              Literal[INT](3)
            )""")

    def test_let_display(self):
        tree = Let(
            identifier("x"),
            make_literal(4),
            RelOp(Identifier("x"), TokenType.LT, make_literal(1.5)),
        )
        assert tree.display_subtree() == textwrap.dedent("""\
            Let[ x ](
              Literal[INT](4)
            ) In (
              RelOp[LT](
                Identifier[x]
                Literal[REAL](1.5)
              )
            )""")

    def test_unary_display_with_indent(self):
        tree = UnaryOp(make_literal(False), TokenType.NOT)
        assert tree.display_subtree(4) == "\n".join([
            "    UnaryOp[NOT](",
            "      Literal[FALSE](False)",
            "    )",
        ])

    def test_display_is_idempotent(self):
        """Display twice gives the same text and leaves evaluation unchanged."""
        tree = sample_tree()
        before = evaluate(tree)
        first = tree.display_subtree()
        second = tree.display_subtree()
        assert first == second
        assert evaluate(tree) == before == int_val(15)

    def test_print_ast(self, capsys):
        print_ast(Identifier("y"))
        assert capsys.readouterr().out == "Identifier[y]\n"
